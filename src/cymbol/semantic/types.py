"""Type tags for Cymbol declarations.

Map the lexical type keywords of the grammar to semantic type tags.
"""

from collections.abc import Mapping
from enum import Enum

from cymbol.log import get_logger

logger = get_logger(__name__)


class TypeTag(str, Enum):
    """Declared type of a symbol."""

    INT = "int"
    FLOAT = "float"
    VOID = "void"


TYPE_TAGS: Mapping[str, TypeTag] = {
    "int": TypeTag.INT,
    "float": TypeTag.FLOAT,
    "void": TypeTag.VOID,
}
"""Type keyword -> type tag lookup table."""


class UnknownTypeError(ValueError):
    """Raised when a declaration names a type keyword with no type tag.

    The parser only admits known keywords, so this signals a malformed
    tree rather than a user error.
    """

    def __init__(self, keyword: str) -> None:
        """Initialize with the offending keyword."""
        super().__init__(f"no type tag for type keyword '{keyword}'")
        self.keyword = keyword


def type_tag_for(
    keyword: str,
    table: Mapping[str, TypeTag] = TYPE_TAGS,
) -> TypeTag:
    """Look up the type tag for a type keyword.

    Args:
        keyword: Type keyword as written in the source (e.g. ``"int"``).
        table: Keyword -> tag table to consult.

    Returns:
        The matching TypeTag.

    Raises:
        UnknownTypeError: If the keyword is not in the table.

    """
    try:
        return table[keyword]
    except KeyError:
        raise UnknownTypeError(keyword) from None
