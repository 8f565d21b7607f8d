"""Parser factory for Cymbol.

Create configured Lark parser instances for the Cymbol grammar.
"""

from pathlib import Path

from lark import Lark

from cymbol.log import get_logger

logger = get_logger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "cymbol.lark"
"""Path to the Cymbol grammar file."""


class ParserFactory:
    """Factory for creating Cymbol parser instances.

    The grammar is LALR(1) apart from the dangling ``else``, which Lark
    resolves as a shift (the ``else`` binds to the nearest ``if``).

    Parser instances are cached because LALR table construction dominates
    the cost of checking a small file.
    """

    _grammar_cache: str | None = None
    """Cached grammar content to avoid repeated file reads."""

    _parser_cache: Lark | None = None
    """Cached production parser instance (non-debug mode)."""

    @classmethod
    def _load_grammar(cls) -> str:
        """Load the grammar file contents.

        Returns:
            The grammar string.

        """
        if cls._grammar_cache is None:
            logger.debug("Loading grammar from %s", GRAMMAR_PATH)
            cls._grammar_cache = GRAMMAR_PATH.read_text()
        return cls._grammar_cache

    @classmethod
    def create(cls, *, debug: bool = False) -> Lark:
        """Create a Cymbol parser.

        Args:
            debug: If True, enables Lark's grammar debugging output and
                   returns a fresh parser instance (not cached).

        Returns:
            Configured Lark parser instance.

        """
        if not debug and cls._parser_cache is not None:
            return cls._parser_cache

        logger.debug("Creating lalr parser (debug=%s)", debug)

        parser = Lark(
            cls._load_grammar(),
            parser="lalr",
            lexer="contextual",
            propagate_positions=True,
            maybe_placeholders=False,
            debug=debug,
        )

        if not debug:
            cls._parser_cache = parser

        return parser

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached parser state.

        Use for testing or when grammar may have changed.
        """
        cls._grammar_cache = None
        cls._parser_cache = None
