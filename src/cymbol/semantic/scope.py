"""Symbols and scopes for Cymbol semantic analysis.

Provide the symbol table model: variable and function symbols, and the
global, function and local scopes they are defined in. Scopes form a
tree through their enclosing links; name resolution walks that chain
outward from the innermost scope.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from cymbol.ast.nodes import SourcePosition
from cymbol.log import get_logger
from cymbol.semantic.types import TypeTag

logger = get_logger(__name__)


class SymbolKind(Enum):
    """Kind of symbol in the symbol table."""

    VARIABLE = auto()
    FUNCTION = auto()


class ScopeType(Enum):
    """Type of scope."""

    GLOBAL = auto()
    FUNCTION = auto()
    LOCAL = auto()


class Scope:
    """Name -> symbol table tied to a lexical region.

    Names are unique within one scope's own table. Lookups that miss fall
    through to the enclosing scope.
    """

    scope_type: ClassVar[ScopeType]

    def __init__(self, enclosing: "Scope | None" = None) -> None:
        """Initialize an empty scope.

        Args:
            enclosing: Parent scope, or None for the global scope.

        """
        self._enclosing = enclosing
        self._symbols: dict[str, Symbol] = {}

    @property
    def enclosing(self) -> "Scope | None":
        """Parent scope, or None for the global scope."""
        return self._enclosing

    @property
    def scope_name(self) -> str:
        """Short name used when printing the scope."""
        return self.scope_type.name.lower()

    def define(self, symbol: "Symbol") -> None:
        """Bind ``symbol`` under its name in this scope.

        An existing binding with the same name is replaced; callers that
        reject redefinitions look the name up with ``resolve_local`` first.

        Args:
            symbol: The symbol to define. Its ``scope`` is set to this scope.

        """
        symbol.scope = self
        self._symbols[symbol.name] = symbol
        logger.debug(
            "Defined %s %s in %s scope",
            symbol.kind.name.lower(),
            symbol.name,
            self.scope_name,
        )

    def resolve(self, name: str) -> "Symbol | None":
        """Look up a name here, then in enclosing scopes.

        Args:
            name: Name of the symbol to look up.

        Returns:
            The innermost Symbol bound to ``name``, or None.

        """
        scope: Scope | None = self
        while scope is not None:
            symbol = scope._symbols.get(name)  # noqa: SLF001
            if symbol is not None:
                return symbol
            scope = scope.enclosing
        return None

    def resolve_local(self, name: str) -> "Symbol | None":
        """Look up a name in this scope only."""
        return self._symbols.get(name)

    def is_defined_locally(self, name: str) -> bool:
        """Check if a name is bound in this scope only."""
        return name in self._symbols

    def symbols(self) -> list["Symbol"]:
        """Return the symbols of this scope in definition order."""
        return list(self._symbols.values())

    def __str__(self) -> str:
        """Format as ``name:[symbol, ...]``."""
        return f"{self.scope_name}:{list(self._symbols)}"


class GlobalScope(Scope):
    """Outermost scope; holds top-level functions and variables."""

    scope_type = ScopeType.GLOBAL

    def __init__(self) -> None:
        """Initialize the global scope (no enclosing scope)."""
        super().__init__(None)

    @property
    def scope_name(self) -> str:
        """Short name used when printing the scope."""
        return "globals"


class LocalScope(Scope):
    """Scope opened by a block."""

    scope_type = ScopeType.LOCAL

    @property
    def scope_name(self) -> str:
        """Short name used when printing the scope."""
        return "locals"


@dataclass(eq=False)
class Symbol:
    """Named, typed entity declared in exactly one scope.

    Symbols compare by identity: two declarations of the same name in
    different scopes are different symbols.
    """

    kind: ClassVar[SymbolKind]

    name: str
    """Name of the symbol."""

    type_tag: TypeTag
    """Declared type."""

    position: SourcePosition | None = None
    """Position of the declaring identifier."""

    scope: Scope | None = field(default=None, repr=False)
    """Scope the symbol is defined in; set by ``Scope.define``."""

    @property
    def is_variable(self) -> bool:
        """True for variable symbols."""
        return self.kind is SymbolKind.VARIABLE

    @property
    def is_function(self) -> bool:
        """True for function symbols."""
        return self.kind is SymbolKind.FUNCTION


@dataclass(eq=False)
class VariableSymbol(Symbol):
    """Variable or parameter."""

    kind: ClassVar[SymbolKind] = SymbolKind.VARIABLE

    def __str__(self) -> str:
        return f"<{self.name}:{self.type_tag.value}>"


@dataclass(eq=False)
class FunctionSymbol(Symbol, Scope):
    """Function symbol that is also the scope of its parameters.

    The enclosing scope is the scope the function was declared in, so
    names in the body resolve through the parameters to the globals.
    """

    kind: ClassVar[SymbolKind] = SymbolKind.FUNCTION
    scope_type: ClassVar[ScopeType] = ScopeType.FUNCTION

    enclosing_scope: Scope | None = field(default=None, repr=False)
    """Declaration-site scope."""

    parameters: list[VariableSymbol] = field(default_factory=list, repr=False)
    """Parameters in declaration order."""

    def __post_init__(self) -> None:
        Scope.__init__(self, self.enclosing_scope)

    @property
    def scope_name(self) -> str:
        """Short name used when printing the scope."""
        return f"function<{self.name}:{self.type_tag.value}>"

    def add_parameter(self, parameter: VariableSymbol) -> None:
        """Append a parameter already defined in this scope."""
        self.parameters.append(parameter)
