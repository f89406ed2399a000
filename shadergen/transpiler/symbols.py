"""Symbol resolution used by the expression translator.

The translator needs to know which method an invocation calls and which type a
construction builds. That knowledge comes from the front end's semantic model,
reached through the ``SymbolResolver`` protocol.
"""

from typing import Protocol

from shadergen.transpiler.models import Symbol, SymbolKind
from shadergen.transpiler.nodes import Node


class SymbolResolver(Protocol):
    """Interface for resolving syntax nodes to the symbols they denote."""

    def resolve(self, node: Node) -> Symbol | None:
        """Resolve a node to its symbol.

        Args:
            node: Identifier node of an invocation callee or constructed type

        Returns:
            The resolved symbol, or None if the node denotes nothing known
        """
        ...


class SymbolTable:
    """Symbol resolver backed by a table keyed by identifier text.

    Fill the table once, then share it read-only across translations.
    """

    def __init__(self) -> None:
        """Initialize an empty symbol table."""
        self.symbols: dict[str, Symbol] = {}

    def add_symbol(self, identifier: str, symbol: Symbol) -> None:
        """Register the symbol an identifier resolves to.

        Args:
            identifier: Identifier text as it appears in method bodies
            symbol: Symbol it denotes
        """
        self.symbols[identifier] = symbol

    def add_method(self, identifier: str, containing_type: str, name: str) -> None:
        """Register a method reachable through a bare identifier.

        Args:
            identifier: Identifier used at the call site (e.g. a static import)
            containing_type: Display name of the declaring type (``System.Math``)
            name: Method name (``Max``)
        """
        self.add_symbol(
            identifier,
            Symbol(name=name, kind=SymbolKind.METHOD, containing_type=containing_type),
        )

    def add_type(
        self, identifier: str, name: str, namespace: str | None = None
    ) -> None:
        """Register a type reachable through an identifier.

        Args:
            identifier: Identifier used in source (``Vector4``)
            name: Simple type name
            namespace: Declaring namespace, if any
        """
        self.add_symbol(
            identifier,
            Symbol(name=name, kind=SymbolKind.TYPE, containing_namespace=namespace),
        )

    def lookup(self, identifier: str) -> Symbol | None:
        """Look up a symbol by identifier text."""
        return self.symbols.get(identifier)

    def resolve(self, node: Node) -> Symbol | None:
        identifier = getattr(node, "id", None)
        if identifier is None:
            return None
        return self.lookup(identifier)
