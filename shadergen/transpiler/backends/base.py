"""Backend lookups shared by every shading dialect.

A backend is a value, not a subclass: each dialect is a ``Backend`` built from
its own ``BackendConfig``. Backends are immutable once created, so one instance
can be shared by any number of concurrent translations.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol

from loguru import logger

from shadergen.transpiler.backends.models import BackendConfig
from shadergen.transpiler.constants import SCALAR_TYPE_ALIASES
from shadergen.transpiler.errors import UnmappedNameError


class LanguageBackend(Protocol):
    """Interface for mapping source symbols to target dialect names."""

    def map_type(self, source_type: str) -> str:
        """Map a source type name to a target type token.

        Args:
            source_type: Source type name (simple or namespace-qualified)

        Returns:
            Equivalent type in the target dialect
        """
        ...

    def map_function(self, containing_type: str, method: str) -> str:
        """Map a library method to a target function name.

        Args:
            containing_type: Display name of the type declaring the method
            method: Method name

        Returns:
            Equivalent function in the target dialect
        """
        ...


class Backend:
    """Type and function lookups for one shading dialect."""

    def __init__(self, config: BackendConfig):
        self.name = config.name
        self._types: Mapping[str, str] = MappingProxyType(dict(config.type_mappings))
        self._functions: Mapping[tuple[str, str], str] = MappingProxyType(
            dict(config.function_mappings)
        )

    @property
    def type_mappings(self) -> Mapping[str, str]:
        return self._types

    @property
    def function_mappings(self) -> Mapping[tuple[str, str], str]:
        return self._functions

    def map_type(self, source_type: str) -> str:
        """Map a source type name to the dialect's type token.

        Raises:
            UnmappedNameError: If the dialect has no such type
        """
        try:
            return self._types[source_type]
        except KeyError:
            msg = f"Type '{source_type}' has no {self.name} equivalent"
            logger.error(msg)
            raise UnmappedNameError(msg) from None

    def map_function(self, containing_type: str, method: str) -> str:
        """Map a (containing type, method) pair to the dialect's function name.

        Raises:
            UnmappedNameError: If the dialect has no such function
        """
        try:
            return self._functions[(containing_type, method)]
        except KeyError:
            msg = f"Function '{containing_type}.{method}' has no {self.name} equivalent"
            logger.error(msg)
            raise UnmappedNameError(msg) from None

    def extend(
        self,
        type_mappings: Mapping[str, str] | None = None,
        function_mappings: Mapping[tuple[str, str], str] | None = None,
    ) -> "Backend":
        """Create a new backend with additional mappings.

        Used to register application-defined value structs and helper functions
        on top of a dialect's built-in surface. The current backend is unchanged.

        Args:
            type_mappings: Extra source type to target type entries
            function_mappings: Extra (type, method) to function entries

        Returns:
            A new backend containing both the existing and the extra entries
        """
        config = BackendConfig(
            name=self.name,
            type_mappings={**self._types, **(type_mappings or {})},
            function_mappings={**self._functions, **(function_mappings or {})},
        )
        return Backend(config)

    def __repr__(self) -> str:
        return (
            f"Backend(name={self.name!r}, types={len(self._types)}, "
            f"functions={len(self._functions)})"
        )


def expand_type_mappings(
    scalars: Mapping[str, str], aggregates: Mapping[str, str], namespace: str
) -> dict[str, str]:
    """Build a type table keyed by every spelling of each source type.

    Args:
        scalars: Keyword alias (``float``) to target type
        aggregates: Simple aggregate name (``Vector4``) to target type
        namespace: Namespace declaring the aggregates

    Returns:
        Table containing keyword, runtime and namespace-qualified spellings
    """
    table: dict[str, str] = {}
    for alias, target in scalars.items():
        table[alias] = target
        runtime_name = SCALAR_TYPE_ALIASES.get(alias)
        if runtime_name:
            table[runtime_name] = target
    for name, target in aggregates.items():
        table[name] = target
        table[f"{namespace}.{name}"] = target
    return table


def expand_function_mappings(
    classes: tuple[str, ...], methods: Mapping[str, str]
) -> dict[tuple[str, str], str]:
    """Map the same methods on each of several classes to one function name each."""
    return {
        (containing_type, method): target
        for containing_type in classes
        for method, target in methods.items()
    }
