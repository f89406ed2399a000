"""
Data models and structures for the shader transpiler.

This module contains the dataclass definitions shared by the translator: the
descriptor of a method to translate, resolved symbols, and batch results.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from shadergen.transpiler.errors import TranspilerError


@dataclass(frozen=True)
class TypeRef:
    """Handle to a source-language type.

    Attributes:
        name: Simple type name (``float``, ``Vector4``)
        namespace: Containing namespace, if any (``System.Numerics``)
    """

    name: str
    namespace: str | None = None

    @property
    def full_name(self) -> str:
        """Namespace-qualified name used as the backend lookup key."""
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name


@dataclass(frozen=True)
class Parameter:
    """Declared parameter of a shader function.

    Attributes:
        name: Parameter name
        type: Declared source type
    """

    name: str
    type: TypeRef


@dataclass(frozen=True)
class ShaderFunction:
    """Description of one method to translate into a shader function.

    Attributes:
        name: Function name
        return_type: Declared source return type
        parameters: Parameters in declaration order
    """

    name: str
    return_type: TypeRef
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)


class SymbolKind(Enum):
    """Kinds of symbols the resolver reports."""

    METHOD = auto()
    TYPE = auto()


@dataclass(frozen=True)
class Symbol:
    """Resolved symbol behind an identifier.

    Attributes:
        name: Member or type name (``Max``, ``Vector4``)
        kind: Whether the symbol is a method or a type
        containing_type: Display name of the declaring type, for methods
        containing_namespace: Declaring namespace, for types
    """

    name: str
    kind: SymbolKind
    containing_type: str | None = None
    containing_namespace: str | None = None


@dataclass
class TranslationResult:
    """Outcome of translating one function in a batch.

    Attributes:
        function: The translated function descriptor
        code: Generated function source, or None if translation failed
        error: The error that aborted translation, if any
    """

    function: ShaderFunction
    code: str | None = None
    error: TranspilerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
