from dataclasses import dataclass, field
from enum import Enum, auto


class BackendType(Enum):
    """Supported shading dialects."""

    HLSL = auto()
    GLSL = auto()


@dataclass
class BackendConfig:
    """Configuration for a shading dialect backend.

    Attributes:
        name: Dialect name used in diagnostics
        type_mappings: Source type name to target type token
        function_mappings: (containing type, method name) to target function name
    """

    name: str
    type_mappings: dict[str, str] = field(default_factory=dict)
    function_mappings: dict[tuple[str, str], str] = field(default_factory=dict)
