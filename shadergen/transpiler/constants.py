"""
Source-side names shared by the dialect backends.

This module lists the source types and library classes whose members shader code
may use. Each backend maps these names onto its own dialect.
"""

# Keyword aliases and their runtime type names
SCALAR_TYPE_ALIASES: dict[str, str] = {
    "float": "System.Single",
    "double": "System.Double",
    "int": "System.Int32",
    "uint": "System.UInt32",
    "bool": "System.Boolean",
    "void": "System.Void",
}

NUMERICS_NAMESPACE = "System.Numerics"

# Classes exposing scalar math as static methods
MATH_CLASSES: tuple[str, ...] = ("System.Math", "System.MathF")

# Vector classes exposing geometric helpers as static methods
VECTOR_CLASSES: tuple[str, ...] = (
    "System.Numerics.Vector2",
    "System.Numerics.Vector3",
    "System.Numerics.Vector4",
)

# Class holding shader-only intrinsics
SHADER_BUILTINS_CLASS = "ShaderGen.ShaderBuiltins"
