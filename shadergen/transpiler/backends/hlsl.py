"""HLSL backend, the reference shading dialect."""

from loguru import logger

from shadergen.transpiler.backends.base import (
    Backend,
    expand_function_mappings,
    expand_type_mappings,
)
from shadergen.transpiler.backends.models import BackendConfig
from shadergen.transpiler.constants import (
    MATH_CLASSES,
    NUMERICS_NAMESPACE,
    SHADER_BUILTINS_CLASS,
    VECTOR_CLASSES,
)

HLSL_SCALAR_TYPES: dict[str, str] = {
    "float": "float",
    "double": "double",
    "int": "int",
    "uint": "uint",
    "bool": "bool",
    "void": "void",
}

HLSL_AGGREGATE_TYPES: dict[str, str] = {
    "Vector2": "float2",
    "Vector3": "float3",
    "Vector4": "float4",
    "Matrix4x4": "float4x4",
}

HLSL_MATH_FUNCTIONS: dict[str, str] = {
    "Abs": "abs",
    "Acos": "acos",
    "Asin": "asin",
    "Atan": "atan",
    "Atan2": "atan2",
    "Ceiling": "ceil",
    "Clamp": "clamp",
    "Cos": "cos",
    "Exp": "exp",
    "Floor": "floor",
    "Log": "log",
    "Max": "max",
    "Min": "min",
    "Pow": "pow",
    "Sin": "sin",
    "Sqrt": "sqrt",
    "Tan": "tan",
}

HLSL_VECTOR_FUNCTIONS: dict[str, str] = {
    "Abs": "abs",
    "Clamp": "clamp",
    "Cross": "cross",
    "Distance": "distance",
    "Dot": "dot",
    "Lerp": "lerp",
    "Max": "max",
    "Min": "min",
    "Normalize": "normalize",
    "Reflect": "reflect",
    "SquareRoot": "sqrt",
}

HLSL_SHADER_BUILTINS: dict[str, str] = {
    "Saturate": "saturate",
    "Mul": "mul",
    "Frac": "frac",
    "Step": "step",
    "SmoothStep": "smoothstep",
}


def create_hlsl_backend() -> Backend:
    """Create the HLSL backend."""
    function_mappings = {
        **expand_function_mappings(MATH_CLASSES, HLSL_MATH_FUNCTIONS),
        **expand_function_mappings(VECTOR_CLASSES, HLSL_VECTOR_FUNCTIONS),
        **expand_function_mappings((SHADER_BUILTINS_CLASS,), HLSL_SHADER_BUILTINS),
    }
    config = BackendConfig(
        name="HLSL",
        type_mappings=expand_type_mappings(
            HLSL_SCALAR_TYPES, HLSL_AGGREGATE_TYPES, NUMERICS_NAMESPACE
        ),
        function_mappings=function_mappings,
    )
    logger.debug(
        f"Created HLSL backend with {len(config.type_mappings)} types "
        f"and {len(config.function_mappings)} functions"
    )
    return Backend(config)
