"""GLSL backend."""

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

GLSL_SCALAR_TYPES: dict[str, str] = {
    "float": "float",
    "double": "double",
    "int": "int",
    "uint": "uint",
    "bool": "bool",
    "void": "void",
}

GLSL_AGGREGATE_TYPES: dict[str, str] = {
    "Vector2": "vec2",
    "Vector3": "vec3",
    "Vector4": "vec4",
    "Matrix4x4": "mat4",
}

GLSL_MATH_FUNCTIONS: dict[str, str] = {
    "Abs": "abs",
    "Acos": "acos",
    "Asin": "asin",
    "Atan": "atan",
    "Atan2": "atan",  # two-argument overload
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

GLSL_VECTOR_FUNCTIONS: dict[str, str] = {
    "Abs": "abs",
    "Clamp": "clamp",
    "Cross": "cross",
    "Distance": "distance",
    "Dot": "dot",
    "Lerp": "mix",
    "Max": "max",
    "Min": "min",
    "Normalize": "normalize",
    "Reflect": "reflect",
    "SquareRoot": "sqrt",
}

# Saturate and Mul have no single-call GLSL spelling and stay unmapped.
GLSL_SHADER_BUILTINS: dict[str, str] = {
    "Frac": "fract",
    "Step": "step",
    "SmoothStep": "smoothstep",
}


def create_glsl_backend() -> Backend:
    """Create the GLSL backend."""
    function_mappings = {
        **expand_function_mappings(MATH_CLASSES, GLSL_MATH_FUNCTIONS),
        **expand_function_mappings(VECTOR_CLASSES, GLSL_VECTOR_FUNCTIONS),
        **expand_function_mappings((SHADER_BUILTINS_CLASS,), GLSL_SHADER_BUILTINS),
    }
    config = BackendConfig(
        name="GLSL",
        type_mappings=expand_type_mappings(
            GLSL_SCALAR_TYPES, GLSL_AGGREGATE_TYPES, NUMERICS_NAMESPACE
        ),
        function_mappings=function_mappings,
    )
    logger.debug(
        f"Created GLSL backend with {len(config.type_mappings)} types "
        f"and {len(config.function_mappings)} functions"
    )
    return Backend(config)
