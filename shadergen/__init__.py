from shadergen.transpiler import (
    BackendType,
    ShaderFunction,
    TranspilerError,
    create_backend,
    transpile_function,
    transpile_functions,
)

__version__ = "0.1.0"


__all__ = [
    "BackendType",
    "ShaderFunction",
    "TranspilerError",
    "create_backend",
    "transpile_function",
    "transpile_functions",
]
