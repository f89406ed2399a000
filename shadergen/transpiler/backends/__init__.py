from shadergen.transpiler.backends.base import Backend, LanguageBackend
from shadergen.transpiler.backends.glsl import create_glsl_backend
from shadergen.transpiler.backends.hlsl import create_hlsl_backend
from shadergen.transpiler.backends.models import BackendConfig, BackendType


def create_backend(backend_type: BackendType = BackendType.HLSL) -> Backend:
    """Create a backend instance based on type.

    Args:
        backend_type: The shading dialect to create a backend for

    Returns:
        An instance of the requested backend

    Raises:
        ValueError: If the backend type is not supported
    """
    if backend_type == BackendType.HLSL:
        return create_hlsl_backend()
    elif backend_type == BackendType.GLSL:
        return create_glsl_backend()
    else:
        raise ValueError(f"Unsupported backend type: {backend_type}")


__all__ = [
    "Backend",
    "BackendConfig",
    "BackendType",
    "LanguageBackend",
    "create_backend",
    "create_glsl_backend",
    "create_hlsl_backend",
]
