"""
Code generation for shader functions.

This module provides the top-level interface for translating resolved method
bodies into shading-language functions, one at a time or as a batch.
"""

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from shadergen.transpiler.backends import (
    Backend,
    BackendConfig,
    BackendType,
    LanguageBackend,
    create_backend,
)
from shadergen.transpiler.code_generator import generate_function
from shadergen.transpiler.errors import (
    ShapeViolationError,
    TranspilerError,
    UnmappedNameError,
    UnresolvedSymbolError,
    UnsupportedConstructError,
)
from shadergen.transpiler.models import (
    Parameter,
    ShaderFunction,
    Symbol,
    SymbolKind,
    TranslationResult,
    TypeRef,
)
from shadergen.transpiler.nodes import Block, Stmt
from shadergen.transpiler.symbols import SymbolResolver, SymbolTable

FunctionBody = Block | list[Stmt]


def transpile_function(
    function: ShaderFunction,
    body: FunctionBody,
    backend: LanguageBackend,
    resolver: SymbolResolver,
) -> str:
    """Translate one method body into a shader function.

    Args:
        function: Descriptor of the method (name, return type, parameters)
        body: The method body
        backend: Target dialect lookups
        resolver: Symbol resolver for invocations and constructions

    Returns:
        The shader function source

    Raises:
        TranspilerError: If any construct in the body cannot be translated
    """
    return generate_function(function, body, backend, resolver)


def _transpile_isolated(
    function: ShaderFunction,
    body: FunctionBody,
    backend: LanguageBackend,
    resolver: SymbolResolver,
) -> TranslationResult:
    try:
        code = transpile_function(function, body, backend, resolver)
    except TranspilerError as e:
        logger.warning(f"Failed to translate '{function.name}': {e}")
        return TranslationResult(function=function, error=e)
    return TranslationResult(function=function, code=code)


def transpile_functions(
    items: Iterable[tuple[ShaderFunction, FunctionBody]],
    backend: LanguageBackend,
    resolver: SymbolResolver,
    max_workers: int | None = None,
) -> list[TranslationResult]:
    """Translate several independent functions.

    A failure in one function is recorded in its result and does not affect
    the others. Results are returned in input order.

    Args:
        items: (descriptor, body) pairs
        backend: Target dialect lookups, shared read-only by all translations
        resolver: Symbol resolver, shared read-only by all translations
        max_workers: Translate on a thread pool of this size; sequential if None

    Returns:
        One result per input item
    """
    pairs: Sequence[tuple[ShaderFunction, FunctionBody]] = list(items)
    logger.debug(f"Translating {len(pairs)} functions")

    if max_workers is None:
        return [
            _transpile_isolated(function, body, backend, resolver)
            for function, body in pairs
        ]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(_transpile_isolated, function, body, backend, resolver)
            for function, body in pairs
        ]
        return [future.result() for future in futures]


__all__ = [
    "Backend",
    "BackendConfig",
    "BackendType",
    "LanguageBackend",
    "Parameter",
    "ShaderFunction",
    "ShapeViolationError",
    "Symbol",
    "SymbolKind",
    "SymbolResolver",
    "SymbolTable",
    "TranslationResult",
    "TranspilerError",
    "TypeRef",
    "UnmappedNameError",
    "UnresolvedSymbolError",
    "UnsupportedConstructError",
    "create_backend",
    "transpile_function",
    "transpile_functions",
]
