"""
Shader code generation for complete functions.

This module emits the signature of a shader function from its descriptor and
wraps the translated body statements in braces.
"""

from loguru import logger

from shadergen.transpiler.backends.base import LanguageBackend
from shadergen.transpiler.code_gen_stmt import generate_body
from shadergen.transpiler.errors import UnmappedNameError
from shadergen.transpiler.models import ShaderFunction
from shadergen.transpiler.nodes import Block, Stmt
from shadergen.transpiler.symbols import SymbolResolver


def generate_parameter_list(function: ShaderFunction, backend: LanguageBackend) -> str:
    """Generate the parameter declaration list in declaration order.

    Args:
        function: Function descriptor
        backend: Dialect lookups

    Returns:
        Parameters as ``<type> <name>`` joined with ``", "``
    """
    return ", ".join(
        f"{backend.map_type(param.type.full_name)} {param.name}"
        for param in function.parameters
    )


def generate_signature(function: ShaderFunction, backend: LanguageBackend) -> str:
    """Generate the function signature line.

    Args:
        function: Function descriptor
        backend: Dialect lookups

    Returns:
        Signature such as ``float Foo(float a)``

    Raises:
        UnmappedNameError: If the return or a parameter type has no equivalent
    """
    try:
        return_type = backend.map_type(function.return_type.full_name)
        params = generate_parameter_list(function, backend)
    except UnmappedNameError as e:
        raise UnmappedNameError(f"{e.message} in signature of '{function.name}'") from e
    return f"{return_type} {function.name}({params})"


def generate_function(
    function: ShaderFunction,
    body: Block | list[Stmt],
    backend: LanguageBackend,
    resolver: SymbolResolver,
    indent: str = "",
) -> str:
    """Generate the complete shader source of one function.

    Args:
        function: Function descriptor
        body: Method body, as a block or its statement list
        backend: Dialect lookups
        resolver: Symbol resolver
        indent: Indentation for body statements

    Returns:
        Function source, one line per statement, ending with a newline

    Raises:
        TranspilerError: On the first construct that cannot be translated;
            no partial output is produced
    """
    statements = body.statements if isinstance(body, Block) else body
    logger.debug(
        f"Generating function '{function.name}' ({len(statements)} statements)"
    )

    lines = [generate_signature(function, backend), "{"]
    lines.extend(generate_body(statements, backend, resolver, indent))
    lines.append("}")

    logger.debug(f"Generated function '{function.name}'")
    return "\n".join(lines) + "\n"
