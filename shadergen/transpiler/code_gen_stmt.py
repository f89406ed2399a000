"""
Shader code generation for statements.

This module contains functions for generating shader code from the statements of
a method body: local declarations, expression statements and returns. The
statement terminator is added here and nowhere else.
"""

from shadergen.transpiler.backends.base import LanguageBackend
from shadergen.transpiler.code_gen_expr import generate_equals_value_expr, generate_expr
from shadergen.transpiler.errors import (
    ShapeViolationError,
    TranspilerError,
    UnmappedNameError,
    UnsupportedConstructError,
)
from shadergen.transpiler.nodes import (
    ExpressionStatement,
    LocalDeclaration,
    ReturnStatement,
    Stmt,
    node_kind,
)
from shadergen.transpiler.symbols import SymbolResolver


def generate_local_declaration(
    stmt: LocalDeclaration,
    backend: LanguageBackend,
    resolver: SymbolResolver,
    indent: str = "",
) -> str:
    """Generate shader code for a local variable declaration.

    Args:
        stmt: Declaration statement
        backend: Dialect lookups
        resolver: Symbol resolver
        indent: Indentation string

    Returns:
        Generated code, e.g. ``float b = a;`` or ``float b;``

    Raises:
        ShapeViolationError: If the statement declares more than one variable
        UnmappedNameError: If the declared type has no dialect equivalent
    """
    declaration = stmt.declaration
    if len(declaration.variables) != 1:
        raise ShapeViolationError(
            "Declarations must declare exactly one variable, "
            f"got {len(declaration.variables)}",
            stmt,
        )

    try:
        type_name = backend.map_type(declaration.type.full_name)
    except UnmappedNameError as e:
        raise e.with_node(stmt) from None

    variable = declaration.variables[0]
    if variable.initializer is None:
        return f"{indent}{type_name} {variable.identifier};"
    initializer = generate_equals_value_expr(variable.initializer, backend, resolver)
    return f"{indent}{type_name} {variable.identifier} {initializer};"


def generate_expression_statement(
    stmt: ExpressionStatement,
    backend: LanguageBackend,
    resolver: SymbolResolver,
    indent: str = "",
) -> str:
    """Generate shader code for an expression evaluated for its effect.

    Raises:
        UnsupportedConstructError: If the expression produced no code
    """
    expr = generate_expr(stmt.expression, backend, resolver)
    if not expr:
        raise UnsupportedConstructError(
            f"{node_kind(stmt.expression)} statements are not supported", stmt
        )
    return f"{indent}{expr};"


def generate_return_statement(
    stmt: ReturnStatement,
    backend: LanguageBackend,
    resolver: SymbolResolver,
    indent: str = "",
) -> str:
    """Generate shader code for a return statement.

    Args:
        stmt: Return statement
        backend: Dialect lookups
        resolver: Symbol resolver
        indent: Indentation string

    Returns:
        Generated code for the return statement

    Raises:
        UnsupportedConstructError: If the returned expression produced no code
    """
    if stmt.expression is None:
        return f"{indent}return;"
    expr = generate_expr(stmt.expression, backend, resolver)
    if not expr:
        raise UnsupportedConstructError(
            f"{node_kind(stmt.expression)} return values are not supported", stmt
        )
    return f"{indent}return {expr};"


def _dispatch_statement(
    stmt: Stmt,
    backend: LanguageBackend,
    resolver: SymbolResolver,
    indent: str,
) -> str:
    if isinstance(stmt, LocalDeclaration):
        return generate_local_declaration(stmt, backend, resolver, indent)
    elif isinstance(stmt, ExpressionStatement):
        return generate_expression_statement(stmt, backend, resolver, indent)
    elif isinstance(stmt, ReturnStatement):
        return generate_return_statement(stmt, backend, resolver, indent)
    raise UnsupportedConstructError(
        f"{node_kind(stmt)} statements are not supported", stmt
    )


def generate_statement(
    stmt: Stmt,
    backend: LanguageBackend,
    resolver: SymbolResolver,
    indent: str = "",
) -> str:
    """Generate shader code for one statement.

    Errors raised for nodes without a source location take the statement's
    location.

    Raises:
        UnsupportedConstructError: If the statement kind is not supported
    """
    try:
        return _dispatch_statement(stmt, backend, resolver, indent)
    except TranspilerError as e:
        if e.lineno is None and stmt.lineno is not None:
            raise e.with_node(stmt) from e
        raise


def generate_body(
    statements: list[Stmt],
    backend: LanguageBackend,
    resolver: SymbolResolver,
    indent: str = "",
) -> list[str]:
    """Generate shader code for a function body.

    Statements are translated in source order, one output line each.

    Args:
        statements: Statements of the method body
        backend: Dialect lookups
        resolver: Symbol resolver
        indent: Indentation string

    Returns:
        List of generated code lines

    Raises:
        TranspilerError: On the first statement that cannot be translated
    """
    return [generate_statement(stmt, backend, resolver, indent) for stmt in statements]
