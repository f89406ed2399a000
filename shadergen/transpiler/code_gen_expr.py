"""
Shader code generation for expressions.

This module contains functions for generating shader code from syntax-tree
expressions: names, literals, member access, assignments, invocations and
object construction. Any other expression kind is rejected by name.
"""

from shadergen.transpiler.backends.base import LanguageBackend
from shadergen.transpiler.errors import (
    UnmappedNameError,
    UnresolvedSymbolError,
    UnsupportedConstructError,
)
from shadergen.transpiler.models import SymbolKind
from shadergen.transpiler.nodes import (
    Argument,
    ArgumentList,
    Assignment,
    EqualsValueClause,
    Invocation,
    Literal,
    MemberAccess,
    Name,
    Node,
    ObjectCreation,
    node_kind,
)
from shadergen.transpiler.symbols import SymbolResolver


def generate_name_expr(node: Name) -> str:
    """Generate shader code for an identifier.

    Identifiers are emitted verbatim; no renaming takes place.

    Args:
        node: Identifier node

    Returns:
        The identifier text
    """
    return node.id


def generate_literal_expr(node: Literal) -> str:
    """Generate shader code for a literal, which is emitted exactly as written."""
    return node.token


def generate_member_access_expr(
    node: MemberAccess, backend: LanguageBackend, resolver: SymbolResolver
) -> str:
    """Generate shader code for a member access expression.

    Args:
        node: Member access node
        backend: Dialect lookups
        resolver: Symbol resolver

    Returns:
        Generated code for the member access, e.g. ``position.x``
    """
    target = generate_expr(node.expression, backend, resolver)
    return f"{target}{node.operator}{generate_name_expr(node.name)}"


def generate_assignment_expr(
    node: Assignment, backend: LanguageBackend, resolver: SymbolResolver
) -> str:
    """Generate shader code for an assignment expression.

    The operator (``=``, ``+=``, ...) is passed through unchanged. No statement
    terminator is added here; that is the statement generator's job.

    Args:
        node: Assignment node
        backend: Dialect lookups
        resolver: Symbol resolver

    Returns:
        Generated code for the assignment
    """
    left = generate_expr(node.left, backend, resolver)
    right = generate_expr(node.right, backend, resolver)
    return f"{left} {node.operator} {right}"


def generate_equals_value_expr(
    node: EqualsValueClause, backend: LanguageBackend, resolver: SymbolResolver
) -> str:
    """Generate the ``= <value>`` part of a variable initializer."""
    return f"= {generate_expr(node.value, backend, resolver)}"


def generate_argument_expr(
    node: Argument, backend: LanguageBackend, resolver: SymbolResolver
) -> str:
    """Generate shader code for a single call argument.

    Raises:
        UnsupportedConstructError: If the argument expression produced no code
    """
    result = generate_expr(node.expression, backend, resolver)
    if not result:
        raise UnsupportedConstructError(
            f"{node_kind(node.expression)} arguments are not supported", node
        )
    return result


def generate_argument_list_expr(
    node: ArgumentList, backend: LanguageBackend, resolver: SymbolResolver
) -> str:
    """Generate comma-separated call arguments in source order."""
    return ", ".join(
        generate_argument_expr(arg, backend, resolver) for arg in node.arguments
    )


def generate_invocation_expr(
    node: Invocation, backend: LanguageBackend, resolver: SymbolResolver
) -> str:
    """Generate shader code for a method call.

    Only calls through a bare identifier are supported. The identifier is
    resolved to its declaring type and method, and the backend maps that pair
    to the dialect's function name.

    Args:
        node: Invocation node
        backend: Dialect lookups
        resolver: Symbol resolver

    Returns:
        Generated code for the call, e.g. ``max(a, b)``

    Raises:
        UnsupportedConstructError: If the callee is not a bare identifier
        UnresolvedSymbolError: If the callee does not resolve to a method
        UnmappedNameError: If the backend has no function for the method
    """
    callee = node.expression
    if not isinstance(callee, Name):
        raise UnsupportedConstructError(
            "Function calls must be made through a bare identifier, "
            f"got {node_kind(callee)}",
            node,
        )

    symbol = resolver.resolve(callee)
    if (
        symbol is None
        or symbol.kind is not SymbolKind.METHOD
        or not symbol.containing_type
    ):
        raise UnresolvedSymbolError(f"Cannot resolve function call: {callee.id}", node)

    try:
        function_name = backend.map_function(symbol.containing_type, symbol.name)
    except UnmappedNameError as e:
        raise e.with_node(node) from None

    args = generate_argument_list_expr(node.argument_list, backend, resolver)
    return f"{function_name}({args})"


def generate_object_creation_expr(
    node: ObjectCreation, backend: LanguageBackend, resolver: SymbolResolver
) -> str:
    """Generate shader code for constructing a value aggregate.

    Construction is rendered as a value-constructor call, e.g.
    ``new Vector4(a, b, c, d)`` becomes ``float4(a, b, c, d)``.

    Args:
        node: Object creation node
        backend: Dialect lookups
        resolver: Symbol resolver

    Returns:
        Generated code for the constructor call

    Raises:
        UnresolvedSymbolError: If the constructed type does not resolve
        UnmappedNameError: If the backend has no equivalent type
    """
    symbol = resolver.resolve(node.type)
    if symbol is None or symbol.kind is not SymbolKind.TYPE:
        raise UnresolvedSymbolError(
            "Cannot resolve constructed type: "
            f"{getattr(node.type, 'id', node_kind(node.type))}",
            node,
        )

    full_name = symbol.name
    if symbol.containing_namespace:
        full_name = f"{symbol.containing_namespace}.{full_name}"

    try:
        type_name = backend.map_type(full_name)
    except UnmappedNameError as e:
        raise e.with_node(node) from None

    args = generate_argument_list_expr(node.argument_list, backend, resolver)
    return f"{type_name}({args})"


class ExpressionCodeGenerator:
    """Visitor generating shader code from expression nodes."""

    def __init__(self, backend: LanguageBackend, resolver: SymbolResolver):
        self.backend = backend
        self.resolver = resolver

    def visit(self, node: Node) -> str:
        """Dispatch to the handler for the node's kind."""
        method_name = "visit_" + node.__class__.__name__
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: Node) -> str:
        """Handler for unsupported node kinds.

        Raises:
            UnsupportedConstructError: Always raised for unsupported nodes
        """
        raise UnsupportedConstructError(
            f"Unsupported expression: {node_kind(node)}", node
        )

    def visit_Name(self, node: Name) -> str:
        return generate_name_expr(node)

    def visit_Literal(self, node: Literal) -> str:
        return generate_literal_expr(node)

    def visit_MemberAccess(self, node: MemberAccess) -> str:
        return generate_member_access_expr(node, self.backend, self.resolver)

    def visit_Assignment(self, node: Assignment) -> str:
        return generate_assignment_expr(node, self.backend, self.resolver)

    def visit_EqualsValueClause(self, node: EqualsValueClause) -> str:
        return generate_equals_value_expr(node, self.backend, self.resolver)

    def visit_Invocation(self, node: Invocation) -> str:
        return generate_invocation_expr(node, self.backend, self.resolver)

    def visit_ArgumentList(self, node: ArgumentList) -> str:
        return generate_argument_list_expr(node, self.backend, self.resolver)

    def visit_Argument(self, node: Argument) -> str:
        return generate_argument_expr(node, self.backend, self.resolver)

    def visit_ObjectCreation(self, node: ObjectCreation) -> str:
        return generate_object_creation_expr(node, self.backend, self.resolver)


def generate_expr(
    node: Node, backend: LanguageBackend, resolver: SymbolResolver
) -> str:
    """Generate shader code for an expression.

    Args:
        node: Expression node
        backend: Dialect lookups
        resolver: Symbol resolver

    Returns:
        Generated shader code for the expression

    Raises:
        TranspilerError: If an unsupported or unresolvable construct is found
    """
    return ExpressionCodeGenerator(backend, resolver).visit(node)
