"""Syntax node definitions for method bodies handed to the transpiler.

The front end parses source methods and resolves their symbols; this module only
describes the shape of the tree it passes in. The translator never mutates it.
"""

from dataclasses import dataclass, field

from shadergen.transpiler.models import TypeRef


@dataclass
class Node:
    """Base syntax node"""

    lineno: int | None = field(default=None, kw_only=True)
    col_offset: int | None = field(default=None, kw_only=True)


@dataclass
class Expr(Node):
    """Base expression node"""

    pass


@dataclass
class Stmt(Node):
    """Base statement node"""

    pass


# ====================
# Expressions
# ====================


@dataclass
class Name(Expr):
    """Identifier reference"""

    id: str


@dataclass
class Literal(Expr):
    """Literal token, kept exactly as written in the source (e.g. ``1.0f``)"""

    token: str


@dataclass
class MemberAccess(Expr):
    """Field or property access such as ``position.x``"""

    expression: Expr
    name: Name
    operator: str = "."


@dataclass
class Assignment(Expr):
    """Simple or compound assignment (``=``, ``+=``, ...)"""

    left: Expr
    operator: str
    right: Expr


@dataclass
class Argument(Expr):
    """Single call argument"""

    expression: Expr


@dataclass
class ArgumentList(Expr):
    """Ordered call arguments"""

    arguments: list[Argument] = field(default_factory=list)


@dataclass
class Invocation(Expr):
    """Method call"""

    expression: Expr
    argument_list: ArgumentList = field(default_factory=ArgumentList)


@dataclass
class ObjectCreation(Expr):
    """``new T(...)`` construction of a value aggregate

    ``type`` is usually a ``Name``; qualified spellings arrive as ``MemberAccess``.
    """

    type: Expr
    argument_list: ArgumentList = field(default_factory=ArgumentList)


@dataclass
class EqualsValueClause(Expr):
    """Initializer part of a variable declarator"""

    value: Expr


# Kinds the front end can produce but the translator rejects.


@dataclass
class BinaryExpression(Expr):
    left: Expr
    operator: str
    right: Expr


@dataclass
class UnaryExpression(Expr):
    operator: str
    operand: Expr


@dataclass
class ConditionalExpression(Expr):
    condition: Expr
    when_true: Expr
    when_false: Expr


@dataclass
class ElementAccess(Expr):
    expression: Expr
    index: Expr


@dataclass
class CastExpression(Expr):
    type: TypeRef
    expression: Expr


# ====================
# Statements
# ====================


@dataclass
class VariableDeclarator(Node):
    """One declared variable and its optional initializer"""

    identifier: str
    initializer: EqualsValueClause | None = None


@dataclass
class VariableDeclaration(Node):
    """Declared type plus the variables declared with it"""

    type: TypeRef
    variables: list[VariableDeclarator] = field(default_factory=list)


@dataclass
class LocalDeclaration(Stmt):
    """Local variable declaration statement"""

    declaration: VariableDeclaration


@dataclass
class ExpressionStatement(Stmt):
    """Expression evaluated for its effect"""

    expression: Expr


@dataclass
class ReturnStatement(Stmt):
    """Return statement"""

    expression: Expr | None = None


@dataclass
class Block(Stmt):
    """Block of statements"""

    statements: list[Stmt] = field(default_factory=list)


@dataclass
class IfStatement(Stmt):
    condition: Expr
    body: Stmt
    orelse: Stmt | None = None


@dataclass
class WhileStatement(Stmt):
    condition: Expr
    body: Stmt


@dataclass
class ForStatement(Stmt):
    declaration: VariableDeclaration | None
    condition: Expr | None
    incrementors: list[Expr]
    body: Stmt


def node_kind(node: object) -> str:
    """Name of the node kind used in diagnostics."""
    return type(node).__name__
