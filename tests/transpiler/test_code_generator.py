"""Tests for the transpiler code_generator module."""

import pytest

from shadergen.transpiler.backends import create_glsl_backend
from shadergen.transpiler.code_generator import (
    generate_function,
    generate_parameter_list,
    generate_signature,
)
from shadergen.transpiler.errors import UnmappedNameError, UnsupportedConstructError
from shadergen.transpiler.models import Parameter, ShaderFunction, TypeRef
from shadergen.transpiler.nodes import (
    BinaryExpression,
    Block,
    EqualsValueClause,
    ExpressionStatement,
    Literal,
    LocalDeclaration,
    Name,
    ReturnStatement,
    VariableDeclaration,
    VariableDeclarator,
)

FLOAT = TypeRef("float")
VECTOR2 = TypeRef("Vector2", "System.Numerics")
VECTOR4 = TypeRef("Vector4", "System.Numerics")


def foo_body() -> Block:
    """Body of ``float b = a; return b;``."""
    return Block(
        [
            LocalDeclaration(
                VariableDeclaration(
                    FLOAT, [VariableDeclarator("b", EqualsValueClause(Name("a")))]
                )
            ),
            ReturnStatement(Name("b")),
        ]
    )


class TestGenerateSignature:
    """Tests for signature generation."""

    def test_parameter_list_order(self, backend):
        """Test that parameters keep declaration order and mapped types."""
        function = ShaderFunction(
            name="Shade",
            return_type=VECTOR4,
            parameters=(
                Parameter("uv", VECTOR2),
                Parameter("time", FLOAT),
                Parameter("tint", VECTOR4),
            ),
        )

        assert generate_parameter_list(function, backend) == (
            "float2 uv, float time, float4 tint"
        )

    def test_signature(self, backend):
        """Test the full signature line."""
        function = ShaderFunction(
            name="Shade", return_type=VECTOR4, parameters=(Parameter("uv", VECTOR2),)
        )

        assert generate_signature(function, backend) == "float4 Shade(float2 uv)"

    def test_signature_without_parameters(self, backend):
        """Test a function without parameters."""
        function = ShaderFunction(name="One", return_type=FLOAT)

        assert generate_signature(function, backend) == "float One()"

    def test_signature_depends_on_backend(self):
        """Test that the dialect decides type tokens."""
        function = ShaderFunction(
            name="Shade", return_type=VECTOR4, parameters=(Parameter("uv", VECTOR2),)
        )

        assert generate_signature(function, create_glsl_backend()) == (
            "vec4 Shade(vec2 uv)"
        )

    def test_signature_is_deterministic(self, backend):
        """Test that the same descriptor and backend give identical text."""
        function = ShaderFunction(
            name="Shade", return_type=VECTOR4, parameters=(Parameter("uv", VECTOR2),)
        )

        assert generate_signature(function, backend) == generate_signature(
            function, backend
        )

    def test_unmapped_parameter_type(self, backend):
        """Test that an unknown parameter type names the type and function."""
        function = ShaderFunction(
            name="Shade",
            return_type=FLOAT,
            parameters=(Parameter("light", TypeRef("Light", "MyGame")),),
        )

        with pytest.raises(UnmappedNameError, match="MyGame.Light.*Shade"):
            generate_signature(function, backend)


class TestGenerateFunction:
    """Tests for the generate_function function."""

    def test_declaration_and_return(self, backend, symbol_table, foo_function):
        """Test the reference translation of a small function."""
        # Act
        result = generate_function(foo_function, foo_body(), backend, symbol_table)

        # Assert
        assert result == "float Foo(float a)\n{\nfloat b = a;\nreturn b;\n}\n"

    def test_statement_list_body(self, backend, symbol_table, foo_function):
        """Test that a plain statement list is accepted as the body."""
        result = generate_function(
            foo_function, foo_body().statements, backend, symbol_table
        )

        assert result == "float Foo(float a)\n{\nfloat b = a;\nreturn b;\n}\n"

    def test_indent(self, backend, symbol_table, foo_function):
        """Test indenting body statements."""
        result = generate_function(
            foo_function, foo_body(), backend, symbol_table, indent="    "
        )

        assert result == "float Foo(float a)\n{\n    float b = a;\n    return b;\n}\n"

    def test_empty_body(self, backend, symbol_table):
        """Test a function without statements."""
        function = ShaderFunction(name="Nothing", return_type=TypeRef("void"))

        assert generate_function(function, Block(), backend, symbol_table) == (
            "void Nothing()\n{\n}\n"
        )

    def test_binary_expression_is_rejected(self, backend, symbol_table):
        """Test that ``return a + b;`` fails instead of being mistranslated."""
        # Arrange
        function = ShaderFunction(
            name="Foo",
            return_type=FLOAT,
            parameters=(Parameter("a", FLOAT), Parameter("b", FLOAT)),
        )
        body = Block([ReturnStatement(BinaryExpression(Name("a"), "+", Name("b")))])

        # Act & Assert
        with pytest.raises(UnsupportedConstructError, match="BinaryExpression"):
            generate_function(function, body, backend, symbol_table)

    def test_error_takes_statement_location(self, backend, symbol_table):
        """Test that an unlocated expression error reports its statement's line."""
        # Arrange
        function = ShaderFunction(
            name="Foo", return_type=FLOAT, parameters=(Parameter("a", FLOAT),)
        )
        body = Block(
            [
                ReturnStatement(
                    BinaryExpression(Name("a"), "+", Name("a")),
                    lineno=3,
                    col_offset=4,
                )
            ]
        )

        # Act & Assert
        with pytest.raises(UnsupportedConstructError) as excinfo:
            generate_function(function, body, backend, symbol_table)
        assert excinfo.value.lineno == 3
        assert excinfo.value.col_offset == 4
        assert "BinaryExpression" in str(excinfo.value)
        assert str(excinfo.value).endswith("at line 3, column 4")

    def test_error_keeps_expression_location(self, backend, symbol_table):
        """Test that an expression's own location wins over its statement's."""
        function = ShaderFunction(
            name="Foo", return_type=FLOAT, parameters=(Parameter("a", FLOAT),)
        )
        body = Block(
            [
                ReturnStatement(
                    BinaryExpression(
                        Name("a"), "+", Name("a"), lineno=3, col_offset=11
                    ),
                    lineno=3,
                    col_offset=4,
                )
            ]
        )

        with pytest.raises(UnsupportedConstructError) as excinfo:
            generate_function(function, body, backend, symbol_table)
        assert excinfo.value.col_offset == 11

    def test_empty_expression_statement_is_rejected(self, backend, symbol_table):
        """Test that a statement rendering no code aborts instead of emitting ``;``."""
        function = ShaderFunction(name="Foo", return_type=TypeRef("void"))
        body = Block([ExpressionStatement(Literal(""))])

        with pytest.raises(UnsupportedConstructError, match="Literal statements"):
            generate_function(function, body, backend, symbol_table)
