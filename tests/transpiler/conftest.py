"""
Pytest configuration and shared fixtures for transpiler tests.

This module contains fixtures that are shared across multiple test modules.
"""

import pytest

from shadergen.transpiler.backends import create_hlsl_backend
from shadergen.transpiler.backends.base import Backend
from shadergen.transpiler.models import Parameter, ShaderFunction, TypeRef
from shadergen.transpiler.symbols import SymbolTable

FLOAT = TypeRef("float")


@pytest.fixture
def backend() -> Backend:
    """Fixture providing the HLSL backend."""
    return create_hlsl_backend()


@pytest.fixture
def symbol_table() -> SymbolTable:
    """Fixture providing a resolver with a few library symbols."""
    table = SymbolTable()

    # Statically imported library methods
    table.add_method("Max", "System.Math", "Max")
    table.add_method("Sqrt", "System.MathF", "Sqrt")
    table.add_method("Dot", "System.Numerics.Vector3", "Dot")
    table.add_method("Saturate", "ShaderGen.ShaderBuiltins", "Saturate")
    table.add_method("Shade", "MyGame.Lighting", "Shade")

    # Value types
    table.add_type("Vector4", "Vector4", "System.Numerics")
    table.add_type("Vector2", "Vector2", "System.Numerics")
    table.add_type("Light", "Light", "MyGame")

    return table


@pytest.fixture
def foo_function() -> ShaderFunction:
    """Fixture providing ``float Foo(float a)``."""
    return ShaderFunction(
        name="Foo",
        return_type=FLOAT,
        parameters=(Parameter("a", FLOAT),),
    )
