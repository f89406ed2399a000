"""
Exceptions and error handling for the shader transpiler.

This module defines the exceptions raised while translating a method body. Every
error aborts the translation of the enclosing function; no partial output is
returned to the caller.
"""

import os
from typing import Any, Optional


class TranspilerError(Exception):
    """Exception raised for errors during shader code transpilation.

    This is the base exception used throughout the transpiler to report errors
    in a user-friendly way. When a syntax node is given, its source location is
    appended to the message, and the source file is taken from the
    ``SHADERGEN_CURRENT_FILE`` environment variable when it is set.

    Examples:
        >>> raise TranspilerError("Unknown function: my_func")
        TranspilerError: Unknown function: my_func
    """

    def __init__(self, message: str, node: Optional[Any] = None):
        """Initialize the exception with a message and optional syntax node.

        Args:
            message: The error message
            node: Optional syntax node where the error occurred
        """
        self.message = message
        self.node = node
        self.file_path = os.environ.get("SHADERGEN_CURRENT_FILE") or None
        self.lineno = getattr(node, "lineno", None) if node is not None else None
        self.col_offset = (
            getattr(node, "col_offset", None) if node is not None else None
        )

        location_info = ""
        if self.file_path:
            location_info = f" in {os.path.basename(self.file_path)}"
        if self.lineno is not None:
            location_info += f" at line {self.lineno}"
            if self.col_offset is not None:
                location_info += f", column {self.col_offset}"

        super().__init__(f"{message}{location_info}")

    def with_node(self, node: Any) -> "TranspilerError":
        """Create an error of the same kind and message attached to another node.

        Args:
            node: Syntax node to associate with the error

        Returns:
            A new error instance with the updated node
        """
        return type(self)(self.message, node)


class UnsupportedConstructError(TranspilerError):
    """A statement or expression kind the translator does not handle."""


class UnresolvedSymbolError(TranspilerError):
    """The symbol resolver could not identify the type or member behind a node."""


class UnmappedNameError(TranspilerError):
    """The backend has no entry for a required type or (type, method) pair."""


class ShapeViolationError(TranspilerError):
    """A supported construct was used in a shape the translator rejects."""
