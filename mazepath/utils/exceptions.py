"""
Exception classes for mazepath with helpful error messages and user guidance.

Every error carries the component that raised it, an optional suggested
action, a stable error code and diagnostic data, so that failures surfacing
through the CLI or a notebook explain themselves.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for mazepath errors with context and suggestions.

    Provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.message = message
        self.component = component or "mazepath"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidDimensionError(MazeError, ValueError):
    """Raised when a maze is requested with a non-positive width or height."""

    def __init__(self, width: Any, height: Any, component: str | None = None):
        self.width = width
        self.height = height

        bad = []
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                bad.append(f"{name} must be an integer, got {type(value).__name__}")
            elif value < 1:
                bad.append(f"{name} must be >= 1, got {value}")

        super().__init__(
            message=f"Invalid maze dimensions {width} x {height}",
            component=component or "Grid",
            suggested_action="Use positive integer dimensions, e.g. width=20, height=20",
            error_code="INVALID_DIMENSION",
            diagnostic_data={"width": width, "height": height, "problems": "; ".join(bad) or "none"},
        )


class NodeNotFoundError(MazeError, LookupError):
    """Raised when a search endpoint is not a node of the graph."""

    def __init__(self, node: Any, role: str = "node", num_nodes: int | None = None):
        self.node = node
        self.role = role

        diagnostic_data: dict[str, Any] = {"role": role, "node": node}
        if num_nodes is not None:
            diagnostic_data["graph_nodes"] = num_nodes

        super().__init__(
            message=f"The {role} {node} is not part of the graph",
            component="PathFinder",
            suggested_action="Pass a (row, col) position that lies inside the maze",
            error_code="NODE_NOT_FOUND",
            diagnostic_data=diagnostic_data,
        )


class MazeGenerationError(MazeError, RuntimeError):
    """Raised when maze carving violates the perfect-maze guarantees."""

    def __init__(self, message: str, diagnostic_data: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            component="PerfectMazeGenerator",
            suggested_action="Report this maze together with its seed and dimensions",
            error_code="GENERATION_FAILURE",
            diagnostic_data=diagnostic_data,
        )


def validate_dimensions(width: Any, height: Any, component: str | None = None) -> tuple[int, int]:
    """
    Check that maze dimensions are positive integers.

    Args:
        width: Number of columns
        height: Number of rows
        component: Name reported in the error message

    Returns:
        The validated ``(width, height)`` pair

    Raises:
        InvalidDimensionError: If either dimension is not a positive integer
    """
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidDimensionError(width, height, component=component)
    return width, height
