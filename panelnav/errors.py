"""
Navigator exceptions.

All errors are raised synchronously to the caller of ``navigate``/``back``;
the navigator never catches or retries them.
"""

from __future__ import annotations


class NavigatorError(Exception):
    """Base class for all navigator errors."""


class RouteNotFoundError(NavigatorError, LookupError):
    """Raised when a path has no registered route."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unknown route: {path!r}")


class ScreenConstructionError(NavigatorError, RuntimeError):
    """Raised when a screen factory fails to produce a screen."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Could not construct screen for route {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class HistoryUnderflowError(NavigatorError, IndexError):
    """Raised when ``back()`` has no previous screen to return to."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(
            f"Cannot go back: history holds {depth} entr{'y' if depth == 1 else 'ies'}, "
            "need at least 2"
        )


class SurfaceNotConfiguredError(NavigatorError, RuntimeError):
    """Raised when navigating before a display surface (frame) is set."""

    def __init__(self) -> None:
        super().__init__("No frame configured; call set_frame() before navigating")
