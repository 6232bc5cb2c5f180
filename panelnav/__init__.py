"""
panelnav - page navigation for PyQt6 desktop applications.

Register pages by path, navigate between them inside one window, go back
through history, and hook into every navigation.
"""

from panelnav.config import NavigatorConfig, load_config
from panelnav.errors import (
    HistoryUnderflowError,
    NavigatorError,
    RouteNotFoundError,
    ScreenConstructionError,
    SurfaceNotConfiguredError,
)
from panelnav.registry import RouteRegistry, factory_for
from panelnav.router import Navigator
from panelnav.screen import ArgGroups, DisplaySurface, NavigationHook, Screen, ScreenFactory

__version__ = "1.0.0"

__all__ = [
    "ArgGroups",
    "DisplaySurface",
    "HistoryUnderflowError",
    "NavigationHook",
    "Navigator",
    "NavigatorConfig",
    "NavigatorError",
    "RouteNotFoundError",
    "RouteRegistry",
    "Screen",
    "ScreenConstructionError",
    "ScreenFactory",
    "SurfaceNotConfiguredError",
    "factory_for",
    "load_config",
]
