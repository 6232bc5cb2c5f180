"""
Navigation Router.

Maps path names to screen factories, swaps the active panel inside the
application frame, keeps a history stack for Back navigation, and runs
before/after hooks around every navigation.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Mapping, Optional, Union

from panelnav.config import NavigatorConfig
from panelnav.errors import (
    HistoryUnderflowError,
    ScreenConstructionError,
    SurfaceNotConfiguredError,
)
from panelnav.registry import RouteRegistry
from panelnav.screen import ArgGroups, DisplaySurface, NavigationHook, Screen, ScreenFactory

logger = logging.getLogger(__name__)


class Navigator:
    """
    Navigation controller backed by a display surface + history stack.

    Every navigation builds a fresh screen from the registered factory,
    shows its panel in the frame and pushes the path onto the history
    stack; back() pops and rebuilds the previous screen.

    The frame may be omitted at construction and supplied later with
    ``set_frame()``; navigating before that raises
    SurfaceNotConfiguredError.
    """

    def __init__(
        self,
        frame: Optional[DisplaySurface] = None,
        routes: Union[RouteRegistry, Mapping[str, Callable[..., Screen]], None] = None,
        config: Optional[NavigatorConfig] = None,
    ):
        if isinstance(routes, RouteRegistry):
            self._routes = routes
        else:
            self._routes = RouteRegistry(routes)
        self._frame = frame
        self._config = config or NavigatorConfig()
        self._history: list[str] = []
        self._before_each: list[NavigationHook] = []
        self._after_each: list[NavigationHook] = []
        self._current: Optional[Screen] = None

    # ── Routes ──

    @property
    def routes(self) -> RouteRegistry:
        return self._routes

    def add_route(self, path: str, target: Callable[..., Screen]) -> None:
        """Register a screen class or a ``factory(args) -> Screen`` closure."""
        self._routes.add_route(path, target)

    def add_factory(self, path: str, factory: ScreenFactory) -> None:
        """Register a factory closure ``factory(args) -> Screen``."""
        self._routes.add_factory(path, factory)

    def resolve(self, path: str) -> ScreenFactory:
        return self._routes.resolve(path)

    # ── Hooks ──

    def before_each(self, hook: NavigationHook) -> NavigationHook:
        """Run ``hook(path, args, screen)`` before every navigation."""
        self._before_each.append(hook)
        return hook

    def after_each(self, hook: NavigationHook) -> NavigationHook:
        """Run ``hook(path, args, screen)`` after every navigation."""
        self._after_each.append(hook)
        return hook

    # ── Navigation ──

    def navigate(self, path: str, args: Optional[ArgGroups] = None) -> Screen:
        """
        Navigate to a registered path.

        Parameters
        ----------
        path : str
            Route path (must be registered)
        args : list of argument groups, optional
            Passed to the screen constructor and to every hook. When omitted
            the screen is built with no arguments.

        Returns
        -------
        Screen
            The newly constructed, now active screen

        Raises
        ------
        RouteNotFoundError
            ``path`` is not registered
        SurfaceNotConfiguredError
            No frame has been set
        ScreenConstructionError
            The factory raised (wrong constructor shape or a failing constructor)
        """
        screen = self._build(path, args)
        self._move(path, args, screen)
        self._push(path)
        self._finish(path, args, screen)
        return screen

    def back(self) -> Optional[Screen]:
        """
        Go back to the previous screen.

        The current entry is discarded and the previous path is rebuilt
        without arguments; it is not pushed a second time.
        """
        depth = len(self._history)
        if depth < 2:
            if self._config.strict_back:
                raise HistoryUnderflowError(depth)
            logger.warning(f"back() ignored: history holds {depth} entries")
            return None

        leaving = self._history.pop()
        target = self._history[-1]
        logger.info(f"Back: {leaving!r} -> {target!r}")
        try:
            screen = self._build(target, None)
            self._move(target, None, screen)
        except Exception:
            self._history.append(leaving)
            raise
        self._finish(target, None, screen)
        return screen

    def _build(self, path: str, args: Optional[ArgGroups]) -> Screen:
        factory = self._routes.resolve(path)
        if self._frame is None:
            raise SurfaceNotConfiguredError()
        try:
            return factory(args)
        except Exception as exc:
            logger.error(f"Screen construction failed for {path!r}: {exc}", exc_info=True)
            raise ScreenConstructionError(path, str(exc)) from exc

    def _move(self, path: str, args: Optional[ArgGroups], screen: Screen) -> None:
        """Run before-hooks and swap the frame content to ``screen``."""
        for hook in self._before_each:
            hook(path, args, screen)

        frame = self._frame
        panel = screen.get_panel()
        frame.set_content(panel)
        if frame.content() is not None:
            frame.set_content_visible(False)
            size = frame.content_size()
        else:
            size = frame.size()
        frame.apply_size(panel, size)
        frame.set_content(panel)
        frame.set_content_visible(True)
        self._current = screen

    def _push(self, path: str) -> None:
        self._history.append(path)
        limit = self._config.max_history
        if limit is not None and len(self._history) > limit:
            del self._history[:-limit]

    def _finish(self, path: str, args: Optional[ArgGroups], screen: Screen) -> None:
        """Signal the screen and run after-hooks."""
        if args:
            logger.info(f"Navigated to {path!r} with {len(args)} argument group(s)")
        else:
            logger.info(f"Navigated to {path!r}")
        screen.on_started()
        for hook in self._after_each:
            hook(path, args, screen)

    # ── History ──

    @property
    def history(self) -> tuple[str, ...]:
        """Snapshot of visited paths, oldest first."""
        return tuple(self._history)

    def get_history(self) -> tuple[str, ...]:
        return self.history

    def clear_history(self) -> None:
        """Forget all visited paths; the current screen stays displayed."""
        self._history.clear()

    @property
    def can_go_back(self) -> bool:
        return len(self._history) > 1

    @property
    def current_path(self) -> Optional[str]:
        return self._history[-1] if self._history else None

    @property
    def current_screen(self) -> Optional[Screen]:
        return self._current

    # ── Frame ──

    @property
    def frame(self) -> Optional[DisplaySurface]:
        return self._frame

    @frame.setter
    def frame(self, frame: Optional[DisplaySurface]) -> None:
        self._frame = frame

    def get_frame(self) -> Optional[DisplaySurface]:
        return self._frame

    def set_frame(self, frame: Optional[DisplaySurface]) -> None:
        self._frame = frame

    @property
    def config(self) -> NavigatorConfig:
        return self._config


def log_navigation(path: str, args: Any, screen: Screen) -> None:
    """Hook that records every navigation at DEBUG level."""
    logger.debug(f"Hook: {path!r} -> {type(screen).__name__}")
