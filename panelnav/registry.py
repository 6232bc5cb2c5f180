"""
Route registry.

Flat mapping of path name -> screen factory. Screen classes are wrapped into
factory closures when they are registered, so navigation never has to look at
constructor signatures.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Iterator, Mapping, Optional

from panelnav.errors import RouteNotFoundError
from panelnav.screen import ArgGroups, Screen, ScreenFactory

logger = logging.getLogger(__name__)


def factory_for(screen_cls: Callable[..., Screen]) -> ScreenFactory:
    """
    Wrap a screen class (or any callable) into a factory closure.

    The closure calls ``screen_cls()`` for a plain navigation and
    ``screen_cls(args)`` when argument groups are given.
    """

    def build(args: Optional[ArgGroups] = None) -> Screen:
        if args is None:
            return screen_cls()
        return screen_cls(args)

    build.__name__ = f"build_{getattr(screen_cls, '__name__', 'screen')}"
    build.__wrapped__ = screen_cls  # type: ignore[attr-defined]
    return build


def _check_entry(path: Any, target: Any) -> None:
    if not isinstance(path, str) or not path:
        raise ValueError(f"Route path must be a non-empty string, got {path!r}")
    if target is None or not callable(target):
        raise TypeError(f"Route target for {path!r} must be callable, got {target!r}")


class RouteRegistry:
    """Path -> factory table. Re-registering a path replaces the old factory."""

    def __init__(self, routes: Optional[Mapping[str, Callable[..., Screen]]] = None):
        self._routes: dict[str, ScreenFactory] = {}
        if routes:
            for path, target in routes.items():
                self.add_route(path, target)

    def add_route(self, path: str, target: Callable[..., Screen]) -> None:
        """
        Register a screen class or a factory closure under ``path``.

        Classes are wrapped with :func:`factory_for`; any other callable is
        taken to be a ``factory(args) -> Screen`` and stored as-is.
        """
        _check_entry(path, target)
        if isinstance(target, type):
            self._store(path, factory_for(target))
        else:
            self._store(path, target)

    def add_factory(self, path: str, factory: ScreenFactory) -> None:
        """Register a factory closure ``factory(args) -> Screen`` as-is."""
        _check_entry(path, factory)
        self._store(path, factory)

    def _store(self, path: str, factory: ScreenFactory) -> None:
        if path in self._routes:
            logger.debug(f"Replacing route {path!r}")
        else:
            logger.debug(f"Registered route {path!r}")
        self._routes[path] = factory

    def resolve(self, path: str) -> ScreenFactory:
        """Return the factory for ``path``."""
        try:
            return self._routes[path]
        except KeyError:
            raise RouteNotFoundError(path) from None

    def remove_route(self, path: str) -> None:
        if path not in self._routes:
            raise RouteNotFoundError(path)
        del self._routes[path]
        logger.debug(f"Removed route {path!r}")

    def paths(self) -> tuple[str, ...]:
        return tuple(self._routes)

    def __contains__(self, path: object) -> bool:
        return path in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._routes))
