"""
Capability contracts consumed by the navigator.

Screens, display surfaces and hooks are supplied by the embedding
application. The navigator only relies on the small protocols below, so any
object with the right methods works (no shared base class required).
"""

from __future__ import annotations
from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

# Ordered list of argument groups, e.g. ``[[1, 2, 3]]``.
ArgGroups = Sequence[Sequence[Any]]


@runtime_checkable
class Screen(Protocol):
    """A displayable unit with a start lifecycle signal."""

    def get_panel(self) -> Any:
        """Return the toolkit widget shown while this screen is active."""
        ...

    def on_started(self) -> None:
        """Called once the panel is displayed and recorded in history."""
        ...


@runtime_checkable
class DisplaySurface(Protocol):
    """The single application-owned region that shows one panel at a time."""

    def content(self) -> Any: ...

    def set_content(self, panel: Any) -> None: ...

    def set_content_visible(self, visible: bool) -> None: ...

    def content_size(self) -> Any: ...

    def size(self) -> Any: ...

    def apply_size(self, panel: Any, size: Any) -> None: ...


ScreenFactory = Callable[[Optional[ArgGroups]], Screen]
NavigationHook = Callable[[str, Optional[ArgGroups], Screen], None]
