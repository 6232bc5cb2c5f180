"""
PyQt6 display surface.

Wraps a QMainWindow so the Navigator can swap pages in and out of it. A
persistent host widget sits in the central area and always holds exactly
one page; its geometry is what new pages inherit.
"""

from __future__ import annotations
from typing import Optional

from PyQt6.QtCore import QSize
from PyQt6.QtWidgets import QMainWindow, QVBoxLayout, QWidget


class QtFrame:
    """DisplaySurface implementation backed by a QMainWindow."""

    def __init__(self, window: QMainWindow):
        self._window = window
        self._host = QWidget()
        self._host.setObjectName("page-host")
        self._layout = QVBoxLayout(self._host)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(0)
        self._content: Optional[QWidget] = None
        window.setCentralWidget(self._host)

    @property
    def window(self) -> QMainWindow:
        return self._window

    @property
    def host(self) -> QWidget:
        return self._host

    def content(self) -> Optional[QWidget]:
        return self._content

    def set_content(self, panel: QWidget) -> None:
        """Show ``panel`` in the host; the previous page is discarded."""
        if panel is self._content:
            return
        previous = self._content
        if previous is not None:
            self._layout.removeWidget(previous)
            previous.hide()
            previous.deleteLater()
        self._layout.addWidget(panel)
        self._content = panel

    def set_content_visible(self, visible: bool) -> None:
        self._host.setVisible(visible)

    def content_size(self) -> QSize:
        return self._host.size()

    def size(self) -> QSize:
        return self._window.size()

    def apply_size(self, panel: QWidget, size: QSize) -> None:
        """
        Start ``panel`` at ``size`` instead of its own sizeHint.

        The host layout owns the panel geometry afterwards and keeps it at
        the host size, which is the size captured by ``content_size()``.
        """
        panel.resize(size)
