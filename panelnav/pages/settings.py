"""
Settings Page.

Read-only view of the active navigator configuration.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QPlainTextEdit, QFrame,
)

if TYPE_CHECKING:
    from panelnav.app import MainWindow


class SettingsPage(QWidget):
    """Shows the configuration the navigator runs with."""

    def __init__(self, main_window: MainWindow):
        super().__init__()
        self._window = main_window
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(12)

        title = QLabel("Settings")
        title.setObjectName("page-title")
        layout.addWidget(title)

        subtitle = QLabel("Navigator configuration")
        subtitle.setObjectName("page-subtitle")
        layout.addWidget(subtitle)

        sep = QFrame()
        sep.setObjectName("separator")
        sep.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(sep)

        self._summary = QPlainTextEdit()
        self._summary.setReadOnly(True)
        layout.addWidget(self._summary, stretch=1)

        nav_row = QHBoxLayout()
        back_btn = QPushButton("Back")
        back_btn.clicked.connect(self._window.go_back)
        nav_row.addWidget(back_btn)
        nav_row.addStretch()
        layout.addLayout(nav_row)

    def get_panel(self) -> QWidget:
        return self

    def on_started(self) -> None:
        config = self._window.config
        lines = [f"{name}: {value}" for name, value in config.model_dump(mode="json").items()]
        self._summary.setPlainText("\n".join(lines))
