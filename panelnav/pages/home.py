"""
Home Page.

Welcome screen with navigation shortcuts.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
)

if TYPE_CHECKING:
    from panelnav.app import MainWindow


class HomePage(QWidget):
    """Welcome page with quick-action buttons."""

    def __init__(self, main_window: MainWindow):
        super().__init__()
        self._window = main_window
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(16)

        title = QLabel("Home")
        title.setObjectName("page-title")
        layout.addWidget(title)

        sep = QFrame()
        sep.setObjectName("separator")
        sep.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(sep)

        self._visits_label = QLabel("")
        self._visits_label.setObjectName("info-label")
        layout.addWidget(self._visits_label)

        actions_row = QHBoxLayout()
        actions_row.setSpacing(12)

        form_btn = QPushButton("Open Form")
        form_btn.setObjectName("primary-btn")
        form_btn.setFixedHeight(44)
        form_btn.clicked.connect(
            lambda: self._window.navigator.navigate("form", [["Sample", 3]])
        )
        actions_row.addWidget(form_btn)

        settings_btn = QPushButton("Settings")
        settings_btn.setFixedHeight(44)
        settings_btn.clicked.connect(lambda: self._window.navigator.navigate("settings"))
        actions_row.addWidget(settings_btn)

        actions_row.addStretch()
        layout.addLayout(actions_row)
        layout.addStretch()

    def get_panel(self) -> QWidget:
        return self

    def on_started(self) -> None:
        """Show how deep the history stack is."""
        depth = len(self._window.navigator.history)
        self._visits_label.setText(f"History depth: {depth}")
