"""
Form Page.

Example of a page built from argument groups passed to navigate().
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional, Sequence

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFormLayout, QLineEdit, QFrame,
)

if TYPE_CHECKING:
    from panelnav.app import MainWindow


class FormPage(QWidget):
    """
    One line edit per value of the first argument group.

    ``navigate("form", [["Name", 3]])`` renders a form titled "Name" with
    three fields.
    """

    def __init__(self, main_window: MainWindow, args: Optional[Sequence[Sequence[Any]]] = None):
        super().__init__()
        self._window = main_window
        group = list(args[0]) if args else []
        self._title = str(group[0]) if group else "Form"
        self._field_count = int(group[1]) if len(group) > 1 else 1
        self._fields: list[QLineEdit] = []
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(12)

        title = QLabel(self._title)
        title.setObjectName("page-title")
        layout.addWidget(title)

        sep = QFrame()
        sep.setObjectName("separator")
        sep.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(sep)

        form = QFormLayout()
        for i in range(self._field_count):
            edit = QLineEdit()
            self._fields.append(edit)
            form.addRow(f"Field {i + 1}:", edit)
        layout.addLayout(form)
        layout.addStretch()

        nav_row = QHBoxLayout()
        back_btn = QPushButton("Back")
        back_btn.clicked.connect(self._window.go_back)
        nav_row.addWidget(back_btn)
        nav_row.addStretch()
        layout.addLayout(nav_row)

    @property
    def fields(self) -> list[QLineEdit]:
        return self._fields

    def get_panel(self) -> QWidget:
        return self

    def on_started(self) -> None:
        if self._fields:
            self._fields[0].setFocus()
