"""
Demo PyQt6 application for panelnav.

Provides MainWindow with a QtFrame display surface, a Navigator with three
routes, and keyboard shortcuts for Back navigation.
"""

from __future__ import annotations
import sys
from typing import Any, Optional

from PyQt6.QtWidgets import QApplication, QMainWindow
from PyQt6.QtGui import QShortcut, QKeySequence

from panelnav.config import NavigatorConfig, load_config
from panelnav.logging_config import setup_logging, get_logger
from panelnav.pages import FormPage, HomePage, SettingsPage
from panelnav.qt_frame import QtFrame
from panelnav.router import Navigator, log_navigation
from panelnav.screen import Screen

STYLESHEET = """
QLabel#page-title { font-size: 22px; font-weight: bold; }
QLabel#page-subtitle { color: #888888; }
QLabel#info-label { color: #7aa2f7; }
QPushButton#primary-btn { font-weight: bold; }
"""

PAGE_TITLES = {
    "home": "Home",
    "settings": "Settings",
    "form": "Form",
}


class MainWindow(QMainWindow):
    """Application window whose central area is driven by a Navigator."""

    def __init__(self, config: Optional[NavigatorConfig] = None):
        super().__init__()
        self.config = config or NavigatorConfig()
        self.setWindowTitle(self.config.window_title)
        self.resize(self.config.window_width, self.config.window_height)

        # Logging
        self.log_file = setup_logging(self.config.log_dir, self.config.log_level)
        self.logger = get_logger("panelnav.app")

        self.frame = QtFrame(self)
        self.navigator = Navigator(self.frame, config=self.config)

        self._register_routes()
        self.navigator.before_each(log_navigation)
        self.navigator.after_each(self._update_title)
        self._init_shortcuts()

        self.navigator.navigate(self.config.initial_route)
        self.logger.info("GUI application initialized")

    def _register_routes(self) -> None:
        """Register a factory closure per page."""
        self.navigator.add_factory("home", lambda args: HomePage(self))
        self.navigator.add_factory("settings", lambda args: SettingsPage(self))
        self.navigator.add_factory("form", lambda args: FormPage(self, args))

    def _init_shortcuts(self) -> None:
        QShortcut(QKeySequence("Ctrl+B"), self).activated.connect(self.go_back)
        QShortcut(QKeySequence("Escape"), self).activated.connect(self.go_back)

    def go_back(self) -> None:
        """Back navigation for buttons and shortcuts; ignored on the first page."""
        if self.navigator.can_go_back:
            self.navigator.back()

    def _update_title(self, path: str, args: Any, screen: Screen) -> None:
        page = PAGE_TITLES.get(path, path)
        self.setWindowTitle(f"{self.config.window_title} - {page}")


def main():
    """Launch the demo application."""
    app = QApplication(sys.argv)
    app.setStyleSheet(STYLESHEET)

    window = MainWindow(load_config())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
