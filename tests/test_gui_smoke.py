"""
GUI Smoke Tests.

Headless tests using QT_QPA_PLATFORM=offscreen to verify:
- App startup
- QtFrame content swapping and sizing
- Navigation forward/back through the demo pages
- Argument groups reaching a page
"""

import os
import sys
import pytest

# Force offscreen rendering for headless testing
os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="module")
def qapp():
    """Create a QApplication instance for the test session."""
    from PyQt6.QtWidgets import QApplication
    from panelnav.app import STYLESHEET

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
        app.setStyleSheet(STYLESHEET)
    yield app


@pytest.fixture
def main_window(qapp, tmp_path):
    """Create a MainWindow logging into a temporary directory."""
    import logging
    from panelnav.app import MainWindow
    from panelnav.config import NavigatorConfig

    nav_logger = logging.getLogger("panelnav")
    saved = list(nav_logger.handlers)

    window = MainWindow(NavigatorConfig(log_dir=tmp_path / "logs"))
    yield window
    window.close()

    for handler in list(nav_logger.handlers):
        if handler not in saved:
            nav_logger.removeHandler(handler)
            handler.close()


def test_window_handlers_released(qapp, tmp_path):
    """Each window's log handler can be detached without leaking into the next."""
    import logging
    from logging.handlers import RotatingFileHandler
    from panelnav.app import MainWindow
    from panelnav.config import NavigatorConfig

    nav_logger = logging.getLogger("panelnav")
    saved = list(nav_logger.handlers)

    window = MainWindow(NavigatorConfig(log_dir=tmp_path / "logs"))
    added = [h for h in nav_logger.handlers if h not in saved]
    window.close()
    for handler in added:
        nav_logger.removeHandler(handler)
        handler.close()

    assert len(added) == 1
    assert isinstance(added[0], RotatingFileHandler)
    assert str(tmp_path) in added[0].baseFilename
    assert nav_logger.handlers == saved


class Panel:
    """Minimal screen wrapping a plain QWidget."""

    def __init__(self):
        from PyQt6.QtWidgets import QWidget
        self.widget = QWidget()
        self.started = False

    def get_panel(self):
        return self.widget

    def on_started(self):
        self.started = True


def test_app_startup(main_window):
    """MainWindow creates without error and opens the initial route."""
    from panelnav.pages import HomePage

    assert main_window.navigator is not None
    assert main_window.navigator.history == ("home",)
    assert isinstance(main_window.navigator.current_screen, HomePage)
    assert main_window.frame.content() is main_window.navigator.current_screen
    assert main_window.log_file.exists()


def test_routes_registered(main_window):
    assert set(main_window.navigator.routes.paths()) == {"home", "settings", "form"}


def test_navigation_forward_back(main_window):
    """Basic forward/back navigation works."""
    from panelnav.pages import HomePage, SettingsPage

    main_window.navigator.navigate("settings")
    assert isinstance(main_window.navigator.current_screen, SettingsPage)
    assert main_window.navigator.history == ("home", "settings")

    main_window.go_back()
    assert isinstance(main_window.navigator.current_screen, HomePage)
    assert main_window.navigator.history == ("home",)


def test_go_back_on_first_page_is_ignored(main_window):
    main_window.go_back()
    assert main_window.navigator.history == ("home",)


def test_window_title_hook(main_window):
    main_window.navigator.navigate("settings")
    assert main_window.windowTitle() == "panelnav - Settings"


def test_form_receives_arg_groups(main_window):
    """Argument groups reach the page constructor."""
    page = main_window.navigator.navigate("form", [["Sample", 4]])
    assert len(page.fields) == 4


def test_settings_page_shows_config(main_window):
    page = main_window.navigator.navigate("settings")
    assert "strict_back: True" in page._summary.toPlainText()


def test_qt_frame_swaps_content(qapp):
    from PyQt6.QtWidgets import QMainWindow
    from panelnav.qt_frame import QtFrame
    from panelnav.router import Navigator

    window = QMainWindow()
    window.resize(640, 480)
    frame = QtFrame(window)
    nav = Navigator(frame, routes={"a": Panel, "b": Panel})

    first = nav.navigate("a")
    second = nav.navigate("b")

    assert frame.content() is second.widget
    assert frame.host.layout().count() == 1
    assert frame.host.isVisibleTo(window)
    assert second.started
    assert first.widget is not second.widget
    window.close()


def test_qt_frame_applies_host_size(qapp):
    from PyQt6.QtWidgets import QMainWindow, QWidget
    from panelnav.qt_frame import QtFrame

    window = QMainWindow()
    frame = QtFrame(window)
    panel = QWidget()
    frame.set_content(panel)
    frame.apply_size(panel, frame.content_size())

    assert panel.size() == frame.host.size()
    assert frame.size() == window.size()
    window.close()


def test_layout_keeps_panel_at_host_size(qapp):
    """After the host layout runs, the page still fills the captured host size."""
    from PyQt6.QtWidgets import QMainWindow
    from panelnav.qt_frame import QtFrame
    from panelnav.router import Navigator

    window = QMainWindow()
    window.resize(640, 480)
    frame = QtFrame(window)
    nav = Navigator(frame, routes={"a": Panel})

    screen = nav.navigate("a")
    window.show()
    qapp.processEvents()
    frame.host.layout().activate()

    assert screen.widget.size() == frame.host.size()
    window.close()
