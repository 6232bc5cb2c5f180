"""Demo pages shown by ``panelnav.app``."""

from panelnav.pages.form import FormPage
from panelnav.pages.home import HomePage
from panelnav.pages.settings import SettingsPage

__all__ = ["FormPage", "HomePage", "SettingsPage"]
