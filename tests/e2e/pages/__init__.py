"""
Page Object Model (POM) classes for the back office and front office.

Each page object encapsulates the selectors and interactions of one screen.
Back office pages derive from ``BOBasePage``, front office pages from
``FOBasePage``; both share ``BasePage``.
"""

from tests.e2e.pages.add_category_page import AddCategoryPage
from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.bo_base_page import BOBasePage
from tests.e2e.pages.categories_page import CategoriesPage
from tests.e2e.pages.dashboard_page import DashboardPage
from tests.e2e.pages.fo_base_page import FOBasePage
from tests.e2e.pages.languages_page import LanguagesPage
from tests.e2e.pages.localization_page import LocalizationPage
from tests.e2e.pages.login_page import LoginPage
from tests.e2e.pages.site_map_page import SiteMapPage

__all__ = [
    "AddCategoryPage",
    "BasePage",
    "BOBasePage",
    "CategoriesPage",
    "DashboardPage",
    "FOBasePage",
    "LanguagesPage",
    "LocalizationPage",
    "LoginPage",
    "SiteMapPage",
]
