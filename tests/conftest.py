"""Shared fixtures for the tests"""

import pytest
from PyQt6.QtCore import QCoreApplication


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Qt application object, so signals and workers behave as in the app"""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
