"""
Shared fixtures for the ColorQuest test suite.
"""

import sys

import pytest
from PySide6.QtCore import QCoreApplication


# Create QCoreApplication for Qt event loop (required for QTimer)
@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Create a QCoreApplication instance for the test session."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    yield app
