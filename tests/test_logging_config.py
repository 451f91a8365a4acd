"""
Tests for logging setup.
"""
import logging

import pytest

from shortlink_app.config import settings
from shortlink_app.logging_config import setup_logging


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestSetupLogging:
    """Test setup_logging"""

    def test_defaults_to_configured_level(self, restore_root_level):
        setup_logging()
        assert restore_root_level.level == logging.getLevelName(settings.log_level.upper())

    def test_explicit_level(self, restore_root_level):
        setup_logging("debug")
        assert restore_root_level.level == logging.DEBUG

    def test_none_means_configured_level(self, restore_root_level):
        setup_logging("debug")
        setup_logging(None)
        assert restore_root_level.level == logging.getLevelName(settings.log_level.upper())
