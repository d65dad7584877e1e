"""Tests for logging levels."""

import logging

from realjobs.config import Settings
from realjobs.util.logging import log_level


class TestLogLevel:
    def test_debug_wins(self):
        assert log_level(Settings(environment="production", debug=True)) == logging.DEBUG

    def test_quiet_under_test(self):
        assert log_level(Settings(environment="test", debug=False)) == logging.WARNING

    def test_info_otherwise(self):
        assert log_level(Settings(environment="development", debug=False)) == logging.INFO
