"""Unit tests for per-category logging levels."""

import logging

from jsonstore.config import Settings
from jsonstore.infrastructure.logging.log_config import setup_logging


def test_setup_logging_applies_category_levels():
    setup_logging(Settings(log_level="WARNING", log_level_sql="ERROR", log_level_store="DEBUG"))

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("aiosqlite").level == logging.ERROR
    assert logging.getLogger("jsonstore").level == logging.DEBUG


def test_unknown_level_name_falls_back_to_info():
    setup_logging(Settings(log_level_store="chatty"))

    assert logging.getLogger("jsonstore").level == logging.INFO
