"""Unit tests for the logging configuration."""

import logging

import pytest

from articles.config import Settings
from articles.infrastructure.logging.log_config import _parse_level, setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    names = ["", "articles.application", "articles.domain"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_setup_logging_applies_category_levels():
    setup_logging(Settings(log_level="WARNING", log_level_service="DEBUG", log_level_domain="ERROR"))
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("articles.application").level == logging.DEBUG
    assert logging.getLogger("articles.domain").level == logging.ERROR


def test_service_logger_inherits_category_level():
    setup_logging(Settings(log_level_service="ERROR"))
    logger = logging.getLogger("articles.application.services.article_service")
    assert logger.getEffectiveLevel() == logging.ERROR


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", logging.DEBUG), ("Warning", logging.WARNING), ("nonsense", logging.INFO)],
)
def test_parse_level(raw, expected):
    assert _parse_level(raw) == expected
