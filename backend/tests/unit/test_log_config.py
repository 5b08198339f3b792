"""Unit tests for per-category logging levels."""

import logging

import pytest

from article_likes.config import Settings
from article_likes.infrastructure.logging.log_config import setup_logging


@pytest.fixture
def restore_levels():
    names = ["", "sqlalchemy.engine", "uvicorn.access", "article_likes.application.services.like_service"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_category_levels_follow_settings(restore_levels):
    settings = Settings(
        _env_file=None,
        log_level="WARNING",
        log_level_sql="ERROR",
        log_level_uvicorn="debug",
        log_level_likes="INFO",
    )

    applied = setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG
    assert applied["article_likes.application.services.like_service"] == logging.INFO


def test_unknown_level_name_falls_back_to_info(restore_levels):
    applied = setup_logging(Settings(_env_file=None, log_level_sql="chatty"))
    assert applied["sqlalchemy.engine"] == logging.INFO
