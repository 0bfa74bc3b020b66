"""Tests untuk konfigurasi logging."""

import logging
import logging.handlers

import pytest

from src.core.config import settings
from src.utils.logging import setup_logging

CONFIGURED_LOGGERS = ("", "uvicorn", "uvicorn.access", "sqlalchemy.engine")


@pytest.fixture
def restore_logging():
    saved = {}
    for name in CONFIGURED_LOGGERS:
        logger = logging.getLogger(name)
        saved[name] = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


def test_all_configured_loggers_write_to_file(tmp_path, monkeypatch, restore_logging):
    monkeypatch.setattr(settings, "LOG_DIRECTORY", str(tmp_path))
    setup_logging()

    for name in CONFIGURED_LOGGERS:
        handlers = logging.getLogger(name).handlers
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in handlers), name

    access_logger = logging.getLogger("uvicorn.access")
    access_logger.info("GET /health 200")
    for handler in access_logger.handlers:
        handler.flush()

    content = (tmp_path / f"{settings.SERVICE_NAME}.log").read_text(encoding="utf-8")
    assert '"logger": "uvicorn.access"' in content
    assert '"message": "GET /health 200"' in content
