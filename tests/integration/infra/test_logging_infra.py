from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and log file rotation logic.
"""

import logging
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from unittest.mock import patch

import pytest

from dirtree.infra.logging import LoggingConfig, configure_logging, reset_logging
from dirtree.infra.logging.core import _QUEUE_LISTENER_ATTR
from dirtree.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def clean_logging():
    """Remove our handlers before and after each test."""
    reset_logging()
    yield
    reset_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_unknown_level_falls_back_to_warning() -> None:
    configure_logging(LoggingConfig(level="CHATTY"))
    assert logging.getLogger().level == logging.WARNING


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert len(_our_handlers()) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_no_handlers_when_all_outputs_disabled() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))
    assert _our_handlers() == []


def test_log_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Let the QueueListener drain
    time.sleep(0.5)
    reset_logging()

    assert log_file.exists()
    assert (tmp_path / "logs" / "rotate.log.1").exists(), "Rotation backup file was not created."


def test_listener_failure_falls_back_to_console() -> None:
    with patch.object(QueueListener, "start", side_effect=RuntimeError("boom")):
        root = configure_logging(LoggingConfig(level="INFO"))

    handlers = _our_handlers()
    assert root is logging.getLogger()
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert not isinstance(handlers[0], QueueHandler)
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
