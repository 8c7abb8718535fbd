from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import pytest

from wolpacket import logs


@pytest.fixture
def fresh_logger():
    logger = logs.logger
    saved = list(logger.handlers), logger.level
    logger.handlers = []
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers, level = saved
    logger.setLevel(level)


def test_setup_logging_console_and_file(fresh_logger, tmp_path: Path):
    log_file = tmp_path / "wol.log"
    logs.setup_logging(log_file)
    kinds = {type(h) for h in fresh_logger.handlers}
    assert logging.handlers.RotatingFileHandler in kinds
    assert logging.StreamHandler in kinds

    logging.getLogger("wolpacket.sender").info("hello")
    for h in fresh_logger.handlers:
        h.flush()
    assert "INFO wolpacket.sender: hello" in log_file.read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(fresh_logger):
    logs.setup_logging()
    logs.setup_logging()
    assert len(fresh_logger.handlers) == 1


def test_unwritable_log_file_falls_back_to_console(fresh_logger, tmp_path: Path):
    logs.setup_logging(tmp_path / "missing-dir" / "wol.log", level=logging.DEBUG)
    assert [type(h) for h in fresh_logger.handlers] == [logging.StreamHandler]
    assert fresh_logger.level == logging.DEBUG
