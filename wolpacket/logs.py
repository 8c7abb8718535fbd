from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

logger = logging.getLogger("wolpacket")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(log_file: Optional[Path] = None, level: int = logging.INFO) -> None:
    """Log to the console and, when it can be opened, a rotating file."""
    logger.setLevel(level)
    if logger.handlers:
        return
    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file is not None:
        try:
            handler = logging.handlers.RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=3)
        except OSError as e:
            logger.warning("Cannot open log file %s, logging to console only: %s", log_file, e)
        else:
            handler.setFormatter(fmt)
            logger.addHandler(handler)
