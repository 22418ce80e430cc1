"""Central logging configuration."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from pathlib import Path

LOG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "ghosttext" / "logs"
LOG_FILE = LOG_DIR / "ghosttext.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Attach console and rotating file handlers to the ``ghosttext`` logger once.

    Later calls only change the level, so every editor host may call this.
    """

    package_logger = logging.getLogger("ghosttext")
    package_logger.setLevel(level)
    if package_logger.handlers:
        return

    target = log_file or LOG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    file_handler = RotatingFileHandler(target, maxBytes=512_000, backupCount=5)
    file_handler.setFormatter(formatter)

    package_logger.addHandler(console_handler)
    package_logger.addHandler(file_handler)
