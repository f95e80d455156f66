# monsters/logging_setup.py
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> Path:
    """
    Configure application-wide logging.

    - Logs to ~/.monster_store/app.log (rotating, max ~1 MB, 3 backups)
    - Also logs warnings (everything when debug) to console (stderr)

    Returns the path of the log file.
    """
    if log_dir is None:
        log_dir = Path.home() / ".monster_store"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers (useful if re-running in dev/REPL)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1_000_000,  # ~1 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
    )
    file_handler.setLevel(level)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s - %(message)s"))
    # Console stays quiet unless debugging; the file gets everything at `level`
    console_handler.setLevel(level if debug else logging.WARNING)
    root_logger.addHandler(console_handler)

    root_logger.debug(f"Logging initialized, log file: {log_file}")
    return log_file
