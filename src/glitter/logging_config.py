"""Logging configuration for Glitter CLI."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from glitter.console import console

if TYPE_CHECKING:
    from glitter.models.config import Config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_DIR_ENV = "GLITTER_LOG_DIR"

_log_dir: Path | None = None
_run_log_file: Path | None = None
_initialized: bool = False


def get_log_dir() -> Path:
    """Return ``$GLITTER_LOG_DIR`` or ``~/.glitter/logs``, creating it if needed."""
    global _log_dir  # noqa: PLW0603
    if _log_dir is None:
        override = os.environ.get(LOG_DIR_ENV)
        _log_dir = Path(override) if override else Path.home() / ".glitter" / "logs"
        _log_dir.mkdir(parents=True, exist_ok=True)
    return _log_dir


def setup_logging(config: Config | None = None) -> None:
    """Attach handlers to the ``glitter`` logger.

    Each run gets its own file (DEBUG when ``config.verbose``, else INFO),
    every run also appends to a rotating ``glitter.log``, and warnings are
    echoed to the terminal.
    """
    global _initialized, _run_log_file  # noqa: PLW0603
    if _initialized:
        return

    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
    root_logger = logging.getLogger("glitter")
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    stamp = datetime.now(tz=UTC).strftime("%Y%m%d-%H%M%S")
    _run_log_file = get_log_dir() / f"glitter-{stamp}-{os.getpid()}.log"
    run_handler = logging.FileHandler(_run_log_file, encoding="utf-8")
    run_handler.setLevel(logging.DEBUG if (config and config.verbose) else logging.INFO)
    run_handler.setFormatter(formatter)
    root_logger.addHandler(run_handler)

    combined_handler = RotatingFileHandler(
        get_log_dir() / "glitter.log",
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    combined_handler.setLevel(logging.INFO)
    combined_handler.setFormatter(formatter)
    root_logger.addHandler(combined_handler)

    terminal_handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
    terminal_handler.setLevel(logging.WARNING)
    root_logger.addHandler(terminal_handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module, e.g. ``glitter.services.git``."""
    return logging.getLogger(name)


def log_subprocess_result(
    logger: logging.Logger,
    cmd: list[str],
    exit_code: int,
    success: bool = True,
) -> None:
    """Record a finished git command; failures are logged at INFO."""
    level = logging.DEBUG if success else logging.INFO
    logger.log(level, f"Subprocess: {' '.join(cmd)} (exit code {exit_code})")


def cleanup_old_logs(max_age_days: int = 30) -> None:
    """Remove per-run log files older than max_age_days."""
    cutoff = datetime.now(tz=UTC).timestamp() - (max_age_days * 24 * 60 * 60)
    logger = get_logger("glitter.logging")

    for log_file in get_log_dir().glob("glitter-*.log"):
        if log_file == _run_log_file:
            continue
        try:
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                logger.debug(f"Cleaned up old log file: {log_file}")
        except OSError as e:
            logger.info(f"Failed to clean up log file {log_file}: {e}")
