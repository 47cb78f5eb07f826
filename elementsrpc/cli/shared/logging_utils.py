"""Loguru helpers for consistent logging in CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}


def get_log_dir() -> Path:
    return Path.home() / ".elementsrpc" / "logs"


def ensure_rotating_log_file(name: str, level: str = "DEBUG") -> Path:
    """Ensure a rotating log sink for the given command name."""
    log_dir = get_log_dir()
    log_path = log_dir / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_dir.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path


def enable_verbose_logging(name: str = "cli") -> Path:
    """Turn on library logging to stderr and a rotating file."""
    logger.enable("elementsrpc")
    if "stderr" not in _SINK_IDS:
        _SINK_IDS["stderr"] = logger.add(sys.stderr, level="DEBUG", diagnose=False)
    return ensure_rotating_log_file(name)
