"""Centralized logging setup for applications embedding jsbeautify."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from jsbeautify.constants import ENV_LOG_LEVEL


def _resolve_level(log_level: int | str | None) -> int:
    if log_level is None:
        log_level = os.environ.get(ENV_LOG_LEVEL, "WARNING")
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).strip().upper(), logging.INFO)


def configure_logging(
    log_level: int | str | None = None,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers.

    Parameters
    ----------
    log_level : int | str, optional
        Numeric logging level or string name (e.g., "DEBUG"). When omitted,
        the ``JSBEAUTIFY_LOG_LEVEL`` environment variable is used, falling
        back to WARNING. Unknown names resolve to INFO.
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
        Console messages forwarded from the interpreter are logged at DEBUG
        under ``jsbeautify.engine``.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
