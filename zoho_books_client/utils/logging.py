"""Logging helpers for the Zoho Books client."""

from __future__ import annotations

import os
import logging
from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def setup_logging() -> None:
    """Configure logging from environment variables.

    Reads ZOHO_LOG_LEVEL and ZOHO_LOG_FILE, sets up root logger.
    """
    load_dotenv(override=False)

    log_level = os.getenv("ZOHO_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
    )

    log_file = os.getenv("ZOHO_LOG_FILE")
    if log_file:
        try:
            handler = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3)
        except OSError:
            logging.getLogger(__name__).warning("Cannot open log file %s", log_file)
            return
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)


def truncate(text: str, max_len: int = 2000) -> str:
    """Truncate text to max_len with a suffix marker."""
    if text is None:
        return ""
    if len(text) <= max_len:
        return text
    return text[:max_len] + "... [truncated]"
