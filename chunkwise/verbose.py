"""Verbosity-gated progress output for chunk processing."""

import logging
import os

logger = logging.getLogger("chunkwise")

VERBOSE_ENV = "VERBOSE"


def is_verbose(default: str = "0") -> bool:
    return os.getenv(VERBOSE_ENV, default).strip().lower() in {"1", "true", "yes", "on"}


def log_if_verbose(message: str, enabled: bool) -> None:
    if enabled:
        logger.info(message)
