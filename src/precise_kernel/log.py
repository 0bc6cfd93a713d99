"""Package logging helper."""

from __future__ import annotations

import logging
import os
from typing import Final

PACKAGE_LOGGER: Final[str] = "precise_kernel"

# Environment override only; handlers are left to the application.
_LEVEL_NAME: Final[str] = os.getenv("PRECISE_KERNEL_LOG_LEVEL", "WARNING").upper()
_PACKAGE_LOGGER_LEVEL: Final[int] = getattr(logging, _LEVEL_NAME, logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger without installing any handlers.

    The level is set once on the package logger; module loggers inherit it,
    so applications can tune the whole package through ``precise_kernel``.
    """
    package = logging.getLogger(PACKAGE_LOGGER)
    if package.level == logging.NOTSET:
        package.setLevel(_PACKAGE_LOGGER_LEVEL)
    return logging.getLogger(name)
