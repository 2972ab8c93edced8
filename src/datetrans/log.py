"""Logging helpers for datetrans."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "datetrans"


def configure_logging(*, level: int = logging.DEBUG, force: bool = False) -> logging.Logger:
    """Send the package's own log records to stderr.

    Only the ``datetrans`` logger is touched; the root logger and the handlers
    an application installed stay as they are. The library emits DEBUG records
    (from ``datetrans.core``) when a computed date falls outside the host
    type's range. Calling this twice adds one stream handler at most, unless
    ``force=True``, which drops the handler installed earlier and adds a fresh one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    ours = [h for h in logger.handlers if getattr(h, "_datetrans", False)]
    if force:
        for h in ours:
            logger.removeHandler(h)
        ours = []
    if not ours:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
        handler._datetrans = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
