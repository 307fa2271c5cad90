"""
Logging utilities for the command-line entry point.

Library modules only create module loggers; handlers are installed here
so that importing grading_toolkit never changes the host's logging setup.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "grading_toolkit"


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Attach a single stream handler to the package logger.

    Calling this twice replaces the previous handler instead of stacking
    a second one.

    Args:
        verbose: Log DEBUG records when True, INFO otherwise.
        stream: Target stream. Defaults to stderr so stdout stays clean JSON.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_grading_toolkit", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handler._grading_toolkit = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler


def detach_handler(handler: logging.Handler) -> None:
    """Remove a handler previously returned by configure_logging()."""
    logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
