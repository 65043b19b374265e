"""Debug logging for expectation confirmation.

Records emitted by ``Expectation.confirm`` carry the expectation's name in
the ``expectation`` record attribute; the logger built here prints it on
every line::

    [2026-10-19T12:00:00] size check | DEBUG Confirming 1 expectator(s) for 'size check'
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

CONFIRMATION_FORMAT = "[%(asctime)s] %(expectation)s | %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
NO_EXPECTATION = "-"


class ExpectationNameFilter(logging.Filter):
    """Give records logged outside a confirmation a placeholder name."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "expectation"):
            record.expectation = NO_EXPECTATION
        return True


def setup_confirmation_logger(
    logger_name: str = "expectator",
    *,
    debug_file: Path | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """Build the logger to pass as ``Expectation(..., logger=...)``.

    Args:
        logger_name: One name per independent log destination.
        debug_file: File receiving every confirmation record, if given.
        verbose: Also write records to stderr.

    Raises:
        ValueError: neither a debug file nor verbose output was requested.
        RuntimeError: a logger with this name already has handlers.
    """
    if debug_file is None and not verbose:
        raise ValueError("setup_confirmation_logger needs a debug_file or verbose=True")

    logger = logging.getLogger(logger_name)
    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a unique logger_name per destination"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=CONFIRMATION_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ExpectationNameFilter())
        logger.addHandler(handler)

    return logger
