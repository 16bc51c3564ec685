"""Debug logging for oracle runs.

Subjects log every equality check and reporters log every recorded failure
under the ``typeoracle`` logger. ``setup_logger`` sends that stream to a
file. Suites that run side by side each get their own logger name so their
logs never interleave.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LIBRARY_LOGGER = "typeoracle"

_FORMAT = "[%(asctime)s] %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    debug_file: Path | str,
    verbose: bool = False,
    logger_name: str = LIBRARY_LOGGER,
) -> logging.Logger:
    """Attach a debug log file (and stderr when *verbose*) to *logger_name*.

    Raises:
        RuntimeError: If the logger already has handlers, i.e. another suite
            is writing through it.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "give each suite its own logger name"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    debug_path = Path(debug_file)
    debug_path.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [logging.FileHandler(debug_path, mode="a")]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def teardown_logger(logger: logging.Logger) -> None:
    """Close and detach every handler so the logger name can be reused."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
