#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/utils/decorators.py
"""Timing helpers used around conversions."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Log how long the enclosed block took, in milliseconds, at DEBUG level.

    The clock is only read when ``logger`` has DEBUG enabled. Nothing is
    logged if the block raises.

    Examples
    --------
        >>> with debug_timer(logger, "Delta conversion"):
        ...     converter.write_op(op)
        ... # Logs: "Delta conversion took 0.4 ms"

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    yield
    logger.debug(f"{operation} took {(time.perf_counter() - started) * 1000:.1f} ms")
