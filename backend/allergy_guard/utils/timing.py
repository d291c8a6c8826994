"""Timing logs for request-level spans."""

import time
from contextlib import contextmanager

from allergy_guard.logging import get_logger

logger = get_logger(__name__)

# Prefix for all timing logs so they are easy to grep
_TIMING_PREFIX = "[TIMING]"


def format_duration(ms: float) -> str:
    """12500 -> '12.5s', 750 -> '750ms', 0.4 -> '0.4ms'."""
    if ms >= 1000:
        return f"{ms / 1000:.1f}s"
    if ms >= 1:
        return f"{int(ms)}ms"
    return f"{ms:.1f}ms"


@contextmanager
def time_span(name: str, **extra: object):
    """Log elapsed time for a block along with any extra key=value fields."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        parts = [f"elapsed_ms={elapsed_ms:.2f}", f"({format_duration(elapsed_ms)})"] + [
            f"{k}={v}" for k, v in extra.items()
        ]
        logger.info("%s %s %s", _TIMING_PREFIX, name, " ".join(parts))
