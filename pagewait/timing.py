"""Wall-clock measurement for comparing how long assertions take."""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass
class Stopwatch:
    label: str
    elapsed: float = 0.0


@contextmanager
def measure(label: str):
    """Time the block and log "<label> in <seconds>s" when it exits.

    The elapsed time is recorded even when the block raises.
    """
    stopwatch = Stopwatch(label)
    start = time.perf_counter()
    try:
        yield stopwatch
    finally:
        stopwatch.elapsed = time.perf_counter() - start
        logging.info(f"{label} in {stopwatch.elapsed:.3f}s")
