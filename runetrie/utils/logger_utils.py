# logger_utils.py - logging setup, metrics and timing helpers for the tooling

import logging
import time
from typing import Optional

logger = logging.getLogger("runetrie.metrics")

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure(level: str = "INFO", fmt: Optional[str] = None) -> None:
    """Root logging setup for command-line entry points. Libraries never call this."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATEFMT,
    )


class Log:
    """Metric and timing records on top of the runetrie.metrics logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timings, counts).
        Example: MatchAny mean: 0.123ms
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure a code block:
            with Log.time_block("build corpus"):
                do_some_work()
        The duration is recorded as a metric on exit.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
