"""Logging setup and diagnostics accounting for generation runs.

Generation diagnostics are plain ``logging`` records: critical for lookup
misses, error for tie-breaks, warning/info for advisories. None of them stop
a run; DiagnosticsCounter lets the CLI report them at the end.

Usage:
    from schemaorg_model.logging import configure_logging
    configure_logging(logging.INFO)   # once, at startup
"""

from __future__ import annotations

import logging
import sys
from collections import Counter

LOG_FORMAT = "%(levelname)-8s %(name)s - %(message)s"

PACKAGE_LOGGER = "schemaorg_model"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if not any(h.get_name() == PACKAGE_LOGGER for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(PACKAGE_LOGGER)
        package_logger.addHandler(handler)

    return package_logger


class DiagnosticsCounter(logging.Handler):
    """Counts log records per level name.

    Example:
        counter = DiagnosticsCounter()
        logging.getLogger("schemaorg_model").addHandler(counter)
        ...
        print(counter.summary())
    """

    def __init__(self, level: int = logging.INFO):
        super().__init__(level)
        self.counts: Counter[str] = Counter()

    def emit(self, record: logging.LogRecord) -> None:
        self.counts[record.levelname] += 1

    def count(self, level: int) -> int:
        return self.counts[logging.getLevelName(level)]

    def summary(self) -> str:
        parts = [
            f"{self.counts[name]} {name.lower()}"
            for name in ("CRITICAL", "ERROR", "WARNING")
            if self.counts[name]
        ]
        return ", ".join(parts) if parts else "no diagnostics"


__all__ = [
    "LOG_FORMAT",
    "PACKAGE_LOGGER",
    "configure_logging",
    "DiagnosticsCounter",
]
