"""Failure reporting for the gridmath kernel.

Kernel operations never raise on bad data.  They report a tagged
``(component, operation, reason)`` triple through the ``gridmath`` logger
and hand back either their documented sentinel (``0``, ``-1``, ``False``)
or a :class:`Failure`, which is falsy so callers can write
``if not result:``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

_LOGGER_ROOT = "gridmath"


@dataclass(frozen=True)
class Failure:
    """Result value for an operation that produced no output."""

    component: str
    operation: str
    reason: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.component}.{self.operation}: {self.reason}"


def report_failure(component: str, operation: str, reason: str) -> Failure:
    """Log a failure at warning level and return it as a value."""

    failure = Failure(component, operation, reason)
    logging.getLogger(f"{_LOGGER_ROOT}.{component}").warning("%s", failure)
    return failure


def is_failure(value) -> bool:
    return isinstance(value, Failure)


__all__ = [
    "Failure",
    "report_failure",
    "is_failure",
]
