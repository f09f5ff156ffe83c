"""Machine precision ceiling and comparison tolerances.

The tolerance, or *precision mask*, used by the comparators in
:mod:`gridmath.compare` is ``10**-p`` for a requested number of decimal
digits ``p``.  Requests beyond what the floating point environment can
actually resolve are clamped to the machine ceiling, which is measured
once per :class:`PrecisionContext` and never changes afterwards.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Dict, Optional

import numpy as np

from gridmath.config import GridmathConfig, get_config
from gridmath.errors import report_failure

logger = logging.getLogger(__name__)

_COMPONENT = "precision"

# widest decimal expansion of a double is 1074 digits
MAX_TRUNCATE_DIGITS = 1074


def _calculation_accuracy() -> int:
    """Decimal digits distinguishable from 1.0 in float arithmetic."""

    one = 1.0
    step = 1.0
    digits = 0
    while one + step != one:
        digits += 1
        step = step / 10.0
    return digits


def _storage_accuracy() -> int:
    """Decimal digits that survive being stored in the widest float type."""

    one = np.longdouble(1.0)
    step = np.longdouble(1.0)
    held = np.empty(1, dtype=np.longdouble)
    digits = 0
    while True:
        held[0] = one + step
        if held[0] == one:
            break
        digits += 1
        step = step / np.longdouble(10.0)
    return digits


def _valid_precision(precision) -> bool:
    return isinstance(precision, int) and not isinstance(precision, bool) and precision >= 1


class PrecisionContext:
    """Owner of the machine precision ceiling and the derived masks.

    The ceiling is computed lazily on first use behind a lock; every later
    read is lock-free.  ``legacy_less_than`` selects the digit truncation
    strategy for :func:`gridmath.compare.less_than` instead of the mask
    window used by the other comparators.
    """

    def __init__(self, legacy_less_than: bool = False):
        self.legacy_less_than = legacy_less_than
        self._ceiling: Optional[int] = None
        self._masks: Dict[int, float] = {}
        self._lock = RLock()

    @classmethod
    def from_config(cls, config: Optional[GridmathConfig] = None) -> "PrecisionContext":
        if config is None:
            config = get_config()
        return cls(legacy_less_than=config.legacy_less_than)

    def __repr__(self) -> str:
        return (f"PrecisionContext(ceiling={self._ceiling}, "
                f"legacy_less_than={self.legacy_less_than})")

    @property
    def ceiling(self) -> int:
        if self._ceiling is None:
            with self._lock:
                if self._ceiling is None:
                    calc = _calculation_accuracy()
                    stored = _storage_accuracy()
                    self._ceiling = min(calc, stored)
                    logger.debug("machine precision ceiling %d (calculation %d, storage %d)",
                                 self._ceiling, calc, stored)
        return self._ceiling

    def mask(self, precision: int) -> float:
        """Return ``10**-precision`` (clamped), or 0 if ``precision`` is invalid."""

        if not _valid_precision(precision):
            report_failure(_COMPONENT, "precision_mask", f"invalid precision {precision!r}")
            return 0.0
        current = min(precision, self.ceiling)
        cached = self._masks.get(current)
        if cached is not None:
            return cached

        # repeated scaling rather than pow() keeps a single error source
        value = 1.0
        for _ in range(current):
            value *= 0.1
        with self._lock:
            self._masks.setdefault(current, value)
        return value


_default_lock = RLock()
_default_context: Optional[PrecisionContext] = None


def default_context() -> PrecisionContext:
    """Return the shared context, creating it from the active configuration."""

    global _default_context
    if _default_context is None:
        with _default_lock:
            if _default_context is None:
                _default_context = PrecisionContext.from_config()
    return _default_context


def set_default_context(context: Optional[PrecisionContext]) -> None:
    """Install ``context`` as the shared context; ``None`` rebuilds it lazily."""

    global _default_context
    with _default_lock:
        _default_context = context


def machine_precision_ceiling(context: Optional[PrecisionContext] = None) -> int:
    return (context or default_context()).ceiling


def precision_mask(precision: int, context: Optional[PrecisionContext] = None) -> float:
    return (context or default_context()).mask(precision)


def truncate(val: float, digits: int) -> float:
    """Drop everything past ``digits`` decimal places of ``val``.

    The value is formatted with exactly ``digits`` decimals and parsed
    back.  ``digits == 0`` returns ``val`` untouched; digits outside
    ``[0, 1074]`` report a failure and return 0.
    """

    if isinstance(digits, bool) or not isinstance(digits, int):
        report_failure(_COMPONENT, "truncate", f"invalid number of digits {digits!r}")
        return 0.0
    if digits == 0:
        return val
    if digits < 0 or digits > MAX_TRUNCATE_DIGITS:
        report_failure(_COMPONENT, "truncate", f"invalid number of digits {digits}")
        return 0.0
    return float(format(val, f".{digits}f"))


__all__ = [
    "MAX_TRUNCATE_DIGITS",
    "PrecisionContext",
    "default_context",
    "set_default_context",
    "machine_precision_ceiling",
    "precision_mask",
    "truncate",
]
