"""Tolerance-aware relational operators on floats.

Every predicate takes ``(x, y, precision)`` where ``precision`` is the
number of decimal digits to honour.  An invalid precision is reported and
makes the predicate answer ``False`` (``not_equal`` answers ``True``, being
the exact negation of ``equal_to``).
"""

from __future__ import annotations

from typing import Optional

from gridmath.errors import report_failure
from gridmath.precision import PrecisionContext, default_context, truncate

_COMPONENT = "compare"


def _mask(precision: int, context: Optional[PrecisionContext], operation: str) -> float:
    ctx = context or default_context()
    mask = ctx.mask(precision)
    if not mask:
        report_failure(_COMPONENT, operation, "precision mask calculation failed")
    return mask


## the mask window is checked on both sides so a tolerance straddling the
## boundary can not flip the answer
def greater_than(x: float, y: float, precision: int,
                 context: Optional[PrecisionContext] = None) -> bool:
    """is ``x`` greater than ``y`` considering ``precision`` decimal places"""
    mask = _mask(precision, context, "greater_than")
    if not mask:
        return False
    return x > y and (x + mask) > (y + mask) and (x - mask) > (y - mask)


def less_than(x: float, y: float, precision: int,
              context: Optional[PrecisionContext] = None) -> bool:
    """is ``x`` less than ``y`` considering ``precision`` decimal places

    A context built with ``legacy_less_than=True`` compares the values
    after truncating both to ``precision`` digits instead.
    """
    ctx = context or default_context()
    mask = _mask(precision, ctx, "less_than")
    if not mask:
        return False
    if ctx.legacy_less_than:
        return truncate(x, precision) < truncate(y, precision)
    return x < y and (x + mask) < (y + mask) and (x - mask) < (y - mask)


def equal_to(x: float, y: float, precision: int,
             context: Optional[PrecisionContext] = None) -> bool:
    """is ``x`` within the precision mask of ``y``"""
    mask = _mask(precision, context, "equal_to")
    if not mask:
        return False
    if x == y:
        return True
    return (x + mask) > y and (x - mask) < y and x < (y + mask) and x > (y - mask)


def not_equal(x: float, y: float, precision: int,
              context: Optional[PrecisionContext] = None) -> bool:
    return not equal_to(x, y, precision, context)


def greater_or_equal(x: float, y: float, precision: int,
                     context: Optional[PrecisionContext] = None) -> bool:
    return equal_to(x, y, precision, context) or greater_than(x, y, precision, context)


def less_or_equal(x: float, y: float, precision: int,
                  context: Optional[PrecisionContext] = None) -> bool:
    return equal_to(x, y, precision, context) or less_than(x, y, precision, context)


__all__ = [
    "greater_than",
    "less_than",
    "equal_to",
    "not_equal",
    "greater_or_equal",
    "less_or_equal",
]
