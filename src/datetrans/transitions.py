"""Boundary dates of the week, month and year around a given date.

Every function returns a new value of the same type as its input and raises
:class:`~datetrans.core.errors.OutOfRangeError` when the result falls outside
the host date type's range. Weeks follow ISO 8601 and start on Monday.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .core.errors import OutOfRangeError
from .core.gregorian import build_date, days_in_month, is_leap_year, shift_days
from .core.types import DIRECTIONS, EDGES, PERIODS, D, CalendarDate, Direction, Edge, Period, Transition

# ============================================================
# ISO 8601 week
# ============================================================

def start_of_current_iso_week(d: D) -> D:
    return shift_days(d, -(d.isoweekday() - 1))

def end_of_current_iso_week(d: D) -> D:
    return shift_days(d, 7 - d.isoweekday())

def start_of_pred_iso_week(d: D) -> D:
    return shift_days(start_of_current_iso_week(d), -7)

def end_of_pred_iso_week(d: D) -> D:
    return shift_days(start_of_current_iso_week(d), -1)

def start_of_succ_iso_week(d: D) -> D:
    return shift_days(start_of_current_iso_week(d), 7)

def end_of_succ_iso_week(d: D) -> D:
    return shift_days(start_of_succ_iso_week(d), 6)

# ============================================================
# Month
# ============================================================

def last_day_of_month(d: CalendarDate) -> int:
    """Number of days in the month of ``d`` (28..31)."""
    return days_in_month(d.year, d.month)

def _pred_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1

def _succ_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1

def start_of_current_month(d: D) -> D:
    return build_date(d, d.year, d.month, 1)

def end_of_current_month(d: D) -> D:
    return build_date(d, d.year, d.month, last_day_of_month(d))

def start_of_pred_month(d: D) -> D:
    year, month = _pred_month(d.year, d.month)
    return build_date(d, year, month, 1)

def end_of_pred_month(d: D) -> D:
    year, month = _pred_month(d.year, d.month)
    return build_date(d, year, month, days_in_month(year, month))

def start_of_succ_month(d: D) -> D:
    year, month = _succ_month(d.year, d.month)
    return build_date(d, year, month, 1)

def end_of_succ_month(d: D) -> D:
    year, month = _succ_month(d.year, d.month)
    return build_date(d, year, month, days_in_month(year, month))

# ============================================================
# Year
# ============================================================

def start_of_current_year(d: D) -> D:
    return build_date(d, d.year, 1, 1)

def end_of_current_year(d: D) -> D:
    return build_date(d, d.year, 12, 31)

def start_of_pred_year(d: D) -> D:
    return build_date(d, d.year - 1, 1, 1)

def end_of_pred_year(d: D) -> D:
    return build_date(d, d.year - 1, 12, 31)

def start_of_succ_year(d: D) -> D:
    return build_date(d, d.year + 1, 1, 1)

def end_of_succ_year(d: D) -> D:
    return build_date(d, d.year + 1, 12, 31)

# ============================================================
# Dispatch by (period, direction, edge)
# ============================================================

_TRANSITIONS: Dict[Transition, Callable[[Any], Any]] = {
    Transition("week", "pred", "start"): start_of_pred_iso_week,
    Transition("week", "pred", "end"): end_of_pred_iso_week,
    Transition("week", "current", "start"): start_of_current_iso_week,
    Transition("week", "current", "end"): end_of_current_iso_week,
    Transition("week", "succ", "start"): start_of_succ_iso_week,
    Transition("week", "succ", "end"): end_of_succ_iso_week,
    Transition("month", "pred", "start"): start_of_pred_month,
    Transition("month", "pred", "end"): end_of_pred_month,
    Transition("month", "current", "start"): start_of_current_month,
    Transition("month", "current", "end"): end_of_current_month,
    Transition("month", "succ", "start"): start_of_succ_month,
    Transition("month", "succ", "end"): end_of_succ_month,
    Transition("year", "pred", "start"): start_of_pred_year,
    Transition("year", "pred", "end"): end_of_pred_year,
    Transition("year", "current", "start"): start_of_current_year,
    Transition("year", "current", "end"): end_of_current_year,
    Transition("year", "succ", "start"): start_of_succ_year,
    Transition("year", "succ", "end"): end_of_succ_year,
}

def list_transitions() -> List[Transition]:
    return sorted(_TRANSITIONS)

def transition(
    d: D,
    period: Period,
    direction: Direction = "current",
    edge: Edge = "start",
    *,
    strict: bool = True,
) -> Optional[D]:
    """
    Apply the boundary operation named by ``(period, direction, edge)``.

    With ``strict=False`` a result outside the host type's range comes back as
    ``None`` instead of raising ``OutOfRangeError``.
    """
    for name, value, allowed in (("period", period, PERIODS), ("direction", direction, DIRECTIONS), ("edge", edge, EDGES)):
        if value not in allowed:
            raise KeyError(f"Unknown {name} {value!r}. Available: {list(allowed)}")
    try:
        return _TRANSITIONS[Transition(period, direction, edge)](d)
    except OutOfRangeError:
        if strict:
            raise
        return None

__all__ = [
    "is_leap_year",
    "last_day_of_month",
    "start_of_current_iso_week",
    "end_of_current_iso_week",
    "start_of_pred_iso_week",
    "end_of_pred_iso_week",
    "start_of_succ_iso_week",
    "end_of_succ_iso_week",
    "start_of_current_month",
    "end_of_current_month",
    "start_of_pred_month",
    "end_of_pred_month",
    "start_of_succ_month",
    "end_of_succ_month",
    "start_of_current_year",
    "end_of_current_year",
    "start_of_pred_year",
    "end_of_pred_year",
    "start_of_succ_year",
    "end_of_succ_year",
    "list_transitions",
    "transition",
]
