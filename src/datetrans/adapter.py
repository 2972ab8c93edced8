from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional

from . import transitions as tr
from .core.gregorian import is_leap_year
from .core.types import D, Direction, Edge, Period

@dataclass(frozen=True)
class DateTransitions(Generic[D]):
    """
    Method-style access to the transition functions for a single date.

    Every method returns a plain date of the wrapped type, never another wrapper:

        >>> DateTransitions(date(1996, 2, 23)).end_of_month()
        datetime.date(1996, 2, 29)
    """
    date: D

    def is_leap_year(self) -> bool:
        return is_leap_year(self.date.year)

    def last_day_of_month(self) -> int:
        return tr.last_day_of_month(self.date)

    # current period
    def start_of_year(self) -> D:
        return tr.start_of_current_year(self.date)

    def end_of_year(self) -> D:
        return tr.end_of_current_year(self.date)

    def start_of_month(self) -> D:
        return tr.start_of_current_month(self.date)

    def end_of_month(self) -> D:
        return tr.end_of_current_month(self.date)

    def start_of_iso8601_week(self) -> D:
        return tr.start_of_current_iso_week(self.date)

    def end_of_iso8601_week(self) -> D:
        return tr.end_of_current_iso_week(self.date)

    # preceding period
    def start_of_pred_year(self) -> D:
        return tr.start_of_pred_year(self.date)

    def end_of_pred_year(self) -> D:
        return tr.end_of_pred_year(self.date)

    def start_of_pred_month(self) -> D:
        return tr.start_of_pred_month(self.date)

    def end_of_pred_month(self) -> D:
        return tr.end_of_pred_month(self.date)

    def start_of_pred_iso8601_week(self) -> D:
        return tr.start_of_pred_iso_week(self.date)

    def end_of_pred_iso8601_week(self) -> D:
        return tr.end_of_pred_iso_week(self.date)

    # succeeding period
    def start_of_succ_year(self) -> D:
        return tr.start_of_succ_year(self.date)

    def end_of_succ_year(self) -> D:
        return tr.end_of_succ_year(self.date)

    def start_of_succ_month(self) -> D:
        return tr.start_of_succ_month(self.date)

    def end_of_succ_month(self) -> D:
        return tr.end_of_succ_month(self.date)

    def start_of_succ_iso8601_week(self) -> D:
        return tr.start_of_succ_iso_week(self.date)

    def end_of_succ_iso8601_week(self) -> D:
        return tr.end_of_succ_iso_week(self.date)

    def to(
        self,
        period: Period,
        direction: Direction = "current",
        edge: Edge = "start",
        *,
        strict: bool = True,
    ) -> Optional[D]:
        return tr.transition(self.date, period, direction, edge, strict=strict)
