"""datetrans public API.

Boundary dates (start/end of the preceding, current and succeeding ISO week,
month and year) for ``datetime.date`` and look-alike date types.
"""

import logging as _logging

from .adapter import DateTransitions
from .core.errors import DateTransError, OutOfRangeError
from .core.gregorian import days_in_month, is_leap_year
from .core.types import CalendarDate, Transition
from .log import configure_logging
from .transitions import (
    last_day_of_month,
    start_of_current_iso_week,
    end_of_current_iso_week,
    start_of_pred_iso_week,
    end_of_pred_iso_week,
    start_of_succ_iso_week,
    end_of_succ_iso_week,
    start_of_current_month,
    end_of_current_month,
    start_of_pred_month,
    end_of_pred_month,
    start_of_succ_month,
    end_of_succ_month,
    start_of_current_year,
    end_of_current_year,
    start_of_pred_year,
    end_of_pred_year,
    start_of_succ_year,
    end_of_succ_year,
    list_transitions,
    transition,
)

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "CalendarDate",
    "DateTransitions",
    "DateTransError",
    "OutOfRangeError",
    "Transition",
    "configure_logging",
    "days_in_month",
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
