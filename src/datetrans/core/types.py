from __future__ import annotations
from dataclasses import dataclass
from datetime import timedelta
from typing import Literal, Protocol, TypeVar

Period = Literal["week", "month", "year"]
Direction = Literal["pred", "current", "succ"]
Edge = Literal["start", "end"]

PERIODS: tuple[Period, ...] = ("week", "month", "year")
DIRECTIONS: tuple[Direction, ...] = ("pred", "current", "succ")
EDGES: tuple[Edge, ...] = ("start", "end")

D = TypeVar("D", bound="CalendarDate")

class CalendarDate(Protocol):
    """What the engine needs from a host date type (``datetime.date`` satisfies it)."""

    @property
    def year(self) -> int: ...
    @property
    def month(self) -> int: ...
    @property
    def day(self) -> int: ...
    def isoweekday(self) -> int: ...
    def replace(self: D, year: int = ..., month: int = ..., day: int = ...) -> D: ...
    def __add__(self: D, other: timedelta) -> D: ...
    def __sub__(self: D, other: timedelta) -> D: ...

@dataclass(frozen=True, order=True)
class Transition:
    period: Period
    direction: Direction
    edge: Edge

    def __str__(self) -> str:
        period = "iso_week" if self.period == "week" else self.period
        return f"{self.edge}_of_{self.direction}_{period}"
