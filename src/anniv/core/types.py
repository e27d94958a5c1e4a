from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal

CalendarSystem = Literal["solar", "lunisolar"]
CountDirection = Literal["countup", "countdown"]
Phase = Literal["past", "future", "today"]


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int
    system: CalendarSystem = "solar"
    is_leap_month: bool = False  # lunisolar only

    @classmethod
    def solar(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(year, month, day, "solar")

    @classmethod
    def lunisolar(cls, year: int, month: int, day: int, is_leap_month: bool = False) -> "CalendarDate":
        return cls(year, month, day, "lunisolar", is_leap_month)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day, "solar")

    @property
    def is_solar(self) -> bool:
        return self.system == "solar"

    def to_date(self) -> date:
        """Solar dates only; raises ValueError for impossible fields."""
        if not self.is_solar:
            raise ValueError("only solar dates map onto datetime.date")
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class LunarDescriptor:
    year: int
    month: int
    day: int
    is_leap_month: bool
    year_ganzhi: str    # e.g. 甲辰
    month_chinese: str  # e.g. 正, 闰四
    day_chinese: str    # e.g. 初一

    def as_date(self) -> CalendarDate:
        return CalendarDate.lunisolar(self.year, self.month, self.day, self.is_leap_month)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "isLeapMonth": self.is_leap_month,
            "yearGanZhi": self.year_ganzhi,
            "monthChinese": self.month_chinese,
            "dayChinese": self.day_chinese,
        }


@dataclass(frozen=True)
class DayCountResult:
    magnitude: int
    phase: Phase
    display_label: str
    resolved_solar_date: CalendarDate

    def as_dict(self) -> Dict[str, Any]:
        return {
            "days": self.magnitude,
            "type": self.phase,
            "label": self.display_label,
            "solarDate": self.resolved_solar_date.isoformat(),
        }
