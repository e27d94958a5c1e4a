"""
anniv.engines.zhdate_backend
----------------------------
Lunisolar conversion primitive backed by ``zhdate``.

zhdate carries the year-code tables for lunar years 1900-2100 and renders
the Chinese-numeral date together with the sexagesimal year name; this
module only adapts its objects to ``CalendarDate`` / ``LunarDescriptor``.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, Optional

from zhdate import ZhDate

from anniv.core.types import CalendarDate, LunarDescriptor

MIN_LUNAR_YEAR = 1900
MAX_LUNAR_YEAR = 2100
FIRST_SOLAR = datetime(1900, 1, 31)  # lunar 1900-01-01

# ZhDate.chinese(): "二〇二〇年闰四月初一 庚子年 (鼠年)"
_CHINESE_RE = re.compile(r"^\S{4}年(?P<month>闰?\S+?)月(?P<day>\S+)\s+(?P<ganzhi>\S{2})年")


class ZhDateBackend:
    def info(self) -> Dict[str, Any]:
        return {
            "name": "zhdate",
            "min_year": MIN_LUNAR_YEAR,
            "max_year": MAX_LUNAR_YEAR,
        }

    def _check_year(self, year: int) -> None:
        if not MIN_LUNAR_YEAR <= year <= MAX_LUNAR_YEAR:
            raise ValueError(f"Lunar year {year} outside supported range {MIN_LUNAR_YEAR}-{MAX_LUNAR_YEAR}")

    def to_solar(self, year: int, month: int, day: int, is_leap_month: bool) -> CalendarDate:
        self._check_year(year)
        dt = ZhDate(year, month, day, leap_month=is_leap_month).to_datetime()
        return CalendarDate.solar(dt.year, dt.month, dt.day)

    def from_solar(self, d: CalendarDate) -> LunarDescriptor:
        # zhdate does its arithmetic on naive datetimes
        dt = datetime(d.year, d.month, d.day)
        if dt < FIRST_SOLAR or d.year > MAX_LUNAR_YEAR:
            raise ValueError(f"Solar date {d.isoformat()} outside supported range")
        z = ZhDate.from_datetime(dt)
        m = _CHINESE_RE.match(z.chinese())
        if m is None:
            raise ValueError(f"Unexpected zhdate rendering: {z.chinese()!r}")
        return LunarDescriptor(
            year=z.lunar_year,
            month=z.lunar_month,
            day=z.lunar_day,
            is_leap_month=bool(z.leap_month),
            year_ganzhi=m.group("ganzhi"),
            month_chinese=m.group("month"),
            day_chinese=m.group("day"),
        )

    def leap_month(self, year: int) -> Optional[int]:
        """Number of the month repeated as a leap month in ``year``, if any."""
        self._check_year(year)
        for month in range(1, 13):
            if ZhDate.validate(year, month, 1, True):
                return month
        return None
