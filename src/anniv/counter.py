"""
anniv.counter
-------------
Day counts for one anniversary relative to one reference day.

countup   -- signed distance between the anchor date and today.
countdown -- distance from today to the next occurrence of the anniversary,
             searched in today's year and the year after.
"""

from __future__ import annotations

from typing import Dict, Optional

from anniv.converter import lunar_to_solar
from anniv.core.errors import ConversionFailed
from anniv.core.time import days_between, is_leap_year, require_solar
from anniv.core.types import CalendarDate, CountDirection, DayCountResult

LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "elapsed": "{n} days elapsed",
        "until_start": "{n} days until start",
        "remaining": "{n} days remaining",
        "today": "today",
    },
    "zh": {
        "elapsed": "已经 {n} 天",
        "until_start": "还有 {n} 天",
        "remaining": "还剩 {n} 天",
        "today": "就是今天",
    },
}

COUNT_DIRECTIONS = ("countup", "countdown")
SEARCH_YEARS = 2


def label(key: str, n: int, lang: str = "en") -> str:
    if lang not in LABELS:
        raise ValueError(f"Unknown label language {lang!r}. Available: {sorted(LABELS)}")
    return LABELS[lang][key].format(n=n)


def _today(anchor: CalendarDate, lang: str) -> DayCountResult:
    return DayCountResult(0, "today", label("today", 0, lang), anchor)


def resolve_anchor(event_date: CalendarDate, *, backend: Optional[str] = None) -> CalendarDate:
    if event_date.is_solar:
        return require_solar(event_date)
    return lunar_to_solar(event_date, backend=backend)


def count_up(anchor: CalendarDate, today: CalendarDate, lang: str = "en") -> DayCountResult:
    diff = days_between(anchor, today)
    if diff < 0:
        return DayCountResult(-diff, "past", label("elapsed", -diff, lang), anchor)
    if diff > 0:
        return DayCountResult(diff, "future", label("until_start", diff, lang), anchor)
    return _today(anchor, lang)


def occurrence(
    event_date: CalendarDate, year: int, *, backend: Optional[str] = None
) -> Optional[CalendarDate]:
    """Solar date of the anniversary in ``year``, or None if it does not occur that year.

    Solar Feb 29 falls on Mar 1 in common years. Lunisolar anniversaries use the
    plain (non-leap) month of ``year``.
    """
    if event_date.is_solar:
        if event_date.month == 2 and event_date.day == 29 and not is_leap_year(year):
            return CalendarDate.solar(year, 3, 1)
        return CalendarDate.solar(year, event_date.month, event_date.day)
    try:
        return lunar_to_solar(
            CalendarDate.lunisolar(year, event_date.month, event_date.day), backend=backend
        )
    except ConversionFailed:
        return None


def count_down(
    event_date: CalendarDate,
    anchor: CalendarDate,
    today: CalendarDate,
    lang: str = "en",
    *,
    backend: Optional[str] = None,
) -> DayCountResult:
    for year in range(today.year, today.year + SEARCH_YEARS):
        candidate = occurrence(event_date, year, backend=backend)
        if candidate is None:
            continue
        diff = days_between(candidate, today)
        if diff > 0:
            return DayCountResult(diff, "future", label("remaining", diff, lang), candidate)
        if diff == 0:
            return _today(candidate, lang)

    # No occurrence in the window: report the anchor itself as elapsed.
    diff = abs(days_between(anchor, today))
    if diff == 0:
        return _today(anchor, lang)
    return DayCountResult(diff, "past", label("elapsed", diff, lang), anchor)


def calculate(
    event_date: CalendarDate,
    count_direction: CountDirection,
    today: CalendarDate,
    *,
    lang: str = "en",
    backend: Optional[str] = None,
) -> DayCountResult:
    if count_direction not in COUNT_DIRECTIONS:
        raise ValueError(f"count_direction must be one of {COUNT_DIRECTIONS}, got {count_direction!r}")
    if lang not in LABELS:
        raise ValueError(f"Unknown label language {lang!r}. Available: {sorted(LABELS)}")
    require_solar(today)

    anchor = resolve_anchor(event_date, backend=backend)
    if count_direction == "countup":
        return count_up(anchor, today, lang)
    return count_down(event_date, anchor, today, lang, backend=backend)
