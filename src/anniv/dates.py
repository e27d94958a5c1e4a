"""YYYY-MM-DD string adapter between the service boundary and CalendarDate."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from anniv.core.errors import InvalidDate
from anniv.core.time import require_solar
from anniv.core.types import CalendarDate, CalendarSystem, CountDirection

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)

# calendar type names used by records -> internal system tag
CALENDAR_TYPES = {
    "solar": "solar",
    "lunar": "lunisolar",
    "lunisolar": "lunisolar",
}
DEFAULT_CALENDAR_TYPE = "solar"
DEFAULT_COUNT_DIRECTION: CountDirection = "countup"


def is_date_string(text: object) -> bool:
    return isinstance(text, str) and DATE_RE.fullmatch(text) is not None


def calendar_system(calendar_type: Optional[str]) -> CalendarSystem:
    name = DEFAULT_CALENDAR_TYPE if calendar_type is None else calendar_type
    if name not in CALENDAR_TYPES:
        raise ValueError(f"Calendar type must be one of: solar, lunar (got {calendar_type!r})")
    return CALENDAR_TYPES[name]  # type: ignore[return-value]


def parse_date(text: str, system: CalendarSystem = "solar", *, is_leap_month: bool = False) -> CalendarDate:
    if not is_date_string(text):
        raise InvalidDate(f'Invalid date format: "{text}". Expected YYYY-MM-DD', value=text)
    y, m, d = map(int, text.split("-"))
    if system == "solar":
        return require_solar(CalendarDate.solar(y, m, d))
    return CalendarDate.lunisolar(y, m, d, is_leap_month)


def format_date(d: CalendarDate) -> str:
    return d.isoformat()


def today_local() -> CalendarDate:
    """Current date in the process's local day."""
    return CalendarDate.from_date(date.today())
