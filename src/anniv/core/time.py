from __future__ import annotations
from datetime import date

from .errors import InvalidDate
from .types import CalendarDate


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def is_valid_solar(year: int, month: int, day: int) -> bool:
    """Gregorian structural validity: month in 1..12 and day within that month."""
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def require_solar(d: CalendarDate) -> CalendarDate:
    if not d.is_solar:
        raise InvalidDate(f"Expected a solar date, got {d.system} {d.isoformat()}", value=d)
    if not is_valid_solar(d.year, d.month, d.day):
        raise InvalidDate(f"Invalid solar date: {d.isoformat()}", value=d)
    return d


def to_jdn(d: CalendarDate | date) -> int:
    """Convert a Gregorian date to its Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def from_jdn(jdn: int) -> CalendarDate:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return CalendarDate.solar(year, month, day)


def days_between(a: CalendarDate, b: CalendarDate) -> int:
    """Signed whole-day difference ``a - b`` of two solar dates."""
    return to_jdn(a) - to_jdn(b)
