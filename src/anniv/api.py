from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from . import converter as _conv
from . import counter as _counter
from .core.config import get_config
from .core.engine import LunisolarBackend
from .core.errors import AnnivError
from .core.time import is_valid_solar
from .core.types import DayCountResult, LunarDescriptor
from .dates import (
    DEFAULT_COUNT_DIRECTION,
    calendar_system,
    format_date,
    is_date_string,
    parse_date,
    today_local,
)

log = logging.getLogger(__name__)


def list_backends() -> List[str]:
    return _conv._reg().list()

def backend_info(backend: Optional[str] = None) -> Dict[str, Any]:
    return _conv.get_backend(backend).info()

def get_backend(name: Optional[str] = None) -> LunisolarBackend:
    return _conv.get_backend(name)

def register_backend(name: str, backend: LunisolarBackend, *, overwrite: bool = False) -> None:
    _conv._reg().register(name, backend, overwrite=overwrite)

# ============================================================
# Conversion
# ============================================================

def lunar_to_solar(text: str, *, is_leap_month: bool = False, backend: Optional[str] = None) -> str:
    d = parse_date(text, "lunisolar", is_leap_month=is_leap_month)
    return format_date(_conv.lunar_to_solar(d, backend=backend))

def solar_to_lunar(text: str, *, backend: Optional[str] = None) -> LunarDescriptor:
    return _conv.solar_to_lunar(parse_date(text, "solar"), backend=backend)

def is_valid_lunar_date(text: str, *, is_leap_month: bool = False, backend: Optional[str] = None) -> bool:
    if not is_date_string(text):
        return False
    d = parse_date(text, "lunisolar", is_leap_month=is_leap_month)
    return _conv.is_valid_lunar_date(d, backend=backend)

def is_valid_solar_date(text: str) -> bool:
    if not is_date_string(text):
        return False
    y, m, d = map(int, text.split("-"))
    return is_valid_solar(y, m, d)

def leap_month(year: int, *, backend: Optional[str] = None) -> Optional[int]:
    return _conv.leap_month(year, backend=backend)

# ============================================================
# Day counts
# ============================================================

def calculate_days(
    event_date: str,
    calendar_type: Optional[str] = "solar",
    count_direction: Optional[str] = DEFAULT_COUNT_DIRECTION,
    today: Optional[str] = None,
    *,
    is_leap_month: bool = False,
    lang: Optional[str] = None,
    backend: Optional[str] = None,
) -> DayCountResult:
    """Day count for one stored anniversary.

    ``today`` defaults to the local current date. Raises InvalidDate for bad
    strings and ConversionFailed when a lunar anchor cannot be resolved.
    """
    event = parse_date(event_date, calendar_system(calendar_type), is_leap_month=is_leap_month)
    ref = today_local() if today is None else parse_date(today, "solar")
    return _counter.calculate(
        event,
        count_direction or DEFAULT_COUNT_DIRECTION,  # type: ignore[arg-type]
        ref,
        lang=lang or get_config().lang,
        backend=backend,
    )

# ============================================================
# Record enrichment
# ============================================================

def lunar_info(
    event_date: str,
    calendar_type: Optional[str] = "solar",
    *,
    is_leap_month: bool = False,
    backend: Optional[str] = None,
) -> Optional[LunarDescriptor]:
    """Lunisolar descriptor for display, or None when it cannot be produced."""
    try:
        system = calendar_system(calendar_type)
        d = parse_date(event_date, system, is_leap_month=is_leap_month)
        if system == "lunisolar":
            d = _conv.lunar_to_solar(d, backend=backend)
        return _conv.solar_to_lunar(d, backend=backend)
    except AnnivError as e:
        log.debug("no lunar info for %r (%s): %s", event_date, e.kind.value, e)
        return None

def describe_event(
    event_date: str,
    calendar_type: Optional[str] = "solar",
    count_direction: Optional[str] = DEFAULT_COUNT_DIRECTION,
    today: Optional[str] = None,
    *,
    is_leap_month: bool = False,
    lang: Optional[str] = None,
    backend: Optional[str] = None,
) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "dayCalculation": calculate_days(
            event_date, calendar_type, count_direction, today,
            is_leap_month=is_leap_month, lang=lang, backend=backend,
        ).as_dict(),
    }
    info = lunar_info(event_date, calendar_type, is_leap_month=is_leap_month, backend=backend)
    if info is not None:
        out["lunarInfo"] = info.as_dict()
    return out

def date_errors(date: Optional[str], calendar_type: Optional[str] = "solar") -> List[Dict[str, str]]:
    """Field-level errors for a record's date, empty when the date is acceptable."""
    if date is None or date == "":
        return [{"field": "date", "message": "Date is required"}]
    if not is_date_string(date):
        return [{"field": "date", "message": "Date must be in YYYY-MM-DD format"}]
    if calendar_system(calendar_type) == "lunisolar":
        if not is_valid_lunar_date(date):
            return [{"field": "date", "message": "Invalid lunar date"}]
    elif not is_valid_solar_date(date):
        return [{"field": "date", "message": "Invalid solar date"}]
    return []
