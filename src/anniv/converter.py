"""
anniv.converter
---------------
Solar <-> lunisolar conversion and lunisolar validity checks.

The calendar tables themselves live in the backend; this module validates
inputs, picks the backend and turns every backend failure into
``ConversionFailed``.
"""

from __future__ import annotations

from typing import Optional

from anniv.core.config import get_config
from anniv.core.engine import BackendRegistry, LunisolarBackend
from anniv.core.errors import AnnivError, ConversionFailed, InvalidDate
from anniv.core.time import require_solar
from anniv.core.types import CalendarDate, LunarDescriptor

_registry: Optional[BackendRegistry] = None

def set_registry(reg: BackendRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> BackendRegistry:
    if _registry is None:
        raise RuntimeError("Backend registry not initialized")
    return _registry

def get_backend(name: Optional[str] = None) -> LunisolarBackend:
    return _reg().get(name if name is not None else get_config().backend)


def _require_lunar_fields(d: CalendarDate) -> None:
    if d.is_solar:
        raise InvalidDate(f"Expected a lunisolar date, got solar {d.isoformat()}", value=d)
    if not 1 <= d.month <= 12:
        raise InvalidDate(f"Lunar month must be 1-12, got {d.month}", value=d)
    if not 1 <= d.day <= 30:
        raise InvalidDate(f"Lunar day must be 1-30, got {d.day}", value=d)


def solar_to_lunar(d: CalendarDate, *, backend: Optional[str] = None) -> LunarDescriptor:
    require_solar(d)
    eng = get_backend(backend)
    try:
        return eng.from_solar(d)
    except Exception as e:
        raise ConversionFailed(
            f"Failed to convert solar date {d.isoformat()} to lunar: {e}", value=d
        ) from e


def lunar_to_solar(d: CalendarDate, *, backend: Optional[str] = None) -> CalendarDate:
    _require_lunar_fields(d)
    eng = get_backend(backend)
    leap = " (leap)" if d.is_leap_month else ""
    try:
        out = eng.to_solar(d.year, d.month, d.day, d.is_leap_month)
    except Exception as e:
        raise ConversionFailed(
            f"Failed to convert lunar date {d.isoformat()}{leap} to solar: {e}", value=d
        ) from e
    return require_solar(out)


def is_valid_lunar_date(d: CalendarDate, *, backend: Optional[str] = None) -> bool:
    """True iff the lunisolar date exists: lunar -> solar -> lunar gives the same fields."""
    if d.is_solar or not 1 <= d.month <= 12 or not 1 <= d.day <= 30:
        return False
    try:
        back = solar_to_lunar(lunar_to_solar(d, backend=backend), backend=backend)
    except AnnivError:
        return False
    return (
        back.year == d.year
        and back.month == d.month
        and back.is_leap_month == d.is_leap_month
        and back.day == d.day
    )


def leap_month(year: int, *, backend: Optional[str] = None) -> Optional[int]:
    """Leap month number of lunar ``year``, or None when the year has none."""
    eng = get_backend(backend)
    try:
        return eng.leap_month(year)
    except Exception as e:
        raise ConversionFailed(f"No leap-month data for lunar year {year}: {e}", value=year) from e
