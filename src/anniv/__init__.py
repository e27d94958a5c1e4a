"""anniv public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    lunar_to_solar,
    solar_to_lunar,
    is_valid_lunar_date,
    is_valid_solar_date,
    leap_month,
    calculate_days,
    lunar_info,
    describe_event,
    date_errors,
    list_backends,
    backend_info,
    get_backend,
    register_backend,
)
from .core.config import AnnivConfig, config_from_env, get_config, set_config
from .core.errors import AnnivError, ConversionFailed, ErrorKind, InvalidDate
from .core.types import CalendarDate, DayCountResult, LunarDescriptor
from .counter import calculate

__all__ = [
    "lunar_to_solar",
    "solar_to_lunar",
    "is_valid_lunar_date",
    "is_valid_solar_date",
    "leap_month",
    "calculate_days",
    "calculate",
    "lunar_info",
    "describe_event",
    "date_errors",
    "list_backends",
    "backend_info",
    "get_backend",
    "register_backend",
    "AnnivConfig",
    "config_from_env",
    "get_config",
    "set_config",
    "AnnivError",
    "ConversionFailed",
    "ErrorKind",
    "InvalidDate",
    "CalendarDate",
    "DayCountResult",
    "LunarDescriptor",
]
