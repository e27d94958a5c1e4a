from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .types import CalendarDate, LunarDescriptor


class LunisolarBackend(Protocol):
    """Conversion primitive. Implementations may raise anything on failure;
    the converter wraps it as ConversionFailed."""

    def info(self) -> Dict[str, Any]: ...
    def to_solar(self, year: int, month: int, day: int, is_leap_month: bool) -> CalendarDate: ...
    def from_solar(self, d: CalendarDate) -> LunarDescriptor: ...
    def leap_month(self, year: int) -> Optional[int]: ...


@dataclass
class BackendRegistry:
    _backends: Dict[str, LunisolarBackend]

    def get(self, name: str) -> LunisolarBackend:
        if name not in self._backends:
            raise KeyError(f"Unknown backend '{name}'. Available: {sorted(self._backends)}")
        return self._backends[name]

    def list(self) -> List[str]:
        return sorted(self._backends.keys())

    def register(self, name: str, backend: LunisolarBackend, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._backends):
            raise KeyError(f"Backend '{name}' already exists. Use overwrite=True to replace.")
        self._backends[name] = backend
