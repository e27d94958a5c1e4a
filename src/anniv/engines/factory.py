"""
anniv.engines.factory
---------------------
Builds live conversion backends from their registry names.
"""

from __future__ import annotations
from typing import Callable, Dict

from anniv.core.engine import LunisolarBackend
from anniv.engines.zhdate_backend import ZhDateBackend

BACKEND_BUILDERS: Dict[str, Callable[[], LunisolarBackend]] = {
    "zhdate": ZhDateBackend,
}


def make_backend(name: str) -> LunisolarBackend:
    """The universal entry point."""
    if name not in BACKEND_BUILDERS:
        raise KeyError(f"Unknown backend '{name}'. Available: {sorted(BACKEND_BUILDERS)}")
    return BACKEND_BUILDERS[name]()
