from __future__ import annotations
from anniv.core.engine import BackendRegistry
from anniv.engines.factory import BACKEND_BUILDERS, make_backend

def build_registry() -> BackendRegistry:
    backends = {}
    for name in BACKEND_BUILDERS:
        backends[name] = make_backend(name)
    return BackendRegistry(backends)
