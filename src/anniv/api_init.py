"""Registry bootstrap (import side-effect)."""
from .converter import set_registry
from .bootstrap import build_registry

set_registry(build_registry())
