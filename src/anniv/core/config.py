from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Literal, Mapping, Optional

Language = Literal["en", "zh"]

ANNIV_LANG_ENV = "ANNIV_LANG"
ANNIV_BACKEND_ENV = "ANNIV_BACKEND"


@dataclass(frozen=True)
class AnnivConfig:
    """Process-wide defaults; every facade call may override them by keyword."""
    lang: Language = "en"
    backend: str = "zhdate"


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> AnnivConfig:
    env = os.environ if environ is None else environ
    base = AnnivConfig()
    lang = (env.get(ANNIV_LANG_ENV) or "").strip().lower() or base.lang
    backend = (env.get(ANNIV_BACKEND_ENV) or "").strip() or base.backend
    if lang not in ("en", "zh"):
        raise ValueError(f"{ANNIV_LANG_ENV} must be 'en' or 'zh', got {lang!r}")
    return AnnivConfig(lang=lang, backend=backend)  # type: ignore[arg-type]


_config: Optional[AnnivConfig] = None

def get_config() -> AnnivConfig:
    global _config
    if _config is None:
        _config = config_from_env()
    return _config

def set_config(cfg: Optional[AnnivConfig]) -> None:
    """Install ``cfg`` as the process config; ``None`` re-reads the environment on next use."""
    global _config
    _config = cfg
