from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


def _env(environ: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    v = environ.get(name)
    if v is None:
        return default
    v = str(v).strip()
    return v if v != "" else default


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    v = _env(environ, name)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    corpus_path: Optional[Path] = None
    min_score: float = 0.0
    log_level: str = "INFO"
    log_format: str = "text"  # "text" | "json"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        corpus = _env(env, "PATTERN_BAG_CORPUS")
        return cls(
            corpus_path=Path(corpus) if corpus else None,
            min_score=_env_float(env, "PATTERN_BAG_MIN_SCORE", 0.0),
            log_level=(_env(env, "PATTERN_BAG_LOG_LEVEL", "INFO") or "INFO").upper(),
            log_format=(_env(env, "PATTERN_BAG_LOG_FORMAT", "text") or "text").lower(),
        )
