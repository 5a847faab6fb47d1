from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_PRELUDE_PATHS: list[Path] = []
_DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    """Source files every Interpreter session evaluates before user code."""
    return paths_from_env('SCHEMER_PRELUDE_PATH', _DEFAULT_PRELUDE_PATHS)


def parse_log_level(name: str) -> int:
    """Map a level name such as 'debug' to its value; unknown names give the default."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        level = logging.getLevelName(_DEFAULT_LOG_LEVEL)
    return level


def get_log_level() -> int:
    return parse_log_level(os.environ.get('SCHEMER_LOG_LEVEL', _DEFAULT_LOG_LEVEL))
