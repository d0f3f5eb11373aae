from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_search_path() -> List[Path]:
    """Roots searched by (import "name") for name.rum files."""
    return paths_from_env('RUM_PATH', [Path.cwd() / 'lib'])


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('RUM_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"RUM_RECURSION_LIMIT must be an integer, got {raw!r}") from None
