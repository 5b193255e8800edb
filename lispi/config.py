from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional


# Defaults
_DEFAULT_IMPORT_ROOTS: list[Path] = []
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_import_roots() -> List[Path]:
    """Directories searched by `import` for relative paths not found in the cwd."""
    return paths_from_env('LISPI_PATH', _DEFAULT_IMPORT_ROOTS)


def get_recursion_limit() -> Optional[int]:
    """Host recursion limit for the driver; 0 or less keeps the interpreter default."""
    raw = os.environ.get('LISPI_RECURSION_LIMIT', '').strip()
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"LISPI_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    return limit if limit > 0 else None


def get_log_level() -> str:
    return os.environ.get('LISPI_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
