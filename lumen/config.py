from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (lumen package directory)
_LUMEN_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _LUMEN_DIR / 'prelude' / 'prelude.lsp'
_DEFAULT_RECURSION_LIMIT = 20000
_TRUE_WORDS = ('1', 'true', 'yes', 'on')


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_path() -> List[Path]:
    """Directories searched by `load-file` for relative paths."""
    return paths_from_env('LUMEN_LOAD_PATH', [])


def get_prelude_path() -> Path:
    p = paths_from_env('LUMEN_PRELUDE_PATH', [_DEFAULT_PRELUDE])[0]
    # a directory holds prelude.lsp
    return p / 'prelude.lsp' if p.is_dir() else p


def get_allow_redefine() -> bool:
    return os.environ.get('LUMEN_ALLOW_REDEFINE', '').strip().lower() in _TRUE_WORDS


def get_recursion_limit() -> int:
    raw = os.environ.get('LUMEN_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT


def get_log_level() -> str:
    return os.environ.get('LUMEN_LOG_LEVEL', 'WARNING').upper()
