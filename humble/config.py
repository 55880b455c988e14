from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (humble package directory)
_HUMBLE_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_PATHS = [_HUMBLE_DIR / 'prelude']
_DEFAULT_PROMPT = '» '
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    return paths_from_env('HUMBLE_PRELUDE_PATH', _DEFAULT_PRELUDE_PATHS)


def prelude_files(paths: Iterable[Path]) -> List[Path]:
    """Expand directories into their *.scm files (sorted); keep plain files as given."""
    files: List[Path] = []
    for p in paths:
        if p.is_dir():
            files.extend(sorted(p.glob('*.scm')))
        else:
            files.append(p)
    return files


def get_prompt() -> str:
    return os.environ.get('HUMBLE_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('HUMBLE_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName answers "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
