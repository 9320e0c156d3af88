from __future__ import annotations
import logging
import os
from pathlib import Path

# Resolve installation dir (schemelet package directory)
_SCHEMELET_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _SCHEMELET_DIR / 'prelude' / 'stdlib.scm'
_DEFAULT_PROMPT = 'λ> '
_DEFAULT_RECURSION_LIMIT = 50_000


def get_prelude_path() -> Path:
    """Bootstrap library file, overridable with SCHEMELET_PRELUDE_PATH."""
    raw = os.environ.get('SCHEMELET_PRELUDE_PATH', '').strip()
    return Path(raw) if raw else _DEFAULT_PRELUDE


def get_prompt() -> str:
    return os.environ.get('SCHEMELET_PROMPT') or _DEFAULT_PROMPT


def get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set.
    """
    loglevel_env = os.getenv('LOGLEVEL', '').upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def get_recursion_limit() -> int:
    """Host recursion limit used while evaluating, from SCHEMELET_RECURSION_LIMIT."""
    raw = os.environ.get('SCHEMELET_RECURSION_LIMIT', '').strip()
    if raw.isdigit() and int(raw) > 0:
        return int(raw)
    return _DEFAULT_RECURSION_LIMIT
