from __future__ import annotations
import os
from pathlib import Path

# Resolve installation dir (qlisp package directory)
_QLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _QLISP_DIR / 'prelude'
_FALSEY = {'0', 'false', 'no', 'off'}


def get_prelude_root() -> Path:
    """Directory holding the prelude files, from QLISP_PRELUDE_PATH or the bundled one."""
    raw = os.environ.get('QLISP_PRELUDE_PATH', '').strip()
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    p = Path(raw).expanduser()
    # a path to core.lsp itself names its directory
    return p.parent if p.is_file() else p


def prelude_enabled() -> bool:
    raw = os.environ.get('QLISP_PRELUDE')
    if raw is None:
        return True
    return raw.strip().lower() not in _FALSEY
