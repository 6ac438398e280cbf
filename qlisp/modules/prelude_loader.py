from __future__ import annotations
from pathlib import Path
from typing import Protocol

from qlisp.config import get_prelude_root


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


PRELUDE_FILES = ('core.lsp',)


def prelude_files(root: Path | None = None) -> list[Path]:
    root = root if root is not None else get_prelude_root()
    return [root / name for name in PRELUDE_FILES if (root / name).is_file()]


def load_prelude(itp: _HasEvalPrelude) -> None:
    files = prelude_files()
    if not files:
        raise FileNotFoundError(f"No prelude found under {get_prelude_root()}")
    for path in files:
        itp.eval_prelude(path.read_text(encoding='utf-8'))
