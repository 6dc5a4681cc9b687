"""
Plain-text word-list I/O: one word per line, UTF-8.

Used for root-word lists, dictionary files and replay guess scripts.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Return the raw lines of a word list (line endings dropped, nothing else).
    Callers decide how to normalize; blank lines are kept so guess scripts
    and validators can see them. Raises FileNotFoundError if `p` is missing.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").splitlines()


def write_lines(words: Iterable[str], p: Path | str) -> str:
    """
    Write a word list, creating parent directories as needed.
    The file always ends with a newline. Returns the path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
