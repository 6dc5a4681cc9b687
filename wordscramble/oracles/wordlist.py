"""
Word-list oracle.

Strategy:
  - Load one or more dictionary files (or take an in-memory iterable) per
    language tag and answer by set membership on the normalized word.
  - A language with no loaded list recognizes nothing.

Notes:
  - The set is built once in the constructor so lookups are O(1).
  - Suits offline play and tests; pair it with /usr/share/dict/words or any
    one-word-per-line file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Set

from ..datasets.io import read_lines
from .base import BaseOracle, DEFAULT_LANGUAGE, register

logger = logging.getLogger(__name__)


@register
class WordListOracle(BaseOracle):
    id = "wordlist"
    name = "Word List"

    def __init__(self, words: Iterable[str] | None = None, *,
                 path: Path | str | None = None,
                 language: str = DEFAULT_LANGUAGE):
        self._by_language: Dict[str, Set[str]] = {}
        if words is not None:
            self.add_words(words, language=language)
        if path is not None:
            self.add_file(path, language=language)

    def add_words(self, words: Iterable[str], *, language: str = DEFAULT_LANGUAGE) -> None:
        entries = self._by_language.setdefault(language, set())
        entries.update(w.strip().lower() for w in words if w.strip())

    def add_file(self, path: Path | str, *, language: str = DEFAULT_LANGUAGE) -> None:
        """Load a one-word-per-line dictionary file. Raises FileNotFoundError."""
        lines = read_lines(path)
        self.add_words(lines, language=language)
        logger.debug("loaded %d dictionary lines for %r from %s", len(lines), language, path)

    def is_recognized(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        return word.strip().lower() in self._by_language.get(language, ())

    def __len__(self) -> int:
        return sum(len(s) for s in self._by_language.values())
