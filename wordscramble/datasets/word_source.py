"""
Root-word source.

- load_words:  read the root-word list once (bundled start.txt by default).
- random_pick: choose one root word uniformly at random.

A missing or empty list is a configuration problem, not a game event: no
round can start without a root word. Both cases raise WordSourceError so the
calling app can stop (or ask for another file) before any round begins.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

from .io import read_lines

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).resolve().parent / "data" / "start.txt"


class WordSourceError(RuntimeError):
    """The root-word list could not be loaded."""


class EmptyWordSourceError(WordSourceError):
    """The root-word list holds no usable words."""


def load_words(path: Path | str | None = None) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.

    Args:
      path: word file; defaults to the bundled start.txt

    Raises:
      WordSourceError      if the file is missing
      EmptyWordSourceError if it contains no non-blank lines
    """
    p = Path(path) if path is not None else DEFAULT_WORDS_PATH
    try:
        lines = read_lines(p)
    except FileNotFoundError as e:
        raise WordSourceError(f"Could not load word list: {p}") from e

    words = [w.strip().lower() for w in lines if w.strip()]
    if not words:
        raise EmptyWordSourceError(f"Word list is empty: {p}")

    logger.debug("loaded %d root words from %s", len(words), p)
    return words


def random_pick(words: Sequence[str], rng: Optional[random.Random] = None) -> Optional[str]:
    """
    Pick one word uniformly at random. Returns None only if `words` is empty.
    """
    if not words:
        return None
    rng = rng or random
    return words[rng.randrange(len(words))]
