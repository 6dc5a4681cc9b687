"""
Game session: one player's current round.

- start_new_round: pick a fresh root word and clear the accepted guesses.
- submit_guess:    normalize a raw submission and run the validation pipeline.
- score:           total letters across accepted guesses (always derived).

The session is the only mutable state in the game. Presentation code reads
it through the properties below and changes it only via the two methods.
One session per player; sessions share nothing.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from ..datasets.word_source import EmptyWordSourceError, random_pick
from ..engine.validation import ValidationOutcome, validate_word
from ..oracles.base import BaseOracle, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


class GameSession:
    """
    Holds the root word and the accepted guesses (most recent first).

    Args:
        words:    root-word pool (from datasets.load_words)
        oracle:   dictionary oracle used for the final validation rule
        language: language tag handed to the oracle
        seed:     RNG seed so root-word picks are reproducible
    """

    def __init__(self, words: Sequence[str], oracle: BaseOracle, *,
                 language: str = DEFAULT_LANGUAGE, seed: int | None = None):
        self.words: List[str] = list(words)
        self.oracle = oracle
        self.language = language
        self.rng = random.Random(seed)

        self._root_word = ""
        self._used_words: List[str] = []

    # ---- read-only views ----

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used_words)

    @property
    def round_active(self) -> bool:
        return bool(self._root_word)

    @property
    def score(self) -> int:
        return sum(len(w) for w in self._used_words)

    # ---- mutations ----

    def start_new_round(self, root_word: str | None = None) -> str:
        """
        Begin a round. Picks from the word pool unless `root_word` is given
        (used by replays to pin the root).

        Raises:
            EmptyWordSourceError: the pool has no usable word.
        """
        word = root_word if root_word is not None else random_pick(self.words, self.rng)
        word = (word or "").strip()
        if not word:
            raise EmptyWordSourceError("Words are not loaded")

        self._root_word = word
        self._used_words = []
        logger.debug("new round: root word %r", word)
        return word

    def submit_guess(self, raw: str) -> Optional[ValidationOutcome]:
        """
        Validate a raw submission and record it if accepted.

        Returns None for empty/whitespace-only input (nothing happens).
        On rejection the session is left exactly as it was.
        """
        if not self.round_active:
            raise RuntimeError("No active round; call start_new_round() first")

        word = raw.lower().strip()
        if not word:
            return None

        outcome = validate_word(
            word,
            root_word=self._root_word,
            used_words=self._used_words,
            oracle=self.oracle,
            language=self.language,
        )

        if outcome.accepted:
            self._used_words.insert(0, word)
            logger.debug("accepted %r (score=%d)", word, self.score)
        else:
            logger.debug("rejected %r: %s", word, outcome.reason.name)
        return outcome
