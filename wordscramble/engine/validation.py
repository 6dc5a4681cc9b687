"""
Guess validation pipeline.

This module answers the question: "Should this guess be accepted right now?"
A normalized guess is accepted iff, checked in this order:
  1) it has at least MIN_WORD_LENGTH characters          -> else TOO_SHORT
  2) it has not been accepted already this round         -> else ALREADY_USED
  3) it can be spelled from the root word's letters      -> else NOT_POSSIBLE
  4) the dictionary oracle recognizes it                 -> else NOT_REAL

The pipeline stops at the first failing rule, so a made-up word that also
uses letters the root doesn't have is reported as NOT_POSSIBLE and the
oracle is never asked. Only rule 4 touches anything outside this process.

Rejections are ordinary return values, not exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .letters import can_spell

# Words must be strictly longer than two characters.
MIN_WORD_LENGTH = 3


class Rejection(Enum):
    """Why a guess was turned down, with the text shown to the player."""

    TOO_SHORT = ("Word is too short", "Try a longer word")
    ALREADY_USED = ("Word is already used", "Be more original!")
    NOT_POSSIBLE = ("Word is not possible", "You cannot spell that word from '{root}'")
    NOT_REAL = ("Word not recognized", "You can't just make them up, you know")

    @property
    def title(self) -> str:
        return self.value[0]

    def message(self, root_word: str = "") -> str:
        return self.value[1].format(root=root_word)


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of running one normalized guess through the pipeline."""
    word: str                              # the normalized guess
    reason: Optional[Rejection] = None     # None means accepted

    @classmethod
    def ok(cls, word: str) -> "ValidationOutcome":
        return cls(word=word)

    @classmethod
    def rejected(cls, word: str, reason: Rejection) -> "ValidationOutcome":
        return cls(word=word, reason=reason)

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def title(self) -> str:
        return "Word accepted" if self.reason is None else self.reason.title

    def message(self, root_word: str = "") -> str:
        if self.reason is None:
            return f"+{len(self.word)} points"
        return self.reason.message(root_word)


# -----------------------------
# Rules (each one is a pure predicate)
# -----------------------------

def is_long_enough(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    return can_spell(word, root_word)


def is_real(word: str, oracle, language: str) -> bool:
    # No caching: a word rejected earlier is looked up again.
    return bool(oracle.is_recognized(word, language))


# -----------------------------
# Public API
# -----------------------------

def validate_word(
        word: str,
        *,
        root_word: str,
        used_words: Iterable[str],
        oracle,
        language: str,
) -> ValidationOutcome:
    """
    Run `word` through the four rules, short-circuiting at the first failure.

    Args:
      word       : normalized guess (lowercase, trimmed, non-empty)
      root_word  : the current round's root word
      used_words : guesses already accepted this round
      oracle     : object with is_recognized(word, language) -> bool
      language   : language tag passed through to the oracle (e.g. "en")

    Returns:
      ValidationOutcome; `accepted` is True only if all four rules passed.
    """
    if not is_long_enough(word):
        return ValidationOutcome.rejected(word, Rejection.TOO_SHORT)

    if not is_original(word, used_words):
        return ValidationOutcome.rejected(word, Rejection.ALREADY_USED)

    if not is_possible(word, root_word):
        return ValidationOutcome.rejected(word, Rejection.NOT_POSSIBLE)

    if not is_real(word, oracle, language):
        return ValidationOutcome.rejected(word, Rejection.NOT_REAL)

    return ValidationOutcome.ok(word)
