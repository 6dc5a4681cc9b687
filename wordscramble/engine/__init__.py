from .letters import can_spell
from .validation import (
    MIN_WORD_LENGTH,
    Rejection,
    ValidationOutcome,
    is_long_enough,
    is_original,
    is_possible,
    is_real,
    validate_word,
)

__all__ = [
    "can_spell",
    "MIN_WORD_LENGTH",
    "Rejection",
    "ValidationOutcome",
    "is_long_enough",
    "is_original",
    "is_possible",
    "is_real",
    "validate_word",
]
