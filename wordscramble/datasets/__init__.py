from .io import read_lines, write_lines
from .validator import validate_wordlist, pretty_summary
from .word_source import (
    DEFAULT_WORDS_PATH,
    EmptyWordSourceError,
    WordSourceError,
    load_words,
    random_pick,
)

__all__ = [
    "read_lines",
    "write_lines",
    "validate_wordlist",
    "pretty_summary",
    "DEFAULT_WORDS_PATH",
    "EmptyWordSourceError",
    "WordSourceError",
    "load_words",
    "random_pick",
]
