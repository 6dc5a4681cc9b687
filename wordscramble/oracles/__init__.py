from __future__ import annotations
from typing import List
from .base import BaseOracle, DEFAULT_LANGUAGE, OracleUnavailableError, REGISTRY, register

from . import wordlist  # noqa: F401
from . import dictionary_api  # noqa: F401

from .wordlist import WordListOracle
from .dictionary_api import DictionaryApiOracle


def create_oracle(oracle_id: str, **kwargs) -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id, passing kwargs through.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def build_oracle(oracle_id: str, *, dictionary: str | None = None,
                 language: str = DEFAULT_LANGUAGE, timeout: float | None = None) -> BaseOracle:
    """
    Build an oracle from CLI-style options.

    - "wordlist" needs `dictionary` (a one-word-per-line file) loaded under `language`.
    - "dictionaryapi" takes the optional `timeout` in seconds.
    """
    if oracle_id == "wordlist":
        if not dictionary:
            raise ValueError("the wordlist oracle needs a dictionary file")
        return create_oracle("wordlist", path=dictionary, language=language)
    if oracle_id == "dictionaryapi" and timeout is not None:
        return create_oracle("dictionaryapi", timeout=timeout)
    return create_oracle(oracle_id)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseOracle",
    "DEFAULT_LANGUAGE",
    "OracleUnavailableError",
    "WordListOracle",
    "DictionaryApiOracle",
    "build_oracle",
    "create_oracle",
    "get_oracle_ids",
    "register",
]
