from __future__ import annotations
from typing import Dict, Type

DEFAULT_LANGUAGE = "en"

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["BaseOracle"]] = {}


def register(cls: Type["BaseOracle"]) -> Type["BaseOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


class OracleUnavailableError(RuntimeError):
    """The dictionary could not be asked (transport failure, bad response)."""


# ---- Base class that oracles inherit ----
class BaseOracle:
    id = "base"
    name = "Base"

    def is_recognized(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")
