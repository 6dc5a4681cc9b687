from .game import GameSession

__all__ = ["GameSession"]
