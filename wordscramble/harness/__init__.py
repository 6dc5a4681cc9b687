from .core import play_console, replay_guesses
from .io import write_csv, write_manifest

__all__ = ["play_console", "replay_guesses", "write_csv", "write_manifest"]
