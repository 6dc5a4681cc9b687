"""wordscramble: spell new words from the letters of a random root word."""

__version__ = "0.1.0"
