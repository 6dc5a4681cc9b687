"""
Letter-bag check: can a word be spelled from the letters of another word?

Conventions:
  - Both words are compared lowercase and stripped.
  - Each letter of the source word may be used at most once.
  - A word identical to the source word consumes the whole bag and passes.

Algorithm (single pass, fail fast):
  1) Count the source word's letters into a bag.
  2) Walk the candidate left to right, consuming one matching letter per
     character; stop at the first letter the bag no longer holds.
"""

from collections import Counter


def can_spell(word: str, source: str) -> bool:
    """
    Return True if every letter of `word` can be taken from `source`.

    Examples:
      can_spell("silk", "silkworm")      -> True
      can_spell("silkworms", "silkworm") -> False  (second 's' missing)
      can_spell("moor", "silkworm")      -> False  (only one 'o')
    """
    word = word.strip().lower()
    bag = Counter(source.strip().lower())

    for ch in word:
        if bag[ch] <= 0:
            return False
        bag[ch] -= 1  # consume one instance

    return True
