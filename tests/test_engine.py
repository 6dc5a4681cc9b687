import pytest
from wordscramble.engine import can_spell, validate_word, Rejection, ValidationOutcome
from wordscramble.oracles import BaseOracle, WordListOracle

ROOT = "silkworm"
DICTIONARY = ["silk", "worm", "milk", "mils", "silkworm", "work", "wok", "ow", "zzqx"]


class CountingOracle(BaseOracle):
    """Records every lookup so tests can see whether rule 4 ran."""
    id = "counting"

    def __init__(self, words):
        self.inner = WordListOracle(words)
        self.calls = []

    def is_recognized(self, word, language="en"):
        self.calls.append((word, language))
        return self.inner.is_recognized(word, language)


def _validate(word, used=(), oracle=None):
    return validate_word(word, root_word=ROOT, used_words=list(used),
                         oracle=oracle or WordListOracle(DICTIONARY), language="en")


# --- letter bag golden tests ---
@pytest.mark.parametrize("word,source,expected", [
    ("silk", "silkworm", True),
    ("worm", "silkworm", True),
    ("silkworm", "silkworm", True),
    ("mrowklis", "silkworm", True),
    ("silkworms", "silkworm", False),
    ("moor", "silkworm", False),
    ("zzqx", "silkworm", False),
    ("SILK", "silkworm", True),
    ("silk", "SilkWorm", True),
    ("", "silkworm", True),
])
def test_can_spell_golden(word, source, expected):
    assert can_spell(word, source) is expected


# --- pipeline verdicts ---
@pytest.mark.parametrize("word,used,expected", [
    ("silk", [], None),
    ("ow", [], Rejection.TOO_SHORT),
    ("ab", [], Rejection.TOO_SHORT),
    ("silk", ["silk"], Rejection.ALREADY_USED),
    ("silkworms", [], Rejection.NOT_POSSIBLE),
    ("zzqx", [], Rejection.NOT_POSSIBLE),
    ("mowl", [], Rejection.NOT_REAL),
    ("silkworm", [], None),
])
def test_validate_word_verdicts(word, used, expected):
    out = _validate(word, used)
    assert out.word == word
    assert out.reason is expected
    assert out.accepted is (expected is None)


def test_pipeline_short_circuits_before_oracle():
    oracle = CountingOracle(DICTIONARY)
    assert _validate("ow", oracle=oracle).reason is Rejection.TOO_SHORT
    assert _validate("silk", ["silk"], oracle=oracle).reason is Rejection.ALREADY_USED
    assert _validate("zzqx", oracle=oracle).reason is Rejection.NOT_POSSIBLE
    assert oracle.calls == []


def test_too_short_wins_over_already_used():
    # length is checked before originality
    assert _validate("wo", ["wo"]).reason is Rejection.TOO_SHORT


def test_oracle_is_requeried_without_caching():
    oracle = CountingOracle(DICTIONARY)
    for _ in range(2):
        assert _validate("mowl", oracle=oracle).reason is Rejection.NOT_REAL
    assert oracle.calls == [("mowl", "en"), ("mowl", "en")]


def test_outcome_messages():
    assert ValidationOutcome.ok("silk").title == "Word accepted"
    out = ValidationOutcome.rejected("silkworms", Rejection.NOT_POSSIBLE)
    assert out.title == "Word is not possible"
    assert out.message("silkworm") == "You cannot spell that word from 'silkworm'"
    assert Rejection.NOT_REAL.message() == "You can't just make them up, you know"
