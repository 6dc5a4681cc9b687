from pathlib import Path
from wordscramble.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "absolute", "abstract"])

    rep = validate_wordlist(p)
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # uppercase, too short and non-alpha lines are invalid
    p = tmp_path / "start.txt"
    p.write_text("silkworm\nABSOLUTE\nab\n???\n\nsilkworm\n", encoding="utf-8")

    rep = validate_wordlist(p)
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert rep["blank_lines"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(tmp_path / "missing.txt")
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_bundled_list_passes():
    from wordscramble.datasets import DEFAULT_WORDS_PATH
    rep = validate_wordlist(DEFAULT_WORDS_PATH)
    assert rep["passed"] is True
    assert rep["count"] == rep["unique_count"]


def test_validate_wordlist_rejects_non_ascii_letters(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "café", "naïveté"])

    rep = validate_wordlist(p)
    assert rep["count"] == 1
    assert rep["invalid_lines"] == 2
    assert rep["passed"] is False
