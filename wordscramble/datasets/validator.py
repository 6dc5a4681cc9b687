"""
Root-word list validator.

What this module does:
- Validate a root-word list (e.g. start.txt) before a game uses it.
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from ..engine.validation import MIN_WORD_LENGTH


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one root-word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest acceptable root word
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    blank_lines: int     # empty/whitespace-only lines (skipped by the loader)
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters
      - blank lines are counted separately (the loader skips them)

    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if w == w.lower() and w.isascii() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str | Path, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a root-word list.

    Parameters
    ----------
    path : str | Path
        Root-word file (one word per line).
    min_length : int
        Shortest acceptable root word. A root shorter than the minimum guess
        length can never yield an accepted guess.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema) with
        counts, SHA-256, duplicate/invalid diagnostics, a strict `passed`
        flag (non-empty, no invalid lines) and `issues`.
    """
    p = Path(path)

    if not p.exists():
        rep = WordListReport(
            path=str(path), exists=False, min_length=min_length, count=0,
            unique_count=0, invalid_lines=0, blank_lines=0, sha256="",
            passed=False, issues=[f"word list not found: {path}"],
        )
        return asdict(rep)

    words, invalid, blank = _load_and_check(p, min_length)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if blank:
        issues.append(f"word list has {blank} blank line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    # Duplicates and blanks only skew the pick distribution; they don't fail.
    passed = bool(words) and invalid == 0

    rep = WordListReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        blank_lines=blank,
        sha256=_sha256_file(p),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=120 (uniq=120, invalid=0, sha=abc123...) | min_len=3 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| min_len={report['min_length']} | {status}"
    )
