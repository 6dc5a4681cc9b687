"""
Build a clean root-word list from a raw word file.

Features:
- Lowercases and strips every line; drops blanks.
- Keeps only alphabetic words within --min-len/--max-len (default 8..8,
  the shape of the bundled start.txt).
- Removes duplicates, preserving original order.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Writes to --out (default: the bundled start.txt).

Usage:
    python -m script.build_wordlist --in /usr/share/dict/words --sort
"""

import argparse
from pathlib import Path

from wordscramble.datasets import DEFAULT_WORDS_PATH, pretty_summary, read_lines, \
    validate_wordlist, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean_words(lines: list[str], min_len: int, max_len: int) -> list[str]:
    words = [s.strip().lower() for s in lines if s.strip()]
    words = [w for w in words if w.isalpha() and w.isascii() and min_len <= len(w) <= max_len]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Build a root-word list from a raw word file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", default=str(DEFAULT_WORDS_PATH), help="output file")
    ap.add_argument("--min-len", type=int, default=8, help="shortest root word kept")
    ap.add_argument("--max-len", type=int, default=8, help="longest root word kept")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    lines = read_lines(args.inp)
    out = clean_words(lines, args.min_len, args.max_len)
    if args.sort:
        out = sorted(out)

    write_lines(out, args.out)
    print(f"Input: {args.inp} ({len(lines)} lines) -> Output: {args.out} ({len(out)} words)")
    print(pretty_summary(validate_wordlist(Path(args.out))))


if __name__ == "__main__":
    main()
