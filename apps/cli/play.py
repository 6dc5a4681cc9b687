# apps/cli/play.py
"""
CLI entry point for playing Word Scramble in a terminal.

This script:
  1) Validates the root-word list (prints counts + SHA).
  2) Loads the list and builds the requested dictionary oracle.
  3) Starts a round and plays interactively until ":quit" or EOF.
     Type ":new" for a fresh root word.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordscramble.datasets import (
    DEFAULT_WORDS_PATH,
    WordSourceError,
    load_words,
    pretty_summary,
    validate_wordlist,
)
from wordscramble.harness import play_console
from wordscramble.oracles import DEFAULT_LANGUAGE, build_oracle, get_oracle_ids
from wordscramble.oracles.dictionary_api import DEFAULT_TIMEOUT
from wordscramble.session import GameSession


def main():
    """
    Parse CLI args, validate and load the word list, then play.
    """
    ap = argparse.ArgumentParser(description="wordscramble: spell words from a root word")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH),
                    help="root-word list (one word per line)")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word picks")
    ap.add_argument("--oracle", default="dictionaryapi", choices=get_oracle_ids(),
                    help="dictionary oracle id")
    ap.add_argument("--dictionary",
                    help="dictionary file for --oracle wordlist (e.g. /usr/share/dict/words)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                    help="seconds to wait for a remote dictionary lookup")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Load it; a missing or empty list means no round can ever start
    try:
        words = load_words(args.words)
    except WordSourceError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    # 3) Build the oracle and play
    try:
        oracle = build_oracle(args.oracle, dictionary=args.dictionary,
                              language=args.language, timeout=args.timeout)
    except (ValueError, FileNotFoundError) as e:
        ap.error(f"cannot build oracle {args.oracle!r}: {e}")
    session = GameSession(words, oracle, language=args.language, seed=args.seed)
    play_console(session)


if __name__ == "__main__":
    main()
