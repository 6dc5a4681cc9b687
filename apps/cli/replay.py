# apps/cli/replay.py
"""
Replay scripted guesses against Word Scramble rounds.

Each --guesses file (one guess per line) is played as its own round, on the
root word given by --root or picked from --words. Writes:
  - CSV:  one row per submitted guess (source file, verdict, running score)
  - JSON: manifest with config, word-list report, git commit, totals
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from wordscramble.datasets import (
    DEFAULT_WORDS_PATH,
    WordSourceError,
    load_words,
    pretty_summary,
    read_lines,
    validate_wordlist,
)
from wordscramble.harness import replay_guesses
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.oracles import DEFAULT_LANGUAGE, build_oracle, get_oracle_ids
from wordscramble.oracles.dictionary_api import DEFAULT_TIMEOUT
from wordscramble.session import GameSession


def main():
    ap = argparse.ArgumentParser(description="wordscramble: replay guess scripts")
    ap.add_argument("--guesses", nargs="+", required=True,
                    help="one or more guess files, each replayed as a fresh round")
    ap.add_argument("--root", help="pin the root word instead of picking one")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH),
                    help="root-word list (used when --root is not given)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for root-word picks")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--oracle", default="dictionaryapi", choices=get_oracle_ids(),
                    help="dictionary oracle id")
    ap.add_argument("--dictionary", help="dictionary file for --oracle wordlist")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                    help="seconds to wait for a remote dictionary lookup")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    try:
        words = load_words(args.words)
    except WordSourceError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        oracle = build_oracle(args.oracle, dictionary=args.dictionary,
                              language=args.language, timeout=args.timeout)
    except (ValueError, FileNotFoundError) as e:
        ap.error(f"cannot build oracle {args.oracle!r}: {e}")
    session = GameSession(words, oracle, language=args.language, seed=args.seed)

    rows: List[Dict] = []
    totals: Dict[str, int] = {}
    for path in tqdm(args.guesses, ncols=80, desc="Replaying", unit="round",
                     disable=args.no_progress):
        session.start_new_round(args.root)
        round_rows = replay_guesses(session, read_lines(path))
        for r in round_rows:
            r["source"] = Path(path).name
        rows.extend(round_rows)
        totals[path] = session.score

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_rounds": len(args.guesses),
        "num_guesses": len(rows),
        "scores": totals,
        "total_score": sum(totals.values()),
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
