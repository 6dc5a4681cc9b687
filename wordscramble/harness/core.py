"""
Harness primitives that drive a GameSession.

- play_console:   interactive loop (one line in, one verdict out).
- replay_guesses: feed a scripted list of guesses into the current round and
                  collect one result row per submission.

Both are UI-agnostic: I/O goes through the `read`/`write` callables so the
same loop works in a terminal, a notebook, or a test.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List

from ..oracles.base import OracleUnavailableError
from ..session.game import GameSession

logger = logging.getLogger(__name__)

NEW_ROUND_COMMAND = ":new"
# Row reason when the dictionary could not be asked; the guess was not recorded.
ORACLE_UNAVAILABLE = "ORACLE_UNAVAILABLE"
QUIT_COMMANDS = (":quit", ":q")


def _banner(session: GameSession) -> str:
    return f"Root word: {session.root_word.upper()} | score {session.score}"


def play_console(
        session: GameSession,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
) -> int:
    """
    Run the interactive game until the player quits (":quit") or input ends.

    ":new" starts a new round. Every other line is a guess. Blank lines are
    ignored, matching GameSession.submit_guess.

    Returns:
        the score of the round in progress when the loop ended.
    """
    if not session.round_active:
        session.start_new_round()
    write(_banner(session))

    while True:
        try:
            line = read("> ")
        except EOFError:
            break

        cmd = line.strip().lower()
        if cmd in QUIT_COMMANDS:
            break
        if cmd == NEW_ROUND_COMMAND:
            session.start_new_round()
            write(_banner(session))
            continue

        try:
            outcome = session.submit_guess(line)
        except OracleUnavailableError as e:
            write(f"Dictionary unavailable: {e}")
            continue

        if outcome is None:
            continue
        if outcome.accepted:
            write(f"{outcome.word} (+{len(outcome.word)}) | score {session.score}")
        else:
            write(f"{outcome.title}: {outcome.message(session.root_word)}")

    write(f"Final score: {session.score}")
    return session.score


def replay_guesses(session: GameSession, guesses: Iterable[str]) -> List[Dict]:
    """
    Submit each guess in order to the session's current round.

    Returns:
        one dict per non-empty submission with keys:
            turn (int), root_word (str), raw (str), word (str),
            accepted (bool), reason (str, "" when accepted), score (int)

        A guess the dictionary could not answer for is kept as a rejected row
        with reason ORACLE_UNAVAILABLE and the replay carries on.
    """
    if not session.round_active:
        session.start_new_round()

    rows: List[Dict] = []
    for raw in guesses:
        try:
            outcome = session.submit_guess(raw)
        except OracleUnavailableError as e:
            logger.warning("dictionary unavailable for %r: %s", raw, e)
            word, accepted, reason = raw.lower().strip(), False, ORACLE_UNAVAILABLE
        else:
            if outcome is None:
                continue  # blank line: nothing submitted
            word, accepted = outcome.word, outcome.accepted
            reason = "" if outcome.reason is None else outcome.reason.name
        rows.append({
            "turn": len(rows) + 1,
            "root_word": session.root_word,
            "raw": raw,
            "word": word,
            "accepted": accepted,
            "reason": reason,
            "score": session.score,
        })
    return rows
