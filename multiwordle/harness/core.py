"""
Simulation harness.

- play_game:  play one multi-board game (known secrets) with the advisor.
- run_batch:  play many games over one bank, sharing its verdict table.
- Turn budget defaults to boards + 5 (session.core.default_max_turns).

Guess policy per turn: if some board is solved but its word hasn't been
played, play it (that board can only be won by guessing it); otherwise play
the advisor's top recommendation.

These functions are UI-agnostic so they can be reused by a CLI, a notebook or
tests.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, Iterable, List, Sequence, Tuple

from multiwordle.advisors import DEFAULT_ADVISOR, recommend
from multiwordle.engine import VerdictTable, WordBank
from multiwordle.engine.validation import hard_mode_violation
from multiwordle.session import Session
from multiwordle.session.io import board_row

log = logging.getLogger(__name__)


def play_game(
        bank: WordBank,
        secrets: Sequence[str],
        *,
        advisor: str = DEFAULT_ADVISOR,
        combine: str = "sum",
        policy: str = "all",
        cap: int | None = None,
        max_turns: int | None = None,
        hard_mode: bool = False,
        table: VerdictTable | None = None,
) -> Dict:
    """
    Play until every board is won or the turn budget runs out.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float, advisor time only),
            rounds (list[(guess, [tiles per board])]), secrets (list[str])
    """
    session = Session(bank, len(secrets), secrets=secrets, hard_mode=hard_mode, table=table,
                      max_turns=max_turns)

    rounds: List[Tuple[str, List[str]]] = []
    total_ms = 0.0

    for turn in range(1, session.max_turns + 1):
        t0 = time.perf_counter()
        pending = session.pending_solutions()
        if hard_mode:
            hints = session.revealed_hints()
            pending = [w for w in pending if hard_mode_violation(w, hints) is None]
        if pending:
            guess = pending[0]
        else:
            recs = recommend(session, advisor=advisor, combine=combine, policy=policy,
                             cap=cap, limit=1)
            if not recs:
                # Nothing active and nothing pending: every board is decided.
                break
            guess = recs[0].word
        total_ms += (time.perf_counter() - t0) * 1000.0

        session.submit_guess(guess)
        r = len(session.guesses) - 1
        tiles = [board_row(session, i, r) for i in range(session.num_targets)]
        rounds.append((guess, tiles))
        log.debug(f"turn {turn}: {guess} {' '.join(tiles)}")

        if session.is_finished():
            break

    success = all(session.is_won(i) for i in range(session.num_targets))
    return {
        "success": success,
        "guesses": len(rounds),
        "time_ms": total_ms,
        "rounds": rounds,
        "secrets": list(session.secrets),
    }


def sample_secrets(bank: WordBank, num_targets: int, games: int,
                   seed: int | None = None) -> List[List[str]]:
    """
    Draw `games` sets of `num_targets` distinct secrets, reproducible by seed.
    """
    if num_targets > len(bank):
        raise ValueError(f"cannot draw {num_targets} distinct secrets from {len(bank)} words")
    rng = random.Random(seed)
    return [rng.sample(bank.secrets, num_targets) for _ in range(games)]


def run_batch(
        bank: WordBank,
        cases: Iterable[Sequence[str]],
        **kwargs,
) -> List[Dict]:
    """
    Play every case (one list of secrets per game) back-to-back. Keyword
    arguments are passed to play_game. One verdict table is shared by all
    games.
    """
    table = kwargs.pop("table", None) or VerdictTable(bank)
    return [play_game(bank, secrets, table=table, **kwargs) for secrets in cases]
