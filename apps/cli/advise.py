# apps/cli/advise.py
"""
Suggest the next guess for a game in progress.

Each --round is a guess followed by one tile string per board, in board order:

    python -m apps.cli.advise --words words.txt --boards 2 \
        --round tears "####-" "#^---"

Boards already decided take "?" (or "?????") in later rounds. Tiles use
'#' correct, '^' present, '-' absent.
"""

from __future__ import annotations

import argparse
import logging

from multiwordle.advisors import COMBINE, DEFAULT_ADVISOR, get_advisor_ids, plan_board
from multiwordle.advisors.pool import POLICIES
from multiwordle.datasets import read_words
from multiwordle.errors import MultiWordleError
from multiwordle.session import load_bank, render_board, render_state


def main():
    ap = argparse.ArgumentParser(description="multiwordle — suggest the next guess")
    ap.add_argument("--words", required=True, help="word list of possible secrets")
    ap.add_argument("--guesses", help="optional list of extra guess-only words")
    ap.add_argument("--boards", type=int, default=4, help="simultaneous boards")
    ap.add_argument("--round", nargs="+", action="append", default=[],
                    metavar="GUESS_OR_TILES", help="a guess and its tiles on every board")
    ap.add_argument("--advisor", default=DEFAULT_ADVISOR,
                    help=f"advisor id (one of: {', '.join(get_advisor_ids())})")
    ap.add_argument("--combine", choices=sorted(COMBINE), default="sum")
    ap.add_argument("--policy", choices=POLICIES, default="auto", help="guess pool policy")
    ap.add_argument("--cap", type=int, help="trim the guess pool to this many words")
    ap.add_argument("--hard", action="store_true", help="hard mode")
    ap.add_argument("--max-turns", type=int, help="turn budget (default: boards + 5)")
    ap.add_argument("--plan", action="store_true",
                    help="also show the best single-board plan for every open board")
    ap.add_argument("--top", type=int, default=10, help="how many suggestions to show")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        session = load_bank(read_words(args.words), args.boards,
                            guesses=read_words(args.guesses) if args.guesses else (),
                            hard_mode=args.hard, max_turns=args.max_turns)
        for guess, *tiles in args.round:
            verdicts = [None if set(t) == {"?"} else t for t in tiles]
            session.apply_verdicts(guess, verdicts)

        for i in range(session.num_targets):
            print(f"-- board {i}")
            for line in render_board(session, i):
                print(line)
        print(render_state(session))

        pending = session.pending_solutions()
        if pending:
            print(f"Solved, still to play: {', '.join(pending)}")

        if args.plan:
            for i in session.active_targets():
                p = plan_board(session, i)
                outcome = "misses some words" if p.missed else \
                    f"{p.expected_attempts:.3f} attempts expected"
                print(f"board {i}: play {p.guess}, {outcome} ({session.turns_left()} turns left)")

        recs = session.recommend(advisor=args.advisor, combine=args.combine,
                                 policy=args.policy, cap=args.cap, limit=args.top)
    except MultiWordleError as e:
        raise SystemExit(f"error: {e}")

    if not recs:
        print("No open boards left.")
        return
    print(f"Suggestions ({args.advisor}, {args.combine}):")
    for rank, (word, score) in enumerate(recs, 1):
        print(f"{rank:>3}. {word}  {score:.4f}")


if __name__ == "__main__":
    main()
