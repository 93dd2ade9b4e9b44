# apps/cli/run.py
"""
Simulate multi-board games and record the results.

    python -m apps.cli.run --words words.txt --boards 4 --games 500 --seed 7

Secrets for every game are drawn from the bank with the given seed, so the
same arguments replay the same games. Each run writes a CSV (one row per game,
see multiwordle.harness.io) and a JSON manifest next to it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from multiwordle.advisors import COMBINE, DEFAULT_ADVISOR, get_advisor_ids
from multiwordle.advisors.pool import POLICIES
from multiwordle.datasets import read_words
from multiwordle.engine import VerdictTable, WordBank
from multiwordle.errors import MultiWordleError
from multiwordle.harness import default_max_turns, play_game, sample_secrets
from multiwordle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

log = logging.getLogger("multiwordle.run")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="multiwordle — simulate multi-board games")
    ap.add_argument("--words", required=True, help="word list of possible secrets")
    ap.add_argument("--guesses", help="optional list of extra guess-only words")
    ap.add_argument("--boards", type=int, default=4, help="simultaneous boards per game")
    ap.add_argument("--games", type=int, default=100, help="number of games to play")
    ap.add_argument("--advisor", default=DEFAULT_ADVISOR,
                    help=f"advisor id (one of: {', '.join(get_advisor_ids())})")
    ap.add_argument("--combine", choices=sorted(COMBINE), default="sum",
                    help="how per-board scores are combined")
    ap.add_argument("--policy", choices=POLICIES, default="auto", help="guess pool policy")
    ap.add_argument("--cap", type=int, help="trim the guess pool to this many words")
    ap.add_argument("--max-turns", type=int, help="turn budget (default: boards + 5)")
    ap.add_argument("--hard", action="store_true", help="hard mode")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for drawing secrets")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "on", "off"], default="auto",
                    help="progress bar (auto: only when stderr is a terminal)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        bank = WordBank.load(read_words(args.words),
                             read_words(args.guesses) if args.guesses else ())
        cases = sample_secrets(bank, args.boards, args.games, seed=args.seed)
    except (MultiWordleError, ValueError, FileNotFoundError) as e:
        raise SystemExit(f"error: {e}")
    log.info(f"{bank!r} from {args.words}")

    table = VerdictTable(bank)
    max_turns = args.max_turns or default_max_turns(args.boards)
    show = args.progress == "on" or (args.progress == "auto" and sys.stderr.isatty())

    results = []
    for secrets in tqdm(cases, desc="Playing", unit="game", ncols=80, disable=not show):
        r = play_game(
            bank, secrets,
            advisor=args.advisor, combine=args.combine, policy=args.policy, cap=args.cap,
            max_turns=max_turns, hard_mode=args.hard, table=table,
        )
        r["advisor_id"] = args.advisor
        results.append(r)

    wins = sum(1 for r in results if r["success"])
    mean_guesses = sum(r["guesses"] for r in results if r["success"]) / max(1, wins)
    print(f"won {wins}/{len(results)} | mean guesses (wins) {mean_guesses:.3f}")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"),
                         max_turns=max_turns, N=bank.word_length)
    manifest_path = write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "bank": {
            "N": bank.word_length,
            "secrets": len(bank),
            "guessable": len(bank.guesses),
        },
        "games": len(results),
        "wins": wins,
        "verdict_rows_cached": table.cached_rows(),
    }, str(outdir / f"run_{run_id}_manifest.json"))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
