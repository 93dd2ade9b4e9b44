"""
Lookahead advisor: search for the fewest total attempts within a turn budget.

For one board with n candidates and k attempts left, a guess is scored by the
total number of attempts needed to find every candidate if it is played now
and every later guess is chosen the same way (so total / n is the expected
number of attempts). A guess that leaves some candidate unfound when the
budget runs out "misses"; a plan without misses always beats one with them.

Search, per candidate set:
  - one candidate: guess it, 1 attempt
  - no attempt to spare: miss
  - two candidates: guess either, 1 + 2 attempts
  - otherwise try every guess whose entropy is within MAX_ENTROPY_GAP bits
    of the best one (at most MAX_BRANCHING of them) and recurse into each of
    its verdict groups except all-correct.

Results are cached by (candidate indices, attempts left, pool), so boards and
later rounds that reach the same candidate set reuse the work. In hard mode
each verdict group only searches the guesses that honour that verdict.

The search is exponential in the budget; keep pools small (policy
'candidates' or 'auto') on real banks.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np

from multiwordle.engine.scoring import decode_verdict
from multiwordle.engine.table import VerdictTable
from multiwordle.engine.validation import is_hard_mode_valid
from multiwordle.errors import InconsistentVerdict
from .base import BaseAdvisor, register
from .entropy import EntropyAdvisor
from .pool import normalize_pool, select_pool

log = logging.getLogger(__name__)


class Performance(NamedTuple):
    # compares as (no miss first, then fewest attempts)
    missed: bool
    total_attempts: int


MISSED = Performance(True, 0)


class Plan(NamedTuple):
    guess: str
    total_attempts: int
    missed: bool
    candidates: int

    @property
    def expected_attempts(self) -> float:
        return self.total_attempts / self.candidates


class LookaheadSearch:
    MAX_ENTROPY_GAP = 1.0
    MAX_BRANCHING = 128

    def __init__(self, table: VerdictTable, pool: Iterable[str], hard_mode: bool = False):
        self.table = table
        self.pool: Tuple[str, ...] = tuple(pool)
        self.hard_mode = hard_mode
        self._entropy = EntropyAdvisor()
        self._cache: Dict[tuple, Tuple[str, Performance]] = {}

    def best_guess(self, candidates: Iterable[int], attempts: int,
                   pool: Sequence[str] | None = None) -> Tuple[str, Performance]:
        """Best guess for `candidates` (secret indices) with `attempts` left."""
        cands = tuple(int(i) for i in candidates)
        pool = self.pool if pool is None else tuple(pool)
        words = self.table.bank.secrets

        if attempts < 1:
            return words[cands[0]], MISSED
        if len(cands) == 1:
            return words[cands[0]], Performance(False, 1)
        if attempts == 1:
            return words[cands[0]], MISSED
        if len(cands) == 2:
            return words[cands[0]], Performance(False, 1 + 2)

        key = (cands, attempts, pool if self.hard_mode else None)
        hit = self._cache.get(key)
        if hit is not None:
            return hit

        best = (words[cands[0]], MISSED)
        for g in self._shortlist(cands, pool):
            perf = self.evaluate(g, cands, attempts, pool)
            if perf < best[1]:
                best = (g, perf)

        self._cache[key] = best
        return best

    def evaluate(self, guess: str, candidates: Iterable[int], attempts: int,
                 pool: Sequence[str] | None = None) -> Performance:
        """
        Performance of playing `guess` now on `candidates`, with `attempts`
        left counting this one. Every candidate spends this attempt; the
        all-correct group is then done and the other groups are searched with
        one attempt less.
        """
        cands = tuple(int(i) for i in candidates)
        if attempts < 1:
            return MISSED
        pool = self.pool if pool is None else tuple(pool)

        codes = self.table.row(guess)[np.array(cands, dtype=np.int64)].tolist()
        groups: Dict[int, List[int]] = {}
        for c, code in zip(cands, codes):
            groups.setdefault(code, []).append(c)

        solved = self.table.num_codes - 1
        total = len(cands)
        for code in sorted(groups, reverse=True):
            if code == solved:
                continue
            sub_pool = pool
            if self.hard_mode:
                verdict = decode_verdict(code, self.table.N)
                sub_pool = tuple(w for w in pool if is_hard_mode_valid(guess, verdict, w))
            _, perf = self.best_guess(groups[code], attempts - 1, sub_pool)
            if perf.missed:
                return MISSED
            total += perf.total_attempts
        return Performance(False, total)

    def _shortlist(self, cands: Tuple[int, ...], pool: Sequence[str]) -> List[str]:
        """Candidates first, then the pool, keeping only high-entropy guesses."""
        words = self.table.bank.secrets
        cand_words = [words[i] for i in cands]
        seen = set(cand_words)
        guesses = cand_words + [w for w in pool if w not in seen]

        idx = np.array(cands, dtype=np.int64)
        n = len(cands)
        gains = [
            round(-self._entropy.score_target(self.table.partition_sizes(g, idx), n), 9)
            for g in guesses
        ]
        floor = max(gains) - self.MAX_ENTROPY_GAP
        if len(guesses) > self.MAX_BRANCHING:
            floor = max(floor, sorted(gains, reverse=True)[self.MAX_BRANCHING - 1])
        return [g for g, h in zip(guesses, gains) if h >= floor]

    def cached_plans(self) -> int:
        return len(self._cache)


@register
class LookaheadAdvisor(BaseAdvisor):
    """
    Per-board score: expected attempts to finish the board if the guess is
    played now (inf if the turn budget cannot cover every candidate).
    Boards are planned independently; the session's turns_left() is the
    budget.
    """

    id = "lookahead"
    name = "Attempt-Budgeted Lookahead"
    version = "1.0.0"

    def __init__(self):
        self.search: LookaheadSearch | None = None
        self.attempts = 0

    def prepare(self, session, pool: Sequence[str]) -> None:
        s = self.search
        # Keep the cache while the table, rules and pool stay the same
        if s is None or s.table is not session.table or s.hard_mode != session.hard_mode \
                or s.pool != tuple(pool):
            self.search = LookaheadSearch(session.table, pool, session.hard_mode)
        self.attempts = session.turns_left()

    def score_board(self, table, guess: str, candidates: np.ndarray, n: int) -> float:
        perf = self.search.evaluate(guess, candidates, self.attempts)
        if perf.missed:
            return math.inf
        return perf.total_attempts / n


def plan_board(session, index: int, pool: Iterable[str] | None = None) -> Plan:
    """
    Best guess for board `index` on its own, with the total and expected
    attempts to finish it within session.turns_left().

    Raises:
      InconsistentVerdict if the board has no candidate left; EmptyPool if
      `pool` holds no usable guess.
    """
    tracker = session.trackers[index]
    if tracker.is_contradicted():
        raise InconsistentVerdict([index])
    words = normalize_pool(session, pool) if pool is not None else \
        select_pool(session, [index], "all")

    search = LookaheadSearch(session.table, words, session.hard_mode)
    guess, perf = search.best_guess(tracker.candidate_indices, session.turns_left())
    log.debug(f"plan board {index}: {guess} total={perf.total_attempts} missed={perf.missed} "
              f"({search.cached_plans()} cached)")
    return Plan(guess, perf.total_attempts, perf.missed, tracker.candidate_count)
