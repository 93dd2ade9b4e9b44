"""
Guess Advisor: rank guesses for all active boards at once.

For every guess in the pool and every active board, the board's candidates
are split by the verdict the guess would produce (numpy bincount over the
session's verdict table). The advisor turns the bucket sizes into a per-board
score (lower is better) and the per-board scores are combined:

  sum  total over boards (default; rewards cutting ambiguity everywhere)
  max  worst board only

Advisors: expected_left (default), entropy, worst_case, verdict_groups and
lookahead (a budgeted search; see advisors.lookahead).

Ordering: combined score ascending (to SCORE_DIGITS decimals), then guesses
that are candidates of the smallest active board ("closing" guesses, which
may win that board outright), then alphabetical. The same state always
yields the same list.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, NamedTuple, Sequence

from .base import BaseAdvisor, REGISTRY, register
from .pool import POLICIES, closing_words, normalize_pool, select_pool

from . import expected_left  # noqa: F401
from . import entropy  # noqa: F401
from . import worst_case  # noqa: F401
from . import verdict_groups  # noqa: F401
from . import lookahead  # noqa: F401
from .lookahead import LookaheadSearch, Plan, plan_board

log = logging.getLogger(__name__)

DEFAULT_ADVISOR = "expected_left"

# Scores equal to this many decimals rank as ties
SCORE_DIGITS = 9

COMBINE: Dict[str, Callable[[Sequence[float]], float]] = {
    "sum": sum,
    "max": max,
}


class Recommendation(NamedTuple):
    word: str
    score: float


def create_advisor(advisor_id: str) -> BaseAdvisor:
    """
    Factory: instantiate a registered advisor by id.
    """
    try:
        cls = REGISTRY[advisor_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown advisor id: {advisor_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_advisor_ids() -> List[str]:
    """
    Return all registered advisor ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


def recommend(
        session,
        pool: Iterable[str] | None = None,
        *,
        advisor: str | BaseAdvisor = DEFAULT_ADVISOR,
        combine: str = "sum",
        policy: str = "all",
        cap: int | None = None,
        limit: int | None = None,
) -> List[Recommendation]:
    """
    Rank guesses for the session's active boards, best first.

    Args:
        session: a multiwordle Session
        pool:    explicit guess pool; overrides `policy` and `cap`
        advisor: advisor id or instance (see get_advisor_ids())
        combine: 'sum' or 'max' across boards
        policy:  pool policy when no pool is given (see advisors.pool)
        cap:     trim the policy pool to this many words
        limit:   return only the first `limit` recommendations

    Returns:
        [Recommendation(word, score)]; empty when no board is active.

    Raises:
        EmptyPool if `pool` holds no usable guess; ValueError on an unknown
        advisor, combine rule or policy.
    """
    adv = advisor if isinstance(advisor, BaseAdvisor) else create_advisor(advisor)
    try:
        combine_fn = COMBINE[combine]
    except KeyError as e:
        raise ValueError(f"Unknown combine rule: {combine}. Available: {sorted(COMBINE)}") from e
    if policy not in POLICIES:
        raise ValueError(f"Unknown pool policy: {policy}. Available: {list(POLICIES)}")

    words = normalize_pool(session, pool) if pool is not None else None

    active = session.active_targets()
    if not active:
        return []
    if words is None:
        words = select_pool(session, active, policy, cap)

    t0 = time.perf_counter()
    table = session.table
    boards = [(session.trackers[i].candidate_indices, session.trackers[i].candidate_count)
              for i in active]
    closing = set(closing_words(session, active))

    adv.prepare(session, words)

    ranked = []
    for g in words:
        score = combine_fn([adv.score_board(table, g, idx, n) for idx, n in boards])
        # Rounded so that equal scores summed in a different order still tie
        ranked.append((round(score, SCORE_DIGITS), g not in closing, g, score))
    ranked.sort()

    out = [Recommendation(g, s) for _, _, g, s in ranked]
    if limit is not None:
        out = out[:limit]

    log.debug(f"recommend[{adv.id}/{combine}]: {len(words)} guess(es) x {len(active)} board(s) "
              f"in {(time.perf_counter() - t0) * 1000.0:.1f} ms")
    return out


__all__ = [
    "BaseAdvisor", "REGISTRY", "register", "Recommendation", "recommend",
    "create_advisor", "get_advisor_ids", "DEFAULT_ADVISOR", "COMBINE", "LookaheadSearch", "Plan",
    "plan_board",
]
