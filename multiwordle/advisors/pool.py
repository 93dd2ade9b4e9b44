"""
Guess pool selection.

Scoring is O(|pool| x sum of candidate counts), so on a large bank the caller
usually narrows the pool. Policies:

  all           every guessable word (secrets, then guess-only words)
  candidates    union of the active boards' candidate sets
  intersection  words still possible on every active board; falls back to
                the union when no word is
  auto          candidates while the active boards hold at most
                CANDIDATE_ONLY_LIMIT candidates in total, else all capped at
                POOL_CAP

`cap` (any policy): when the pool is bigger, rank it by distinct-letter
coverage of the active candidates and keep the top `cap`, plus every word of
the smallest active candidate set so closing guesses are never lost.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from multiwordle.engine.bank import normalize
from multiwordle.engine.validation import hard_mode_violation
from multiwordle.errors import EmptyPool

POLICIES = ("all", "candidates", "intersection", "auto")

# If the active boards hold at most this many candidates, 'auto' searches only
# among candidates
CANDIDATE_ONLY_LIMIT = 200

# Pool size 'auto' trims the full word list to
POOL_CAP = 400


def _distinct_score(w: str, counts: Counter) -> int:
    """Sum of per-letter counts with duplicates in the word counted once."""
    return sum(counts[ch] for ch in set(w))


def closing_words(session, active: Sequence[int]) -> List[str]:
    """Candidates of the smallest active board(s), in bank order."""
    trackers = [session.trackers[i] for i in active]
    smallest = min(t.candidate_count for t in trackers)
    seen = set()
    out: List[str] = []
    for t in trackers:
        if t.candidate_count != smallest:
            continue
        for w in t.candidates():
            if w not in seen:
                seen.add(w)
                out.append(w)
    return out


def _union(session, active: Sequence[int]) -> List[str]:
    keep = set()
    for i in active:
        keep.update(session.trackers[i].candidates())
    return [w for w in session.bank.secrets if w in keep]


def _intersection(session, active: Sequence[int]) -> List[str]:
    common = set(session.trackers[active[0]].candidates())
    for i in active[1:]:
        common &= set(session.trackers[i].candidates())
    if not common:
        return _union(session, active)
    return [w for w in session.bank.secrets if w in common]


def cap_pool(session, active: Sequence[int], pool: List[str], cap: int) -> List[str]:
    """
    Keep the `cap` words covering the most letters of the active candidates,
    plus the closing words, in a stable order.
    """
    if len(pool) <= cap:
        return pool

    # Histogram from CURRENT candidates (reflects constraints so far)
    counts: Counter = Counter()
    for i in active:
        for w in session.trackers[i].candidates():
            counts.update(set(w))

    ranked = sorted(pool, key=lambda w: _distinct_score(w, counts), reverse=True)
    top = ranked[:cap]

    # Stable-union: closing words first, then the top-K without duplicates
    allowed = set(pool)
    closing = [w for w in closing_words(session, active) if w in allowed]
    seen = set()
    out: List[str] = []
    for w in closing + top:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def select_pool(session, active: Sequence[int], policy: str = "all",
                cap: int | None = None) -> List[str]:
    """Build the guess pool for the active boards under `policy`."""
    if policy == "all":
        pool = list(session.bank.guesses)
    elif policy == "candidates":
        pool = _union(session, active)
    elif policy == "intersection":
        pool = _intersection(session, active)
    elif policy == "auto":
        total = sum(session.trackers[i].candidate_count for i in active)
        if total <= CANDIDATE_ONLY_LIMIT:
            pool = _union(session, active)
        else:
            pool = list(session.bank.guesses)
            cap = POOL_CAP if cap is None else cap
    else:
        raise ValueError(f"Unknown pool policy: {policy}. Available: {list(POLICIES)}")

    pool = _hard_mode_filter(session, pool)
    if cap is not None:
        pool = cap_pool(session, active, pool, cap)
    return pool


def normalize_pool(session, words: Iterable[str]) -> List[str]:
    """
    Clean a caller-supplied pool: normalise, dedupe, keep guessable words
    (and, in hard mode, only hint-respecting ones).

    Raises:
      EmptyPool if no word survives.
    """
    if isinstance(words, str):
        words = [words]
    bank = session.bank
    seen = set()
    pool: List[str] = []
    for raw in words:
        w = normalize(raw)
        if w in seen or not bank.is_guessable(w):
            continue
        seen.add(w)
        pool.append(w)

    pool = _hard_mode_filter(session, pool)
    if not pool:
        raise EmptyPool("the pool override contains no usable guess")
    return pool


def _hard_mode_filter(session, pool: List[str]) -> List[str]:
    if not session.hard_mode:
        return pool
    hints = session.revealed_hints()
    return [w for w in pool if hard_mode_violation(w, hints) is None]
