"""
Candidate filtering given a verdict history (pure-Python path).

Given:
  - a pool of words (normally the bank's secrets)
  - a history of (guess, verdict) pairs for ONE target

Return:
  - the words that would have produced exactly those verdicts.

The tracker filters incrementally through the numpy verdict table; this
function is the slow, obviously-correct version it can always be replayed
against.
"""

from typing import Iterable, List, Tuple

from .scoring import Verdict, score

History = Iterable[Tuple[str, Verdict]]  # (guess, verdict)


def is_consistent(word: str, history: History) -> bool:
    """True if `word` as the secret reproduces every recorded verdict."""
    for g, verdict in history:
        if len(g) != len(word) or score(g, word) != tuple(verdict):
            return False
    return True


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with every (guess, verdict) in `history`.

    Order is preserved as in `words`.
    """
    history = list(history)
    return [w for w in words if is_consistent(w, history)]
