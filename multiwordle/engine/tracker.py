"""
Per-board candidate tracking.

A TargetTracker starts with every secret in the bank and shrinks its
candidate set each time a (guess, verdict) pair is applied. Candidates are
kept as a numpy array of bank indices, in bank order, and filtered against
the shared VerdictTable.

Invariants:
  - the candidate set never grows
  - if every verdict was computed from the true secret, the secret survives
  - the incremental result equals TargetTracker.replay(bank, history)
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

import numpy as np

from multiwordle.errors import InvalidGuess, InvalidVerdict
from .bank import WordBank, normalize
from .constraints import filter_candidates
from .scoring import Tile, Verdict, encode_verdict, is_all_correct
from .table import VerdictTable

log = logging.getLogger(__name__)


class TargetTracker:
    def __init__(self, bank: WordBank, table: VerdictTable | None = None):
        self.bank = bank
        self.table = table if table is not None else VerdictTable(bank)
        self._idx: np.ndarray = np.arange(len(bank), dtype=np.int64)
        self._history: List[Tuple[str, Verdict]] = []
        self._won = False

    @classmethod
    def replay(cls, bank: WordBank, history: Iterable[Tuple[str, Verdict]],
               table: VerdictTable | None = None) -> "TargetTracker":
        """
        Rebuild a tracker from its history alone, using the pure-Python filter.
        """
        history = [(normalize(g), tuple(Tile(t) for t in v)) for g, v in history]
        t = cls(bank, table)
        survivors = filter_candidates(bank.secrets, history)
        t._idx = np.array([bank.index(w) for w in survivors], dtype=np.int64)
        t._history = history
        t._won = any(is_all_correct(v) for _, v in history)
        return t

    def apply(self, guess: str, verdict: Verdict) -> int:
        """
        Record (guess, verdict) and drop every candidate that disagrees.

        Returns the number of candidates left. Malformed input raises before
        anything is changed.
        """
        guess = normalize(guess)
        N = self.bank.word_length
        if len(guess) != N or not guess.isalpha():
            raise InvalidGuess(f"guess {guess!r} is not a {N}-letter word")
        if len(verdict) != N:
            raise InvalidVerdict(f"verdict has {len(verdict)} tiles, expected {N}")
        try:
            verdict = tuple(Tile(t) for t in verdict)
        except ValueError as e:
            raise InvalidVerdict(f"unknown tile in verdict {verdict!r}") from e

        before = len(self._idx)
        code = encode_verdict(verdict)
        row = self.table.row(guess)
        self._idx = self._idx[row[self._idx] == code]
        self._history.append((guess, verdict))
        if is_all_correct(verdict):
            self._won = True

        log.debug(f"apply {guess}: {before} -> {len(self._idx)} candidates")
        return len(self._idx)

    # ---- queries ----

    def candidates(self) -> Iterator[str]:
        words = self.bank.secrets
        return (words[i] for i in self._idx)

    @property
    def candidate_indices(self) -> np.ndarray:
        return self._idx

    @property
    def candidate_count(self) -> int:
        return len(self._idx)

    @property
    def history(self) -> List[Tuple[str, Verdict]]:
        return list(self._history)

    def is_solved(self) -> bool:
        return len(self._idx) == 1

    def is_contradicted(self) -> bool:
        return len(self._idx) == 0

    def is_won(self) -> bool:
        return self._won

    def is_active(self) -> bool:
        return not (self.is_solved() or self.is_contradicted())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or word not in self.bank:
            return False
        return bool(np.any(self._idx == self.bank.index(word)))

    def __repr__(self) -> str:
        return f"TargetTracker(candidates={len(self._idx)}, history={len(self._history)})"
