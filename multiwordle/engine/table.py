"""
Vectorised verdict table.

Row `g` holds the base-3 verdict code of guess `g` against every secret in the
bank (same order as the bank). Rows are computed with numpy on first use and
cached, so a guess costs one vectorised pass the first time and a dict lookup
afterwards. Codes agree with engine.scoring.encode_verdict(score(g, s)).

Partitioning a candidate set by a guess is then a bincount over
row[candidate_indices].
"""

from __future__ import annotations

from typing import Dict

import numpy as np

from .bank import WordBank


def code_dtype(N: int) -> np.dtype:
    """Smallest unsigned dtype that holds every verdict code of length N."""
    for dtype in (np.uint8, np.uint16, np.uint32):
        if 3 ** N <= np.iinfo(dtype).max + 1:
            return np.dtype(dtype)
    return np.dtype(np.uint64)


class VerdictTable:
    def __init__(self, bank: WordBank):
        self.bank = bank
        self.N = bank.word_length
        self.num_codes = 3 ** self.N
        # (num_secrets, N) matrix of letter codes
        self._letters = np.array(
            [[ord(ch) for ch in w] for w in bank.secrets], dtype=np.int32
        ).reshape(len(bank), self.N)
        self._weights = 3 ** np.arange(self.N - 1, -1, -1, dtype=np.int64)
        self.code_dtype = code_dtype(self.N)
        self._rows: Dict[str, np.ndarray] = {}

    def row(self, guess: str) -> np.ndarray:
        """Verdict codes of `guess` against every secret (array of code_dtype)."""
        r = self._rows.get(guess)
        if r is None:
            r = self._compute_row(guess)
            self._rows[guess] = r
        return r

    def _compute_row(self, guess: str) -> np.ndarray:
        if len(guess) != self.N:
            raise ValueError(f"guess {guess!r} is not {self.N} letters long")

        secrets = self._letters
        g = np.array([ord(ch) for ch in guess], dtype=np.int32)

        # Pass 1: exact matches
        green = secrets == g
        tiles = np.where(green, 2, 0)

        # Pass 2: per distinct guess letter, hand out PRESENT left to right
        # until the secret's unmatched copies of that letter run out.
        for letter in set(guess):
            code = ord(letter)
            avail = ((secrets == code) & ~green).sum(axis=1)
            used = np.zeros(len(secrets), dtype=np.int64)
            for i, ch in enumerate(guess):
                if ch != letter:
                    continue
                present = ~green[:, i] & (used < avail)
                tiles[present, i] = 1
                used += present

        return (tiles @ self._weights).astype(self.code_dtype)

    def partition_sizes(self, guess: str, candidates: np.ndarray) -> np.ndarray:
        """Non-empty bucket sizes of `candidates` (secret indices) under `guess`."""
        counts = np.bincount(self.row(guess)[candidates])
        return counts[counts > 0]

    def cached_rows(self) -> int:
        return len(self._rows)
