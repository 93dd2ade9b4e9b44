"""
Word bank: the immutable universe of possible secrets (and guesses).

Loading rules:
  - case-insensitive; every word is stripped and lowercased
  - blank lines are ignored
  - the first accepted word fixes the word length L; a word of any other
    length, or one with non-letter characters, makes the load fail
  - duplicates are dropped, first occurrence wins (insertion order is kept
    so result ordering is reproducible)

Guess-only words (valid guesses that are never secrets) can be attached at
load time. They follow the same rules and come after the secrets in
`guesses`.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from multiwordle.errors import InvalidBank

log = logging.getLogger(__name__)


def normalize(word: str) -> str:
    return word.strip().lower()


def _clean(words: Iterable[str], N: int | None) -> Tuple[List[str], int | None, int]:
    """
    Normalise and dedupe `words`; return (accepted words, length, duplicates).

    Raises InvalidBank on a word of the wrong length or with non-letters.
    """
    out: List[str] = []
    seen = set()
    duplicates = 0
    for raw in words:
        w = normalize(raw)
        if not w:
            continue
        if not w.isalpha():
            raise InvalidBank(f"{raw!r} is not a word (letters only)")
        if N is None:
            N = len(w)
        if len(w) != N:
            raise InvalidBank(f"{raw!r} has length {len(w)}, expected {N}")
        if w in seen:
            duplicates += 1
            continue
        seen.add(w)
        out.append(w)
    return out, N, duplicates


class WordBank:
    """Deduplicated, fixed-length, insertion-ordered word collection."""

    def __init__(self, secrets: Tuple[str, ...], guess_only: Tuple[str, ...] = ()):
        self._secrets = secrets
        self._guesses = secrets + guess_only
        self._index: Dict[str, int] = {w: i for i, w in enumerate(secrets)}
        self._guessable = frozenset(secrets) | frozenset(guess_only)
        self.word_length = len(secrets[0])

    @classmethod
    def load(cls, words: Iterable[str], guesses: Iterable[str] = ()) -> "WordBank":
        """
        Build a bank from raw strings.

        Raises:
          InvalidBank if nothing survives filtering, or the words don't share
          one length, or a word contains non-letters.
        """
        if isinstance(words, str) or isinstance(guesses, str):
            raise InvalidBank("expected a sequence of words, got a single string")

        secrets, N, duplicates = _clean(words, None)
        if not secrets:
            raise InvalidBank("word bank is empty")

        extra, _, _ = _clean(guesses, N)
        in_bank = set(secrets)
        guess_only = tuple(w for w in extra if w not in in_bank)

        log.debug(f"Loaded bank: {len(secrets)} secrets ({duplicates} duplicate(s) dropped), "
                  f"{len(guess_only)} guess-only, L={N}")
        return cls(tuple(secrets), guess_only)

    # ---- read-only accessors ----

    @property
    def secrets(self) -> Tuple[str, ...]:
        return self._secrets

    @property
    def guesses(self) -> Tuple[str, ...]:
        """Every guessable word: secrets first, then guess-only words."""
        return self._guesses

    def size(self) -> int:
        return len(self._secrets)

    def contains(self, word: str) -> bool:
        return normalize(word) in self._index

    def is_guessable(self, word: str) -> bool:
        return normalize(word) in self._guessable

    def index(self, word: str) -> int:
        """Position of `word` among the secrets. Raises KeyError if absent."""
        return self._index[normalize(word)]

    def iterate(self) -> Iterator[str]:
        return iter(self._secrets)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return self.iterate()

    def __getitem__(self, i: int) -> str:
        return self._secrets[i]

    def __repr__(self) -> str:
        return (f"WordBank(L={self.word_length}, secrets={len(self._secrets)}, "
                f"guess_only={len(self._guesses) - len(self._secrets)})")
