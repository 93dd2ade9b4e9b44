"""
Guess validation.

A guess is acceptable iff it is a string of letters, has the bank's word
length, and is guessable in that bank (a secret or a guess-only word).

Hard mode adds: every hint already revealed must be honoured. For each
earlier (guess, verdict):
  - a CORRECT tile pins its letter to that position
  - every letter shown CORRECT or PRESENT must appear in the new guess at
    least as many times as it was credited
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Tuple

from .bank import WordBank, normalize
from .scoring import Tile, Verdict


def validate_guess(word: str, bank: WordBank) -> bool:
    """Return True if `word` is a valid guess for `bank`."""
    if not isinstance(word, str):
        return False

    w = normalize(word)

    # Shape/characters check
    if len(w) != bank.word_length or not w.isalpha():
        return False

    return bank.is_guessable(w)


def is_hard_mode_valid(prev_guess: str, prev_verdict: Verdict, guess: str) -> bool:
    """Does `guess` honour the hints revealed by one earlier guess?"""
    required: Counter = Counter()
    for i, (ch, tile) in enumerate(zip(prev_guess, prev_verdict)):
        if tile == Tile.ABSENT:
            continue
        required[ch] += 1
        if tile == Tile.CORRECT and guess[i] != ch:
            return False

    have = Counter(guess)
    return all(have[ch] >= n for ch, n in required.items())


def hard_mode_violation(guess: str, history: Iterable[Tuple[str, Verdict]]) -> str | None:
    """
    Describe the first hint `guess` ignores, or None if it honours them all.
    """
    for prev_guess, prev_verdict in history:
        if not is_hard_mode_valid(prev_guess, prev_verdict, guess):
            return f"{guess!r} ignores hints from {prev_guess!r}"
    return None
