"""
Verdict (feedback) computation for a single (guess, secret) pair.

Tiles:
  - CORRECT : right letter in the right position
  - PRESENT : letter occurs elsewhere in the secret
  - ABSENT  : letter not in the secret (or already used up by other tiles)

A verdict is a tuple of tiles, one per position. For vectorised work a verdict
also has a base-3 integer code, first position most significant, so the
all-correct verdict of length L is 3**L - 1.

Algorithm (two-pass; duplicates depend on the order):
  1) Mark every exact match CORRECT and count the secret letters left over.
  2) Walk the remaining positions left to right; mark PRESENT only while the
     letter still has leftover count, consuming one each time.
"""

from __future__ import annotations

from collections import Counter
from enum import IntEnum
from typing import Iterable, Tuple


class Tile(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


Verdict = Tuple[Tile, ...]


def score(guess: str, secret: str) -> Verdict:
    """
    Compute the verdict of `guess` against `secret`.

    Both words are expected already normalised (lowercase, stripped); the
    bank and session take care of that at the boundary.

    Raises:
      ValueError if the words differ in length.

    Examples:
      score("belle", "level") -> (ABSENT, CORRECT, PRESENT, PRESENT, PRESENT)
      score("lemon", "level") -> (CORRECT, CORRECT, ABSENT, ABSENT, ABSENT)
    """
    if len(guess) != len(secret):
        raise ValueError(
            f"guess and secret must be the same length: {guess!r} vs {secret!r}")

    tiles = [Tile.ABSENT] * len(guess)

    # Pass 1: exact matches; everything else in the secret stays available.
    remaining: Counter = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            tiles[i] = Tile.CORRECT
        else:
            remaining[s] += 1

    # Pass 2: present-elsewhere, capped by the leftover multiplicity.
    for i, g in enumerate(guess):
        if tiles[i] is Tile.CORRECT:
            continue
        if remaining[g] > 0:
            tiles[i] = Tile.PRESENT
            remaining[g] -= 1

    return tuple(tiles)


def encode_verdict(verdict: Iterable[int]) -> int:
    """Pack a verdict into its base-3 code."""
    code = 0
    for tile in verdict:
        code = code * 3 + int(tile)
    return code


def decode_verdict(code: int, length: int) -> Verdict:
    """Inverse of encode_verdict for a verdict of `length` tiles."""
    if not 0 <= code < 3 ** length:
        raise ValueError(f"verdict code {code} out of range for length {length}")
    tiles = [Tile.ABSENT] * length
    for i in range(length - 1, -1, -1):
        tiles[i] = Tile(code % 3)
        code //= 3
    return tuple(tiles)


def all_correct(length: int) -> Verdict:
    return (Tile.CORRECT,) * length


def is_all_correct(verdict: Verdict) -> bool:
    return all(t == Tile.CORRECT for t in verdict)
