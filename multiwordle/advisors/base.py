from __future__ import annotations

from typing import Dict, Sequence, Type

import numpy as np

# ---- Global advisor registry ----
REGISTRY: Dict[str, Type["BaseAdvisor"]] = {}


def register(cls: Type["BaseAdvisor"]) -> Type["BaseAdvisor"]:
    """
    Decorator: @register on an advisor class adds it to REGISTRY by its `id`.
    """
    aid = getattr(cls, "id", None)
    if not aid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if aid in REGISTRY:
        raise ValueError(f"Duplicate advisor id: {aid}")
    REGISTRY[aid] = cls
    return cls


# ---- Base class that advisors inherit ----
class BaseAdvisor:
    """
    Scores one guess against one board.

    `score_target` receives the sizes of the non-empty verdict buckets the
    guess splits the board's candidates into, and the candidate count. Lower
    scores are better for every advisor. Advisors that need more than bucket
    sizes override `score_board` (and `prepare` for per-call state).
    """

    id = "base"
    name = "Base"
    version = "0.0.0"

    def prepare(self, session, pool: Sequence[str]) -> None:
        """Called once per recommend() before any guess is scored."""

    def score_board(self, table, guess: str, candidates: np.ndarray, n: int) -> float:
        """Score `guess` on one board; `candidates` are its secret indices."""
        return self.score_target(table.partition_sizes(guess, candidates), n)

    def score_target(self, sizes: np.ndarray, n: int) -> float:
        raise NotImplementedError("Override in subclass")
