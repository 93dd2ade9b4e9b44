"""
Number of Verdict Groups (NVG).

Idea:
  Count how many DISTINCT verdicts a guess produces against a board's
  candidates; more groups means more boards-worth of information per guess.
  Ties go to the guess whose largest group is smaller.

No probabilities or logs, just bucket counts. The score is
  -groups + largest / (n + 1)
so the group count dominates (the fraction stays below 1) and lower is
better, as for every advisor.
"""

from __future__ import annotations

import numpy as np

from .base import BaseAdvisor, register


@register
class VerdictGroupsAdvisor(BaseAdvisor):
    id = "verdict_groups"
    name = "Number of Verdict Groups"
    version = "1.0.0"

    def score_target(self, sizes: np.ndarray, n: int) -> float:
        if not len(sizes):
            return 0.0
        return -len(sizes) + float(sizes.max()) / (n + 1)
