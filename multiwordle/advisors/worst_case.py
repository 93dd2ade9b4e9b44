"""
Worst-case bucket (minimax).

Score a guess by the size of its largest verdict bucket: the most candidates
that could be left on this board after the guess.
"""

from __future__ import annotations

import numpy as np

from .base import BaseAdvisor, register


@register
class WorstCaseAdvisor(BaseAdvisor):
    id = "worst_case"
    name = "Worst-Case Bucket"
    version = "1.0.0"

    def score_target(self, sizes: np.ndarray, n: int) -> float:
        return float(sizes.max()) if len(sizes) else 0.0
