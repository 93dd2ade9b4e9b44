"""
Entropy advisor (expected information gain).

  - Partition a board's candidates by verdict.
  - Shannon entropy H = -sum p_i log2 p_i over those buckets.
  - Report -H so that, like every advisor, lower is better.
"""

from __future__ import annotations

import numpy as np

from .base import BaseAdvisor, register


@register
class EntropyAdvisor(BaseAdvisor):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    def score_target(self, sizes: np.ndarray, n: int) -> float:
        if n <= 1:
            return 0.0
        p = sizes / n
        return float(np.sum(p * np.log2(p)))
