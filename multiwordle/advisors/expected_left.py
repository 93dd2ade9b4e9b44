"""
Expected Remaining Candidates (ERC).

Idea:
  For guess g, if a board's n candidates split into verdict buckets of sizes
  {c_i}, and the secret is uniform over the candidates, the expected number
  of candidates left after seeing the verdict is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  Lower is better; 1.0 means the guess identifies the secret outright.

This is the default advisor.
"""

from __future__ import annotations

import numpy as np

from .base import BaseAdvisor, register


@register
class ExpectedLeftAdvisor(BaseAdvisor):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    def score_target(self, sizes: np.ndarray, n: int) -> float:
        return float(np.dot(sizes, sizes)) / n
