"""
multiwordle: candidate tracking and guess advice for multi-board Wordle.

Typical use:
    from multiwordle import load_bank
    s = load_bank(["stare", "tears", "teary", "timer", "timed"], 2,
                  secrets=["teary", "timed"])
    s.submit_guess("tears")
    s.recommend(limit=3)
"""

from .errors import (
    MultiWordleError, InvalidBank, InvalidTargetCount, InvalidGuess, InvalidVerdict,
    InvalidSecrets, EmptyPool, InconsistentVerdict,
)
from .engine import Tile, Verdict, WordBank, TargetTracker, score
from .session import Session, TargetState, load_bank, format_verdict, parse_verdict
from .advisors import Recommendation, recommend

__version__ = "0.1.0"

__all__ = [
    "MultiWordleError", "InvalidBank", "InvalidTargetCount", "InvalidGuess", "InvalidVerdict",
    "InvalidSecrets", "EmptyPool", "InconsistentVerdict", "Tile", "Verdict", "WordBank",
    "TargetTracker", "score", "Session", "TargetState", "load_bank", "format_verdict",
    "parse_verdict", "Recommendation", "recommend",
]
