from .scoring import Tile, Verdict, score, encode_verdict, decode_verdict, all_correct, is_all_correct
from .bank import WordBank
from .table import VerdictTable
from .constraints import filter_candidates
from .validation import validate_guess, is_hard_mode_valid
from .tracker import TargetTracker

__all__ = [
    "Tile", "Verdict", "score", "encode_verdict", "decode_verdict", "all_correct",
    "is_all_correct", "WordBank", "VerdictTable", "filter_candidates", "validate_guess",
    "is_hard_mode_valid", "TargetTracker",
]
