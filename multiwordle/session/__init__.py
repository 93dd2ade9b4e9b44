from .core import Session, TargetState, load_bank
from .io import (
    format_verdict, parse_verdict, format_board_row, render_board, render_state,
)

__all__ = [
    "Session", "TargetState", "load_bank", "format_verdict", "parse_verdict",
    "format_board_row", "render_board", "render_state",
]
