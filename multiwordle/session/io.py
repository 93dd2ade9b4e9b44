"""
Boundary rendering.

Responsibilities:
- format_verdict / parse_verdict: Tile tuples <-> tile strings.
- format_board_row / render_board / render_state: text boards for a UI or CLI.

Tile symbols:
  '#' correct   '^' present   '-' absent
  '?' board skipped this round (it was already solved or contradicted)
  ' ' tile slot not used yet

Only this module knows the symbols; the engine works with Tile values.
"""

from __future__ import annotations

from typing import List

from multiwordle.engine.scoring import Tile, Verdict, all_correct
from multiwordle.errors import InvalidVerdict

TILE_SYMBOLS = {Tile.CORRECT: "#", Tile.PRESENT: "^", Tile.ABSENT: "-"}
SYMBOL_TILES = {s: t for t, s in TILE_SYMBOLS.items()}
UNKNOWN = "?"
EMPTY = " "


def format_verdict(verdict: Verdict) -> str:
    """
    Example: (CORRECT, PRESENT, ABSENT, ABSENT, ABSENT) -> "#^---"
    """
    return "".join(TILE_SYMBOLS[Tile(t)] for t in verdict)


def parse_verdict(tiles: str) -> Verdict:
    """Inverse of format_verdict. Raises InvalidVerdict on unknown symbols."""
    try:
        return tuple(SYMBOL_TILES[ch] for ch in tiles)
    except KeyError as e:
        raise InvalidVerdict(f"unknown tile symbol {e.args[0]!r} in {tiles!r}") from e


def as_verdict(value, N: int) -> Verdict:
    """
    Accept a rendered string or a sequence of tiles/ints; return a Verdict of
    length N.
    """
    if isinstance(value, str):
        verdict = parse_verdict(value)
    else:
        try:
            verdict = tuple(Tile(t) for t in value)
        except (TypeError, ValueError) as e:
            raise InvalidVerdict(f"not a verdict: {value!r}") from e
    if len(verdict) != N:
        raise InvalidVerdict(f"verdict {value!r} has {len(verdict)} tiles, expected {N}")
    return verdict


def format_board_row(verdict: Verdict | None, N: int) -> str:
    """Tile string for one round; None means the board sat this round out."""
    if verdict is None:
        return UNKNOWN * N
    return format_verdict(verdict)


def board_row(session, index: int, r: int) -> str:
    """
    Tiles of board `index` in round `r` (0-based). A board solved by deduction
    shows all-correct in the round its word was played.
    """
    N = session.bank.word_length
    history = session.trackers[index].history
    if r < len(history):
        return format_verdict(history[r][1])
    if session.won_round(index) == r:
        return format_verdict(all_correct(N))
    return format_board_row(None, N)


def render_board(session, index: int, rows: int | None = None) -> List[str]:
    """
    One line per round for board `index`: "<guess> <tiles>".

    If `rows` is given the board is padded with blank rows up to that many.
    """
    N = session.bank.word_length
    lines: List[str] = []
    for r, guess in enumerate(session.guesses):
        lines.append(f"{guess} {board_row(session, index, r)}")
    if rows is not None:
        while len(lines) < rows:
            lines.append(f"{EMPTY * N} {EMPTY * N}")
    return lines


def render_state(session) -> str:
    """Multi-line summary of every board (candidate counts and flags)."""
    out = []
    for st in session.state():
        if st.won:
            flag = "won"
        elif st.contradicted:
            flag = "contradicted"
        elif st.solved:
            flag = "solved"
        else:
            flag = "open"
        out.append(f"board {st.index}: {st.candidate_count} candidate(s), "
                   f"{st.history_length} guess(es), {flag}")
    return "\n".join(out)

