from __future__ import annotations

from pathlib import Path
from typing import List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a word list (one or more whitespace-separated words per line, '#'
    starts a comment). Words are returned as written; the bank normalises them.
    """
    out: List[str] = []
    for ln in read_lines(p):
        ln = ln.split("#", 1)[0]
        out.extend(ln.split())
    return out
