"""
Run outputs.

- write_csv:      one row per simulated game, with a guess and verdict column
                  per round.
- write_manifest: JSON with the run's configuration and summary.
- timestamp_id / git_commit_or_unknown: run identifiers.

Verdict cells start with an apostrophe so spreadsheets don't read strings
like "-#^^-" as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

FIXED_COLUMNS = ["advisor", "N", "boards", "secrets", "success", "guesses", "time_ms"]


def _excel_safe(cell: str) -> str:
    return "'" + cell if cell else cell


def _columns(max_turns: int) -> List[str]:
    cols = list(FIXED_COLUMNS)
    for k in range(1, max_turns + 1):
        cols.append(f"guess_{k}")
        cols.append(f"verdicts_{k}")
    return cols


def _game_row(result: Dict, N: int) -> Dict:
    row = {
        "advisor": result.get("advisor_id", "?"),
        "N": N,
        "boards": len(result["secrets"]),
        "secrets": "|".join(result["secrets"]),
        "success": result["success"],
        "guesses": result["guesses"],
        "time_ms": round(float(result["time_ms"]), 3),
    }
    # rounds are (guess, [tiles per board]); "|" separates boards
    for k, (guess, tiles) in enumerate(result.get("rounds", []), 1):
        row[f"guess_{k}"] = guess
        row[f"verdicts_{k}"] = _excel_safe("|".join(tiles))
    return row


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Write play_game results to `path` and return it.

    Columns: advisor, N, boards, secrets, success, guesses, time_ms, then
    guess_k / verdicts_k for k = 1..max_turns (blank past the last round).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=_columns(max_turns), restval="")
        writer.writeheader()
        for r in results:
            writer.writerow(_game_row(r, N))
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC timestamp for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.run(["git", "rev-parse", "--short", "HEAD"], capture_output=True,
                             text=True, check=True)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip()
