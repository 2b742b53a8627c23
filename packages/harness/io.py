"""
I/O utilities for self-play runs.

- write_csv:      one row per game with guess/pattern history columns.
- write_manifest: JSON manifest with config and the reference data report.
- timestamp_id:   UTC run ID string for filenames.

Patterns are prefixed with an apostrophe to keep Excel from interpreting
strings like "-GYY-" as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
from pathlib import Path
from typing import Dict, List


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Columns:
      solver, solution, success, guesses, time_ms,
      guess_1, patt_1, ..., guess_<max_turns>, patt_<max_turns>

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "solution", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "solution": r["solution"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                rec = hist[i - 1] if i <= len(hist) else None
                row[f"guess_{i}"] = rec.guess if rec else ""
                row[f"patt_{i}"] = _excel_safe_pattern(rec.pattern) if rec else ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Write a JSON manifest (run_id, config, reference data report, summary stats)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
