"""
Startup report for the reference data.

What this module does:
- Check the guess vocabulary and solution vocabulary files line by line
  (lowercase a-z, exactly five letters, one per line).
- Count duplicates and invalid lines; hash the raw files (SHA-256) so a run
  manifest records exactly which lists were used.
- Check solutions ⊆ words, and that every guess word has a frequency entry.
- Return a plain dict (for manifests) plus a one-line summary for logs.

Unlike Library.load, this never raises on bad content: it collects every
problem so they can all be fixed in one go.

Typical use:
    from packages.datasets import validate_reference_data, pretty_summary
    rep = validate_reference_data("words.csv", "solutions.csv", "freq_map.json")
    log.info(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Set, Tuple

from packages.engine.errors import DatasetError
from packages.engine.types import WORD_LENGTH
from .io import load_frequency_table


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # valid lines
    unique_count: int
    invalid_lines: int
    sha256: str          # empty if missing


@dataclass
class ValidationReport:
    words: FileReport
    solutions: FileReport
    frequencies: FileReport
    solutions_subset_words: bool
    words_missing_frequency: int
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_word_file(path: Path) -> Tuple[FileReport, Set[str]]:
    if not path.exists():
        return FileReport(str(path), False, 0, 0, 0, ""), set()

    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            # require already-lowercase ascii letters of the right length
            if len(w) == WORD_LENGTH and w.isascii() and w.isalpha() and w == w.lower():
                valid.append(w)
            else:
                invalid += 1
    unique = set(valid)
    return FileReport(str(path), True, len(valid), len(unique), invalid, _sha256_file(path)), unique


def validate_reference_data(words_path: str, solutions_path: str, freq_path: str) -> Dict:
    """
    Validate the guess vocabulary, solution vocabulary and frequency table.

    Returns a JSON-serialisable dict (see ValidationReport); `passed` is
    strict: both lists non-empty with no invalid lines, solutions ⊆ words,
    and a frequency entry for every word.
    """
    issues: List[str] = []

    words_rep, words = _check_word_file(Path(words_path))
    sols_rep, sols = _check_word_file(Path(solutions_path))

    for label, rep in (("words", words_rep), ("solutions", sols_rep)):
        if not rep.exists:
            issues.append(f"{label} file not found: {rep.path}")
            continue
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate lines")

    subset_ok = bool(sols) and sols.issubset(words)
    if sols and not subset_ok:
        stray = sorted(sols - words)[:5]
        issues.append(f"solutions not subset of words (e.g., {stray})")

    fp = Path(freq_path)
    table: Dict[str, float] = {}
    if fp.exists():
        try:
            table = load_frequency_table(fp)
        except DatasetError as e:
            issues.append(str(e))
        freq_rep = FileReport(str(fp), True, len(table), len(table), 0, _sha256_file(fp))
    else:
        issues.append(f"frequency file not found: {freq_path}")
        freq_rep = FileReport(str(fp), False, 0, 0, 0, "")

    missing_freq = sorted(w for w in words if w not in table)
    if missing_freq:
        issues.append(f"{len(missing_freq)} word(s) missing a frequency entry (e.g., {missing_freq[:5]})")

    passed = (
            not issues
            and words_rep.count > 0
            and sols_rep.count > 0
    )

    rep = ValidationReport(
        words=words_rep,
        solutions=sols_rep,
        frequencies=freq_rep,
        solutions_subset_words=subset_ok,
        words_missing_frequency=len(missing_freq),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for logs, e.g.

        words=12972 (uniq=12972, sha=abc123...) | solutions=2315 (uniq=2315, sha=def456...) | freq=12972 | solutions⊆words=True | OK
    """
    w = report["words"]
    s = report["solutions"]
    f = report["frequencies"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"words={w['count']} (uniq={w['unique_count']}, sha={(w.get('sha256') or '')[:12]}) "
        f"| solutions={s['count']} (uniq={s['unique_count']}, sha={(s.get('sha256') or '')[:12]}) "
        f"| freq={f['count']} | solutions⊆words={report['solutions_subset_words']} | {status}"
    )
