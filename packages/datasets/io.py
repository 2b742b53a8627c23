from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from packages.engine.errors import DatasetError, MalformedWordError
from packages.engine.validation import normalize_word

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises DatasetError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise DatasetError(f"file not found: {p}")
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Load a line-delimited word list. Blank lines are skipped; any other line
    that is not a five-letter word is fatal (the file is misconfigured).
    Order is preserved and duplicates are dropped.
    """
    words: List[str] = []
    seen = set()
    for lineno, raw in enumerate(read_lines(p), start=1):
        if not raw.strip():
            continue
        try:
            w = normalize_word(raw)
        except MalformedWordError as e:
            raise DatasetError(f"{p}:{lineno}: {e}") from e
        if w not in seen:
            seen.add(w)
            words.append(w)
    log.debug("loaded %d words from %s", len(words), p)
    return words


def load_frequency_table(p: Path | str) -> Dict[str, float]:
    """
    Load a JSON object mapping word -> popularity score (higher is more
    frequent). Keys are lowercased; non-numeric values are fatal.
    """
    p = Path(p)
    if not p.exists():
        raise DatasetError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetError(f"{p}: invalid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise DatasetError(f"{p}: expected a JSON object of word -> score")

    table: Dict[str, float] = {}
    for k, v in raw.items():
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise DatasetError(f"{p}: score for {k!r} is not a number: {v!r}")
        table[k.strip().lower()] = float(v)
    log.debug("loaded %d frequency entries from %s", len(table), p)
    return table
