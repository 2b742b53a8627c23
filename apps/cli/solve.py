# apps/cli/solve.py
"""
Interactive helper for a live game.

Type each guess followed by the colours it got:

    > crane -Y--G        (G = green, Y = yellow, - or . = gray)

After every line the remaining candidates (most frequent first) and the
best expected-elimination guesses are printed. Other commands:

    undo    drop the last guess
    reset   start over
    quit    exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from packages.datasets import Library
from packages.engine import DatasetError, FeedbackRecord, MalformedWordError, validate_guess

log = logging.getLogger("apps.cli.solve")

SHOW_CANDIDATES = 10


def _report(library: Library, history: List[FeedbackRecord], *, limit: int, workers: int) -> None:
    words = library.possible_words(history)
    solutions = library.possible_solutions(history)
    print(f"{len(solutions)} possible solution(s), {len(words)} consistent word(s)")
    if not words:
        print("No word fits this feedback; check for a typo and `undo`.")
        return
    top = [w for w in words if w in solutions][:SHOW_CANDIDATES] or words[:SHOW_CANDIDATES]
    print("  likely:  " + " ".join(top))
    if history and len(solutions) > 2:
        ranked = library.suggest(history, limit=limit, workers=workers)
        print("  probe:   " + " ".join(f"{w}({s:.1f})" for w, s in ranked))


def _parse_line(line: str, library: Library) -> FeedbackRecord:
    parts = line.split()
    if len(parts) != 2:
        raise MalformedWordError("expected: <guess> <pattern>, e.g. `crane -Y--G`")
    guess, patt = parts
    if not validate_guess(guess, library.words):
        log.warning("%r is not in the guess vocabulary", guess)
    return FeedbackRecord.from_pattern(guess, patt)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Interactive Wordle helper")
    ap.add_argument("--words", default="words.csv")
    ap.add_argument("--solutions", default="solutions.csv")
    ap.add_argument("--freq", default="freq_map.json")
    ap.add_argument("--limit", type=int, default=5, help="number of probe suggestions to show")
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s: %(message)s")

    try:
        library = Library.load(args.words, args.solutions, args.freq)
    except DatasetError as e:
        log.error("cannot start: %s", e)
        return 1

    history: List[FeedbackRecord] = []
    _report(library, history, limit=args.limit, workers=args.workers)

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            print()
            return 0
        if not line:
            continue
        cmd = line.lower()
        if cmd in ("quit", "exit", "q"):
            return 0
        if cmd == "reset":
            history.clear()
        elif cmd == "undo":
            if history:
                history.pop()
        else:
            try:
                record = _parse_line(line, library)
            except MalformedWordError as e:
                print(f"error: {e}")
                continue
            history.append(record)
            if record.solved:
                print(f"Solved in {len(history)}.")
                return 0
        _report(library, history, limit=args.limit, workers=args.workers)


if __name__ == "__main__":
    sys.exit(main())
