# apps/cli/run.py
"""
Benchmark a solver by self-play over the solution vocabulary.

This script:
  1) Validates the reference data (logs counts + SHA, checks solutions ⊆ words
     and frequency coverage).
  2) Loads the Library and instantiates the requested solver.
  3) Plays one game per solution with a progress bar and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, reference data report and summary stats
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from packages.datasets import Library, pretty_summary, validate_reference_data
from packages.engine import DatasetError
from packages.harness import WORDLE_MAX_TURNS, run_case
from packages.harness.io import timestamp_id, write_csv, write_manifest
from packages.solvers import create_solver, get_solver_ids

log = logging.getLogger("apps.cli.run")


def main(argv=None) -> int:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="Benchmark a Wordle solver by self-play")
    ap.add_argument("--solver", default="frequency", help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default="words.csv", help="guess vocabulary")
    ap.add_argument("--solutions", default="solutions.csv", help="solution vocabulary")
    ap.add_argument("--freq", default="freq_map.json", help="word -> frequency JSON")
    ap.add_argument("--sample", type=int, help="play only a random subset of solutions")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--workers", type=int, default=1, help="processes for entropy scoring")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rep = validate_reference_data(args.words, args.solutions, args.freq)
    log.info(pretty_summary(rep))

    try:
        library = Library.load(args.words, args.solutions, args.freq)
    except DatasetError as e:
        log.error("cannot run: %s", e)
        return 1

    solver = create_solver(args.solver)
    solver.workers = args.workers

    cases = sorted(library.solutions)
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        cases = rng.sample(cases, args.sample)

    results = []
    for solution in tqdm(cases, ncols=80, desc=solver.id, unit="game", disable=args.no_progress):
        r = run_case(solver, solution, library=library)
        r["solver_id"] = solver.id
        results.append(r)

    wins = [r for r in results if r["success"]]
    mean_guesses = sum(r["guesses"] for r in wins) / len(wins) if wins else 0.0
    log.info("%s: solved %d/%d, mean %.3f guesses when solved",
             solver.id, len(wins), len(results), mean_guesses)

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{solver.id}_{run_id}.csv"
    manifest_path = outdir / f"run_{solver.id}_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "solver_id": solver.id,
        "solver_version": solver.version,
        "config": vars(args),
        "reference_data": rep,
        "num_cases": len(results),
        "num_solved": len(wins),
        "mean_guesses_solved": mean_guesses,
    }, str(manifest_path))

    log.info("wrote %s", csv_path)
    log.info("wrote %s", manifest_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
