# apps/cli/serve.py
"""
Run the HTTP service.

Loads the guess vocabulary, solution vocabulary and frequency table once,
refuses to start if any of them is missing or malformed, then serves the
Flask app.

    python -m apps.cli.serve --words words.csv --solutions solutions.csv --freq freq_map.json
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import Library, pretty_summary, validate_reference_data
from packages.engine import DatasetError
from packages.service import ServiceConfig, create_app

log = logging.getLogger("apps.cli.serve")


def parse_args(argv=None) -> ServiceConfig:
    d = ServiceConfig.from_env()
    ap = argparse.ArgumentParser(description="Wordle solver HTTP service")
    ap.add_argument("--words", default=d.words_path, help="guess vocabulary, one word per line")
    ap.add_argument("--solutions", default=d.solutions_path, help="solution vocabulary, one word per line")
    ap.add_argument("--freq", default=d.freq_path, help="JSON object of word -> frequency score")
    ap.add_argument("--host", default=d.host)
    ap.add_argument("--port", type=int, default=d.port)
    ap.add_argument("--limit", type=int, default=d.suggestion_limit,
                    help="default number of /suggestions results")
    ap.add_argument("--workers", type=int, default=d.workers,
                    help="processes used to score suggestions")
    ap.add_argument("--log-level", default=d.log_level,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    return ServiceConfig(
        words_path=args.words,
        solutions_path=args.solutions,
        freq_path=args.freq,
        host=args.host,
        port=args.port,
        suggestion_limit=args.limit,
        workers=args.workers,
        log_level=args.log_level,
    )


def main(argv=None) -> int:
    cfg = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rep = validate_reference_data(cfg.words_path, cfg.solutions_path, cfg.freq_path)
    log.info(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)

    try:
        library = Library.load(cfg.words_path, cfg.solutions_path, cfg.freq_path)
    except DatasetError as e:
        log.error("cannot start: %s", e)
        return 1

    app = create_app(library, suggestion_limit=cfg.suggestion_limit, workers=cfg.workers)
    log.info("listening on %s:%d", cfg.host, cfg.port)
    app.run(host=cfg.host, port=cfg.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
