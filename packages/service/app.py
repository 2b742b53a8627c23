"""
HTTP front for the engine.

Every POST endpoint takes the same body, the feedback history so far:

    [{"guess": "enter", "result": ["Missing", "Missing", "Correct", "Correct", "Correct"]}, ...]

Routes:
    GET  /health       -> "OK"
    POST /words        -> surviving guess-vocabulary words, most frequent first
    POST /solutions    -> surviving solution words (alphabetical)
    POST /suggestions  -> [{"word", "score"}] best expected elimination first;
                          ?limit=N (default from config)

The candidate sets are recomputed from the full history on every request;
nothing is kept between requests.
"""

from __future__ import annotations

import logging
import time

from flask import Flask, g, jsonify, request

from packages.datasets.library import Library
from packages.engine import MalformedWordError, MissingFrequencyError, parse_history

log = logging.getLogger(__name__)


def _history_from_request():
    body = request.get_json(silent=True)
    if body is None:
        raise MalformedWordError("request body must be a JSON list of feedback records")
    return parse_history(body)


def create_app(library: Library, *, suggestion_limit: int = 10, workers: int = 1) -> Flask:
    app = Flask(__name__)
    app.config["LIBRARY"] = library

    @app.before_request
    def _start_timer():
        g.t0 = time.perf_counter()

    @app.after_request
    def _finish(response):
        # The front-end is served from a different origin.
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        ms = (time.perf_counter() - g.get("t0", time.perf_counter())) * 1000.0
        log.info("%s %s %d %.1fms", request.method, request.path, response.status_code, ms)
        return response

    @app.errorhandler(MalformedWordError)
    def _bad_request(e):
        return jsonify(error=str(e)), 400

    @app.errorhandler(MissingFrequencyError)
    def _stale_frequencies(e):
        log.error("frequency table is missing an entry: %s", e)
        return jsonify(error=str(e)), 500

    @app.get("/health")
    def health():
        return "OK"

    @app.post("/words")
    def words():
        records = _history_from_request()
        return jsonify(library.possible_words(records))

    @app.post("/solutions")
    def solutions():
        records = _history_from_request()
        return jsonify(sorted(library.possible_solutions(records)))

    @app.post("/suggestions")
    def suggestions():
        records = _history_from_request()
        limit = request.args.get("limit", default=suggestion_limit, type=int)
        if limit < 1:
            raise MalformedWordError("limit must be a positive integer")
        ranked = library.suggest(records, limit=limit, workers=workers)
        return jsonify([{"word": w, "score": s} for w, s in ranked])

    return app
