"""
Service configuration.

Defaults match the file names the data has always shipped under; each can
be overridden by an environment variable and then by a CLI flag.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceConfig:
    words_path: str = "words.csv"
    solutions_path: str = "solutions.csv"
    freq_path: str = "freq_map.json"
    host: str = "0.0.0.0"
    port: int = 8080
    suggestion_limit: int = 10
    workers: int = 1
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "ServiceConfig":
        env = os.environ if environ is None else environ
        d = cls()
        return cls(
            words_path=env.get("WORDLE_WORDS", d.words_path),
            solutions_path=env.get("WORDLE_SOLUTIONS", d.solutions_path),
            freq_path=env.get("WORDLE_FREQ", d.freq_path),
            host=env.get("WORDLE_HOST", d.host),
            port=int(env.get("WORDLE_PORT", d.port)),
            suggestion_limit=int(env.get("WORDLE_LIMIT", d.suggestion_limit)),
            workers=int(env.get("WORDLE_WORKERS", d.workers)),
            log_level=env.get("WORDLE_LOG_LEVEL", d.log_level),
        )
