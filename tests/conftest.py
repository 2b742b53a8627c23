from pathlib import Path

import pytest
from packages.datasets import Library

WORDS = ["water", "pater", "eater", "later", "hater", "enter", "crane", "total", "asked"]
SOLUTIONS = ["water", "later", "total", "crane"]
FREQ = {
    "water": 5.0, "crane": 4.5, "later": 4.0, "total": 3.0, "hater": 2.0,
    "enter": 1.5, "pater": 1.0, "asked": 0.8, "eater": 0.5,
}


@pytest.fixture
def library() -> Library:
    return Library.from_iterables(WORDS, SOLUTIONS, FREQ)


def write_lines(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
