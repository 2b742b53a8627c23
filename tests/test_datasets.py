import json
from pathlib import Path

import pytest
from packages.datasets import (
    Library, load_frequency_table, load_words, pretty_summary, validate_reference_data,
)
from packages.engine import DatasetError, evaluate

from conftest import FREQ, SOLUTIONS, WORDS, write_lines


@pytest.fixture
def files(tmp_path: Path):
    words = tmp_path / "words.csv"
    sols = tmp_path / "solutions.csv"
    freq = tmp_path / "freq_map.json"
    write_lines(words, WORDS)
    write_lines(sols, SOLUTIONS)
    freq.write_text(json.dumps(FREQ), encoding="utf-8")
    return words, sols, freq


def test_load_words_skips_blanks_and_dedupes(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("Water\n\ncrane\r\nwater\n", encoding="utf-8")
    assert load_words(p) == ["water", "crane"]


def test_load_words_bad_line_is_fatal(tmp_path: Path):
    p = tmp_path / "w.csv"
    write_lines(p, ["water", "cranes"])
    with pytest.raises(DatasetError, match=":2:"):
        load_words(p)
    with pytest.raises(DatasetError):
        load_words(tmp_path / "nope.csv")


def test_load_frequency_table_rejects_bad_json(tmp_path: Path):
    p = tmp_path / "f.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(DatasetError):
        load_frequency_table(p)
    p.write_text(json.dumps({"water": "lots"}), encoding="utf-8")
    with pytest.raises(DatasetError):
        load_frequency_table(p)
    p.write_text(json.dumps({"WATER": 3}), encoding="utf-8")
    assert load_frequency_table(p) == {"water": 3.0}


def test_library_load_and_query(files):
    lib = Library.load(*files)
    assert lib.words == frozenset(WORDS)
    assert lib.solutions == frozenset(SOLUTIONS)

    history = [evaluate("water", "enter")]
    assert lib.possible_words(history) == ["water", "later", "hater", "pater"]
    assert lib.possible_solutions(history) == {"water", "later"}
    assert lib.possible_words([]) == sorted(WORDS, key=lambda w: -FREQ[w])


def test_library_suggest(library):
    ranked = library.suggest([evaluate("water", "enter")], limit=2)
    assert len(ranked) == 2
    assert all(isinstance(w, str) and isinstance(s, float) for w, s in ranked)
    assert ranked[0][1] >= ranked[1][1]


def test_library_requires_frequency_for_every_word():
    with pytest.raises(DatasetError, match="frequency"):
        Library.from_iterables(WORDS, SOLUTIONS, {"water": 1.0})


def test_library_rejects_malformed_and_empty():
    with pytest.raises(DatasetError):
        Library.from_iterables(WORDS + ["toolong"], SOLUTIONS, FREQ)
    with pytest.raises(DatasetError):
        Library.from_iterables(WORDS, [], FREQ)


def test_library_is_read_only(library):
    with pytest.raises(TypeError):
        library.frequencies["water"] = 0.0


def test_validate_reference_data_happy_path(files):
    rep = validate_reference_data(*map(str, files))
    assert rep["passed"] is True
    assert rep["solutions_subset_words"] is True
    assert rep["words_missing_frequency"] == 0
    s = pretty_summary(rep)
    assert "words=9" in s and "solutions⊆words=True" in s and s.endswith("OK")


def test_validate_reference_data_flags_errors(tmp_path: Path, files):
    words, sols, freq = files
    words.write_text("water\nWATER\nlater\n???\nwater\n", encoding="utf-8")
    rep = validate_reference_data(str(words), str(sols), str(freq))
    assert rep["passed"] is False
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_reference_data_missing_files(tmp_path: Path):
    rep = validate_reference_data(str(tmp_path / "a"), str(tmp_path / "b"), str(tmp_path / "c"))
    assert rep["passed"] is False
    assert len([m for m in rep["issues"] if "not found" in m]) == 3


def test_library_suggest_scores_only_most_frequent_pool(library):
    from packages.datasets.library import SUGGESTION_POOL_CAP
    from packages.engine import entropy
    from packages.solvers.entropy import EntropySolver

    ranked = library.suggest([], limit=None, pool_cap=2)
    assert sorted(w for w, _ in ranked) == ["crane", "water"]
    # the guess space is still every surviving word
    for w, s in ranked:
        assert s == pytest.approx(entropy.score(w, WORDS, SOLUTIONS))
    assert len(library.suggest([], limit=None)) == len(WORDS)
    assert EntropySolver.POOL_CAP == SUGGESTION_POOL_CAP
