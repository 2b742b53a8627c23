import pytest
from packages.engine import (
    FeedbackRecord, GuessState, MalformedWordError, derive_constraints, evaluate, filter_candidates,
    is_consistent, matches_history, normalize_word, pattern, validate_guess,
)

M, W, C = GuessState.MISSING, GuessState.WRONG_PLACE, GuessState.CORRECT


# --- feedback golden tests (duplicates + placements) ---
@pytest.mark.parametrize("solution,guess,expected", [
    ("water", "enter", "--GGG"),
    ("water", "axaer", "Y--GG"),
    ("attic", "matah", "-YG--"),
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    ("enter", "leech", "-YY--"),
    ("hotel", "eerie", "Y----"),
])
def test_evaluate_golden(solution, guess, expected):
    assert pattern(solution, guess) == expected


def test_evaluate_returns_record_with_states():
    rec = evaluate("water", "enter")
    assert rec.guess == "enter"
    assert rec.result == (M, M, C, C, C)
    assert not rec.solved
    assert evaluate("water", "WATER").solved


def test_evaluate_rejects_wrong_length():
    with pytest.raises(MalformedWordError):
        evaluate("water", "wat")
    with pytest.raises(MalformedWordError):
        evaluate("waters", "enter")


# --- constraint matching ---
def test_record_requires_letter_and_count():
    rec = FeedbackRecord("enter", (W, M, M, C, M))
    assert is_consistent("asked", rec) is False


def test_single_known_copy_allows_more():
    rec = FeedbackRecord("enter", (M, M, C, M, M))
    assert is_consistent("total", rec) is True


@pytest.mark.parametrize("solution,guess,word,expected", [
    ("water", "enter", "eater", False),   # no e where the gray e was
    ("water", "enter", "pater", True),
    ("apple", "maker", "twues", False),   # must contain a
    ("enter", "leech", "maker", False),   # must contain two e's
    ("hotel", "eerie", "hotel", True),    # yellow + gray of the same letter
    ("hotel", "eerie", "ethos", False),
])
def test_is_consistent_from_feedback(solution, guess, word, expected):
    assert is_consistent(word, evaluate(solution, guess)) is expected


def test_gray_duplicate_beside_yellow_does_not_exclude_letter():
    rec = FeedbackRecord("enter", (W, M, W, M, M))
    assert is_consistent("elate", rec) is False   # e at a guessed position
    assert is_consistent("table", rec) is True    # one e elsewhere is fine


def test_gray_duplicate_sets_minimum_not_exact_count():
    # "--GGG" from enter: one e confirmed, the gray e only rules out position 0.
    rec = evaluate("water", "enter")
    assert is_consistent("beter", rec) is True


def test_all_gray_duplicate_excludes_letter_everywhere():
    rec = FeedbackRecord.from_pattern("geese", "-----")
    assert is_consistent("tepid", rec) is False
    assert is_consistent("world", rec) is True


def test_is_consistent_normalises_and_rejects_bad_words():
    rec = evaluate("water", "enter")
    assert is_consistent(" WATER ", rec) is True
    with pytest.raises(MalformedWordError):
        is_consistent("wat", rec)


def test_matches_history_is_conjunction():
    r1 = evaluate("water", "crane")
    r2 = evaluate("water", "enter")
    assert matches_history("water", [r1, r2]) is True
    assert matches_history("pater", [r1, r2]) is True
    assert matches_history("eater", [r1, r2]) is False
    assert matches_history("water", []) is True


# --- filtering ---
def test_filter_candidates_history():
    words = {"water", "pater", "eater", "later", "hater", "enter", "crane", "total"}
    cand = filter_candidates(words, [evaluate("water", "enter")])
    assert cand == {"water", "pater", "later", "hater"}


def test_filter_candidates_empty_is_not_an_error():
    words = {"water", "later"}
    contradictory = [FeedbackRecord.from_pattern("water", "-----"),
                     FeedbackRecord.from_pattern("later", "GGGGG")]
    assert filter_candidates(words, contradictory) == set()
    assert filter_candidates(words, []) == words


# --- records and validation ---
def test_record_patterns_and_json():
    rec = FeedbackRecord.from_pattern("CRANE", "-y..G")
    assert rec.guess == "crane"
    assert rec.pattern == "-Y--G"
    assert rec.to_json() == {
        "guess": "crane",
        "result": ["Missing", "WrongPlace", "Missing", "Missing", "Correct"],
    }
    assert FeedbackRecord.from_json(rec.to_json()) == rec


@pytest.mark.parametrize("guess,result", [
    ("cran", "-----"),
    ("crane", "----"),
    ("cr4ne", "-----"),
    ("crane", "--Z--"),
])
def test_record_rejects_malformed(guess, result):
    with pytest.raises(MalformedWordError):
        FeedbackRecord(guess, tuple(result))


def test_record_from_json_rejects_bad_shapes():
    with pytest.raises(MalformedWordError):
        FeedbackRecord.from_json({"guess": "crane"})
    with pytest.raises(MalformedWordError):
        FeedbackRecord.from_json({"guess": "crane", "result": "GGGGG"})
    with pytest.raises(MalformedWordError):
        FeedbackRecord.from_json({"guess": "crane", "result": ["Right"] * 5})


def test_normalize_and_validate_guess():
    allowed = ["crane", "raise", "stare"]
    assert normalize_word(" CRANE\n") == "crane"
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("slate", frozenset(allowed)) is False


def test_derive_constraints_shape():
    c = derive_constraints(FeedbackRecord("enter", (W, M, M, C, M)))
    bit = lambda ch: 1 << (ord(ch) - ord("a"))
    assert c.exact == (None, None, None, "e", None)
    assert c.min_counts == (("e", 2),)
    assert c.excluded[0] & bit("e")
    assert not c.excluded[1] & bit("e")
    for mask in c.excluded:
        assert mask & bit("n") and mask & bit("t") and mask & bit("r")


def test_filter_candidates_checks_words_like_is_consistent():
    rec = FeedbackRecord.from_pattern("crane", "-----")
    with pytest.raises(MalformedWordError):
        is_consistent("bod", rec)
    with pytest.raises(MalformedWordError):
        filter_candidates({"bod", "lobby"}, [rec])
    assert is_consistent("LOBBY", rec) is True
    assert filter_candidates({"LOBBY"}, [rec]) == {"lobby"}
    with pytest.raises(MalformedWordError):
        filter_candidates({"lobby", "bod"}, [])
