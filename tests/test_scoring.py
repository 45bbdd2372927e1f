import pytest

from wordplay.games import (
    GameStatus,
    GuessRow,
    KeyboardState,
    LetterState,
    check_hard_mode,
    completion_status,
    score_guess,
    share_pattern,
)

C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT


@pytest.mark.parametrize(
    "target, guess, expected",
    [
        ("crane", "crane", (C, C, C, C, C)),
        ("crane", "zzzzz", (A, A, A, A, A)),
        ("allee", "eagle", (P, P, A, P, C)),
        ("speed", "erase", (P, A, A, P, P)),
        ("abbey", "eerie", (P, A, A, A, A)),
        ("stare", "tears", (P, P, C, C, P)),
    ],
)
def test_score_guess_two_pass(target, guess, expected):
    assert score_guess(target, guess) == expected


def test_exact_matches_consume_letters_before_present_pass():
    # The trailing "e" is correct, so the leading "e" has nothing left to match.
    assert score_guess("crane", "eerie") == (A, A, P, A, C)


def test_score_guess_is_case_insensitive():
    assert score_guess("CRANE", "crAne") == (C, C, C, C, C)


def test_score_guess_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score_guess("crane", "cranes")


def test_letter_state_ordering_and_merge():
    assert LetterState.UNUSED < A < P < C
    assert C.merge(A) is C
    assert A.merge(P) is P
    assert LetterState.UNUSED.merge(A) is A


def test_keyboard_never_downgrades():
    keyboard = KeyboardState()

    keyboard.record("e", C)
    keyboard.record("E", P)
    keyboard.record("e", A)
    keyboard.record("r", A)
    keyboard.record("r", P)

    assert keyboard.state_of("e") is C
    assert keyboard.state_of("r") is P
    assert keyboard.state_of("q") is LetterState.UNUSED
    assert keyboard.as_dict() == {"e": "correct", "r": "present"}


def test_keyboard_record_row_uses_best_state_per_letter():
    keyboard = KeyboardState()

    keyboard.record_row(GuessRow("eerie", score_guess("crane", "eerie")))

    assert keyboard.state_of("e") is C
    assert keyboard.state_of("r") is P
    assert keyboard.state_of("i") is A


def test_hard_mode_requires_correct_letter_in_place():
    rows = [GuessRow("slate", (C, A, A, A, A))]

    violation = check_hard_mode("crane", rows)

    assert violation is not None
    assert violation.position == 1
    assert violation.letter == "S"
    assert violation.message == "1 letter must be S"


def test_hard_mode_requires_present_letters():
    rows = [GuessRow("crane", (A, P, A, A, A))]

    violation = check_hard_mode("stole", rows)

    assert violation is not None
    assert violation.position is None
    assert violation.message == "Guess must contain R"
    assert check_hard_mode("store", rows) is None


def test_hard_mode_reports_first_violation_in_order():
    rows = [
        GuessRow("crane", (A, A, P, A, A)),
        GuessRow("slate", (C, A, C, A, A)),
    ]

    assert check_hard_mode("bxcde", rows).message == "Guess must contain A"
    assert check_hard_mode("axcde", rows).message == "1 letter must be S"
    assert check_hard_mode("sxade", rows) is None


def test_completion_status():
    miss = GuessRow("crane", (A, A, A, A, A))
    hit = GuessRow("speed", (C, C, C, C, C))

    assert completion_status([], "speed", 6) is GameStatus.PLAYING
    assert completion_status([miss], "speed", 6) is GameStatus.PLAYING
    assert completion_status([miss, hit], "speed", 2) is GameStatus.WON
    assert completion_status([miss, miss], "speed", 2) is GameStatus.LOST


def test_share_pattern():
    rows = [GuessRow("erase", (P, A, A, P, P)), GuessRow("speed", (C, C, C, C, C))]

    assert share_pattern(rows) == "\U0001F7E8⬜⬜\U0001F7E8\U0001F7E8\n" + "\U0001F7E9" * 5
