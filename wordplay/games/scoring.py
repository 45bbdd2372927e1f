"""Letter classification for word-guessing games.

:func:`score_guess` classifies a guess against a target with the usual two
pass approach: exact matches consume target letters first, then the
remaining positions are marked present while unconsumed copies of the letter
are left. Repeated letters are therefore never over-reported as present.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple


class LetterState(IntEnum):
    """Per-letter classification, ordered from weakest to strongest hint."""

    UNUSED = 0
    ABSENT = 1
    PRESENT = 2
    CORRECT = 3

    def merge(self, other: "LetterState") -> "LetterState":
        return max(self, LetterState(other))

    @property
    def label(self) -> str:
        return self.name.lower()


SHARE_SYMBOLS: Mapping[LetterState, str] = {
    LetterState.CORRECT: "\U0001F7E9",
    LetterState.PRESENT: "\U0001F7E8",
    LetterState.ABSENT: "⬜",
    LetterState.UNUSED: "⬜",
}


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GuessRow:
    """A submitted guess and the classification of each of its positions."""

    word: str
    states: Tuple[LetterState, ...]

    def pattern(self) -> str:
        return "".join(SHARE_SYMBOLS[state] for state in self.states)

    def to_dict(self) -> Dict[str, object]:
        return {"word": self.word, "states": [state.label for state in self.states]}


@dataclass(frozen=True)
class HardModeViolation:
    """A guess that ignores a hint revealed by an earlier row.

    ``position`` is 1-indexed and only set for misplaced correct letters.
    """

    letter: str
    message: str
    position: Optional[int] = None


class KeyboardState:
    """Best state seen for each letter across a game; never downgrades."""

    def __init__(self) -> None:
        self._states: Dict[str, LetterState] = {}

    def record(self, letter: str, state: LetterState) -> LetterState:
        key = letter.lower()
        merged = self._states.get(key, LetterState.UNUSED).merge(state)
        self._states[key] = merged
        return merged

    def record_row(self, row: GuessRow) -> None:
        for letter, state in zip(row.word, row.states):
            self.record(letter, state)

    def state_of(self, letter: str) -> LetterState:
        return self._states.get(letter.lower(), LetterState.UNUSED)

    def as_dict(self) -> Dict[str, str]:
        return {letter: state.label for letter, state in sorted(self._states.items())}

    def __len__(self) -> int:
        return len(self._states)


def score_guess(target: str, guess: str) -> Tuple[LetterState, ...]:
    target = target.lower()
    guess = guess.lower()
    if len(target) != len(guess):
        raise ValueError(
            f"Guess length {len(guess)} does not match target length {len(target)}"
        )

    remaining = Counter(target)
    states: List[LetterState] = [LetterState.ABSENT] * len(guess)

    for index, (expected, letter) in enumerate(zip(target, guess)):
        if letter == expected:
            states[index] = LetterState.CORRECT
            remaining[letter] -= 1

    for index, letter in enumerate(guess):
        if states[index] is LetterState.CORRECT:
            continue
        if remaining[letter] > 0:
            states[index] = LetterState.PRESENT
            remaining[letter] -= 1

    return tuple(states)


def check_hard_mode(
    guess: str, rows: Iterable[GuessRow]
) -> Optional[HardModeViolation]:
    """Return the first revealed hint ``guess`` fails to honour, if any.

    Rows are checked in submission order and positions left to right.
    """

    guess = guess.lower()
    for row in rows:
        for index, (letter, state) in enumerate(zip(row.word, row.states)):
            if state is LetterState.CORRECT:
                if index >= len(guess) or guess[index] != letter:
                    position = index + 1
                    return HardModeViolation(
                        letter=letter.upper(),
                        position=position,
                        message=f"{position} letter must be {letter.upper()}",
                    )
            elif state is LetterState.PRESENT and letter not in guess:
                return HardModeViolation(
                    letter=letter.upper(),
                    message=f"Guess must contain {letter.upper()}",
                )
    return None


def completion_status(
    rows: Sequence[GuessRow], target: str, max_guesses: int
) -> GameStatus:
    if rows and rows[-1].word == target.lower():
        return GameStatus.WON
    if len(rows) >= max_guesses:
        return GameStatus.LOST
    return GameStatus.PLAYING


def share_pattern(rows: Iterable[GuessRow]) -> str:
    return "\n".join(row.pattern() for row in rows)


__all__ = [
    "LetterState",
    "GameStatus",
    "GuessRow",
    "HardModeViolation",
    "KeyboardState",
    "SHARE_SYMBOLS",
    "score_guess",
    "check_hard_mode",
    "completion_status",
    "share_pattern",
]
