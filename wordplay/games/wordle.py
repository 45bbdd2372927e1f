"""Single-player Wordle session over an injected :class:`DictionaryStore`."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..core.dictionary_store import DictionaryStore
from ..core.errors import NoCandidateWordsError
from ..core.records import Difficulty
from ..utils.observability import create_counter, get_logger
from .scoring import (
    GameStatus,
    GuessRow,
    KeyboardState,
    check_hard_mode,
    completion_status,
    score_guess,
    share_pattern,
)

COMMON_LETTERS = frozenset("aeiourstln")

WORDLE_SUBMISSIONS = create_counter(
    "wordplay_wordle_submissions",
    "Wordle guess submissions, by outcome.",
    label_names=("outcome",),
)


def commonality_difficulty(word: str) -> Difficulty:
    """Rate a word by the share of its letters drawn from ``COMMON_LETTERS``."""

    if not word:
        return Difficulty.HARD
    ratio = sum(1 for letter in word.lower() if letter in COMMON_LETTERS) / len(word)
    if ratio > 0.6:
        return Difficulty.EASY
    if ratio > 0.4:
        return Difficulty.MEDIUM
    return Difficulty.HARD


@dataclass(frozen=True)
class WordleConfig:
    word_length: int = 5
    max_guesses: int = 6
    hard_mode: bool = False
    difficulty: Difficulty = Difficulty.MEDIUM


@dataclass(frozen=True)
class SubmissionResult:
    success: bool
    message: Optional[str] = None


@dataclass(frozen=True)
class WordleResult:
    difficulty: Difficulty
    score: int
    time_elapsed: int
    completed: bool
    timestamp: float
    target_word: str
    guess_count: int
    pattern: str
    hard_mode: bool
    solved_in: int


class WordleGame:
    """One game of Wordle.

    The target is drawn from the store's bucket of ``word_length`` words whose
    letter commonality matches the configured difficulty, falling back to any
    word of that length. Rejected submissions leave the game state untouched.
    Each game owns its rows and keyboard; concurrent games need their own
    instances but may share the store.
    """

    def __init__(
        self,
        store: DictionaryStore,
        config: Optional[WordleConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        time_fn: Optional[Callable[[], float]] = None,
    ) -> None:
        self.store = store
        self.config = config or WordleConfig()
        self._rng = rng or random.Random()
        self._time_fn = time_fn or time.time
        self._logger = get_logger(__name__).bind(component="wordle")
        self._reset()

    def _reset(self) -> None:
        self.target = self._select_target()
        self.current_guess = ""
        self.keyboard = KeyboardState()
        self._rows: List[GuessRow] = []
        self.status = GameStatus.PLAYING
        self.start_time = self._time_fn()
        self.end_time: Optional[float] = None
        self._logger.debug(
            "Wordle game started",
            context={
                "word_length": self.config.word_length,
                "difficulty": Difficulty.coerce(self.config.difficulty).value,
                "hard_mode": self.config.hard_mode,
            },
        )

    def _select_target(self) -> str:
        length = self.config.word_length
        level = Difficulty.coerce(self.config.difficulty)
        bucket = [word for word in self.store.by_length(length) if len(word) == length]
        candidates = [word for word in bucket if commonality_difficulty(word) is level]
        if not candidates:
            candidates = bucket
        if not candidates:
            raise NoCandidateWordsError(
                f"No {length}-letter words available for a Wordle target"
            )
        return self._rng.choice(candidates).lower()

    @property
    def rows(self) -> Tuple[GuessRow, ...]:
        return tuple(self._rows)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def add_letter(self, letter: str) -> bool:
        if self.is_over or len(self.current_guess) >= self.config.word_length:
            return False
        if len(letter) != 1 or not letter.isalpha():
            return False
        self.current_guess += letter.lower()
        return True

    def delete_letter(self) -> bool:
        if self.is_over or not self.current_guess:
            return False
        self.current_guess = self.current_guess[:-1]
        return True

    def _reject(self, outcome: str, message: str) -> SubmissionResult:
        WORDLE_SUBMISSIONS.labels(outcome=outcome).inc()
        self._logger.debug(
            "Guess rejected",
            context={"outcome": outcome, "guess": self.current_guess},
        )
        return SubmissionResult(False, message)

    def submit_guess(self) -> SubmissionResult:
        guess = self.current_guess
        if self.is_over:
            return self._reject("game_over", "Game is not active")
        if len(guess) != self.config.word_length:
            return self._reject(
                "wrong_length", f"Word must be {self.config.word_length} letters long"
            )
        if not self.store.is_valid(guess):
            return self._reject("invalid_word", "Not a valid word")
        if self.config.hard_mode and self._rows:
            violation = check_hard_mode(guess, self._rows)
            if violation is not None:
                return self._reject("hard_mode", violation.message)

        row = GuessRow(guess, score_guess(self.target, guess))
        self._rows.append(row)
        self.keyboard.record_row(row)
        self.current_guess = ""
        WORDLE_SUBMISSIONS.labels(outcome="accepted").inc()

        self.status = completion_status(self._rows, self.target, self.config.max_guesses)
        if self.is_over:
            self.end_time = self._time_fn()
            self._logger.info(
                "Wordle game finished",
                context={"status": self.status.value, "guesses": len(self._rows)},
            )
        return SubmissionResult(True)

    def share_pattern(self) -> str:
        return share_pattern(self._rows)

    def result(self, now: Optional[float] = None) -> WordleResult:
        """Summarise the game; the score is only non-zero for a win."""

        elapsed = (
            int(math.floor(self.end_time - self.start_time))
            if self.end_time is not None
            else 0
        )
        won = self.status is GameStatus.WON
        score = max(0, 1000 - len(self._rows) * 100 - elapsed * 2) if won else 0
        return WordleResult(
            difficulty=Difficulty.coerce(self.config.difficulty),
            score=score,
            time_elapsed=elapsed,
            completed=self.is_over,
            timestamp=self._time_fn() if now is None else now,
            target_word=self.target,
            guess_count=len(self._rows),
            pattern=self.share_pattern(),
            hard_mode=self.config.hard_mode,
            solved_in=len(self._rows) if won else 0,
        )

    def restart(self) -> None:
        self._reset()


__all__ = [
    "COMMON_LETTERS",
    "WordleConfig",
    "WordleGame",
    "WordleResult",
    "SubmissionResult",
    "commonality_difficulty",
]
