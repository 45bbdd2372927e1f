"""Game logic built on top of :class:`wordplay.core.DictionaryStore`."""

from .scoring import (
    GameStatus,
    GuessRow,
    HardModeViolation,
    KeyboardState,
    LetterState,
    check_hard_mode,
    completion_status,
    score_guess,
    share_pattern,
)
from .wordle import (
    SubmissionResult,
    WordleConfig,
    WordleGame,
    WordleResult,
    commonality_difficulty,
)

__all__ = [
    "GameStatus",
    "GuessRow",
    "HardModeViolation",
    "KeyboardState",
    "LetterState",
    "check_hard_mode",
    "completion_status",
    "score_guess",
    "share_pattern",
    "SubmissionResult",
    "WordleConfig",
    "WordleGame",
    "WordleResult",
    "commonality_difficulty",
]
