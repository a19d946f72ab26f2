"""Domain models for the arithmetic quiz."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto

from mathquiz_app.constants.quiz_constants import (
    DEFAULT_COUNTDOWN_SECONDS,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_ROUND_DURATION_SECONDS,
    MAX_COUNTDOWN_SECONDS,
    MAX_QUESTION_COUNT,
    MAX_ROUND_DURATION_SECONDS,
    MIN_COUNTDOWN_SECONDS,
    MIN_QUESTION_COUNT,
    MIN_ROUND_DURATION_SECONDS,
)


class GamePhase(Enum):
    """Phase of a single round."""

    COUNTDOWN = auto()
    PLAYING = auto()
    FINISHED = auto()


class GameMode(Enum):
    """Ways a round can be started from the game menu."""

    QUICK = auto()
    DAILY = auto()
    CUSTOM = auto()


class Operation(Enum):
    """Arithmetic operation with its display symbol."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Question:
    """A single arithmetic question with its integer answer."""

    text: str
    answer: int
    operation: Operation
    left: int
    right: int

    @property
    def answer_text(self) -> str:
        return str(self.answer)


@dataclass(frozen=True, slots=True)
class RoundConfig:
    """Sizes and seed for one round. Raises ValueError for out-of-range values."""

    question_count: int = DEFAULT_QUESTION_COUNT
    round_duration_seconds: int = DEFAULT_ROUND_DURATION_SECONDS
    countdown_seconds: int = DEFAULT_COUNTDOWN_SECONDS
    seed: int | None = None
    mode: GameMode = GameMode.QUICK

    def __post_init__(self) -> None:
        _check_range("question_count", self.question_count, MIN_QUESTION_COUNT, MAX_QUESTION_COUNT)
        _check_range(
            "round_duration_seconds",
            self.round_duration_seconds,
            MIN_ROUND_DURATION_SECONDS,
            MAX_ROUND_DURATION_SECONDS,
        )
        _check_range(
            "countdown_seconds",
            self.countdown_seconds,
            MIN_COUNTDOWN_SECONDS,
            MAX_COUNTDOWN_SECONDS,
        )


def _check_range(name: str, value: int, minimum: int, maximum: int) -> None:
    if not minimum <= value <= maximum:
        raise ValueError(f"{name} must be between {minimum} and {maximum}, got {value}.")


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Immutable snapshot of a finished round."""

    mode: GameMode
    elapsed_seconds: float
    answered_count: int
    question_count: int
    finished_at: datetime

    @property
    def completed(self) -> bool:
        return self.answered_count == self.question_count
