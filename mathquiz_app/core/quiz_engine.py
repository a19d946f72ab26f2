"""State machine for one timed arithmetic round: countdown, playing, finished."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import string
import time
from typing import Callable

from mathquiz_app.core.models import GamePhase, Question, RoundConfig, RoundResult
from mathquiz_app.core.services.question_generator import QuestionGenerator
from mathquiz_app.core.services.round_timer import RoundTimer

logger = logging.getLogger(__name__)


class QuizEngine:
    """Owns the phase, questions, input buffer and clocks of the active round.

    Every operation is total: events that arrive in the wrong phase are
    ignored. Time only moves when ``on_tick`` (or a digit entry) reads the
    clock, so tests can drive the engine with a fake clock.
    """

    def __init__(
        self,
        config: RoundConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
        generator: QuestionGenerator | None = None,
        on_finished: Callable[[RoundResult], None] | None = None,
    ) -> None:
        self._config = config or RoundConfig()
        self._clock = clock
        self._generator = generator or QuestionGenerator()
        self._on_finished = on_finished

        self._phase: GamePhase | None = None
        self._questions: tuple[Question, ...] = ()
        self._current_index: int = 0
        self._answered_count: int = 0
        self._input: str = ""
        self._incorrect: bool = False
        self._elapsed_time: float | None = None
        self._result: RoundResult | None = None
        self._reset_clocks()

    # --- Round lifecycle ---

    def start_round(self, config: RoundConfig | None = None) -> None:
        """Begin a fresh round in the countdown phase, discarding any previous one."""
        if config is not None:
            self._config = config
        # A None seed reseeds from OS entropy.
        self._generator.set_seed(self._config.seed)

        self._questions = self._generator.generate(self._config.question_count)
        self._current_index = 0
        self._answered_count = 0
        self._input = ""
        self._incorrect = False
        self._elapsed_time = None
        self._result = None
        self._reset_clocks()
        self._phase = GamePhase.COUNTDOWN
        self._countdown_timer.start(self._clock())
        logger.info(
            "Round started (%s, %d questions, %ds)",
            self._config.mode.name.lower(),
            self._config.question_count,
            self._config.round_duration_seconds,
        )

    def abandon_round(self) -> None:
        """Drop the current round without producing a result."""
        if self._phase is None:
            return
        logger.info("Round abandoned in phase %s", self._phase.name)
        self._phase = None
        self._questions = ()
        self._current_index = 0
        self._input = ""
        self._incorrect = False
        self._reset_clocks()

    def on_tick(self, now: float | None = None) -> None:
        """Advance the countdown or the playing clock to ``now``."""
        now = self._clock() if now is None else now
        if self._phase is GamePhase.COUNTDOWN:
            self._countdown_remaining = self._countdown_timer.remaining_whole_seconds(now)
            if self._countdown_remaining > 0:
                return
            # The round starts at the countdown deadline, not at the tick that noticed it.
            self._begin_playing(self._countdown_timer.deadline)
        if self._phase is GamePhase.PLAYING:
            self._advance_playing_clock(now)

    # --- Player input ---

    def submit_digit(self, digit: str) -> None:
        if self._phase is not GamePhase.PLAYING:
            logger.debug("Ignoring digit %r outside of play", digit)
            return
        if not isinstance(digit, str) or len(digit) != 1 or digit not in string.digits:
            logger.debug("Ignoring non-digit input %r", digit)
            return

        self._advance_playing_clock(self._clock())
        if self._phase is not GamePhase.PLAYING:
            return

        self._incorrect = False
        self._input += digit
        expected = self._questions[self._current_index].answer_text
        if len(self._input) < len(expected):
            return

        if self._input == expected:
            self._input = ""
            self._answered_count += 1
            if self._current_index >= len(self._questions) - 1:
                self._finish()
            else:
                self._current_index += 1
        else:
            self._incorrect = True
            self._input = ""

    def clear_input(self) -> None:
        if self._phase is not GamePhase.PLAYING:
            return
        self._input = ""
        self._incorrect = False

    # --- Read-only state ---

    @property
    def config(self) -> RoundConfig:
        return self._config

    @property
    def phase(self) -> GamePhase | None:
        return self._phase

    @property
    def countdown_remaining(self) -> int:
        return self._countdown_remaining

    @property
    def time_remaining(self) -> float:
        return self._time_remaining

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_question(self) -> Question | None:
        if not self._questions:
            return None
        return self._questions[self._current_index]

    @property
    def answered_count(self) -> int:
        return self._answered_count

    @property
    def input(self) -> str:
        return self._input

    @property
    def is_incorrect(self) -> bool:
        return self._incorrect

    @property
    def elapsed_time(self) -> float | None:
        return self._elapsed_time

    def result(self) -> RoundResult | None:
        return self._result

    # --- Internal transitions ---

    def _reset_clocks(self) -> None:
        self._countdown_timer = RoundTimer(self._config.countdown_seconds)
        self._round_timer = RoundTimer(self._config.round_duration_seconds)
        self._countdown_remaining = self._config.countdown_seconds
        self._time_remaining = float(self._config.round_duration_seconds)

    def _begin_playing(self, started_at: float) -> None:
        self._countdown_remaining = 0
        self._phase = GamePhase.PLAYING
        self._round_timer.start(started_at)
        logger.info("Countdown finished, round is live")

    def _advance_playing_clock(self, now: float) -> None:
        self._time_remaining = self._round_timer.remaining(now)
        if self._time_remaining <= 0:
            self._finish()

    def _finish(self) -> None:
        if self._phase is not GamePhase.PLAYING:
            return
        duration = float(self._config.round_duration_seconds)
        self._phase = GamePhase.FINISHED
        self._input = ""
        self._incorrect = False
        self._elapsed_time = min(duration, duration - self._time_remaining)
        self._result = RoundResult(
            mode=self._config.mode,
            elapsed_seconds=self._elapsed_time,
            answered_count=self._answered_count,
            question_count=len(self._questions),
            finished_at=datetime.now(timezone.utc),
        )
        logger.info(
            "Round finished: %d/%d answered in %.1fs",
            self._answered_count,
            len(self._questions),
            self._elapsed_time,
        )
        if self._on_finished is not None:
            self._on_finished(self._result)
