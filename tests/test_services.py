from datetime import date, datetime, timezone

import pytest

from mathquiz_app.core.game_modes import round_config_for
from mathquiz_app.core.models import GameMode, RoundConfig, RoundResult
from mathquiz_app.core.services.question_generator import daily_seed
from mathquiz_app.core.services.round_history import RoundHistory
from mathquiz_app.core.services.round_timer import RoundTimer
from mathquiz_app.core.time_format import format_elapsed_time, format_remaining_time


def make_result(mode, elapsed, answered=10, total=10):
    return RoundResult(
        mode=mode,
        elapsed_seconds=elapsed,
        answered_count=answered,
        question_count=total,
        finished_at=datetime.now(timezone.utc),
    )


class TestRoundConfig:
    def test_defaults(self):
        config = RoundConfig()

        assert config.question_count == 10
        assert config.round_duration_seconds == 60
        assert config.countdown_seconds == 5
        assert config.seed is None
        assert config.mode is GameMode.QUICK

    @pytest.mark.parametrize(
        "field, value",
        [
            ("question_count", 0),
            ("question_count", 51),
            ("round_duration_seconds", 9),
            ("round_duration_seconds", 601),
            ("countdown_seconds", 0),
            ("countdown_seconds", 11),
        ],
    )
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValueError, match=field):
            RoundConfig(**{field: value})


class TestRoundResult:
    def test_completed_only_when_every_question_answered(self):
        assert make_result(GameMode.QUICK, 30.0).completed
        assert not make_result(GameMode.QUICK, 60.0, answered=9).completed


class TestRoundHistory:
    def test_best_result_is_fastest_completed_round_for_mode(self):
        history = RoundHistory()
        slow = make_result(GameMode.QUICK, 40.0)
        fast = make_result(GameMode.QUICK, 25.0)
        history.record(slow)
        history.record(fast)
        history.record(make_result(GameMode.DAILY, 10.0))

        assert history.best_result(GameMode.QUICK) == fast
        assert history.best_result(GameMode.CUSTOM) is None

    def test_incomplete_rounds_never_count_as_best(self):
        history = RoundHistory()
        history.record(make_result(GameMode.QUICK, 60.0, answered=3))

        assert history.best_result(GameMode.QUICK) is None
        assert len(history.results()) == 1

    def test_ties_keep_earliest(self):
        history = RoundHistory()
        first = make_result(GameMode.QUICK, 30.0)
        history.record(first)
        history.record(make_result(GameMode.QUICK, 30.0))

        assert history.best_result(GameMode.QUICK) is first

    def test_results_is_a_copy_and_clear_empties(self):
        history = RoundHistory()
        history.record(make_result(GameMode.QUICK, 30.0))
        history.results().clear()

        assert len(history.results()) == 1
        history.clear()
        assert history.results() == []


class TestRoundTimer:
    def test_not_started_reports_full_duration(self):
        timer = RoundTimer(60)

        assert timer.remaining(1000.0) == 60
        assert not timer.is_expired(1000.0)
        assert timer.deadline is None

    def test_remaining_is_clamped(self):
        timer = RoundTimer(10)
        timer.start(100.0)

        assert timer.deadline == 110.0
        assert timer.remaining(99.0) == 10
        assert timer.remaining(104.5) == pytest.approx(5.5)
        assert timer.remaining_whole_seconds(104.5) == 6
        assert timer.remaining(200.0) == 0
        assert timer.is_expired(110.0)

    def test_reset_stops_timer(self):
        timer = RoundTimer(10)
        timer.start(0.0)
        timer.reset()

        assert not timer.is_running()
        assert timer.remaining(50.0) == 10


class TestTimeFormat:
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (60, "1:00.0"),
            (45, "0:45.0"),
            (9.25, "0:09.3"),
            (0.01, "0:00.1"),
            (0, "0:00.0"),
            (-3, "0:00.0"),
        ],
    )
    def test_remaining_time(self, seconds, expected):
        assert format_remaining_time(seconds) == expected

    @pytest.mark.parametrize(
        "seconds, expected",
        [(12.5, "12.5 s"), (60, "1:00.0"), (65.0, "1:05.0"), (-1, "0.0 s")],
    )
    def test_elapsed_time(self, seconds, expected):
        assert format_elapsed_time(seconds) == expected


class TestRoundConfigForMode:
    def test_quick_uses_defaults(self):
        config = round_config_for(GameMode.QUICK)

        assert config == RoundConfig(mode=GameMode.QUICK)

    def test_daily_is_seeded_from_date(self):
        day = date(2026, 10, 17)

        config = round_config_for(GameMode.DAILY, today=day)

        assert config.seed == daily_seed(day)
        assert config.mode is GameMode.DAILY

    def test_custom_keeps_chosen_sizes(self):
        chosen = RoundConfig(question_count=20, round_duration_seconds=120, countdown_seconds=3)

        config = round_config_for(GameMode.CUSTOM, chosen)

        assert config.question_count == 20
        assert config.round_duration_seconds == 120
        assert config.countdown_seconds == 3
        assert config.mode is GameMode.CUSTOM

    def test_custom_without_choice_falls_back_to_defaults(self):
        assert round_config_for(GameMode.CUSTOM) == RoundConfig(mode=GameMode.CUSTOM)
