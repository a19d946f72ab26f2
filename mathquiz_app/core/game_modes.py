"""Round configuration for each entry of the game menu."""

from __future__ import annotations

from datetime import date

from mathquiz_app.core.models import GameMode, RoundConfig
from mathquiz_app.core.services.question_generator import daily_seed


def round_config_for(
    mode: GameMode,
    custom: RoundConfig | None = None,
    today: date | None = None,
) -> RoundConfig:
    """Return the configuration a round of ``mode`` should start with.

    ``custom`` carries the sizes picked in the custom game dialog and is only
    consulted for ``GameMode.CUSTOM``.
    """
    if mode is GameMode.DAILY:
        return RoundConfig(seed=daily_seed(today), mode=GameMode.DAILY)
    if mode is GameMode.CUSTOM:
        if custom is None:
            return RoundConfig(mode=GameMode.CUSTOM)
        return RoundConfig(
            question_count=custom.question_count,
            round_duration_seconds=custom.round_duration_seconds,
            countdown_seconds=custom.countdown_seconds,
            seed=custom.seed,
            mode=GameMode.CUSTOM,
        )
    return RoundConfig(mode=GameMode.QUICK)
