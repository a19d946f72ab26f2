"""Service for keeping the results of finished rounds in memory."""

from __future__ import annotations

from mathquiz_app.core.models import GameMode, RoundResult


class RoundHistory:
    """Tracks finished rounds for the lifetime of the application."""

    def __init__(self) -> None:
        self._results: list[RoundResult] = []

    def record(self, result: RoundResult) -> None:
        self._results.append(result)

    def results(self) -> list[RoundResult]:
        return list(self._results)

    def best_result(self, mode: GameMode) -> RoundResult | None:
        """Return the fastest completed round for ``mode``, earliest on ties."""
        completed = [r for r in self._results if r.mode == mode and r.completed]
        if not completed:
            return None
        return min(completed, key=lambda r: r.elapsed_seconds)

    def clear(self) -> None:
        self._results.clear()
