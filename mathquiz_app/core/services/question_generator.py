"""Service for generating the random question set of a round."""

from __future__ import annotations

from datetime import date
import random

from mathquiz_app.constants.quiz_constants import (
    ADDITION_OPERAND_RANGE,
    DIVISION_DIVISOR_RANGE,
    DIVISION_QUOTIENT_RANGE,
    MULTIPLICATION_OPERAND_RANGE,
    SUBTRACTION_LEFT_RANGE,
    SUBTRACTION_RIGHT_MIN,
)
from mathquiz_app.core.models import Operation, Question


class QuestionGenerator:
    """Builds arithmetic questions from a seedable random source."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def generate(self, count: int) -> tuple[Question, ...]:
        """Return exactly ``count`` questions in generation order."""
        return tuple(self.generate_question() for _ in range(count))

    def generate_question(self) -> Question:
        operation = self._rng.choice(list(Operation))
        if operation is Operation.MULTIPLY:
            left = self._rng.randint(*MULTIPLICATION_OPERAND_RANGE)
            right = self._rng.randint(*MULTIPLICATION_OPERAND_RANGE)
            answer = left * right
        elif operation is Operation.ADD:
            left = self._rng.randint(*ADDITION_OPERAND_RANGE)
            right = self._rng.randint(*ADDITION_OPERAND_RANGE)
            answer = left + right
        elif operation is Operation.SUBTRACT:
            left = self._rng.randint(*SUBTRACTION_LEFT_RANGE)
            right = self._rng.randint(SUBTRACTION_RIGHT_MIN, left)
            answer = left - right
        else:
            # Built from the quotient so the division is always exact.
            right = self._rng.randint(*DIVISION_DIVISOR_RANGE)
            answer = self._rng.randint(*DIVISION_QUOTIENT_RANGE)
            left = right * answer
        return Question(
            text=f"{left} {operation.symbol} {right} = ?",
            answer=answer,
            operation=operation,
            left=left,
            right=right,
        )


def daily_seed(day: date | None = None) -> int:
    """Seed shared by every Daily Puzzle round played on ``day``."""
    return (day or date.today()).toordinal()
