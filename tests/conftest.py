import os

import pytest

# Widgets are created without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from mathquiz_app.core.models import Operation, Question


class FakeClock:
    """Monotonic clock that only moves when a test says so."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class FixedQuestions:
    """Question source that hands out a prepared list."""

    def __init__(self, questions):
        self.questions = tuple(questions)
        self.seeds = []

    def set_seed(self, seed):
        self.seeds.append(seed)

    def generate(self, count):
        return self.questions[:count]


def make_question(left, operation, right, answer):
    return Question(
        text=f"{left} {operation.symbol} {right} = ?",
        answer=answer,
        operation=operation,
        left=left,
        right=right,
    )


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def three_questions():
    return FixedQuestions([
        make_question(3, Operation.MULTIPLY, 4, 12),
        make_question(9, Operation.SUBTRACT, 9, 0),
        make_question(84, Operation.DIVIDE, 7, 12),
    ])


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
