"""Component for playing a round: countdown, keypad and results."""

from __future__ import annotations

import string
import time
from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from mathquiz_app.constants.quiz_constants import TIME_LOW_WARNING_SECONDS
from mathquiz_app.constants.ui_constants import (
    COUNTDOWN_TEMPLATE,
    HOME_BUTTON,
    INCORRECT_MESSAGE,
    INPUT_PLACEHOLDER,
    KEYPAD_CLEAR,
    PLAY_AGAIN_BUTTON,
    PROGRESS_TEMPLATE,
    RESULT_ANSWERED_TEMPLATE,
    RESULT_BEST_TEMPLATE,
    RESULT_NO_BEST,
    RESULT_TIME_TEMPLATE,
    RESULT_TITLE_COMPLETE,
    RESULT_TITLE_TIMEOUT,
    TICK_INTERVAL_MS,
)
from mathquiz_app.core.models import GamePhase, RoundConfig, RoundResult
from mathquiz_app.core.quiz_engine import QuizEngine
from mathquiz_app.core.services.round_history import RoundHistory
from mathquiz_app.core.time_format import format_elapsed_time, format_remaining_time
from mathquiz_app.styling.styles import Styles
from mathquiz_app.ui.dialog_helpers import confirm_abandon_round

KEYPAD_ROWS: tuple[tuple[str, ...], ...] = (
    ("1", "2", "3"),
    ("4", "5", "6"),
    ("7", "8", "9"),
)
CLEAR_KEYS = (Qt.Key_Backspace, Qt.Key_Delete, Qt.Key_Escape)


class GamePanel(QWidget):
    """UI component that drives a QuizEngine from a periodic QTimer."""

    def __init__(
        self,
        history: RoundHistory,
        on_exit: Callable[[], None],
        clock: Callable[[], float] = time.monotonic,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.history = history
        self.on_exit = on_exit
        self.engine = QuizEngine(clock=clock, on_finished=self._handle_round_finished)

        self.setFocusPolicy(Qt.StrongFocus)
        self._build_ui()
        self._configure_tick_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.page_stack = QStackedWidget(self)
        self.page_stack.addWidget(self._build_countdown_page())
        self.page_stack.addWidget(self._build_play_page())
        self.page_stack.addWidget(self._build_results_page())
        layout.addWidget(self.page_stack)

    def _build_countdown_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)

        page_layout.addStretch()
        self.countdown_label = QLabel("", page)
        self.countdown_label.setAlignment(Qt.AlignCenter)
        self.countdown_label.setStyleSheet(Styles.get_countdown_label_style())
        page_layout.addWidget(self.countdown_label)
        page_layout.addStretch()
        return page

    def _build_play_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)

        # Progress and time row
        status_row = QHBoxLayout()
        self.leave_button = QPushButton(HOME_BUTTON, page)
        self.leave_button.setFocusPolicy(Qt.NoFocus)
        self.leave_button.clicked.connect(self._handle_leave_round)
        status_row.addWidget(self.leave_button)
        self.progress_label = QLabel("", page)
        status_row.addWidget(self.progress_label)
        status_row.addStretch()
        self.time_label = QLabel("", page)
        status_row.addWidget(self.time_label)
        page_layout.addLayout(status_row)

        self.time_progress = QProgressBar(page)
        self.time_progress.setRange(0, 1000)
        self.time_progress.setTextVisible(False)
        page_layout.addWidget(self.time_progress)

        page_layout.addStretch()
        self.question_label = QLabel("", page)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setStyleSheet(Styles.get_question_label_style())
        page_layout.addWidget(self.question_label)

        self.input_label = QLabel(INPUT_PLACEHOLDER, page)
        self.input_label.setAlignment(Qt.AlignCenter)
        self.input_label.setStyleSheet(Styles.get_large_label_style())
        page_layout.addWidget(self.input_label)

        self.incorrect_label = QLabel(INCORRECT_MESSAGE, page)
        self.incorrect_label.setObjectName("incorrect")
        self.incorrect_label.setAlignment(Qt.AlignCenter)
        self.incorrect_label.setVisible(False)
        page_layout.addWidget(self.incorrect_label)
        page_layout.addStretch()

        # Keypad
        keypad = QGridLayout()
        self.digit_buttons: dict[str, QPushButton] = {}
        for row_index, row in enumerate(KEYPAD_ROWS):
            for column_index, digit in enumerate(row):
                keypad.addWidget(self._make_digit_button(digit, page), row_index, column_index)
        self.clear_button = QPushButton(KEYPAD_CLEAR, page)
        self.clear_button.setObjectName("keypad")
        self.clear_button.setFocusPolicy(Qt.NoFocus)
        self.clear_button.clicked.connect(self._handle_clear)
        keypad.addWidget(self.clear_button, len(KEYPAD_ROWS), 0)
        keypad.addWidget(self._make_digit_button("0", page), len(KEYPAD_ROWS), 1)
        page_layout.addLayout(keypad)
        return page

    def _make_digit_button(self, digit: str, parent: QWidget) -> QPushButton:
        button = QPushButton(digit, parent)
        button.setObjectName("keypad")
        button.setFocusPolicy(Qt.NoFocus)
        button.clicked.connect(lambda _checked=False, d=digit: self._handle_digit(d))
        self.digit_buttons[digit] = button
        return button

    def _build_results_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)

        page_layout.addStretch()
        self.result_title_label = QLabel("", page)
        self.result_title_label.setAlignment(Qt.AlignCenter)
        self.result_title_label.setStyleSheet(Styles.get_title_label_style())
        page_layout.addWidget(self.result_title_label)

        self.result_time_label = QLabel("", page)
        self.result_time_label.setAlignment(Qt.AlignCenter)
        self.result_time_label.setStyleSheet(Styles.get_large_label_style())
        page_layout.addWidget(self.result_time_label)

        self.result_answered_label = QLabel("", page)
        self.result_answered_label.setAlignment(Qt.AlignCenter)
        page_layout.addWidget(self.result_answered_label)

        self.result_best_label = QLabel("", page)
        self.result_best_label.setObjectName("secondary")
        self.result_best_label.setAlignment(Qt.AlignCenter)
        page_layout.addWidget(self.result_best_label)
        page_layout.addStretch()

        button_row = QHBoxLayout()
        self.home_button = QPushButton(HOME_BUTTON, page)
        self.home_button.clicked.connect(self._handle_home)
        button_row.addWidget(self.home_button)

        self.play_again_button = QPushButton(PLAY_AGAIN_BUTTON, page)
        self.play_again_button.setObjectName("primary")
        self.play_again_button.clicked.connect(self._handle_play_again)
        button_row.addWidget(self.play_again_button)
        page_layout.addLayout(button_row)
        return page

    def _configure_tick_timer(self) -> None:
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self._tick)

    # --- Round control ---

    def start_round(self, config: RoundConfig | None = None) -> None:
        self.engine.start_round(config)
        if not self.tick_timer.isActive():
            self.tick_timer.start()
        self.refresh_view()
        self.setFocus()

    def abandon_round(self) -> None:
        self.tick_timer.stop()
        self.engine.abandon_round()

    def is_round_in_progress(self) -> bool:
        return self.engine.phase in (GamePhase.COUNTDOWN, GamePhase.PLAYING)

    def _tick(self) -> None:
        self.engine.on_tick()
        self.refresh_view()

    def _handle_round_finished(self, result: RoundResult) -> None:
        self.tick_timer.stop()
        self.history.record(result)

    # --- Player input ---

    def _handle_digit(self, digit: str) -> None:
        self.engine.submit_digit(digit)
        self.refresh_view()

    def _handle_clear(self) -> None:
        self.engine.clear_input()
        self.refresh_view()

    def _handle_play_again(self) -> None:
        self.start_round()

    def _handle_home(self) -> None:
        self.abandon_round()
        self.on_exit()

    def _handle_leave_round(self) -> None:
        if self.is_round_in_progress() and not confirm_abandon_round(self):
            return
        self._handle_home()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        text = event.text()
        if len(text) == 1 and text in string.digits:
            self._handle_digit(text)
        elif event.key() in CLEAR_KEYS:
            self._handle_clear()
        else:
            super().keyPressEvent(event)

    # --- View ---

    def refresh_view(self) -> None:
        phase = self.engine.phase
        if phase is GamePhase.COUNTDOWN:
            self.countdown_label.setText(
                COUNTDOWN_TEMPLATE.format(seconds=self.engine.countdown_remaining)
            )
            self.page_stack.setCurrentIndex(0)
        elif phase is GamePhase.PLAYING:
            self._update_play_page()
            self.page_stack.setCurrentIndex(1)
        elif phase is GamePhase.FINISHED:
            self._update_results_page()
            self.page_stack.setCurrentIndex(2)

    def _update_play_page(self) -> None:
        engine = self.engine
        question = engine.current_question
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(number=engine.current_index + 1, total=engine.question_count)
        )
        self.question_label.setText(question.text if question else "")
        self.input_label.setText(engine.input or INPUT_PLACEHOLDER)
        self.incorrect_label.setVisible(engine.is_incorrect)

        remaining = engine.time_remaining
        self.time_label.setText(format_remaining_time(remaining))
        low_time = remaining <= TIME_LOW_WARNING_SECONDS
        if self.time_label.objectName() != ("timeLow" if low_time else ""):
            self.time_label.setObjectName("timeLow" if low_time else "")
            # Re-polish so the object name selector is re-evaluated.
            self.time_label.style().unpolish(self.time_label)
            self.time_label.style().polish(self.time_label)

        duration = engine.config.round_duration_seconds
        fraction = 0.0 if duration <= 0 else max(0.0, min(1.0, remaining / duration))
        self.time_progress.setValue(int(fraction * 1000))

    def _update_results_page(self) -> None:
        result = self.engine.result()
        if result is None:
            return
        self.result_title_label.setText(
            RESULT_TITLE_COMPLETE if result.completed else RESULT_TITLE_TIMEOUT
        )
        self.result_time_label.setText(
            RESULT_TIME_TEMPLATE.format(elapsed=format_elapsed_time(result.elapsed_seconds))
        )
        self.result_answered_label.setText(
            RESULT_ANSWERED_TEMPLATE.format(
                answered=result.answered_count, total=result.question_count
            )
        )
        best = self.history.best_result(result.mode)
        if best is None:
            self.result_best_label.setText(RESULT_NO_BEST)
        else:
            self.result_best_label.setText(
                RESULT_BEST_TEMPLATE.format(best=format_elapsed_time(best.elapsed_seconds))
            )
