"""Dialog for configuring a Custom Game before it starts."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSpinBox,
    QPushButton,
    QGroupBox,
)

from mathquiz_app.constants.quiz_constants import (
    MAX_COUNTDOWN_SECONDS,
    MAX_QUESTION_COUNT,
    MAX_ROUND_DURATION_SECONDS,
    MIN_COUNTDOWN_SECONDS,
    MIN_QUESTION_COUNT,
    MIN_ROUND_DURATION_SECONDS,
)
from mathquiz_app.constants.ui_constants import GAME_MODE_CUSTOM, GAME_MODE_DESCRIPTIONS
from mathquiz_app.core.models import GameMode, RoundConfig


class CustomGameDialog(QDialog):
    """Dialog for choosing the size and pace of a custom round."""

    def __init__(self, parent=None, initial: RoundConfig | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(GAME_MODE_CUSTOM)
        self.setModal(True)
        self.setMinimumWidth(360)

        self._initial = initial or RoundConfig(mode=GameMode.CUSTOM)

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        description = QLabel(GAME_MODE_DESCRIPTIONS[GAME_MODE_CUSTOM])
        description.setObjectName("secondary")
        description.setWordWrap(True)
        layout.addWidget(description)

        round_group = QGroupBox("Round")
        round_layout = QVBoxLayout()
        round_group.setLayout(round_layout)

        self.question_count_spinbox = self._add_spinbox_row(
            round_layout,
            "Questions:",
            "Number of questions in the round",
            MIN_QUESTION_COUNT,
            MAX_QUESTION_COUNT,
            self._initial.question_count,
        )
        self.duration_spinbox = self._add_spinbox_row(
            round_layout,
            "Time limit:",
            "Seconds available to answer every question",
            MIN_ROUND_DURATION_SECONDS,
            MAX_ROUND_DURATION_SECONDS,
            self._initial.round_duration_seconds,
            suffix=" s",
        )
        self.countdown_spinbox = self._add_spinbox_row(
            round_layout,
            "Countdown:",
            "Seconds of countdown before the first question",
            MIN_COUNTDOWN_SECONDS,
            MAX_COUNTDOWN_SECONDS,
            self._initial.countdown_seconds,
            suffix=" s",
        )

        layout.addWidget(round_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.start_button = QPushButton("Start")
        self.start_button.setObjectName("primary")
        self.start_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.start_button.setDefault(True)
        button_row.addWidget(self.start_button)

        layout.addLayout(button_row)

    def _add_spinbox_row(
        self,
        layout: QVBoxLayout,
        label_text: str,
        tooltip: str,
        minimum: int,
        maximum: int,
        value: int,
        suffix: str = "",
    ) -> QSpinBox:
        row = QHBoxLayout()
        label = QLabel(label_text)
        label.setToolTip(tooltip)
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(max(minimum, min(maximum, value)))
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(label)
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_round_config(self) -> RoundConfig:
        """Build the round configuration from the current spin box values."""
        return RoundConfig(
            question_count=self.question_count_spinbox.value(),
            round_duration_seconds=self.duration_spinbox.value(),
            countdown_seconds=self.countdown_spinbox.value(),
            mode=GameMode.CUSTOM,
        )
