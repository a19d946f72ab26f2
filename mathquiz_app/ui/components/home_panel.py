"""Component for the Home tab."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from mathquiz_app.constants.about import APP_ABOUT_TEXT, HOW_TO_PLAY_MARKDOWN
from mathquiz_app.constants.ui_constants import HOME_MESSAGE, HOME_WELCOME, TAB_HOME
from mathquiz_app.core.markdown_renderer import renderer
from mathquiz_app.styling.styles import Styles


class HomePanel(QWidget):
    """Dashboard card plus the how-to-play instructions."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(20)
        self.setLayout(layout)

        header = QVBoxLayout()
        header.setSpacing(6)
        self.title_label = QLabel(TAB_HOME, self)
        self.title_label.setStyleSheet(Styles.get_title_label_style())
        header.addWidget(self.title_label)

        self.welcome_label = QLabel(HOME_WELCOME, self)
        self.welcome_label.setObjectName("secondary")
        self.welcome_label.setWordWrap(True)
        header.addWidget(self.welcome_label)
        layout.addLayout(header)

        # Dashboard card
        self.card = QFrame(self)
        self.card.setObjectName("card")
        card_layout = QHBoxLayout()
        card_layout.setContentsMargins(16, 16, 16, 16)
        card_layout.setSpacing(12)
        self.card.setLayout(card_layout)

        icon_label = QLabel(self.card)
        icon = self.style().standardIcon(QStyle.StandardPixmap.SP_DirHomeIcon)
        icon_label.setPixmap(icon.pixmap(32, 32))
        card_layout.addWidget(icon_label, alignment=Qt.AlignTop)

        text_column = QVBoxLayout()
        text_column.setSpacing(4)
        card_title = QLabel(TAB_HOME, self.card)
        card_title.setStyleSheet("font-weight: bold;")
        text_column.addWidget(card_title)
        self.message_label = QLabel(HOME_MESSAGE, self.card)
        self.message_label.setObjectName("secondary")
        text_column.addWidget(self.message_label)
        card_layout.addLayout(text_column)
        card_layout.addStretch()
        layout.addWidget(self.card)

        self.how_to_play_label = QLabel(self)
        self.how_to_play_label.setTextFormat(Qt.RichText)
        self.how_to_play_label.setWordWrap(True)
        self.how_to_play_label.setText(renderer.render_fragment(HOW_TO_PLAY_MARKDOWN))
        layout.addWidget(self.how_to_play_label)

        self.about_label = QLabel(APP_ABOUT_TEXT, self)
        self.about_label.setObjectName("secondary")
        self.about_label.setWordWrap(True)
        layout.addWidget(self.about_label)

        layout.addStretch()
