"""Component listing the game modes on the Game tab."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from mathquiz_app.constants.ui_constants import (
    GAME_MENU_SECTION,
    GAME_MODE_CUSTOM,
    GAME_MODE_DAILY,
    GAME_MODE_DESCRIPTIONS,
    GAME_MODE_QUICK,
    TAB_GAME,
)
from mathquiz_app.core.models import GameMode
from mathquiz_app.styling.styles import Styles

MENU_ENTRIES: tuple[tuple[GameMode, str], ...] = (
    (GameMode.QUICK, GAME_MODE_QUICK),
    (GameMode.DAILY, GAME_MODE_DAILY),
    (GameMode.CUSTOM, GAME_MODE_CUSTOM),
)


class GameMenuPanel(QWidget):
    """UI component for picking which kind of round to play."""

    def __init__(
        self,
        on_select: Callable[[GameMode], None],
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.on_select = on_select

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(TAB_GAME, self)
        self.title_label.setStyleSheet(Styles.get_title_label_style())
        layout.addWidget(self.title_label)

        self.section_label = QLabel(GAME_MENU_SECTION, self)
        self.section_label.setObjectName("secondary")
        layout.addWidget(self.section_label)

        self.mode_list = QListWidget(self)
        for mode, title in MENU_ENTRIES:
            item = QListWidgetItem(f"{title}\n{GAME_MODE_DESCRIPTIONS[title]}", self.mode_list)
            item.setData(Qt.UserRole, mode)
        self.mode_list.itemClicked.connect(self._handle_item_clicked)
        layout.addWidget(self.mode_list, stretch=1)

    def _handle_item_clicked(self, item: QListWidgetItem) -> None:
        mode = item.data(Qt.UserRole)
        self.mode_list.clearSelection()
        if isinstance(mode, GameMode):
            self.on_select(mode)

    def select_mode(self, mode: GameMode) -> None:
        """Act as if the entry for ``mode`` was clicked."""
        for row in range(self.mode_list.count()):
            item = self.mode_list.item(row)
            if item.data(Qt.UserRole) == mode:
                self._handle_item_clicked(item)
                return
