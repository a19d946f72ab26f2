"""Qt main window hosting the Home, Game and Settings tabs."""

from __future__ import annotations

from enum import Enum
import logging
import time
from typing import Callable

from PySide6.QtWidgets import (
    QMainWindow,
    QStackedWidget,
    QStyle,
    QTabWidget,
)

from mathquiz_app.constants.ui_constants import (
    TAB_GAME,
    TAB_HOME,
    TAB_SETTINGS,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from mathquiz_app.core.game_modes import round_config_for
from mathquiz_app.core.models import GameMode, RoundConfig
from mathquiz_app.core.services.round_history import RoundHistory
from mathquiz_app.styling.color_palette import Theme
from mathquiz_app.styling.styles import Styles
from mathquiz_app.ui.components.game_menu_panel import GameMenuPanel
from mathquiz_app.ui.components.game_panel import GamePanel
from mathquiz_app.ui.components.home_panel import HomePanel
from mathquiz_app.ui.components.settings_panel import SettingsPanel
from mathquiz_app.ui.custom_game_dialog import CustomGameDialog
from mathquiz_app.ui.dialog_helpers import confirm_abandon_round, show_error
from mathquiz_app.utils.preferences import AppearancePreferences

logger = logging.getLogger(__name__)


class AppSection(Enum):
    """Tabs of the main window, in display order."""

    HOME = TAB_HOME
    GAME = TAB_GAME
    SETTINGS = TAB_SETTINGS

    @property
    def standard_icon(self) -> QStyle.StandardPixmap:
        icons = {
            AppSection.HOME: QStyle.StandardPixmap.SP_DirHomeIcon,
            AppSection.GAME: QStyle.StandardPixmap.SP_MediaPlay,
            AppSection.SETTINGS: QStyle.StandardPixmap.SP_FileDialogDetailedView,
        }
        return icons[self]


class GameView(Enum):
    """Page shown inside the Game tab."""

    MENU = 0
    PLAY = 1


class MainWindow(QMainWindow):
    """Main Qt window holding the tab container and the appearance state."""

    def __init__(
        self,
        preferences: AppearancePreferences,
        history: RoundHistory | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.preferences = preferences
        self.history = history if history is not None else RoundHistory()
        self._clock = clock

        self._tab_selection = AppSection.HOME
        self._game_view = GameView.MENU
        self._custom_config: RoundConfig | None = None

        self._build_ui()
        self._apply_styles(Theme.from_dark_flag(self.preferences.is_dark()))

    def _build_ui(self) -> None:
        self.tabs = QTabWidget(self)
        self.setCentralWidget(self.tabs)

        self.home_panel = HomePanel(self)

        self.game_stack = QStackedWidget(self)
        self.game_menu_panel = GameMenuPanel(on_select=self._handle_game_mode_selected, parent=self)
        self.game_panel = GamePanel(
            self.history,
            on_exit=self._show_game_menu,
            clock=self._clock,
            parent=self,
        )
        self.game_stack.addWidget(self.game_menu_panel)
        self.game_stack.addWidget(self.game_panel)

        self.settings_panel = SettingsPanel(
            self.preferences,
            on_appearance_changed=self._handle_appearance_changed,
            parent=self,
        )

        pages = {
            AppSection.HOME: self.home_panel,
            AppSection.GAME: self.game_stack,
            AppSection.SETTINGS: self.settings_panel,
        }
        for section in AppSection:
            icon = self.style().standardIcon(section.standard_icon)
            self.tabs.addTab(pages[section], icon, section.value)

        self.tabs.currentChanged.connect(self._handle_tab_changed)
        self._set_game_view(GameView.MENU)

    # --- Tabs ---

    @property
    def tab_selection(self) -> AppSection:
        return self._tab_selection

    def select_tab(self, section: AppSection) -> None:
        self.tabs.setCurrentIndex(list(AppSection).index(section))

    def _handle_tab_changed(self, index: int) -> None:
        section = list(AppSection)[index]
        leaving_game = self._tab_selection == AppSection.GAME and section != AppSection.GAME
        if leaving_game and self.game_panel.is_round_in_progress():
            if not confirm_abandon_round(self):
                self.tabs.blockSignals(True)
                self.tabs.setCurrentIndex(list(AppSection).index(AppSection.GAME))
                self.tabs.blockSignals(False)
                return
            self.game_panel.abandon_round()
            self._set_game_view(GameView.MENU)
        self._tab_selection = section

    # --- Game tab ---

    def _set_game_view(self, view: GameView) -> None:
        self._game_view = view
        self.game_stack.setCurrentIndex(view.value)

    def _show_game_menu(self) -> None:
        self._set_game_view(GameView.MENU)

    def _handle_game_mode_selected(self, mode: GameMode) -> None:
        custom = None
        if mode is GameMode.CUSTOM:
            dialog = CustomGameDialog(self, self._custom_config)
            if not dialog.exec():
                return
            try:
                custom = dialog.get_round_config()
            except ValueError as exc:
                show_error(self, "Invalid game", str(exc))
                return
            self._custom_config = custom

        try:
            config = round_config_for(mode, custom)
        except ValueError as exc:
            show_error(self, "Invalid game", str(exc))
            return

        logger.info("Starting %s round", mode.name.lower())
        self._set_game_view(GameView.PLAY)
        self.game_panel.start_round(config)

    # --- Appearance ---

    def _handle_appearance_changed(self, is_dark: bool) -> None:
        self._apply_styles(Theme.from_dark_flag(is_dark))

    def _apply_styles(self, theme: Theme) -> None:
        self._theme = theme
        self.setStyleSheet(Styles.get_main_window_style(theme))

    @property
    def theme(self) -> Theme:
        return self._theme
