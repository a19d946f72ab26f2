from PySide6.QtCore import QEvent, QSettings, Qt
from PySide6.QtGui import QKeyEvent
import pytest

from mathquiz_app.core.models import GameMode, GamePhase, RoundConfig
from mathquiz_app.styling.color_palette import Theme
from mathquiz_app.ui.custom_game_dialog import CustomGameDialog
from mathquiz_app.ui.main_window import AppSection, MainWindow
from mathquiz_app.utils.preferences import AppearancePreferences


@pytest.fixture()
def preferences(tmp_path):
    settings = QSettings(str(tmp_path / "prefs.ini"), QSettings.Format.IniFormat)
    return AppearancePreferences(settings)


@pytest.fixture()
def window(qapp, preferences, clock):
    main_window = MainWindow(preferences=preferences, clock=clock)
    yield main_window
    main_window.game_panel.abandon_round()
    main_window.close()
    main_window.deleteLater()


def start_quick_round(window, clock):
    window.select_tab(AppSection.GAME)
    window.game_menu_panel.select_mode(GameMode.QUICK)
    clock.advance(window.game_panel.engine.config.countdown_seconds)
    window.game_panel._tick()


def press_key(widget, key, text=""):
    widget.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, key, Qt.KeyboardModifier.NoModifier, text))


def test_window_starts_on_home_tab(window):
    assert window.tab_selection is AppSection.HOME
    assert [window.tabs.tabText(i) for i in range(window.tabs.count())] == ["Home", "Game", "Settings"]


def test_quick_game_runs_countdown_then_shows_question(window, clock):
    window.select_tab(AppSection.GAME)
    window.game_menu_panel.select_mode(GameMode.QUICK)
    panel = window.game_panel

    assert window.game_stack.currentWidget() is panel
    assert panel.engine.phase is GamePhase.COUNTDOWN
    assert panel.page_stack.currentIndex() == 0
    assert panel.tick_timer.isActive()

    clock.advance(5)
    panel._tick()

    assert panel.page_stack.currentIndex() == 1
    assert panel.question_label.text() == panel.engine.current_question.text
    assert panel.progress_label.text() == "Question 1 of 10"


def test_keypad_answers_advance_and_finish(window, clock):
    start_quick_round(window, clock)
    panel = window.game_panel

    for _ in range(panel.engine.question_count):
        for digit in panel.engine.current_question.answer_text:
            panel.digit_buttons[digit].click()

    assert panel.engine.phase is GamePhase.FINISHED
    assert panel.page_stack.currentIndex() == 2
    assert not panel.tick_timer.isActive()
    assert panel.result_title_label.text() == "Finished!"
    assert panel.result_answered_label.text() == "Answered 10 of 10"
    assert window.history.best_result(GameMode.QUICK) is not None


def test_wrong_answer_shows_incorrect_message(window, clock):
    start_quick_round(window, clock)
    panel = window.game_panel
    answer = panel.engine.current_question.answer_text
    wrong = ("2" if answer[0] != "2" else "3") + answer[1:]

    for digit in wrong:
        panel.digit_buttons[digit].click()

    assert not panel.incorrect_label.isHidden()
    assert panel.engine.current_index == 0

    panel.clear_button.click()

    assert panel.incorrect_label.isHidden()


def test_keyboard_digits_are_accepted(window, clock):
    start_quick_round(window, clock)
    panel = window.game_panel
    answer = panel.engine.current_question.answer_text

    for digit in answer:
        press_key(panel, getattr(Qt, f"Key_{digit}"), digit)

    assert panel.engine.current_index == 1


def test_escape_clears_input(window, clock):
    start_quick_round(window, clock)
    panel = window.game_panel
    if len(panel.engine.current_question.answer_text) < 2:
        pytest.skip("single digit answer is checked immediately")

    press_key(panel, Qt.Key_1, "1")
    assert panel.input_label.text() == "1"

    press_key(panel, Qt.Key_Escape)

    assert panel.engine.input == ""
    assert panel.input_label.text() == "?"


def test_timeout_shows_results(window, clock):
    start_quick_round(window, clock)
    panel = window.game_panel

    clock.advance(60)
    panel._tick()

    assert panel.page_stack.currentIndex() == 2
    assert panel.result_title_label.text() == "Time's up!"
    assert panel.result_time_label.text() == "Time: 1:00.0"


def test_play_again_restarts_countdown(window, clock):
    start_quick_round(window, clock)
    panel = window.game_panel
    clock.advance(60)
    panel._tick()

    panel.play_again_button.click()

    assert panel.engine.phase is GamePhase.COUNTDOWN
    assert panel.page_stack.currentIndex() == 0


def test_home_button_returns_to_menu(window, clock):
    start_quick_round(window, clock)
    clock.advance(60)
    window.game_panel._tick()

    window.game_panel.home_button.click()

    assert window.game_stack.currentWidget() is window.game_menu_panel
    assert window.game_panel.engine.phase is None


def test_leaving_game_tab_keeps_round_when_declined(window, clock, monkeypatch):
    monkeypatch.setattr("mathquiz_app.ui.main_window.confirm_abandon_round", lambda parent: False)
    start_quick_round(window, clock)

    window.select_tab(AppSection.SETTINGS)

    assert window.tabs.currentIndex() == 1
    assert window.tab_selection is AppSection.GAME
    assert window.game_panel.engine.phase is GamePhase.PLAYING


def test_leaving_game_tab_abandons_round_when_confirmed(window, clock, monkeypatch):
    monkeypatch.setattr("mathquiz_app.ui.main_window.confirm_abandon_round", lambda parent: True)
    start_quick_round(window, clock)

    window.select_tab(AppSection.HOME)

    assert window.tab_selection is AppSection.HOME
    assert window.game_panel.engine.phase is None
    assert not window.game_panel.tick_timer.isActive()
    assert window.game_stack.currentWidget() is window.game_menu_panel


def test_dark_mode_toggle_restyles_and_persists(window, preferences):
    assert window.theme is Theme.LIGHT

    window.settings_panel.dark_mode_checkbox.setChecked(True)

    assert window.theme is Theme.DARK
    assert preferences.is_dark() is True

    window.settings_panel.dark_mode_checkbox.setChecked(False)

    assert window.theme is Theme.LIGHT
    assert preferences.is_dark() is False


def test_window_reads_saved_appearance(qapp, preferences, clock):
    preferences.set_dark(True)

    main_window = MainWindow(preferences=preferences, clock=clock)

    assert main_window.theme is Theme.DARK
    assert main_window.settings_panel.dark_mode_checkbox.isChecked()
    main_window.deleteLater()


def test_custom_game_dialog_builds_config(qapp):
    dialog = CustomGameDialog(None, RoundConfig(question_count=7, round_duration_seconds=90))
    dialog.countdown_spinbox.setValue(3)

    config = dialog.get_round_config()

    assert config.question_count == 7
    assert config.round_duration_seconds == 90
    assert config.countdown_seconds == 3
    assert config.mode is GameMode.CUSTOM
    dialog.deleteLater()


def test_custom_game_dialog_spinboxes_stay_in_range(qapp):
    dialog = CustomGameDialog(None)
    dialog.question_count_spinbox.setValue(500)

    assert dialog.get_round_config().question_count == 50
    dialog.deleteLater()


def test_play_page_home_button_keeps_round_when_declined(window, clock, monkeypatch):
    monkeypatch.setattr("mathquiz_app.ui.components.game_panel.confirm_abandon_round", lambda parent: False)
    start_quick_round(window, clock)

    window.game_panel.leave_button.click()

    assert window.game_panel.engine.phase is GamePhase.PLAYING
    assert window.game_stack.currentWidget() is window.game_panel


def test_play_page_home_button_abandons_round_when_confirmed(window, clock, monkeypatch):
    monkeypatch.setattr("mathquiz_app.ui.components.game_panel.confirm_abandon_round", lambda parent: True)
    start_quick_round(window, clock)

    window.game_panel.leave_button.click()

    assert window.game_panel.engine.phase is None
    assert not window.game_panel.tick_timer.isActive()
    assert window.game_stack.currentWidget() is window.game_menu_panel
