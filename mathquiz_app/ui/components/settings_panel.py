"""Component for the Settings tab."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from mathquiz_app.constants.ui_constants import (
    SETTINGS_APPEARANCE_GROUP,
    SETTINGS_DARK_MODE,
    TAB_SETTINGS,
)
from mathquiz_app.styling.styles import Styles
from mathquiz_app.utils.preferences import AppearancePreferences


class SettingsPanel(QWidget):
    """UI component holding the appearance toggle."""

    def __init__(
        self,
        preferences: AppearancePreferences,
        on_appearance_changed: Callable[[bool], None],
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.preferences = preferences
        self.on_appearance_changed = on_appearance_changed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(16)
        self.setLayout(layout)

        self.title_label = QLabel(TAB_SETTINGS, self)
        self.title_label.setStyleSheet(Styles.get_title_label_style())
        layout.addWidget(self.title_label)

        appearance_group = QGroupBox(SETTINGS_APPEARANCE_GROUP, self)
        appearance_layout = QVBoxLayout()
        appearance_group.setLayout(appearance_layout)

        self.dark_mode_checkbox = QCheckBox(SETTINGS_DARK_MODE, self)
        self.dark_mode_checkbox.setChecked(self.preferences.is_dark())
        self.dark_mode_checkbox.toggled.connect(self._handle_dark_mode_toggled)
        appearance_layout.addWidget(self.dark_mode_checkbox)

        layout.addWidget(appearance_group)
        layout.addStretch()

    def _handle_dark_mode_toggled(self, checked: bool) -> None:
        self.preferences.set_dark(checked)
        self.on_appearance_changed(checked)
