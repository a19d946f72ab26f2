"""Persisted user preferences backed by QSettings."""

from __future__ import annotations

import logging

from PySide6.QtCore import QSettings

from mathquiz_app.constants.about import APP_NAME, ORGANIZATION_NAME

APPEARANCE_IS_DARK_KEY = "appAppearanceIsDark"

logger = logging.getLogger(__name__)


class AppearancePreferences:
    """Reads and writes the dark mode flag."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings if settings is not None else QSettings(ORGANIZATION_NAME, APP_NAME)

    def is_dark(self) -> bool:
        value = self._settings.value(APPEARANCE_IS_DARK_KEY, False)
        # INI and plist backends hand booleans back as strings.
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes")
        return bool(value)

    def set_dark(self, enabled: bool) -> None:
        self._settings.setValue(APPEARANCE_IS_DARK_KEY, bool(enabled))
        self._settings.sync()
        logger.info("Appearance set to %s", "dark" if enabled else "light")
