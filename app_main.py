"""Application entry point for MathQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from mathquiz_app.constants.about import APP_NAME, APP_VERSION, ORGANIZATION_NAME
from mathquiz_app.ui.main_window import MainWindow
from mathquiz_app.utils.logging_config import configure_logging
from mathquiz_app.utils.preferences import AppearancePreferences


def main() -> None:
    """Initialize logging, load preferences, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    preferences = AppearancePreferences()
    window = MainWindow(preferences=preferences)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
