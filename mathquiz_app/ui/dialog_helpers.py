"""Helper functions for common dialog patterns in the app shell."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from mathquiz_app.constants.ui_constants import ABANDON_ROUND_MESSAGE, ABANDON_ROUND_TITLE


def confirm_abandon_round(parent: QWidget) -> bool:
    """Show confirmation dialog for leaving a round that is still running.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        ABANDON_ROUND_TITLE,
        ABANDON_ROUND_MESSAGE,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)
