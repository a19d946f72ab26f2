"""Qt UI components for the MathQuiz shell."""

from .dialog_helpers import confirm_abandon_round, show_error
from .main_window import AppSection, MainWindow

__all__ = [
    "AppSection",
    "MainWindow",
    "confirm_abandon_round",
    "show_error",
]
