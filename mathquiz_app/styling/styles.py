"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QDialog {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{
                background-color: transparent;
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QLabel#secondary {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QLabel#incorrect {{
                color: {ColorPalette.ERROR.get(theme)};
                font-weight: bold;
            }}
            QLabel#timeLow {{
                color: {ColorPalette.WARNING.get(theme)};
                font-weight: bold;
            }}
            QFrame#card, QFrame#card QWidget {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
            }}
            QFrame#card {{
                border-radius: 16px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton#primary {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPushButton#keypad {{
                font-size: 20px;
                min-height: 48px;
            }}
            QSpinBox, QListWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QListWidget::item:selected {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                max-height: 8px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.SUCCESS.get(theme)};
            }}
            QTabBar::tab {{
                padding: 8px 20px;
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QTabBar::tab:selected {{
                color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                border-bottom: 2px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_title_label_style() -> str:
        return "font-size: 22pt; font-weight: 600;"

    @staticmethod
    def get_question_label_style() -> str:
        return "font-size: 32pt; font-weight: bold;"

    @staticmethod
    def get_countdown_label_style() -> str:
        return "font-size: 48pt; font-weight: bold;"
