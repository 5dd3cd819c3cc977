"""Centralized styles for the quiz window and option buttons."""

from animal_quiz.constants.ui_constants import OPTION_VARIANT_SELECTED

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT, font_size: int = 12) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: {font_size}pt;
            }}
            QPushButton {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 8px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_DISABLED.get(theme)};
            }}
            QProgressBar {{
                border: none;
                border-radius: 4px;
                background-color: {ColorPalette.BORDER_PRIMARY.get(theme)};
                max-height: 8px;
            }}
            QProgressBar::chunk {{
                border-radius: 4px;
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_option_button_style(variant: str, theme: Theme = Theme.LIGHT) -> str:
        """Stylesheet for an option button in the given variant."""
        if variant == OPTION_VARIANT_SELECTED:
            background = ColorPalette.BUTTON_PRIMARY_BG.get(theme)
            text = ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)
        else:
            background = ColorPalette.BUTTON_OUTLINE_BG.get(theme)
            text = ColorPalette.TEXT_PRIMARY.get(theme)
        # Disabled buttons keep their variant colours.
        return (
            f"QPushButton, QPushButton:disabled {{ background-color: {background}; color: {text}; }}"
        )

    @staticmethod
    def get_feedback_style(is_correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS.get(theme) if is_correct else ColorPalette.ERROR.get(theme)
        return f"color: {color}; font-weight: bold;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
