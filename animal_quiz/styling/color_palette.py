"""Color palette for Animal Quiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#18181B", dark="#F5F5F5")
    TEXT_DISABLED = ThemeColors(light="#A1A1AA", dark="#555555")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")

    # Selected option ("default" button variant)
    BUTTON_PRIMARY_BG = ThemeColors(light="#18181B", dark="#FAFAFA")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FAFAFA", dark="#18181B")

    # Unselected option ("outline" button variant)
    BUTTON_OUTLINE_BG = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BUTTON_HOVER_BG = ThemeColors(light="#F4F4F5", dark="#3A3A3A")

    BORDER_PRIMARY = ThemeColors(light="#E4E4E7", dark="#555555")
    ACCENT_PRIMARY = ThemeColors(light="#0078D4", dark="#4A9EFF")

    SUCCESS = ThemeColors(light="#107C10", dark="#6FCF6F")
    ERROR = ThemeColors(light="#D13438", dark="#FF6B6B")
