"""Qt UI components for the animal quiz."""

from .dialog_helpers import show_info
from .quiz_window import QuizMode, QuizWindow
from .settings_dialog import SettingsDialog
from .share_action import ShareAction

__all__ = [
    "QuizMode",
    "QuizWindow",
    "SettingsDialog",
    "ShareAction",
    "show_info",
]
