"""Share collaborator invoked from the result panel."""

from __future__ import annotations

from collections.abc import Callable
import logging

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QWidget

from animal_quiz.constants.ui_constants import SHARE_CONFIRM_TITLE
from animal_quiz.ui.dialog_helpers import show_info

logger = logging.getLogger(__name__)


class ShareAction:
    """Copies a share message to the clipboard and confirms it to the user."""

    def __init__(
        self,
        parent: QWidget,
        notify: Callable[..., None] = show_info,
    ) -> None:
        self._parent = parent
        self._notify = notify

    def share(self, text: str, font_point_size: int | None = None) -> None:
        clipboard = QGuiApplication.clipboard()
        clipboard.setText(text)
        logger.info("Share text copied to clipboard")
        self._notify(self._parent, SHARE_CONFIRM_TITLE, text, font_point_size=font_point_size)
