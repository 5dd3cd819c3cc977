"""Component revealing the matched animal at the end of a run."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from animal_quiz.constants.quiz_constants import IMAGE_DIRECTORY, IMAGE_SIZE_PX
from animal_quiz.constants.ui_constants import RETAKE_BUTTON, SHARE_BUTTON
from animal_quiz.core.markdown_renderer import renderer
from animal_quiz.core.view_model import ResultView
from animal_quiz.styling.styles import Styles

logger = logging.getLogger(__name__)


class ResultPanel(QWidget):
    """Shows a ResultView with share and retake actions."""

    def __init__(
        self,
        on_share: Callable[[str], None],
        on_retake: Callable[[], None],
        image_directory: Path = IMAGE_DIRECTORY,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_share = on_share
        self.on_retake = on_retake
        self.image_directory = image_directory
        self._share_text: str = ""
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setVisible(False)
        layout.addWidget(self.image_label)

        self.score_label = QLabel("", self)
        self.score_label.setWordWrap(True)
        layout.addWidget(self.score_label)

        self.match_label = QLabel("", self)
        self.match_label.setTextFormat(Qt.RichText)
        self.match_label.setWordWrap(True)
        layout.addWidget(self.match_label)

        self.share_button = QPushButton(SHARE_BUTTON, self)
        self.share_button.clicked.connect(lambda: self.on_share(self._share_text))
        layout.addWidget(self.share_button)

        self.retake_button = QPushButton(RETAKE_BUTTON, self)
        self.retake_button.clicked.connect(lambda: self.on_retake())
        layout.addWidget(self.retake_button)

        layout.addStretch()

    def render(self, view: ResultView) -> None:
        self.title_label.setText(view.title)
        self.score_label.setText(view.score_line)
        self.match_label.setText(renderer.render_emphasis(view.match_line))
        self._share_text = view.share_text
        self._show_image(view.image_name, view.category)

    def _show_image(self, image_name: str, category: str) -> None:
        image_path = self.image_directory / image_name
        pixmap = QPixmap(str(image_path)) if image_path.exists() else QPixmap()
        if pixmap.isNull():
            logger.info("No result image for '%s' at %s", category, image_path)
            self.image_label.clear()
            self.image_label.setVisible(False)
            return
        self.image_label.setPixmap(
            pixmap.scaled(IMAGE_SIZE_PX, IMAGE_SIZE_PX, Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )
        self.image_label.setToolTip(category)
        self.image_label.setVisible(True)
