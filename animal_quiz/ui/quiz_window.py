"""Qt main window hosting the quiz and its result screen."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
import logging

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from animal_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from animal_quiz.constants.quiz_constants import DEFAULT_FONT_SIZE, SHARE_URL
from animal_quiz.constants.ui_constants import (
    ABOUT_BUTTON,
    SETTINGS_BUTTON,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from animal_quiz.core.models import Option, QuizSession
from animal_quiz.core.quiz_engine import QuizEngine
from animal_quiz.core.view_model import build_question_view, build_result_view
from animal_quiz.styling.color_palette import Theme
from animal_quiz.styling.styles import Styles
from animal_quiz.ui.components.question_panel import QuestionPanel
from animal_quiz.ui.components.result_panel import ResultPanel
from animal_quiz.ui.dialog_helpers import show_info
from animal_quiz.ui.settings_dialog import SettingsDialog
from animal_quiz.ui.share_action import ShareAction

logger = logging.getLogger(__name__)


class QuizMode(Enum):
    """Which screen the window is showing."""

    QUESTION = auto()
    RESULT = auto()


class QuizWindow(QMainWindow):
    """Owns the active QuizSession and routes user intents through the engine."""

    def __init__(
        self,
        engine: QuizEngine,
        share_url: str = SHARE_URL,
        share_action: ShareAction | None = None,
        notify: Callable[..., None] = show_info,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(WINDOW_MIN_WIDTH)

        self.engine = engine
        self.share_url = share_url
        self.notify = notify
        self.share_action = share_action or ShareAction(self, notify=notify)

        self._font_size: int = DEFAULT_FONT_SIZE
        self._theme = Theme.LIGHT
        self._shuffle_seed: int | None = None
        self._mode = QuizMode.QUESTION

        self._build_ui()
        self._apply_styles()
        self.session: QuizSession = self.engine.initialize()
        self._render()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)
        root_layout.addLayout(button_row)

        self.mode_stack = QStackedWidget(self)
        self.question_panel = QuestionPanel(
            on_option_selected=self.handle_option_selected,
            on_next=self.handle_next,
            parent=self,
        )
        self.result_panel = ResultPanel(
            on_share=self.handle_share,
            on_retake=self.handle_retake,
            parent=self,
        )
        self.mode_stack.addWidget(self.question_panel)
        self.mode_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.mode_stack)

    def handle_option_selected(self, option: Option) -> None:
        self.session = self.engine.select_option(self.session, option)
        self._render()

    def handle_next(self) -> None:
        self.session = self.engine.advance(self.session)
        self._render()

    def handle_retake(self) -> None:
        self.session = self.engine.retake(self.session)
        self._render()

    def handle_share(self, text: str) -> None:
        self.share_action.share(text, font_point_size=self._font_size)

    def _render(self) -> None:
        question_view = build_question_view(self.session)
        if question_view is not None:
            self.question_panel.render(question_view)
            self._set_mode(QuizMode.QUESTION)
            return

        result = self.engine.compute_result(self.session)
        if result is None:
            return
        self.result_panel.render(build_result_view(result, self.share_url))
        self._set_mode(QuizMode.RESULT)

    def _set_mode(self, mode: QuizMode) -> None:
        self._mode = mode
        index_map = {
            QuizMode.QUESTION: 0,
            QuizMode.RESULT: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def current_mode(self) -> QuizMode:
        return self._mode

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        self.notify(self, f"About {APP_NAME}", details, font_point_size=self._font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._font_size, self._shuffle_seed, self._theme)
        if dialog.exec():
            seed = dialog.get_shuffle_seed()
            if seed != self._shuffle_seed:
                self._shuffle_seed = seed
                self.engine.set_shuffle_seed(seed)
                logger.info("Shuffle seed set to %s; applies from the next run", seed)
            self._font_size = dialog.get_font_size()
            self.set_theme(dialog.get_theme())

    def set_font_size(self, size: int) -> None:
        self._font_size = size
        self._apply_styles()

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.question_panel.theme = theme
        self._apply_styles()
        self._render()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme, font_size=self._font_size))
