"""Component showing the active question and its options."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from animal_quiz.core.markdown_renderer import renderer
from animal_quiz.core.models import Feedback, Option
from animal_quiz.core.view_model import QuestionView
from animal_quiz.styling.color_palette import Theme
from animal_quiz.styling.styles import Styles


class QuestionPanel(QWidget):
    """Renders a QuestionView and forwards option picks and advance clicks."""

    def __init__(
        self,
        on_option_selected: Callable[[Option], None],
        on_next: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_option_selected = on_option_selected
        self.on_next = on_next
        self.option_buttons: list[QPushButton] = []
        self.theme = Theme.LIGHT
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.heading_label = QLabel("", self)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setVisible(False)
        layout.addWidget(self.feedback_label)

        self.next_button = QPushButton("", self)
        self.next_button.clicked.connect(lambda: self.on_next())
        self.next_button.setVisible(False)
        layout.addWidget(self.next_button)

        layout.addStretch()

    def render(self, view: QuestionView) -> None:
        self.progress_bar.setValue(view.progress)
        self.heading_label.setText(view.heading)
        self.question_label.setText(renderer.render_fragment(view.text))
        self._rebuild_option_buttons(view)

        self.feedback_label.setText(view.feedback_text)
        self.feedback_label.setVisible(bool(view.feedback_text))
        if view.feedback_text:
            self.feedback_label.setStyleSheet(
                Styles.get_feedback_style(view.feedback_text == Feedback.CORRECT.value, self.theme)
            )

        self.next_button.setText(view.next_button_label)
        self.next_button.setVisible(view.show_next_button)

    def _rebuild_option_buttons(self, view: QuestionView) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.option_buttons = []
        for option_view in view.options:
            button = QPushButton(option_view.label, self)
            button.setEnabled(option_view.enabled)
            button.setStyleSheet(Styles.get_option_button_style(option_view.variant, self.theme))
            button.clicked.connect(
                lambda _checked=False, option=option_view.option: self.on_option_selected(option)
            )
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)
