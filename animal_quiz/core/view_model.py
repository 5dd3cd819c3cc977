"""Pure conversions from quiz state to what the widgets display."""

from __future__ import annotations

from dataclasses import dataclass

from animal_quiz.constants.quiz_constants import IMAGE_SUFFIX
from animal_quiz.constants.ui_constants import (
    NEXT_BUTTON,
    OPTION_VARIANT_SELECTED,
    OPTION_VARIANT_UNSELECTED,
    QUESTION_HEADING_TEMPLATE,
    RESULT_MATCH_TEMPLATE,
    RESULT_SCORE_TEMPLATE,
    RESULT_TITLE,
    SEE_RESULT_BUTTON,
    SHARE_TEXT_TEMPLATE,
)
from animal_quiz.core.models import Category, Option, QuizResult, QuizSession


@dataclass(frozen=True, slots=True)
class OptionView:
    """Render state of one option button."""

    option: Option
    label: str
    category: Category
    variant: str
    enabled: bool
    is_selected: bool


@dataclass(frozen=True, slots=True)
class QuestionView:
    """Everything the question panel needs for the active question."""

    heading: str
    text: str
    progress: int
    options: tuple[OptionView, ...]
    feedback_text: str
    show_next_button: bool
    next_button_label: str


@dataclass(frozen=True, slots=True)
class ResultView:
    """Everything the result panel needs once a run is complete."""

    title: str
    category: str
    image_name: str
    score_line: str
    match_line: str
    share_text: str


def build_question_view(session: QuizSession) -> QuestionView | None:
    """Return the view for the active question, or None once the run is complete."""
    question = session.current_question
    if question is None:
        return None

    total = session.total_questions
    selected = session.selected_option
    options = tuple(
        OptionView(
            option=option,
            label=option.label,
            category=option.category,
            variant=OPTION_VARIANT_SELECTED if option == selected else OPTION_VARIANT_UNSELECTED,
            enabled=selected is None,
            is_selected=option == selected,
        )
        for option in question.options
    )
    return QuestionView(
        heading=QUESTION_HEADING_TEMPLATE.format(number=session.current_index + 1, total=total),
        text=question.text,
        progress=int((session.current_index + 1) / total * 100),
        options=options,
        feedback_text=session.feedback.value if session.feedback else "",
        show_next_button=selected is not None,
        next_button_label=SEE_RESULT_BUTTON if session.is_last_question else NEXT_BUTTON,
    )


def build_result_view(result: QuizResult, share_url: str) -> ResultView:
    category = result.matched_category.value
    return ResultView(
        title=RESULT_TITLE,
        category=category,
        image_name=f"{category}{IMAGE_SUFFIX}",
        score_line=RESULT_SCORE_TEMPLATE.format(score=result.score, total=result.total_questions),
        match_line=RESULT_MATCH_TEMPLATE.format(category=category),
        share_text=format_share_text(result.score, share_url),
    )


def format_share_text(score: int, share_url: str) -> str:
    return SHARE_TEXT_TEMPLATE.format(score=score, url=share_url)
