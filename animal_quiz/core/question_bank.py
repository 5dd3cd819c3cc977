"""Template question set and its validation rules."""

from __future__ import annotations

from collections.abc import Iterable

from animal_quiz.core.models import Category, Option, Question


class QuestionBankError(ValueError):
    """Raised when question data breaks the five-animal option rules."""


def _options(correct: Category) -> tuple[Option, ...]:
    return tuple(
        Option(label=category.value.capitalize(), category=category, is_correct=category is correct)
        for category in Category
    )


DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question("What type of animal do you prefer for a pet?", _options(Category.CAT)),
    Question("Which animal do you think is the most independent?", _options(Category.CAT)),
    Question("Which animal would you choose for a quick getaway?", _options(Category.FOX)),
    Question("Which animal do you think is the most energetic?", _options(Category.DOG)),
    Question("Which animal would you prefer for a long ride?", _options(Category.HORSE)),
)


def validate_question(question: Question) -> Question:
    """Check a single question and return it unchanged."""
    if not question.text.strip():
        raise QuestionBankError("Question text must not be empty.")

    option_count = len(Category)
    if len(question.options) != option_count:
        raise QuestionBankError(
            f"Each question must have exactly {option_count} options, got {len(question.options)}."
        )

    categories = {option.category for option in question.options}
    if len(categories) != option_count:
        raise QuestionBankError(f"Options must cover every animal once: '{question.text}'.")

    if any(not option.label.strip() for option in question.options):
        raise QuestionBankError("Option label cannot be empty.")

    correct_count = sum(1 for option in question.options if option.is_correct)
    if correct_count != 1:
        raise QuestionBankError(
            f"Exactly one option must be correct, found {correct_count}: '{question.text}'."
        )
    return question


def validate_question_bank(questions: Iterable[Question]) -> tuple[Question, ...]:
    """Validate every question and return the bank as a tuple."""
    bank = tuple(questions)
    if not bank:
        raise QuestionBankError("Quiz must contain at least one question.")
    for question in bank:
        validate_question(question)
    return bank
