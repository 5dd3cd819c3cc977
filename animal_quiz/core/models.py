"""Domain models for the animal quiz."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class Category(Enum):
    """Animals a quiz run can resolve to.

    Declaration order doubles as the tie-break order used when several
    animals share the highest tally.
    """

    CAT = "cat"
    DOG = "dog"
    FOX = "fox"
    HAMSTER = "hamster"
    HORSE = "horse"


class Feedback(Enum):
    """Outcome shown after an option is picked."""

    CORRECT = "Correct!"
    INCORRECT = "Incorrect!"


@dataclass(frozen=True, slots=True)
class Option:
    """Single answer choice attributed to one animal."""

    label: str
    category: Category
    is_correct: bool = False


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly five options."""

    text: str
    options: tuple[Option, ...]


def empty_tally() -> tuple[int, ...]:
    return tuple(0 for _ in Category)


@dataclass(frozen=True, slots=True)
class QuizSession:
    """Snapshot of one quiz run; engine operations return updated copies."""

    questions: tuple[Question, ...]
    current_index: int = 0
    score: int = 0
    # One count per Category, in declaration order.
    tally_counts: tuple[int, ...] = field(default_factory=empty_tally)
    selected_option: Option | None = None
    feedback: Feedback | None = None
    is_complete: bool = False

    @property
    def tally(self) -> Mapping[Category, int]:
        """Read-only view of correct answers per animal."""
        return MappingProxyType(dict(zip(Category, self.tally_counts)))

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question | None:
        if self.is_complete or not 0 <= self.current_index < len(self.questions):
            return None
        return self.questions[self.current_index]

    @property
    def has_selection(self) -> bool:
        return self.selected_option is not None

    @property
    def is_last_question(self) -> bool:
        return self.current_index == len(self.questions) - 1

    @property
    def answered_count(self) -> int:
        """Questions answered so far, including a pending selection."""
        if self.is_complete:
            return len(self.questions)
        return self.current_index + (1 if self.has_selection else 0)


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Final outcome of a completed run."""

    matched_category: Category
    score: int
    total_questions: int
