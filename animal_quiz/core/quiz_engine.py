"""State transitions for a single animal quiz run."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
import logging
import random

from animal_quiz.core.models import (
    Category,
    Feedback,
    Option,
    Question,
    QuizResult,
    QuizSession,
)
from animal_quiz.core.question_bank import DEFAULT_QUESTIONS, validate_question_bank

logger = logging.getLogger(__name__)


class QuizEngine:
    """Builds sessions from the template questions and applies user intents.

    The engine never stores the active session. Every operation receives the
    caller's session and returns the next one; ignored intents return the
    session they were given.
    """

    def __init__(
        self,
        questions: Sequence[Question] = DEFAULT_QUESTIONS,
        rng: random.Random | None = None,
    ) -> None:
        self._questions = validate_question_bank(questions)
        self._shuffle_rng = rng or random.Random()

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)

    def initialize(self) -> QuizSession:
        questions = self._shuffled(self._questions)
        session = QuizSession(
            questions=tuple(
                replace(question, options=tuple(self._shuffled(question.options)))
                for question in questions
            )
        )
        logger.info("Started quiz session with %d questions", session.total_questions)
        return session

    def select_option(self, session: QuizSession, option: Option) -> QuizSession:
        question = session.current_question
        if question is None:
            logger.debug("Ignoring selection: session is complete")
            return session
        if session.has_selection:
            logger.debug("Ignoring selection: question %d already answered", session.current_index + 1)
            return session
        if option not in question.options:
            logger.debug("Ignoring selection: '%s' is not an option of the current question", option.label)
            return session

        if not option.is_correct:
            return replace(session, selected_option=option, feedback=Feedback.INCORRECT)

        tally_counts = tuple(
            count + 1 if category is option.category else count
            for category, count in zip(Category, session.tally_counts)
        )
        return replace(
            session,
            selected_option=option,
            feedback=Feedback.CORRECT,
            score=session.score + 1,
            tally_counts=tally_counts,
        )

    def advance(self, session: QuizSession) -> QuizSession:
        if session.is_complete or not session.has_selection:
            logger.debug("Ignoring advance: no selection for the current question")
            return session

        if session.is_last_question:
            logger.info(
                "Quiz session complete: %d of %d correct", session.score, session.total_questions
            )
            return replace(
                session,
                selected_option=None,
                feedback=None,
                current_index=session.total_questions,
                is_complete=True,
            )
        return replace(
            session,
            selected_option=None,
            feedback=None,
            current_index=session.current_index + 1,
        )

    def compute_result(self, session: QuizSession) -> QuizResult | None:
        if not session.is_complete:
            logger.debug("No result yet: session is still in progress")
            return None
        return QuizResult(
            matched_category=matched_category(session.tally),
            score=session.score,
            total_questions=session.total_questions,
        )

    def retake(self, session: QuizSession | None = None) -> QuizSession:
        if session is not None:
            logger.info("Retaking quiz (previous score %d)", session.score)
        return self.initialize()

    def _shuffled(self, items: Sequence) -> list:
        shuffled = list(items)
        self._shuffle_rng.shuffle(shuffled)
        return shuffled


def matched_category(tally: Mapping[Category, int]) -> Category:
    """Return the highest-tallied animal, preferring earlier enum members on ties."""
    counts = {category: tally.get(category, 0) for category in Category}
    highest = max(counts.values())
    # NOTE: ties resolve by declaration order, not at random.
    return next(category for category, count in counts.items() if count == highest)
