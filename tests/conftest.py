"""Shared fixtures for the animal quiz tests."""

from __future__ import annotations

import random

import pytest

from animal_quiz.core.models import Option, Question, QuizSession
from animal_quiz.core.quiz_engine import QuizEngine


@pytest.fixture
def engine() -> QuizEngine:
    return QuizEngine(rng=random.Random(1234))


def correct_option(question: Question) -> Option:
    return next(option for option in question.options if option.is_correct)


def wrong_option(question: Question) -> Option:
    return next(option for option in question.options if not option.is_correct)


def answer_and_advance(engine: QuizEngine, session: QuizSession, correct: bool) -> QuizSession:
    question = session.current_question
    assert question is not None
    option = correct_option(question) if correct else wrong_option(question)
    return engine.advance(engine.select_option(session, option))
