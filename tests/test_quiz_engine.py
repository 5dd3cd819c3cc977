"""Tests for QuizEngine session transitions and scoring."""

from collections import Counter
import random

import pytest

from animal_quiz.core.models import Category, Feedback, Option, Question, QuizSession
from animal_quiz.core.question_bank import DEFAULT_QUESTIONS
from animal_quiz.core.quiz_engine import QuizEngine, matched_category
from conftest import answer_and_advance, correct_option, wrong_option


def _question_order(session: QuizSession) -> list[str]:
    return [question.text for question in session.questions]


def _layout(session: QuizSession) -> list[tuple[str, list[Category]]]:
    return [
        (question.text, [option.category for option in question.options])
        for question in session.questions
    ]


class TestInitialize:

    def test_fresh_session_state(self, engine):
        session = engine.initialize()

        assert session.current_index == 0
        assert session.score == 0
        assert session.tally == {category: 0 for category in Category}
        assert session.selected_option is None
        assert session.feedback is None
        assert not session.is_complete

    def test_questions_and_options_shape(self, engine):
        for _ in range(20):
            session = engine.initialize()
            assert session.total_questions == 5
            for question in session.questions:
                assert len(question.options) == 5
                assert sum(option.is_correct for option in question.options) == 1
                assert {option.category for option in question.options} == set(Category)

    def test_shuffle_is_a_permutation(self, engine):
        session = engine.initialize()

        assert sorted(_question_order(session)) == sorted(q.text for q in DEFAULT_QUESTIONS)
        templates = {question.text: question for question in DEFAULT_QUESTIONS}
        for question in session.questions:
            assert Counter(question.options) == Counter(templates[question.text].options)

    def test_template_questions_are_not_mutated(self, engine):
        before = [(q.text, q.options) for q in DEFAULT_QUESTIONS]
        for _ in range(10):
            engine.initialize()
        assert [(q.text, q.options) for q in DEFAULT_QUESTIONS] == before

    def test_same_seed_gives_same_order(self):
        first = QuizEngine(rng=random.Random(99)).initialize()
        second = QuizEngine(rng=random.Random(99)).initialize()
        assert _layout(first) == _layout(second)

    def test_set_shuffle_seed_reproduces_order(self, engine):
        engine.set_shuffle_seed(5)
        first = engine.initialize()
        engine.set_shuffle_seed(5)
        second = engine.initialize()
        assert _layout(first) == _layout(second)

    def test_question_order_is_roughly_uniform(self, engine):
        runs = 2000
        first_positions = Counter(engine.initialize().questions[0].text for _ in range(runs))

        assert set(first_positions) == {question.text for question in DEFAULT_QUESTIONS}
        for count in first_positions.values():
            assert runs / 5 * 0.7 < count < runs / 5 * 1.3

    def test_option_order_varies_independently(self, engine):
        layouts = {
            tuple(option.category for option in engine.initialize().questions[0].options)
            for _ in range(50)
        }
        assert len(layouts) > 1


class TestSelectOption:

    def test_correct_pick_scores_and_tallies(self, engine):
        session = engine.initialize()
        option = correct_option(session.current_question)

        updated = engine.select_option(session, option)

        assert updated.selected_option == option
        assert updated.feedback is Feedback.CORRECT
        assert updated.score == 1
        assert updated.tally[option.category] == 1
        assert sum(updated.tally.values()) == 1

    def test_wrong_pick_only_records_selection(self, engine):
        session = engine.initialize()
        option = wrong_option(session.current_question)

        updated = engine.select_option(session, option)

        assert updated.selected_option == option
        assert updated.feedback is Feedback.INCORRECT
        assert updated.score == 0
        assert sum(updated.tally.values()) == 0

    def test_second_pick_is_ignored(self, engine):
        session = engine.initialize()
        question = session.current_question
        first = engine.select_option(session, wrong_option(question))

        second = engine.select_option(first, correct_option(question))

        assert second is first
        assert second.selected_option == wrong_option(question)
        assert second.score == 0

    def test_original_session_is_untouched(self, engine):
        session = engine.initialize()
        engine.select_option(session, correct_option(session.current_question))

        assert session.selected_option is None
        assert session.score == 0
        assert sum(session.tally.values()) == 0

    def test_option_not_in_current_question_is_ignored(self, engine):
        session = engine.initialize()
        foreign = Option("Unicorn", Category.CAT, is_correct=True)

        assert engine.select_option(session, foreign) is session

    def test_selection_after_completion_is_ignored(self, engine):
        session = engine.initialize()
        for _ in range(session.total_questions):
            session = answer_and_advance(engine, session, correct=False)
        assert session.is_complete

        last_question = session.questions[-1]
        assert engine.select_option(session, correct_option(last_question)) is session


class TestAdvance:

    def test_advance_without_selection_is_ignored(self, engine):
        session = engine.initialize()
        assert engine.advance(session) is session

    def test_advance_moves_to_next_question(self, engine):
        session = engine.initialize()
        session = engine.select_option(session, correct_option(session.current_question))

        advanced = engine.advance(session)

        assert advanced.current_index == 1
        assert advanced.selected_option is None
        assert advanced.feedback is None
        assert advanced.score == 1
        assert not advanced.is_complete

    def test_advance_on_last_question_completes(self, engine):
        session = engine.initialize()
        for _ in range(session.total_questions - 1):
            session = answer_and_advance(engine, session, correct=True)
        assert session.is_last_question

        session = engine.select_option(session, wrong_option(session.current_question))
        finished = engine.advance(session)

        assert finished.is_complete
        assert finished.current_index == finished.total_questions
        assert finished.current_question is None
        assert finished.selected_option is None

    def test_advance_after_completion_is_ignored(self, engine):
        session = engine.initialize()
        for _ in range(session.total_questions):
            session = answer_and_advance(engine, session, correct=True)
        assert engine.advance(session) is session

    def test_score_matches_tally_throughout(self, engine):
        rng = random.Random(3)
        for _ in range(25):
            session = engine.initialize()
            while not session.is_complete:
                session = engine.select_option(
                    session, rng.choice(session.current_question.options)
                )
                assert session.score == sum(session.tally.values())
                assert session.score <= session.answered_count
                session = engine.advance(session)
                assert session.score == sum(session.tally.values())
                assert 0 <= session.current_index <= session.total_questions


class TestComputeResult:

    def test_no_result_while_in_progress(self, engine):
        session = engine.initialize()
        assert engine.compute_result(session) is None

    def test_all_correct_ties_resolve_to_cat(self, engine):
        session = engine.initialize()
        while not session.is_complete:
            session = answer_and_advance(engine, session, correct=True)

        result = engine.compute_result(session)

        assert result.score == 5
        assert result.total_questions == 5
        assert session.tally == {
            Category.CAT: 2,
            Category.DOG: 1,
            Category.FOX: 1,
            Category.HAMSTER: 0,
            Category.HORSE: 1,
        }
        assert result.matched_category is Category.CAT

    def test_five_way_tie_resolves_to_cat(self):
        bank = [
            Question(
                f"Question about {animal.value}?",
                tuple(Option(c.value.title(), c, is_correct=c is animal) for c in Category),
            )
            for animal in Category
        ]
        engine = QuizEngine(bank, rng=random.Random(8))
        session = engine.initialize()
        while not session.is_complete:
            session = answer_and_advance(engine, session, correct=True)

        result = engine.compute_result(session)

        assert result.score == 5
        assert result.total_questions == 5
        assert all(count == 1 for count in session.tally.values())
        assert result.matched_category is Category.CAT

    def test_only_first_template_question_correct(self, engine):
        first_text = DEFAULT_QUESTIONS[0].text
        session = engine.initialize()
        while not session.is_complete:
            is_first = session.current_question.text == first_text
            session = answer_and_advance(engine, session, correct=is_first)

        result = engine.compute_result(session)

        assert result.score == 1
        assert session.tally[Category.CAT] == 1
        assert sum(session.tally.values()) == 1
        assert result.matched_category is Category.CAT

    def test_all_wrong_resolves_to_first_animal(self, engine):
        session = engine.initialize()
        while not session.is_complete:
            session = answer_and_advance(engine, session, correct=False)

        result = engine.compute_result(session)

        assert result.score == 0
        assert result.matched_category is Category.CAT

    def test_only_fox_correct_matches_fox(self, engine):
        session = engine.initialize()
        while not session.is_complete:
            is_fox = correct_option(session.current_question).category is Category.FOX
            session = answer_and_advance(engine, session, correct=is_fox)

        assert engine.compute_result(session).matched_category is Category.FOX


class TestMatchedCategory:

    def test_highest_tally_wins(self):
        tally = {category: 0 for category in Category}
        tally[Category.HORSE] = 3
        tally[Category.DOG] = 2
        assert matched_category(tally) is Category.HORSE

    def test_ties_resolve_in_declaration_order(self):
        tally = {category: 1 for category in Category}
        assert matched_category(tally) is Category.CAT

        tally = {Category.CAT: 0, Category.DOG: 0, Category.FOX: 2, Category.HAMSTER: 2, Category.HORSE: 2}
        assert matched_category(tally) is Category.FOX

    def test_insertion_order_of_tally_does_not_matter(self):
        tally = {Category.HORSE: 1, Category.HAMSTER: 1, Category.CAT: 0, Category.DOG: 0, Category.FOX: 0}
        assert matched_category(tally) is Category.HAMSTER


class TestRetake:

    def test_retake_resets_state(self, engine):
        session = engine.initialize()
        while not session.is_complete:
            session = answer_and_advance(engine, session, correct=True)

        fresh = engine.retake(session)

        assert fresh.current_index == 0
        assert fresh.score == 0
        assert all(count == 0 for count in fresh.tally.values())
        assert not fresh.is_complete
        assert fresh.selected_option is None

    def test_retake_reshuffles(self, engine):
        session = engine.initialize()
        orders = [_layout(engine.retake(session)) for _ in range(10)]
        assert any(order != _layout(session) for order in orders)

    def test_retake_without_session(self, engine):
        assert engine.retake().current_index == 0


class TestSessionSnapshots:

    def test_tally_is_read_only(self, engine):
        session = engine.initialize()

        with pytest.raises(TypeError):
            session.tally[Category.HAMSTER] = 7

    def test_advanced_snapshot_does_not_share_tally(self, engine):
        session = engine.initialize()
        answered = engine.select_option(session, correct_option(session.current_question))
        advanced = engine.advance(answered)

        with pytest.raises(TypeError):
            advanced.tally[Category.HAMSTER] += 7
        assert answered.tally[Category.HAMSTER] == 0
        assert answered.score == sum(answered.tally.values())
        assert advanced.score == sum(advanced.tally.values())

    def test_earlier_snapshots_keep_their_counts(self, engine):
        snapshots = [engine.initialize()]
        while not snapshots[-1].is_complete:
            current = snapshots[-1]
            snapshots.append(engine.select_option(current, correct_option(current.current_question)))
            snapshots.append(engine.advance(snapshots[-1]))

        assert [s.score for s in snapshots] == [0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5]
        for snapshot in snapshots:
            assert snapshot.score == sum(snapshot.tally.values())

    def test_sessions_are_hashable(self, engine):
        session = engine.initialize()
        answered = engine.select_option(session, correct_option(session.current_question))

        assert hash(session) == hash(session)
        assert len({session, answered, engine.advance(answered)}) == 3
