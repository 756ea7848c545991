"""
Unit tests for the quiz engine: generation, shuffling and scoring.
"""

import random

import pytest

from finlit.content.store import ContentStore
from finlit.engines.quiz import QuizEngine, QuizSelection
from finlit.models import UNANSWERED, Category, Level, QuizSession


@pytest.fixture
def engine(store, rng):
    """Quiz engine over the packaged content with a seeded RNG."""
    return QuizEngine(store, rng=rng)


class TestGenerateQuiz:
    """Question selection."""

    @pytest.mark.parametrize("level", list(Level))
    def test_returns_exact_count_when_pool_is_large_enough(self, engine, store, level):
        pool_ids = {q.id for q in store.questions_for_level(level)}
        selection = engine.generate_quiz(level, count=5)

        assert len(selection) == 5
        assert not selection.insufficient
        assert {q.id for q in selection} <= pool_ids

    def test_no_duplicates(self, engine):
        selection = engine.generate_quiz(Level.NOVICE, count=10)
        ids = [q.id for q in selection]
        assert len(ids) == len(set(ids))

    def test_default_count_is_ten(self, engine):
        selection = engine.generate_quiz(Level.NOVICE)
        assert selection.requested_count == 10
        assert len(selection) == 10

    def test_insufficient_pool_returns_whole_pool(self, engine, store, caplog):
        pool_ids = {q.id for q in store.questions_for_level(Level.ADVANCED)}

        with caplog.at_level("WARNING", logger="finlit"):
            selection = engine.generate_quiz(Level.ADVANCED, count=50)

        assert isinstance(selection, QuizSelection)
        assert selection.insufficient
        assert selection.requested_count == 50
        assert {q.id for q in selection} == pool_ids
        assert "Not enough questions" in caplog.text

    def test_focus_categories_filter(self, engine):
        selection = engine.generate_quiz(Level.NOVICE, count=3, focus_categories={Category.SAVINGS})
        assert len(selection) == 3
        assert all(q.category == Category.SAVINGS for q in selection)

    def test_focus_category_smaller_than_count(self, engine):
        selection = engine.generate_quiz(Level.NOVICE, count=5, focus_categories=[Category.CREDIT])
        assert [q.id for q in selection] == ["nov_004"]
        assert selection.insufficient

    def test_empty_focus_categories_means_no_filter(self, engine):
        selection = engine.generate_quiz(Level.INTERMEDIATE, count=6, focus_categories=set())
        assert len(selection) == 6
        assert not selection.insufficient

    def test_focus_category_absent_at_level(self, engine):
        selection = engine.generate_quiz(Level.ADVANCED, count=3, focus_categories={Category.INSURANCE})
        assert list(selection) == []
        assert selection.insufficient

    def test_negative_count_rejected(self, engine):
        with pytest.raises(ValueError, match="cannot be negative"):
            engine.generate_quiz(Level.NOVICE, count=-3)

    def test_zero_count_is_empty(self, engine):
        selection = engine.generate_quiz(Level.NOVICE, count=0)
        assert list(selection) == []
        assert not selection.insufficient

    def test_same_seed_same_order(self, store):
        first = QuizEngine(store, seed=99).generate_quiz(Level.NOVICE, count=10)
        second = QuizEngine(store, seed=99).generate_quiz(Level.NOVICE, count=10)
        assert [q.id for q in first] == [q.id for q in second]

    def test_shuffle_produces_varied_orders(self, store):
        engine = QuizEngine(store, rng=random.Random(7))
        orders = {tuple(q.id for q in engine.generate_quiz(Level.NOVICE, count=10)) for _ in range(20)}
        assert len(orders) > 1

    def test_every_question_can_be_selected(self, store):
        engine = QuizEngine(store, rng=random.Random(3))
        seen = set()
        for _ in range(200):
            seen.update(q.id for q in engine.generate_quiz(Level.NOVICE, count=2))
        assert seen == {q.id for q in store.questions_for_level(Level.NOVICE)}

    def test_does_not_reorder_store(self, engine, store):
        before = [q.id for q in store.questions_for_level(Level.NOVICE)]
        engine.generate_quiz(Level.NOVICE, count=4)
        assert [q.id for q in store.questions_for_level(Level.NOVICE)] == before

    def test_create_session(self, engine):
        session = engine.create_session(Level.INTERMEDIATE, count=4, user_id="u-1")
        assert isinstance(session, QuizSession)
        assert session.total_questions == 4
        assert session.requested_count == 4
        assert session.user_answers == [UNANSWERED] * 4
        assert session.user_id == "u-1"
        assert not session.is_scored


class TestScoreQuiz:
    """Session scoring."""

    def test_score_and_category_performance(self, sample_session):
        scored = QuizEngine(ContentStore()).score_quiz(sample_session)

        assert scored is sample_session
        assert scored.score == 3
        assert scored.total_questions == 4
        assert scored.category_performance == {Category.SAVINGS: 2, Category.CREDIT: 1}
        assert scored.completed_at is not None

    def test_categories_without_correct_answers_are_absent(self, sample_session):
        scored = QuizEngine(ContentStore()).score_quiz(sample_session)
        assert Category.BUDGETING not in scored.category_performance

    def test_unanswered_never_counts(self, sample_session):
        sample_session.user_answers = [UNANSWERED] * 4
        scored = QuizEngine(ContentStore()).score_quiz(sample_session)
        assert scored.score == 0
        assert scored.category_performance == {}

    def test_short_answer_list_is_safe(self, sample_session):
        sample_session.user_answers = [1]
        scored = QuizEngine(ContentStore()).score_quiz(sample_session)
        assert scored.score == 1

    def test_rescoring_is_idempotent(self, sample_session):
        engine = QuizEngine(ContentStore())
        first = engine.score_quiz(sample_session)
        score, performance = first.score, dict(first.category_performance)

        second = engine.score_quiz(sample_session)
        assert second.score == score
        assert second.category_performance == performance
