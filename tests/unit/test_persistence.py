"""
Unit tests for the progress store contract and the in-memory store.
"""

from datetime import timedelta

import pytest
from jsonschema import ValidationError

from finlit.engines.quiz import QuizEngine
from finlit.models import Category, Level, QuizSession, UserProgress
from finlit.utils.persistence import InMemoryStore, ProgressStore


@pytest.fixture
def memory_store():
    return InMemoryStore()


class TestInMemoryStore:
    def test_satisfies_protocol(self, memory_store):
        assert isinstance(memory_store, ProgressStore)

    def test_unknown_ids_load_as_none(self, memory_store):
        assert memory_store.load_progress("nobody") is None
        assert memory_store.load_session("qs-missing") is None

    def test_progress_round_trip(self, memory_store, fixed_now):
        progress = UserProgress(
            user_id="u-1",
            current_level=Level.ADVANCED,
            total_quizzes_completed=2,
            total_questions_answered=20,
            overall_accuracy=75.0,
            category_mastery={Category.CREDIT: 3.5},
            learning_streak=1,
            achievements=["Perfect Score"],
            last_activity=fixed_now,
        )
        memory_store.save_progress(progress)
        assert memory_store.load_progress("u-1") == progress

    def test_saved_snapshot_is_isolated(self, memory_store):
        progress = UserProgress(user_id="u-1")
        memory_store.save_progress(progress)

        progress.achievements.append("Quiz Whiz")
        loaded = memory_store.load_progress("u-1")
        loaded.total_quizzes_completed = 99

        again = memory_store.load_progress("u-1")
        assert again.achievements == []
        assert again.total_quizzes_completed == 0

    def test_invalid_progress_rejected(self, memory_store):
        progress = UserProgress(user_id="u-1", overall_accuracy=150.0)
        with pytest.raises(ValidationError, match="overall_accuracy"):
            memory_store.save_progress(progress)
        assert memory_store.load_progress("u-1") is None

    def test_validation_can_be_disabled(self):
        store = InMemoryStore(validate=False)
        store.save_progress(UserProgress(user_id="u-1", overall_accuracy=150.0))
        assert store.load_progress("u-1").overall_accuracy == 150.0

    def test_session_round_trip(self, memory_store, sample_session):
        QuizEngine().score_quiz(sample_session)
        memory_store.save_session(sample_session)

        loaded = memory_store.load_session(sample_session.session_id)
        assert loaded == sample_session
        assert loaded is not sample_session

    def test_sessions_for_user_newest_first(self, memory_store, question_factory, fixed_now):
        older = QuizSession(
            user_level=Level.NOVICE,
            questions=[question_factory("a")],
            user_id="u-1",
            created_at=fixed_now - timedelta(hours=1),
        )
        newer = QuizSession(
            user_level=Level.NOVICE,
            questions=[question_factory("b")],
            user_id="u-1",
            created_at=fixed_now,
        )
        someone_else = QuizSession(user_level=Level.NOVICE, user_id="u-2")
        for session in (older, newer, someone_else):
            memory_store.save_session(session)

        ids = [s.session_id for s in memory_store.sessions_for_user("u-1")]
        assert ids == [newer.session_id, older.session_id]
