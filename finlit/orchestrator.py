"""
Learning Platform - entry point for callers such as web handlers or UIs.

Orchestrates the complete flow:
1. Placement pretest (assessment)
2. Quiz generation for a level and optional focus categories
3. Quiz submission and scoring
4. Progress updates, achievements and recommendations

All caller-supplied values are validated here, before they reach the
engines; invalid input raises ``jsonschema.ValidationError``.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterable, List, Optional, Sequence

from jsonschema import ValidationError

from .content.store import ContentStore, get_default_store
from .engines.assessment import AssessmentEngine
from .engines.progress import ProgressTracker
from .engines.quiz import QuizEngine
from .models.assessment import AssessmentResult
from .models.progress import UserProgress
from .models.quiz_session import QuizSession
from .utils.persistence import InMemoryStore, ProgressStore
from .utils.validation import coerce_categories, coerce_level, validate_answers

logger = logging.getLogger(__name__)


class LearningPlatform:
    """
    Wires content, engines and a caller-supplied progress store.

    Usage:
        platform = LearningPlatform()
        result = platform.assess([1, 2, 0, 0, 2], user_id="u-1")
        session = platform.start_quiz(result.primary_level, count=5, user_id="u-1")
        platform.submit_quiz(session, answers, time_taken_seconds=120)
        progress = platform.record_quiz("u-1", session)
    """

    def __init__(
        self,
        content: Optional[ContentStore] = None,
        store: Optional[ProgressStore] = None,
        assessment_engine: Optional[AssessmentEngine] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the platform.

        Args:
            content: Content store (defaults to the packaged content)
            store: Progress/session store (defaults to an InMemoryStore)
            assessment_engine: Pretest engine (defaults to the packaged pretest)
            rng: Random source for quiz shuffling
        """
        self.content = content or get_default_store()
        self.store = store if store is not None else InMemoryStore()
        self.assessment_engine = assessment_engine or AssessmentEngine()
        self.quiz_engine = QuizEngine(self.content, rng=rng)
        self.tracker = ProgressTracker()

    # ==================== Assessment ====================

    def assess(self, answers: Sequence[int], user_id: Optional[str] = None) -> AssessmentResult:
        """
        Score the placement pretest.

        A shorter answer list is allowed (missing answers are wrong), but
        not a longer one.

        Raises:
            ValidationError: If answers are malformed
        """
        pretest_length = len(self.assessment_engine.pretest_questions())
        answers = validate_answers(answers)
        if len(answers) > pretest_length:
            raise ValidationError(
                f"Pretest has {pretest_length} questions, got {len(answers)} answers"
            )
        return self.assessment_engine.assess_user(answers, user_id=user_id)

    # ==================== Quizzes ====================

    def start_quiz(
        self,
        level: Any,
        count: Optional[int] = None,
        focus_categories: Optional[Iterable[Any]] = None,
        user_id: Optional[str] = None,
    ) -> QuizSession:
        """
        Create an unscored quiz session.

        Args:
            level: Level member or name ("novice", ...)
            count: Number of questions (default from config)
            focus_categories: Category members or names to focus on
            user_id: Owner of the session

        Raises:
            ValidationError: On unknown level/category or a non-positive count
        """
        level = coerce_level(level)
        focus = coerce_categories(focus_categories)
        if count is not None and (isinstance(count, bool) or not isinstance(count, int) or count < 1):
            raise ValidationError(f"Question count must be a positive integer, got {count!r}")

        session = self.quiz_engine.create_session(level, count, focus, user_id=user_id)
        if session.total_questions < (session.requested_count or 0):
            logger.info(
                "Session %s has %d of %d requested questions",
                session.session_id,
                session.total_questions,
                session.requested_count,
            )
        return session

    def submit_quiz(
        self,
        session: QuizSession,
        answers: Sequence[int],
        time_taken_seconds: int = 0,
    ) -> QuizSession:
        """
        Record a user's answers, score the session and save it.

        Raises:
            ValidationError: If answers do not match the session's questions
                or the elapsed time is not a non-negative integer
        """
        answers = validate_answers(answers, expected_length=len(session.questions))
        if isinstance(time_taken_seconds, bool) or not isinstance(time_taken_seconds, int):
            raise ValidationError(
                f"Time taken must be an integer number of seconds, got {time_taken_seconds!r}"
            )
        if time_taken_seconds < 0:
            raise ValidationError(f"Time taken cannot be negative: {time_taken_seconds}")

        session.user_answers = answers
        session.time_taken_seconds = int(time_taken_seconds)
        self.quiz_engine.score_quiz(session)
        self.store.save_session(session)
        return session

    # ==================== Progress ====================

    def get_progress(self, user_id: str) -> Optional[UserProgress]:
        """Stored progress for a user, or None."""
        return self.store.load_progress(user_id)

    def record_quiz(self, user_id: str, session: QuizSession) -> UserProgress:
        """
        Fold a scored session into the user's stored progress.

        Progress is created at the session's level on first use.

        Raises:
            ValidationError: If the session has not been scored
        """
        if not session.is_scored:
            raise ValidationError(f"Session {session.session_id} has not been scored")

        progress = self.store.load_progress(user_id)
        if progress is None:
            progress = self.tracker.new_progress(user_id, session.user_level)

        updated = self.tracker.update_progress(progress, session)
        self.store.save_progress(updated)
        return updated

    def recommendations(self, user_id: str) -> List[str]:
        """Study advice for a user (empty if the user has no progress yet)."""
        progress = self.store.load_progress(user_id)
        if progress is None:
            return []
        return self.tracker.generate_recommendations(progress)

    def progress_summary(self, user_id: str) -> Dict[str, Any]:
        """Dashboard summary for a user (a fresh record if none is stored)."""
        progress = self.store.load_progress(user_id) or self.tracker.new_progress(user_id)
        return self.tracker.summarize(progress)
