"""
Quiz Engine - builds personalized quizzes and scores completed sessions.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Optional

from ..config import config
from ..content.store import ContentStore, get_default_store
from ..models.content import Question
from ..models.enums import Category, Level
from ..models.quiz_session import QuizSession
from ..models.timestamps import utc_now

logger = logging.getLogger(__name__)


class QuizSelection(list):
    """
    Questions picked for a quiz.

    Behaves as a plain list; ``insufficient`` is True when the pool held
    fewer questions than requested and the whole pool was returned.
    """

    def __init__(self, questions: Iterable[Question], requested_count: int):
        super().__init__(questions)
        self.requested_count = requested_count

    @property
    def insufficient(self) -> bool:
        return len(self) < self.requested_count


class QuizEngine:
    """
    Generates and scores quizzes.

    Features:
    - Level-exact question pools, optionally narrowed to focus categories
    - Uniform random selection (seedable for reproducible quizzes)
    - Graceful degradation when the pool is smaller than requested
    """

    def __init__(
        self,
        store: Optional[ContentStore] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the quiz engine.

        Args:
            store: Content store (defaults to the packaged content)
            rng: Random source for shuffling (takes precedence over seed)
            seed: Seed for a private random source (defaults to config.quiz.random_seed)
        """
        self.store = store or get_default_store()
        if rng is None:
            rng = random.Random(seed if seed is not None else config.quiz.random_seed)
        self.rng = rng

    def generate_quiz(
        self,
        level: Level,
        count: Optional[int] = None,
        focus_categories: Optional[Iterable[Category]] = None,
    ) -> QuizSelection:
        """
        Pick questions for a quiz.

        Args:
            level: Literacy level to draw questions from
            count: Number of questions wanted (default from config, 10)
            focus_categories: Restrict to these categories (ignored if empty)

        Returns:
            QuizSelection of up to ``count`` distinct questions in random order

        Raises:
            ValueError: If count is negative
        """
        if count is None:
            count = config.quiz.default_question_count
        if count < 0:
            raise ValueError(f"Question count cannot be negative, got {count}")

        pool = self.store.questions_for_level(level)

        focus = set(focus_categories or ())
        if focus:
            pool = [q for q in pool if q.category in focus]

        self.rng.shuffle(pool)

        if len(pool) < count:
            logger.warning(
                "Not enough questions for level=%s categories=%s: requested %d, returning %d",
                level.value,
                sorted(c.value for c in focus) or "all",
                count,
                len(pool),
            )
            return QuizSelection(pool, count)

        return QuizSelection(pool[:count], count)

    def create_session(
        self,
        level: Level,
        count: Optional[int] = None,
        focus_categories: Optional[Iterable[Category]] = None,
        user_id: Optional[str] = None,
    ) -> QuizSession:
        """Generate a quiz and wrap it in a new, unscored session."""
        selection = self.generate_quiz(level, count, focus_categories)
        return QuizSession(
            user_level=level,
            questions=list(selection),
            requested_count=selection.requested_count,
            user_id=user_id,
        )

    def score_quiz(self, session: QuizSession) -> QuizSession:
        """
        Score a completed session in place.

        Score and category performance depend only on the session's
        questions and answers, so re-scoring gives the same result;
        ``completed_at`` is reset to the time of the latest call.

        Args:
            session: Session with questions and user answers filled in

        Returns:
            The same session, scored
        """
        correct = 0
        performance: Dict[Category, int] = {}

        for index, question in enumerate(session.questions):
            if question.is_correct(session.answer_at(index)):
                correct += 1
                performance[question.category] = performance.get(question.category, 0) + 1

        session.score = correct
        session.total_questions = len(session.questions)
        session.category_performance = performance
        session.completed_at = utc_now()

        logger.debug(
            "Scored session %s: %d/%d", session.session_id, correct, session.total_questions
        )
        return session
