"""
Progress Tracker - folds scored quiz sessions into cumulative user progress.

Known approximations, kept as-is:
- Overall accuracy is recombined from the previous percentage and question
  count each time, so it is subject to float drift over many sessions.
- Category mastery is the mean of the previous mastery value and the
  session's raw correct-answer count for that category. The count is not a
  percentage, so mastery does not settle on a 0-100 scale.
- The streak only records whether the previous activity was recent
  (1) or not (0); it does not count consecutive days.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config import config
from ..models.enums import Level
from ..models.progress import UserProgress
from ..models.quiz_session import QuizSession
from ..models.timestamps import as_utc, utc_now
from ..utils.progress import mastery_by_band, mastery_histogram, mastery_summary, weakest_categories

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24


class ProgressTracker:
    """Updates progress, awards achievements and produces study advice."""

    @staticmethod
    def new_progress(user_id: str, level: Level = Level.NOVICE) -> UserProgress:
        """Empty progress record for a user's first session."""
        return UserProgress(user_id=user_id, current_level=level)

    def update_progress(
        self,
        progress: UserProgress,
        session: QuizSession,
        now: Optional[datetime] = None,
    ) -> UserProgress:
        """
        Apply a scored session to a user's progress.

        The input progress is left untouched; a new snapshot is returned.

        Args:
            progress: Progress before this session
            session: Scored quiz session
            now: Current time (defaults to UTC now)

        Returns:
            Updated progress
        """
        now = as_utc(now) if now is not None else utc_now()
        updated = deepcopy(progress)

        total_correct = (
            progress.total_questions_answered * progress.overall_accuracy / 100 + session.score
        )
        total_answered = progress.total_questions_answered + session.total_questions
        updated.overall_accuracy = (
            total_correct / total_answered * 100 if total_answered > 0 else 0.0
        )
        updated.total_quizzes_completed = progress.total_quizzes_completed + 1
        updated.total_questions_answered = total_answered

        for category, correct_count in session.category_performance.items():
            current = updated.category_mastery.get(category, 0)
            updated.category_mastery[category] = (current + correct_count) / 2

        updated.achievements = self.check_achievements(updated, session)
        updated.learning_streak = self.calculate_learning_streak(progress.last_activity, now)
        updated.last_activity = now

        logger.info(
            "Progress for %s: quizzes=%d accuracy=%.1f%% streak=%d",
            updated.user_id,
            updated.total_quizzes_completed,
            updated.overall_accuracy,
            updated.learning_streak,
        )
        return updated

    def check_achievements(self, progress: UserProgress, session: QuizSession) -> List[str]:
        """
        Achievements after this session; existing ones are always kept.

        ``progress`` must already count the session in
        ``total_quizzes_completed``.
        """
        settings = config.progress
        achievements = list(progress.achievements)

        if (
            session.score == session.total_questions
            and settings.perfect_score_achievement not in achievements
        ):
            achievements.append(settings.perfect_score_achievement)

        if (
            progress.total_quizzes_completed >= settings.quiz_whiz_quizzes
            and settings.quiz_whiz_achievement not in achievements
        ):
            achievements.append(settings.quiz_whiz_achievement)

        for name in achievements[len(progress.achievements):]:
            logger.info("Achievement unlocked for %s: %s", progress.user_id, name)

        return achievements

    @staticmethod
    def calculate_learning_streak(
        last_activity: Optional[datetime],
        now: Optional[datetime] = None,
    ) -> int:
        """1 if there was no earlier activity or it was recent enough, else 0."""
        if last_activity is None:
            return 1
        now = as_utc(now) if now is not None else utc_now()
        days = int((now - as_utc(last_activity)).total_seconds() // SECONDS_PER_DAY)
        return 1 if days <= config.progress.streak_window_days else 0

    def generate_recommendations(self, progress: UserProgress) -> List[str]:
        """
        Study advice based on mastery and overall accuracy.

        Returns:
            One focus string per weak category, then accuracy-based advice
        """
        settings = config.progress
        recommendations = []

        for category, mastery in progress.category_mastery.items():
            if mastery < settings.mastery_focus_threshold:
                recommendations.append(f"Focus on improving {category.value} knowledge")

        if progress.overall_accuracy < settings.low_accuracy_threshold:
            recommendations.append("Review fundamental concepts in the glossary")
            recommendations.append("Try starting with easier quiz levels")
        elif progress.overall_accuracy > settings.high_accuracy_threshold:
            recommendations.append("Challenge yourself with advanced level quizzes")
            recommendations.append("Explore complex financial strategies")

        return recommendations

    def summarize(self, progress: UserProgress) -> Dict[str, Any]:
        """
        Dashboard summary of a user's progress.

        Returns:
            Dict with headline counters plus mastery statistics
        """
        mastery = progress.category_mastery
        return {
            "user_id": progress.user_id,
            "current_level": progress.current_level.value,
            "quizzes_completed": progress.total_quizzes_completed,
            "questions_answered": progress.total_questions_answered,
            "overall_accuracy": round(progress.overall_accuracy, 2),
            "learning_streak": progress.learning_streak,
            "achievements": list(progress.achievements),
            "mastery": mastery_summary(mastery),
            "mastery_histogram": mastery_histogram(mastery),
            "mastery_bands": mastery_by_band(mastery),
            "weakest_categories": weakest_categories(mastery),
        }
