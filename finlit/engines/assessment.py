"""
Assessment Engine - places a user at a literacy level from a fixed pretest.

Scoring rules:
- A correct answer adds its level weight (novice=1, intermediate=2,
  advanced=3) to that level's total and its difficulty weight to its
  category's score.
- The primary level is novice unless a higher level's total is strictly
  greater than the best total seen so far (checked intermediate first,
  then advanced), so ties favour the lower level.
- Categories scoring at or above the strength threshold are strengths;
  all others, including untouched ones, are improvement areas.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from ..config import config
from ..content.store import load_questions
from ..models.assessment import AssessmentResult, CategoryScores
from ..models.content import Question
from ..models.enums import Category, Level

logger = logging.getLogger(__name__)

LEVEL_GUIDANCE: Dict[Level, str] = {
    Level.NOVICE: (
        "Start with our 'Foundations of Finance' quiz and read the glossary terms "
        "in the Novice section."
    ),
    Level.INTERMEDIATE: (
        "Challenge yourself with our Intermediate quizzes and explore concepts like "
        "investment diversification and tax strategies."
    ),
    Level.ADVANCED: (
        "You're ready for our Advanced quizzes. Dive into complex topics like options, "
        "real estate investment trusts, and advanced tax planning."
    ),
}


class AssessmentEngine:
    """
    Scores the placement pretest.

    The pretest is its own content resource (``data/pretest.json``) and is
    independent of the practice question bank.
    """

    def __init__(
        self,
        pretest: Optional[Iterable[Question]] = None,
        pretest_path: Optional[Path] = None,
    ):
        """
        Initialize the engine.

        Args:
            pretest: Pretest questions in order (loaded from file if None)
            pretest_path: Pretest file (defaults to config.paths.pretest_file)
        """
        if pretest is None:
            pretest = load_questions(pretest_path or config.paths.pretest_file)
        self._pretest = tuple(pretest)

    def pretest_questions(self) -> List[Question]:
        """The pretest in presentation order."""
        return list(self._pretest)

    def assess_user(self, answers: Sequence[int], user_id: Optional[str] = None) -> AssessmentResult:
        """
        Determine a user's literacy level from pretest answers.

        Args:
            answers: Selected option index per pretest question; a shorter
                sequence leaves the remaining questions unanswered
            user_id: Opaque user identifier (defaults to "guest")

        Returns:
            AssessmentResult with level, category scores and recommendations
        """
        weights = config.assessment.level_weights
        level_scores = {level: 0 for level in Level}
        category_scores = CategoryScores()

        for index, question in enumerate(self._pretest):
            answer = answers[index] if index < len(answers) else None
            if question.is_correct(answer):
                level_scores[question.level] += weights[question.level.value]
                category_scores.add(question.category, question.difficulty_weight)

        primary_level = self._primary_level(level_scores)

        threshold = config.assessment.strength_threshold
        improvement_areas = category_scores.below(threshold)
        strengths = category_scores.at_least(threshold)

        result = AssessmentResult(
            user_id=user_id or config.assessment.default_user_id,
            primary_level=primary_level,
            category_scores=category_scores,
            strengths=strengths,
            improvement_areas=improvement_areas,
            recommended_topics=self.generate_recommendations(primary_level, improvement_areas),
        )
        logger.debug(
            "Assessed %s: level=%s level_scores=%s",
            result.user_id,
            primary_level.value,
            {level.value: score for level, score in level_scores.items()},
        )
        return result

    @staticmethod
    def _primary_level(level_scores: Dict[Level, int]) -> Level:
        primary = Level.NOVICE
        best = level_scores[Level.NOVICE]
        if level_scores[Level.INTERMEDIATE] > best:
            primary = Level.INTERMEDIATE
            best = level_scores[Level.INTERMEDIATE]
        if level_scores[Level.ADVANCED] > best:
            primary = Level.ADVANCED
        return primary

    @staticmethod
    def generate_recommendations(level: Level, improvement_areas: List[Category]) -> List[str]:
        """Guidance strings: improvement areas first (if any), then level advice."""
        recommendations = []
        if improvement_areas:
            areas = ", ".join(c.value for c in improvement_areas)
            recommendations.append(
                f"Based on your assessment, focus on these areas: {areas}. "
                "Try our targeted quizzes and glossary sections for these topics."
            )
        recommendations.append(LEVEL_GUIDANCE[level])
        return recommendations
