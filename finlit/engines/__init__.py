"""
Scoring and selection engines.

- AssessmentEngine: placement pretest scoring
- QuizEngine: quiz generation and session scoring
- ProgressTracker: cumulative progress, achievements, recommendations
"""

from .assessment import AssessmentEngine
from .quiz import QuizEngine, QuizSelection
from .progress import ProgressTracker

__all__ = [
    "AssessmentEngine",
    "QuizEngine",
    "QuizSelection",
    "ProgressTracker",
]
