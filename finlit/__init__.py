"""
FinLit: financial literacy content, placement assessment, quiz scoring and
progress tracking.
"""

from .models import (
    AssessmentResult,
    Category,
    CategoryScores,
    GlossaryTerm,
    Level,
    Question,
    QuizSession,
    UNANSWERED,
    UserProgress,
)
from .content import ContentStore, get_default_store
from .engines import AssessmentEngine, ProgressTracker, QuizEngine, QuizSelection
from .orchestrator import LearningPlatform

__version__ = "0.1.0"

__all__ = [
    "AssessmentResult",
    "Category",
    "CategoryScores",
    "GlossaryTerm",
    "Level",
    "Question",
    "QuizSession",
    "UNANSWERED",
    "UserProgress",
    "ContentStore",
    "get_default_store",
    "AssessmentEngine",
    "ProgressTracker",
    "QuizEngine",
    "QuizSelection",
    "LearningPlatform",
]
