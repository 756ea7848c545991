"""
Data models for the financial literacy library.

This module contains:
- Level, Category: literacy levels and topic categories
- Question, GlossaryTerm: immutable content records
- AssessmentResult, CategoryScores: pretest outcome
- QuizSession: one quiz attempt
- UserProgress: cumulative learning state
"""

from .enums import Category, Level
from .content import GlossaryTerm, Question
from .assessment import AssessmentResult, CategoryScores
from .quiz_session import UNANSWERED, QuizSession
from .progress import UserProgress

__all__ = [
    "Category",
    "Level",
    "Question",
    "GlossaryTerm",
    "AssessmentResult",
    "CategoryScores",
    "QuizSession",
    "UNANSWERED",
    "UserProgress",
]
