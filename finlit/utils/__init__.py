"""
Utility modules for FinLit.

This module contains utility functions:
- validation: JSON Schema validation and boundary coercion
- progress: Mastery analytics helpers
- persistence: Progress store protocol and in-memory store
- logging_utils: Package logging setup
"""

from .validation import (
    ValidationResult,
    SchemaValidator,
    QuestionBankValidator,
    GlossaryValidator,
    coerce_level,
    coerce_category,
    coerce_categories,
    validate_answers,
    validate_user_progress,
    validate_quiz_session,
    validate_assessment_result,
)
from .progress import (
    mastery_histogram,
    mastery_summary,
    mastery_by_band,
    weakest_categories,
)
from .persistence import (
    ProgressStore,
    InMemoryStore,
)
from .logging_utils import configure_logging

__all__ = [
    # Validation
    "ValidationResult",
    "SchemaValidator",
    "QuestionBankValidator",
    "GlossaryValidator",
    "coerce_level",
    "coerce_category",
    "coerce_categories",
    "validate_answers",
    "validate_user_progress",
    "validate_quiz_session",
    "validate_assessment_result",
    # Progress analytics
    "mastery_histogram",
    "mastery_summary",
    "mastery_by_band",
    "weakest_categories",
    # Persistence
    "ProgressStore",
    "InMemoryStore",
    # Logging
    "configure_logging",
]
