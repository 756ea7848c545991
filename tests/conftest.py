"""
Shared pytest fixtures and configuration for FinLit tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Make the package importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from finlit.content.store import ContentStore, get_default_store
from finlit.models import Category, Level, Question, QuizSession, UserProgress


@pytest.fixture
def store() -> ContentStore:
    """The packaged question bank and glossary."""
    return get_default_store()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible quizzes."""
    return random.Random(1234)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed 'current time' for streak calculations."""
    return datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def make_question(
    qid: str,
    level: Level = Level.NOVICE,
    category: Category = Category.SAVINGS,
    correct_index: int = 0,
    difficulty_weight: int = 1,
) -> Question:
    """Build a throwaway question for tests."""
    return Question(
        id=qid,
        prompt=f"Prompt for {qid}?",
        options=("A", "B", "C", "D"),
        correct_index=correct_index,
        level=level,
        category=category,
        explanation=f"Explanation for {qid}.",
        difficulty_weight=difficulty_weight,
    )


@pytest.fixture
def question_factory():
    """Factory fixture for ad-hoc questions."""
    return make_question


@pytest.fixture
def sample_session() -> QuizSession:
    """A four-question novice session with answers filled in (3 correct)."""
    questions = [
        make_question("q1", category=Category.SAVINGS, correct_index=1),
        make_question("q2", category=Category.SAVINGS, correct_index=2),
        make_question("q3", category=Category.CREDIT, correct_index=0),
        make_question("q4", category=Category.BUDGETING, correct_index=3),
    ]
    return QuizSession(
        user_level=Level.NOVICE,
        questions=questions,
        user_answers=[1, 2, 0, 0],
        user_id="user-test",
    )


@pytest.fixture
def empty_progress() -> UserProgress:
    """Progress record for a user with no history."""
    return UserProgress(user_id="user-test")


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
