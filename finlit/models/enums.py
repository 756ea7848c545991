"""
Literacy levels and financial topic categories.
"""

from __future__ import annotations

from enum import Enum


class Level(str, Enum):
    """Financial literacy level, ordered novice < intermediate < advanced."""

    NOVICE = "novice"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        """Position in the level ordering (0 = novice)."""
        return _LEVEL_ORDER.index(self)

    def __lt__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value


_LEVEL_ORDER = [Level.NOVICE, Level.INTERMEDIATE, Level.ADVANCED]


class Category(str, Enum):
    """Financial topic categories used to organize content and track mastery."""

    SAVINGS = "savings"
    RETIREMENT = "retirement"
    INVESTING = "investing"
    CREDIT = "credit"
    PLANNING = "planning"
    ECONOMICS = "economics"
    TAXATION = "taxation"
    REAL_ESTATE = "real_estate"
    EDUCATION = "education"
    INSURANCE = "insurance"
    BUDGETING = "budgeting"
    DEBT_MANAGEMENT = "debt_management"

    def __str__(self) -> str:
        return self.value


LEVEL_VALUES = [level.value for level in Level]
CATEGORY_VALUES = [category.value for category in Category]
