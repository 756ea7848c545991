"""
Assessment result model.

``CategoryScores`` is the dense per-category map (all twelve categories,
zero-initialized). Quiz performance and mastery use sparse dicts instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from .enums import Category, Level
from .timestamps import from_iso, to_iso, utc_now


class CategoryScores(Mapping):
    """Dense Category -> score mapping; every category is always present."""

    def __init__(self, scores: Optional[Dict[Category, float]] = None):
        self._scores: Dict[Category, float] = {category: 0 for category in Category}
        for category, value in (scores or {}).items():
            self._scores[Category(category)] = value

    def __getitem__(self, category) -> float:
        try:
            key = Category(category)
        except ValueError:
            raise KeyError(category) from None
        return self._scores[key]

    def __iter__(self) -> Iterator[Category]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def add(self, category: Category, amount: float) -> None:
        """Add ``amount`` to a category's score."""
        self._scores[Category(category)] += amount

    def at_least(self, threshold: float) -> List[Category]:
        """Categories scoring ``>= threshold``, in enum order."""
        return [c for c, score in self._scores.items() if score >= threshold]

    def below(self, threshold: float) -> List[Category]:
        """Categories scoring ``< threshold``, in enum order."""
        return [c for c, score in self._scores.items() if score < threshold]

    def to_dict(self) -> Dict[str, float]:
        return {category.value: score for category, score in self._scores.items()}

    def __repr__(self) -> str:
        nonzero = {c.value: s for c, s in self._scores.items() if s}
        return f"CategoryScores({nonzero})"


@dataclass
class AssessmentResult:
    """
    Outcome of the placement pretest.

    Attributes:
        user_id: Opaque user identifier ("guest" for anonymous assessments)
        primary_level: Literacy level assigned by the pretest
        category_scores: Dense per-category difficulty-weighted scores
        strengths: Categories at or above the strength threshold
        improvement_areas: Categories below the strength threshold
        recommended_topics: Free-text guidance strings
        assessment_date: When the assessment was scored
    """
    user_id: str
    primary_level: Level
    category_scores: CategoryScores
    strengths: List[Category] = field(default_factory=list)
    improvement_areas: List[Category] = field(default_factory=list)
    recommended_topics: List[str] = field(default_factory=list)
    assessment_date: datetime = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "user_id": self.user_id,
            "primary_level": self.primary_level.value,
            "category_scores": self.category_scores.to_dict(),
            "strengths": [c.value for c in self.strengths],
            "improvement_areas": [c.value for c in self.improvement_areas],
            "recommended_topics": list(self.recommended_topics),
            "assessment_date": to_iso(self.assessment_date),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AssessmentResult:
        """Rebuild a result from its dictionary form."""
        return cls(
            user_id=data["user_id"],
            primary_level=Level(data["primary_level"]),
            category_scores=CategoryScores(
                {Category(k): v for k, v in data.get("category_scores", {}).items()}
            ),
            strengths=[Category(c) for c in data.get("strengths", [])],
            improvement_areas=[Category(c) for c in data.get("improvement_areas", [])],
            recommended_topics=list(data.get("recommended_topics", [])),
            assessment_date=from_iso(data["assessment_date"]),
        )
