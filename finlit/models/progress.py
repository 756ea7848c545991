"""
Cumulative user progress model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .enums import Category, Level
from .timestamps import from_iso, to_iso


@dataclass
class UserProgress:
    """
    Long-term learning state for one user.

    ``category_mastery`` only holds categories the user has answered
    correctly at least once. ``last_activity`` is None until the first
    progress update.
    """
    user_id: str
    current_level: Level = Level.NOVICE
    total_quizzes_completed: int = 0
    total_questions_answered: int = 0
    overall_accuracy: float = 0.0
    category_mastery: Dict[Category, float] = field(default_factory=dict)
    learning_streak: int = 0
    achievements: List[str] = field(default_factory=list)
    last_activity: Optional[datetime] = None

    def has_achievement(self, name: str) -> bool:
        return name in self.achievements

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "user_id": self.user_id,
            "current_level": self.current_level.value,
            "total_quizzes_completed": self.total_quizzes_completed,
            "total_questions_answered": self.total_questions_answered,
            "overall_accuracy": self.overall_accuracy,
            "category_mastery": {c.value: m for c, m in self.category_mastery.items()},
            "learning_streak": self.learning_streak,
            "achievements": list(self.achievements),
            "last_activity": to_iso(self.last_activity),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> UserProgress:
        """Rebuild progress from its dictionary form."""
        return cls(
            user_id=data["user_id"],
            current_level=Level(data.get("current_level", Level.NOVICE.value)),
            total_quizzes_completed=data.get("total_quizzes_completed", 0),
            total_questions_answered=data.get("total_questions_answered", 0),
            overall_accuracy=data.get("overall_accuracy", 0.0),
            category_mastery={
                Category(c): m for c, m in data.get("category_mastery", {}).items()
            },
            learning_streak=data.get("learning_streak", 0),
            achievements=list(data.get("achievements", [])),
            last_activity=from_iso(data.get("last_activity")),
        )

    def __repr__(self) -> str:
        return (
            f"UserProgress(user_id={self.user_id}, "
            f"level={self.current_level.value}, "
            f"quizzes={self.total_quizzes_completed}, "
            f"accuracy={self.overall_accuracy:.1f}%)"
        )
