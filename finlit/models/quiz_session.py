"""
Quiz session model.

A session is created unscored by the quiz engine; scoring fills in
``score``, ``category_performance`` and ``completed_at``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .content import Question
from .enums import Category, Level
from .timestamps import from_iso, to_iso, utc_now

# Answer value for a question the user skipped
UNANSWERED = -1


def new_session_id() -> str:
    """Generate a session ID in the ``qs-<uuid4>`` format."""
    return f"qs-{uuid.uuid4()}"


@dataclass
class QuizSession:
    """
    One quiz attempt.

    Attributes:
        session_id: Session identifier (auto-generated)
        user_level: Level the quiz was generated for
        questions: Questions in presentation order (fixed at creation)
        user_answers: Selected option index per question, UNANSWERED if skipped
        score: Number of correct answers (0 until scored)
        total_questions: Number of questions in the session
        time_taken_seconds: Time the user spent on the quiz
        category_performance: Correct answers per category (sparse)
        completed_at: When the session was scored
        user_id: Optional owner of the session
        requested_count: Question count requested at generation
        created_at: When the session was created
    """
    user_level: Level
    questions: List[Question] = field(default_factory=list)
    user_answers: List[int] = field(default_factory=list)
    session_id: str = field(default_factory=new_session_id)
    score: int = 0
    total_questions: int = 0
    time_taken_seconds: int = 0
    category_performance: Dict[Category, int] = field(default_factory=dict)
    completed_at: Optional[datetime] = None
    user_id: Optional[str] = None
    requested_count: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        if not self.total_questions:
            self.total_questions = len(self.questions)
        if not self.user_answers:
            self.user_answers = [UNANSWERED] * len(self.questions)

    @property
    def is_scored(self) -> bool:
        """Whether scoring has run on this session."""
        return self.completed_at is not None

    @property
    def accuracy(self) -> float:
        """Percentage of questions answered correctly (0 for an empty session)."""
        if self.total_questions <= 0:
            return 0.0
        return self.score / self.total_questions * 100

    def answer_at(self, index: int) -> int:
        """Answer for question ``index``; missing entries count as unanswered."""
        if 0 <= index < len(self.user_answers):
            return self.user_answers[index]
        return UNANSWERED

    def answered_count(self) -> int:
        """Number of questions with a non-sentinel answer."""
        return sum(1 for i in range(len(self.questions)) if self.answer_at(i) != UNANSWERED)

    def public_questions(self) -> List[Dict[str, Any]]:
        """Questions formatted for display before scoring."""
        return [q.public_dict() for q in self.questions]

    def to_dict(self) -> Dict[str, Any]:
        """Convert quiz session to dictionary for persistence."""
        return {
            "session_id": self.session_id,
            "user_id": self.user_id,
            "user_level": self.user_level.value,
            "questions": [q.to_dict() for q in self.questions],
            "user_answers": list(self.user_answers),
            "score": self.score,
            "total_questions": self.total_questions,
            "requested_count": self.requested_count,
            "time_taken_seconds": self.time_taken_seconds,
            "category_performance": {c.value: n for c, n in self.category_performance.items()},
            "created_at": to_iso(self.created_at),
            "completed_at": to_iso(self.completed_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QuizSession:
        """Rebuild a session from its dictionary form."""
        return cls(
            session_id=data["session_id"],
            user_id=data.get("user_id"),
            user_level=Level(data["user_level"]),
            questions=[Question.from_dict(q) for q in data.get("questions", [])],
            user_answers=list(data.get("user_answers", [])),
            score=data.get("score", 0),
            total_questions=data.get("total_questions", 0),
            requested_count=data.get("requested_count"),
            time_taken_seconds=data.get("time_taken_seconds", 0),
            category_performance={
                Category(c): n for c, n in data.get("category_performance", {}).items()
            },
            created_at=from_iso(data.get("created_at")) or utc_now(),
            completed_at=from_iso(data.get("completed_at")),
        )
