"""
Content records: quiz questions and glossary terms.

Both are frozen dataclasses; the content store hands out the same instances
to every caller, so nothing downstream may change them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from .enums import Category, Level

OPTIONS_PER_QUESTION = 4


@dataclass(frozen=True)
class Question:
    """
    A multiple-choice question.

    Attributes:
        id: Unique question identifier (e.g. "nov_001")
        prompt: Question text
        options: Exactly four answer options
        correct_index: Index of the correct option (0-3)
        level: Literacy level the question targets
        category: Financial topic
        explanation: Why the correct option is correct
        difficulty_weight: 1-5 difficulty scale
        region_specific: Whether the content is specific to one country's system
    """
    id: str
    prompt: str
    options: Tuple[str, ...]
    correct_index: int
    level: Level
    category: Category
    explanation: str = ""
    difficulty_weight: int = 1
    region_specific: bool = False

    def __post_init__(self):
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(
                f"Question {self.id} must have {OPTIONS_PER_QUESTION} options, got {len(self.options)}"
            )
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"Question {self.id} correct_index {self.correct_index} is not a valid option index"
            )
        if not 1 <= self.difficulty_weight <= 5:
            raise ValueError(
                f"Question {self.id} difficulty_weight must be between 1 and 5, got {self.difficulty_weight}"
            )

    def is_correct(self, answer: Optional[int]) -> bool:
        """Whether ``answer`` selects the correct option."""
        return answer == self.correct_index

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        """Build a question from its JSON representation."""
        return cls(
            id=data["id"],
            prompt=data["prompt"],
            options=tuple(data["options"]),
            correct_index=data["correct_index"],
            level=Level(data["level"]),
            category=Category(data["category"]),
            explanation=data.get("explanation", ""),
            difficulty_weight=data.get("difficulty_weight", 1),
            region_specific=data.get("region_specific", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "prompt": self.prompt,
            "options": list(self.options),
            "correct_index": self.correct_index,
            "level": self.level.value,
            "category": self.category.value,
            "explanation": self.explanation,
            "difficulty_weight": self.difficulty_weight,
            "region_specific": self.region_specific,
        }

    def public_dict(self) -> Dict[str, Any]:
        """Dictionary safe to show before scoring (no answer, no explanation)."""
        data = self.to_dict()
        data.pop("correct_index")
        data.pop("explanation")
        return data


@dataclass(frozen=True)
class GlossaryTerm:
    """
    A glossary entry.

    ``related_term_ids`` may reference ids that are not in the glossary;
    lookups simply skip them.
    """
    id: str
    term: str
    definition: str
    level: Level
    category: Category
    related_term_ids: FrozenSet[str] = field(default_factory=frozenset)
    region_context: Optional[str] = None
    examples: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GlossaryTerm:
        """Build a term from its JSON representation."""
        examples = data.get("examples")
        return cls(
            id=data["id"],
            term=data["term"],
            definition=data["definition"],
            level=Level(data["level"]),
            category=Category(data["category"]),
            related_term_ids=frozenset(data.get("related_term_ids", [])),
            region_context=data.get("region_context"),
            examples=tuple(examples) if examples is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "term": self.term,
            "definition": self.definition,
            "level": self.level.value,
            "category": self.category.value,
            "related_term_ids": sorted(self.related_term_ids),
        }
        if self.region_context is not None:
            data["region_context"] = self.region_context
        if self.examples is not None:
            data["examples"] = list(self.examples)
        return data
