"""
Content Store - read-only question bank and financial glossary.

Content lives in JSON data files (``finlit/data``) and is loaded and
validated once. Every query is a pure read over the loaded tuples.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..config import config
from ..models.content import GlossaryTerm, Question
from ..models.enums import Category, Level
from ..utils.validation import GlossaryValidator, QuestionBankValidator

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_questions(path: Optional[Path] = None) -> Tuple[Question, ...]:
    """
    Load and validate a question bank file.

    Args:
        path: Bank file (defaults to the packaged practice bank)

    Returns:
        Questions in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file fails schema or duplicate-id checks
    """
    path = Path(path or config.paths.questions_file)
    data = _read_json(path)
    QuestionBankValidator().validate(data).raise_for_errors()

    questions = tuple(Question.from_dict(q) for q in data["questions"])
    logger.debug("Loaded %d questions from %s", len(questions), path)
    return questions


def load_glossary(path: Optional[Path] = None) -> Tuple[GlossaryTerm, ...]:
    """
    Load and validate a glossary file.

    Dangling related-term references are logged, not rejected.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file fails schema or duplicate-id checks
    """
    path = Path(path or config.paths.glossary_file)
    data = _read_json(path)
    result = GlossaryValidator().validate(data)
    result.raise_for_errors()
    for warning in result.warnings:
        logger.warning("Glossary %s: %s", path.name, warning)

    terms = tuple(GlossaryTerm.from_dict(t) for t in data["terms"])
    logger.debug("Loaded %d glossary terms from %s", len(terms), path)
    return terms


class ContentStore:
    """
    Immutable question bank and glossary.

    Usage:
        store = ContentStore.from_files()
        novice = store.questions_for_level(Level.NOVICE)
        related = store.related_terms("ira_roth")
    """

    def __init__(self, questions: Iterable[Question] = (), terms: Iterable[GlossaryTerm] = ()):
        """
        Initialize the store from already-built records.

        Args:
            questions: Practice-bank questions
            terms: Glossary terms
        """
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._terms: Tuple[GlossaryTerm, ...] = tuple(terms)
        self._questions_by_id = {q.id: q for q in self._questions}
        self._terms_by_id = {t.id: t for t in self._terms}

    @classmethod
    def from_files(
        cls,
        questions_path: Optional[Path] = None,
        glossary_path: Optional[Path] = None,
    ) -> ContentStore:
        """Load the store from JSON data files (packaged defaults if omitted)."""
        return cls(load_questions(questions_path), load_glossary(glossary_path))

    # ==================== Questions ====================

    def questions_all(self) -> List[Question]:
        """All questions in bank order."""
        return list(self._questions)

    def questions_for_level(self, level: Level) -> List[Question]:
        """Questions tagged with exactly ``level`` (no cascading between levels)."""
        return [q for q in self._questions if q.level == level]

    def questions_by_category(self, category: Category) -> List[Question]:
        """Questions in ``category`` across all levels."""
        return [q for q in self._questions if q.category == category]

    def get_question(self, question_id: str) -> Optional[Question]:
        """Question by ID, or None if unknown."""
        return self._questions_by_id.get(question_id)

    def categories_for_level(self, level: Level) -> List[Category]:
        """Categories with at least one question at ``level``, in enum order."""
        present = {q.category for q in self._questions if q.level == level}
        return [c for c in Category if c in present]

    # ==================== Glossary ====================

    def terms_all(self) -> List[GlossaryTerm]:
        """All glossary terms in file order."""
        return list(self._terms)

    def terms_by_category(self, category: Category) -> List[GlossaryTerm]:
        """Terms in exactly ``category``."""
        return [t for t in self._terms if t.category == category]

    def terms_by_level(self, level: Level) -> List[GlossaryTerm]:
        """Terms tagged with exactly ``level``."""
        return [t for t in self._terms if t.level == level]

    def get_term(self, term_id: str) -> Optional[GlossaryTerm]:
        """Term by ID, or None if unknown."""
        return self._terms_by_id.get(term_id)

    def related_terms(self, term_id: str) -> List[GlossaryTerm]:
        """
        Terms listed in ``term_id``'s related ids, in glossary order.

        Unknown ids (the term itself or any of its references) yield nothing.
        """
        term = self._terms_by_id.get(term_id)
        if term is None:
            return []
        return [t for t in self._terms if t.id in term.related_term_ids]

    def search_terms(self, text: str) -> List[GlossaryTerm]:
        """Terms whose name contains ``text`` (case-insensitive)."""
        needle = text.strip().lower()
        if not needle:
            return []
        return [t for t in self._terms if needle in t.term.lower()]

    def __repr__(self) -> str:
        return f"ContentStore(questions={len(self._questions)}, terms={len(self._terms)})"


_default_store: Optional[ContentStore] = None


def get_default_store() -> ContentStore:
    """Get or create the process-wide store backed by the packaged data."""
    global _default_store
    if _default_store is None:
        _default_store = ContentStore.from_files()
    return _default_store
