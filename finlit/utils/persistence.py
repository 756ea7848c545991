"""
Progress and session persistence contract.

The library does not own durable storage. Callers plug in any object that
implements ``ProgressStore``; ``InMemoryStore`` is a validating reference
implementation for tests and single-process use.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ..models.progress import UserProgress
from ..models.quiz_session import QuizSession
from .validation import SchemaValidator

logger = logging.getLogger(__name__)


@runtime_checkable
class ProgressStore(Protocol):
    """Storage interface the learning platform reads and writes through."""

    def load_progress(self, user_id: str) -> Optional[UserProgress]:
        ...

    def save_progress(self, progress: UserProgress) -> None:
        ...

    def load_session(self, session_id: str) -> Optional[QuizSession]:
        ...

    def save_session(self, session: QuizSession) -> None:
        ...


class InMemoryStore:
    """
    Dict-backed ProgressStore.

    Features:
    - Stores ``to_dict()`` snapshots, so callers never share mutable state
      with the store
    - Validates snapshots against the packaged JSON schemas before saving
    - Lists sessions per user, newest first
    """

    def __init__(self, validate: bool = True):
        """
        Initialize the store.

        Args:
            validate: Whether to validate snapshots before saving
        """
        self.validate = validate
        self._progress: Dict[str, Dict[str, Any]] = {}
        self._sessions: Dict[str, Dict[str, Any]] = {}
        self._progress_validator: Optional[SchemaValidator] = None
        self._session_validator: Optional[SchemaValidator] = None

    def _check(self, validator_attr: str, schema_name: str, data: dict) -> None:
        if not self.validate:
            return
        if getattr(self, validator_attr) is None:
            setattr(self, validator_attr, SchemaValidator.for_schema(schema_name))
        getattr(self, validator_attr).validate(data).raise_for_errors()

    def load_progress(self, user_id: str) -> Optional[UserProgress]:
        """Load progress for a user, or None if never saved."""
        data = self._progress.get(user_id)
        if data is None:
            return None
        return UserProgress.from_dict(deepcopy(data))

    def save_progress(self, progress: UserProgress) -> None:
        """
        Save a progress snapshot.

        Raises:
            ValidationError: If the snapshot does not match the schema
        """
        data = progress.to_dict()
        self._check("_progress_validator", "user_progress", data)
        self._progress[progress.user_id] = data
        logger.debug("Saved progress for %s", progress.user_id)

    def load_session(self, session_id: str) -> Optional[QuizSession]:
        """Load a quiz session by ID, or None if not found."""
        data = self._sessions.get(session_id)
        if data is None:
            return None
        return QuizSession.from_dict(deepcopy(data))

    def save_session(self, session: QuizSession) -> None:
        """
        Save a quiz session snapshot.

        Raises:
            ValidationError: If the snapshot does not match the schema
        """
        data = session.to_dict()
        self._check("_session_validator", "quiz_session", data)
        self._sessions[session.session_id] = data
        logger.debug("Saved session %s", session.session_id)

    def sessions_for_user(self, user_id: str) -> List[QuizSession]:
        """All sessions owned by ``user_id``, newest first."""
        sessions = [
            QuizSession.from_dict(deepcopy(data))
            for data in self._sessions.values()
            if data.get("user_id") == user_id
        ]
        sessions.sort(key=lambda s: s.created_at, reverse=True)
        return sessions
