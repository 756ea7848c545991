"""
Configuration management for FinLit.

This module centralizes all configuration settings:
- Environment variables (optionally from a .env file) override defaults
- Sensible defaults for development
- Single source of truth for thresholds, paths and logging
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class PathConfig:
    """File system paths for packaged content and schemas."""

    package_root: Path = field(default_factory=lambda: Path(__file__).parent)
    data_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("FINLIT_DATA_DIR", str(Path(__file__).parent / "data"))
        )
    )

    # Computed from data_dir / package_root
    questions_file: Path = field(init=False)
    glossary_file: Path = field(init=False)
    pretest_file: Path = field(init=False)
    schemas_dir: Path = field(init=False)

    def __post_init__(self):
        """Initialize computed paths."""
        self.refresh()

    def refresh(self):
        """Recompute derived paths after data_dir changes."""
        self.questions_file = self.data_dir / "questions.json"
        self.glossary_file = self.data_dir / "glossary.json"
        self.pretest_file = self.data_dir / "pretest.json"
        self.schemas_dir = self.package_root / "schemas"

    def schema(self, name: str) -> Path:
        """Path of a packaged JSON schema, e.g. ``schema("question")``."""
        return self.schemas_dir / f"{name}.schema.json"


@dataclass
class AssessmentConfig:
    """Pretest scoring configuration."""

    # Contribution of a correct pretest answer to its level accumulator
    level_weights: Dict[str, int] = field(
        default_factory=lambda: {"novice": 1, "intermediate": 2, "advanced": 3}
    )
    # Category score at or above this is a strength
    strength_threshold: int = 5
    default_user_id: str = "guest"


@dataclass
class QuizConfig:
    """Quiz generation configuration."""

    default_question_count: int = field(
        default_factory=lambda: _env_int("FINLIT_DEFAULT_QUESTION_COUNT") or 10
    )

    # Reproducibility
    random_seed: Optional[int] = field(
        default_factory=lambda: _env_int("FINLIT_RANDOM_SEED")
    )


@dataclass
class ProgressConfig:
    """Progress tracking thresholds and achievement names."""

    mastery_focus_threshold: float = 60.0
    low_accuracy_threshold: float = 70.0
    high_accuracy_threshold: float = 85.0

    perfect_score_achievement: str = "Perfect Score"
    quiz_whiz_achievement: str = "Quiz Whiz"
    quiz_whiz_quizzes: int = 5

    # Activity within this many whole days keeps the streak alive
    streak_window_days: int = 1


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("FINLIT_LOG_LEVEL", "INFO"))
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from finlit.config import config

        count = config.quiz.default_question_count
        config.quiz.random_seed = 7  # reproducible quizzes
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.assessment = AssessmentConfig()
            cls._instance.quiz = QuizConfig()
            cls._instance.progress = ProgressConfig()
            cls._instance.logging = LoggingConfig()

        return cls._instance

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        # Path validation
        for label, path in [
            ("Question bank", self.paths.questions_file),
            ("Glossary", self.paths.glossary_file),
            ("Pretest", self.paths.pretest_file),
        ]:
            if not path.exists():
                errors.append(f"{label} file not found: {path}")

        if not self.paths.schemas_dir.is_dir():
            errors.append(f"Schemas directory not found: {self.paths.schemas_dir}")

        # Assessment validation
        expected_levels = {"novice", "intermediate", "advanced"}
        if set(self.assessment.level_weights) != expected_levels:
            errors.append(
                f"Assessment level_weights must define exactly {sorted(expected_levels)}, "
                f"got {sorted(self.assessment.level_weights)}"
            )
        if any(w <= 0 for w in self.assessment.level_weights.values()):
            errors.append("Assessment level_weights must all be > 0")

        if self.assessment.strength_threshold < 0:
            errors.append(
                f"Assessment strength_threshold must be >= 0, got {self.assessment.strength_threshold}"
            )

        # Quiz validation
        if self.quiz.default_question_count < 1:
            errors.append(
                f"Quiz default_question_count must be >= 1, got {self.quiz.default_question_count}"
            )

        # Progress validation
        for name in ("mastery_focus_threshold", "low_accuracy_threshold", "high_accuracy_threshold"):
            value = getattr(self.progress, name)
            if not (0 <= value <= 100):
                errors.append(f"Progress {name} must be in [0, 100], got {value}")

        if self.progress.low_accuracy_threshold > self.progress.high_accuracy_threshold:
            errors.append(
                "Progress low_accuracy_threshold must not exceed high_accuracy_threshold"
            )

        if self.progress.streak_window_days < 0:
            errors.append(
                f"Progress streak_window_days must be >= 0, got {self.progress.streak_window_days}"
            )

        # Logging validation
        if self.logging.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"Unknown log level: {self.logging.log_level}")

        return errors


# Global config instance
config = Config()
