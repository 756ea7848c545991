"""
Schema validation utilities for FinLit.

Provides JSON Schema validation with clear error messages, content
consistency checks and boundary coercion for caller-supplied values.

Features:
- Format validation (date-time)
- Unique ID checks for questions and glossary terms
- Dangling glossary references reported as warnings, not errors
- Level/category/answer coercion that fails fast with ValidationError
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from jsonschema import Draft7Validator, FormatChecker, ValidationError

from ..config import config
from ..models.enums import CATEGORY_VALUES, LEVEL_VALUES, Category, Level
from ..models.quiz_session import UNANSWERED


class ValidationResult:
    """
    Outcome of validating one document.

    Truthy when valid. ``warnings`` carries findings that do not make the
    document invalid, such as glossary references to unknown terms.
    """

    def __init__(
        self,
        valid: bool,
        errors: list[str],
        data: Any = None,
        warnings: Optional[list[str]] = None,
    ):
        self.valid = valid
        self.errors = errors
        self.data = data
        self.warnings = warnings or []

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        if not self.valid:
            lines = [f"✗ Validation failed with {len(self.errors)} error(s):"]
            lines.extend(f"  - {error}" for error in self.errors)
            return "\n".join(lines)
        suffix = f" (with {len(self.warnings)} warning(s))" if self.warnings else ""
        return f"✓ Validation passed{suffix}"

    def raise_for_errors(self) -> None:
        """
        Raise if the result is invalid.

        Raises:
            ValidationError: With every error message joined
        """
        if not self.valid:
            raise ValidationError("\n".join(self.errors))


class SchemaValidator:
    """
    Draft-07 JSON Schema validator for one schema file.

    Usage:
        result = SchemaValidator.for_schema("quiz_session").validate(session.to_dict())
        if not result:
            print(result)
    """

    def __init__(self, schema_path: Path | str):
        """
        Load a schema file.

        Args:
            schema_path: Path to a JSON Schema document
        """
        self.schema_path = Path(schema_path)
        self.schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
        # date-time fields are checked, not just typed as strings
        self.validator = Draft7Validator(self.schema, format_checker=FormatChecker())

    @classmethod
    def for_schema(cls, name: str) -> SchemaValidator:
        """Validator for a packaged schema, e.g. ``for_schema("user_progress")``."""
        return cls(config.paths.schema(name))

    def validate(self, data: Any) -> ValidationResult:
        """Collect every schema violation in ``data``."""
        errors = [self._describe(error) for error in self.validator.iter_errors(data)]
        return ValidationResult(valid=not errors, errors=errors, data=data)

    @staticmethod
    def _describe(error: ValidationError) -> str:
        location = " -> ".join(map(str, error.path)) or "root"
        rule = "/".join(map(str, error.schema_path))
        return f"At '{location}': {error.message} [validator={error.validator}, schema_path=/{rule}]"


class QuestionBankValidator(SchemaValidator):
    """
    Validator for question bank files (practice bank and pretest).

    Adds a duplicate-id check on top of the JSON Schema.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.schema("question_bank"))

    def validate(self, data: Any) -> ValidationResult:
        result = super().validate(data)
        if not result.valid:
            return result

        duplicates = find_duplicate_ids(data["questions"])
        if duplicates:
            return ValidationResult(
                valid=False,
                errors=[f"Duplicate question IDs found: {', '.join(sorted(duplicates))}"],
                data=data,
            )
        return result


class GlossaryValidator(SchemaValidator):
    """
    Validator for glossary files.

    Duplicate term ids are errors. Related-term ids that point at no term
    are tolerated and reported as warnings.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.schema("glossary"))

    def validate(self, data: Any) -> ValidationResult:
        result = super().validate(data)
        if not result.valid:
            return result

        terms = data["terms"]
        duplicates = find_duplicate_ids(terms)
        if duplicates:
            return ValidationResult(
                valid=False,
                errors=[f"Duplicate glossary term IDs found: {', '.join(sorted(duplicates))}"],
                data=data,
            )

        known = {t["id"] for t in terms}
        warnings = []
        for term in terms:
            for related_id in term.get("related_term_ids", []):
                if related_id == term["id"]:
                    warnings.append(f"Term '{term['id']}' lists itself as related")
                elif related_id not in known:
                    warnings.append(
                        f"Term '{term['id']}' references unknown related term '{related_id}'"
                    )

        return ValidationResult(valid=True, errors=[], data=data, warnings=warnings)


def find_duplicate_ids(records: Iterable[dict]) -> set[str]:
    """Ids that occur more than once in ``records``."""
    counts = Counter(r["id"] for r in records)
    return {i for i, c in counts.items() if c > 1}


# ==================== Boundary coercion ====================


def coerce_level(value: Any) -> Level:
    """
    Convert a caller-supplied level to a Level.

    Raises:
        ValidationError: If the value is not a known level
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, str) and value.strip().lower() in LEVEL_VALUES:
        return Level(value.strip().lower())
    raise ValidationError(f"Unknown literacy level {value!r}; expected one of {LEVEL_VALUES}")


def coerce_category(value: Any) -> Category:
    """
    Convert a caller-supplied category to a Category.

    Raises:
        ValidationError: If the value is not a known category
    """
    if isinstance(value, Category):
        return value
    if isinstance(value, str) and value.strip().lower() in CATEGORY_VALUES:
        return Category(value.strip().lower())
    raise ValidationError(f"Unknown category {value!r}; expected one of {CATEGORY_VALUES}")


def coerce_categories(values: Optional[Iterable[Any]]) -> Optional[set[Category]]:
    """Convert an optional collection of categories; ``None`` stays ``None``."""
    if values is None:
        return None
    if isinstance(values, (str, Category)):
        values = [values]
    return {coerce_category(v) for v in values}


def validate_answers(
    answers: Any,
    expected_length: Optional[int] = None,
    max_index: int = 3,
) -> List[int]:
    """
    Check an answer vector before it reaches the scoring code.

    Args:
        answers: Sequence of selected option indexes
        expected_length: Required length (None to skip the check)
        max_index: Highest valid option index

    Returns:
        The answers as a list of ints

    Raises:
        ValidationError: If answers are not ints in [UNANSWERED, max_index]
            or the length does not match
    """
    if isinstance(answers, (str, bytes)) or not isinstance(answers, Sequence):
        raise ValidationError(f"Answers must be a sequence of integers, got {type(answers).__name__}")

    errors = []
    for i, answer in enumerate(answers):
        # bool is an int subclass but never a meaningful option index
        if isinstance(answer, bool) or not isinstance(answer, int):
            errors.append(f"Answer {i} must be an integer, got {answer!r}")
        elif not UNANSWERED <= answer <= max_index:
            errors.append(f"Answer {i} must be between {UNANSWERED} and {max_index}, got {answer}")

    if expected_length is not None and len(answers) != expected_length:
        errors.append(f"Expected {expected_length} answers, got {len(answers)}")

    if errors:
        raise ValidationError("\n".join(errors))
    return list(answers)


# Convenience functions for quick validation
def validate_user_progress(data: dict) -> ValidationResult:
    """Validate a user progress snapshot (``UserProgress.to_dict()``)."""
    return SchemaValidator.for_schema("user_progress").validate(data)


def validate_quiz_session(data: dict) -> ValidationResult:
    """Validate a quiz session snapshot (``QuizSession.to_dict()``)."""
    return SchemaValidator.for_schema("quiz_session").validate(data)


def validate_assessment_result(data: dict) -> ValidationResult:
    """Validate an assessment result (``AssessmentResult.to_dict()``)."""
    return SchemaValidator.for_schema("assessment_result").validate(data)
