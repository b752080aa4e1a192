"""
Schema Validation Utilities

Validates raw question and chapter-metadata records before they are turned
into models.

Two levels:
- Basic checks (always): required fields, types and the same invariants
  the models enforce, reported with the offending field path
- Strict mode: full JSON Schema validation against the bundled
  `*.schema.json` files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schemas are loaded lazily and cached
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when a record fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question_record(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a raw question record.

    Expected keys: ordinal, questionText, codeSnippet (optional),
    choices (optional), answers.

    Args:
        data: Question dictionary to validate
        strict: If True, also validate against question.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Question record must be an object, got {type(data).__name__}")

    _require(data, ["ordinal", "questionText", "answers"])

    ordinal = data["ordinal"]
    if not _is_int(ordinal) or ordinal <= 0:
        raise ValidationError(
            f"Invalid ordinal: {ordinal!r} (must be a positive integer)",
            path="ordinal",
        )

    text = data["questionText"]
    if not isinstance(text, str) or not text:
        raise ValidationError("questionText must be a non-empty string", path="questionText")

    snippet = data.get("codeSnippet")
    if snippet is not None and not isinstance(snippet, str):
        raise ValidationError("codeSnippet must be a string or null", path="codeSnippet")

    choices = data.get("choices", [])
    if not isinstance(choices, list):
        raise ValidationError("choices must be a list", path="choices")
    for i, choice in enumerate(choices):
        if not isinstance(choice, str):
            raise ValidationError(
                f"Invalid choice: {choice!r} (must be a string)",
                path=f"choices[{i}]",
            )

    _validate_answers(data["answers"])

    if strict:
        _validate_against_schema(data, "question")


def validate_chapter_meta(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a chapter meta.json record.

    Args:
        data: Metadata dictionary ({"title": ..., "number": optional})
        strict: If True, also validate against chapter_meta.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Chapter metadata must be an object, got {type(data).__name__}")

    _require(data, ["title"])

    title = data["title"]
    if not isinstance(title, str) or not title:
        raise ValidationError("title must be a non-empty string", path="title")

    if "number" in data:
        number = data["number"]
        if not _is_int(number) or number <= 0:
            raise ValidationError(
                f"Invalid chapter number: {number!r} (must be a positive integer)",
                path="number",
            )

    if strict:
        _validate_against_schema(data, "chapter_meta")


def _require(data: dict[str, Any], required: list[str]) -> None:
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )


def _validate_answers(answers: Any) -> None:
    """Answers are a non-empty list of single letters or a non-empty string."""
    if isinstance(answers, str):
        if not answers:
            raise ValidationError("answers cannot be empty", path="answers")
        return

    if not isinstance(answers, list) or not answers:
        raise ValidationError(
            "answers must be a non-empty list or string",
            path="answers",
        )
    for i, answer in enumerate(answers):
        if not isinstance(answer, str) or len(answer) != 1:
            raise ValidationError(
                f"Invalid answer: {answer!r} (must be a single character)",
                path=f"answers[{i}]",
            )


def _validate_against_schema(data: dict[str, Any], schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid number here
    return isinstance(value, int) and not isinstance(value, bool)
