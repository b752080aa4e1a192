"""
Module: loading.parser

Purpose:
    Parse and validate the JSON files of a chapter directory: the chapter
    meta.json and the per-question q<N>.json records.

Key Functions:
    - parse_chapter_meta(): Parse meta.json
    - parse_question(): Parse a question file into a Question
    - parse_question_from_dict(): Parse an already-decoded question record

Key Classes:
    - ParsedChapterMeta: Parsed meta.json contents
    - ParseError: Exception for parse failures

Dependencies:
    - json (std)
    - pathlib (std)
    - mockmate.core.schemas.validator: Record validation

Used By:
    - loading.loader: Chapter loading
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from mockmate.core.models import Question
from mockmate.core.schemas.validator import (
    ValidationError,
    validate_chapter_meta,
    validate_question_record,
)

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Error parsing a chapter resource file."""
    pass


@dataclass(frozen=True)
class ParsedChapterMeta:
    """
    Parsed meta.json contents.

    Attributes:
        number: Chapter number (from the directory, unless the file gives one)
        title: Chapter title
    """
    number: int
    title: str


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ParseError(f"File not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ParseError(f"Cannot read {path}: {e}") from e


def parse_chapter_meta(path: Path, number: int, *, strict: bool = False) -> ParsedChapterMeta:
    """
    Parse a chapter meta.json file.

    Args:
        path: Path to meta.json
        number: Chapter number implied by the chapter directory
        strict: Validate against the JSON schema as well

    Returns:
        ParsedChapterMeta object

    Raises:
        ParseError: If file missing, invalid JSON, or invalid fields

    Example:
        >>> meta = parse_chapter_meta(Path("chapter1/meta.json"), 1)
        >>> meta.title
        'Building Blocks'
    """
    data = _read_json(path)

    try:
        validate_chapter_meta(data, strict=strict)
    except ValidationError as e:
        raise ParseError(f"Invalid chapter metadata in {path}: {e}") from e

    declared = data.get("number", number)
    if declared != number:
        logger.debug(f"{path} declares chapter {declared}, directory says {number}; using {number}")

    return ParsedChapterMeta(number=number, title=data["title"])


def parse_question(path: Path, *, strict: bool = False) -> Question:
    """
    Parse a question file.

    Args:
        path: Path to q<N>.json
        strict: Validate against the JSON schema as well

    Raises:
        ParseError: If file missing, invalid JSON, or invalid record
    """
    data = _read_json(path)
    return parse_question_from_dict(data, source=str(path), strict=strict)


def parse_question_from_dict(
    data: Dict[str, Any],
    *,
    source: str = "record",
    strict: bool = False,
) -> Question:
    """
    Parse a question from a decoded record.

    Args:
        data: Dict with ordinal, questionText, codeSnippet, choices, answers
        source: Source identifier for error messages
        strict: Validate against the JSON schema as well

    Returns:
        Question object

    Raises:
        ParseError: If the record is invalid
    """
    try:
        validate_question_record(data, strict=strict)
    except ValidationError as e:
        where = f" at {e.path}" if e.path else ""
        raise ParseError(f"Invalid question record in {source}{where}: {e}") from e

    try:
        return Question.from_dict(data)
    except (ValueError, TypeError) as e:
        raise ParseError(f"Invalid question record in {source}: {e}") from e
