"""
Record validation for question and chapter-metadata JSON.
"""

from .validator import (
    validate_question_record,
    validate_chapter_meta,
    ValidationError,
)

__all__ = [
    "validate_question_record",
    "validate_chapter_meta",
    "ValidationError",
]
