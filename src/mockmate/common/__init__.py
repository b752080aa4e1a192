"""Common utilities shared across the package."""

from __future__ import annotations

from .exams import (
    ExamCode,
    get_exam_code,
    supported_exam_codes,
    UnsupportedCodeError,
)
from .text import (
    make_heading,
    format_choice,
    format_code,
    format_question,
    format_chapter,
    NO_CODE_PLACEHOLDER,
)

__all__ = [
    # exams
    "ExamCode",
    "get_exam_code",
    "supported_exam_codes",
    "UnsupportedCodeError",
    # text
    "make_heading",
    "format_choice",
    "format_code",
    "format_question",
    "format_chapter",
    "NO_CODE_PLACEHOLDER",
]
