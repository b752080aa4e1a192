"""
Module: common.exams

Purpose:
    Exam-code metadata for the Oracle Java certification exams that have
    bundled question resources.

Key Functions:
    - get_exam_code(): Look up an ExamCode by its code string
    - supported_exam_codes(): List all known exam code strings

Used By:
    - loading.loader: Resolving exam resource directories
"""

from __future__ import annotations

from enum import Enum
from typing import List

__all__ = [
    "ExamCode",
    "get_exam_code",
    "supported_exam_codes",
    "UnsupportedCodeError",
]


class UnsupportedCodeError(ValueError):
    """Raised when an exam code is not known."""


class ExamCode(Enum):
    """Certification exam codes and the Java version each one tests."""

    EXAM_1Z0_811 = ("1Z0-811", "Foundations")
    EXAM_1Z0_808 = ("1Z0-808", "SE 8")
    EXAM_1Z0_830 = ("1Z0-830", "SE 21")
    EXAM_1Z0_829 = ("1Z0-829", "SE 17")
    EXAM_1Z0_819 = ("1Z0-819", "SE 11")
    EXAM_1Z0_809 = ("1Z0-809", "SE 8")
    EXAM_1Z0_900 = ("1Z0-900", "EE 7")
    EXAM_1Z0_895 = ("1Z0-895", "EE 6 EJB")
    EXAM_1Z0_897 = ("1Z0-897", "EE 6 Web Services")
    EXAM_1Z0_898 = ("1Z0-898", "EE 6 JPA")
    EXAM_1Z0_899 = ("1Z0-899", "EE 6 Web Component")
    EXAM_1Z0_807 = ("1Z0-807", "EE 6 Enterprise Architect")
    EXAM_1Z0_865 = ("1Z0-865", "EE Enterprise Architect Assignment")
    EXAM_1Z0_866 = ("1Z0-866", "EE Enterprise Architect Essay")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def java_version(self) -> str:
        return self.value[1]

    def __str__(self) -> str:
        return self.code


def supported_exam_codes() -> List[str]:
    """
    Return all supported exam codes in declaration order.

    Example:
        >>> supported_exam_codes()[:2]
        ['1Z0-811', '1Z0-808']
    """
    return [exam.code for exam in ExamCode]


def get_exam_code(code: str) -> ExamCode:
    """
    Get the ExamCode for a code string (case-insensitive).

    Raises:
        UnsupportedCodeError: If code is not a known exam code.

    Example:
        >>> get_exam_code("1z0-829").java_version
        'SE 17'
    """
    wanted = (code or "").strip().upper()
    for exam in ExamCode:
        if exam.code == wanted:
            return exam
    raise UnsupportedCodeError(
        f"Unsupported exam code: {code!r}. Supported: {', '.join(supported_exam_codes())}"
    )
