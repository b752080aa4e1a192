"""
MockMate Core Package

Shared data models and record validation. Nothing in this package performs
I/O apart from reading the bundled JSON schemas.
"""

from .models import Question, Chapter, EmptyChapterError

__all__ = [
    "Question",
    "Chapter",
    "EmptyChapterError",
]
