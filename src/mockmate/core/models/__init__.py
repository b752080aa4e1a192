"""
Core Models Package

Question is a frozen dataclass: once built from a record it never changes.
Chapter is the mutable aggregate that owns an ordered list of Questions
and the navigation cursor over them.
"""

from .questions import Question
from .chapters import Chapter, EmptyChapterError

__all__ = [
    "Question",
    "Chapter",
    "EmptyChapterError",
]
