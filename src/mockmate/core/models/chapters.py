"""
Module: chapters

Purpose:
    Provides the Chapter class - an ordered, mutable collection of
    Questions with lookup by ordinal and a circular navigation cursor.

Key Functions:
    - Chapter.add_question() / Chapter.remove_question(): Manage questions
    - Chapter.get_question(ordinal): First question with that ordinal
    - Chapter.next_question() / Chapter.previous_question(): Circular navigation
    - Chapter.get_all_questions(): Immutable snapshot in insertion order

Dependencies:
    - typing (std)
    - .questions.Question

Used By:
    - loading.loader.Exam
    - common.text

Notes:
    Ordinals are not unique. Lookup and removal use the first match in
    insertion order, so questions are kept in a list, not a dict.

    Navigation is asymmetric: next_question() reads the
    question under the cursor and then advances, previous_question()
    steps back first and then reads. On a fresh chapter next_question()
    returns the first question and previous_question() the last.

    Not thread-safe; callers sharing a Chapter must serialize access.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .questions import Question


class EmptyChapterError(RuntimeError):
    """Raised when navigating a chapter that has no questions."""


class Chapter:
    """
    Ordered collection of questions belonging to one exam chapter.

    Attributes:
        title: Chapter title (non-empty)
        chapter_number: Chapter number within its exam (positive)
        cursor: Index of the question next_question() will return

    Example:
        >>> chapter = Chapter(1, "Building Blocks")
        >>> chapter.add_question(q1)
        >>> chapter.add_question(q2)
        >>> chapter.next_question() is q1
        True
        >>> chapter.previous_question() is q1
        True
    """

    def __init__(self, number: int, title: str) -> None:
        if number <= 0:
            raise ValueError(f"Invalid chapter number: {number}")
        if not title:
            raise ValueError("Chapter title cannot be None or empty")

        self._title = title
        self._chapter_number = number
        self._questions: List[Question] = []
        self._cursor = 0

    @property
    def title(self) -> str:
        return self._title

    @property
    def chapter_number(self) -> int:
        return self._chapter_number

    @property
    def cursor(self) -> int:
        return self._cursor

    # ─────────────────────────────────────────────────────────────────────────
    # Collection Management
    # ─────────────────────────────────────────────────────────────────────────

    def count_questions(self) -> int:
        """Return the number of questions currently in the chapter."""
        return len(self._questions)

    def add_question(self, question: Optional[Question]) -> None:
        """
        Append a question to the end of the chapter.

        Duplicate ordinals, and even the same object twice, are allowed.

        Raises:
            ValueError: If question is None
        """
        if question is None:
            raise ValueError("Cannot add a None question to a chapter")
        self._questions.append(question)

    def remove_question(self, ordinal: int) -> bool:
        """
        Remove the first question with the given ordinal.

        The cursor is left as is; navigation wraps it against the new
        length.

        Returns:
            True if a question was removed, False if none matched
        """
        for index, question in enumerate(self._questions):
            if question.ordinal == ordinal:
                del self._questions[index]
                return True
        return False

    def get_question(self, ordinal: int) -> Question:
        """
        Return the first question with the given ordinal.

        Raises:
            ValueError: If no question has that ordinal
        """
        for question in self._questions:
            if question.ordinal == ordinal:
                return question
        raise ValueError(f"Invalid question number: {ordinal}")

    def get_all_questions(self) -> Tuple[Question, ...]:
        """Return an immutable snapshot of the questions in insertion order."""
        return tuple(self._questions)

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────────

    def next_question(self) -> Question:
        """
        Return the question under the cursor, then advance the cursor.

        Wraps to the first question after the last one.

        Raises:
            EmptyChapterError: If the chapter has no questions
        """
        size = self._require_questions()
        index = self._cursor % size
        self._cursor = (index + 1) % size
        return self._questions[index]

    def previous_question(self) -> Question:
        """
        Move the cursor back one position, then return the question there.

        Wraps to the last question before the first one.

        Raises:
            EmptyChapterError: If the chapter has no questions
        """
        size = self._require_questions()
        self._cursor = (self._cursor - 1) % size
        return self._questions[self._cursor]

    def _require_questions(self) -> int:
        size = len(self._questions)
        if size == 0:
            raise EmptyChapterError(
                f"Cannot navigate chapter {self._chapter_number}: it has no questions"
            )
        return size

    # ─────────────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.get_all_questions())

    def __repr__(self) -> str:
        return (
            f"Chapter(number={self._chapter_number}, title={self._title!r}, "
            f"questions={len(self._questions)})"
        )

    def __str__(self) -> str:
        from mockmate.common.text import format_chapter

        return format_chapter(self)
