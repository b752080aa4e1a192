"""
Module: questions

Purpose:
    Provides the Question dataclass - an immutable multiple-choice quiz
    question with its prompt, optional code listing, answer choices and
    the set of correct choice labels. Evaluates submitted answers without
    any outside help.

Key Functions:
    - Question.has_code_snippet(): True if a non-blank code listing exists
    - Question.count_correct(answers): Number of submitted labels that are correct
    - Question.is_correct(answers): Whether a submission is fully correct
    - Question.get_ordinal_of(text): Label ('A', 'B', ...) of a choice
    - Question.to_dict() / Question.from_dict(): Record serialization

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.models.chapters.Chapter
    - loading.parser
    - common.text
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

FIRST_LABEL = "A"


@dataclass(frozen=True)
class Question:
    """
    Multiple-choice question (immutable).

    Choice labels are implied by position: the first choice is 'A', the
    second 'B', and so on.

    Attributes:
        ordinal: Question number within its chapter (positive, caller-assigned)
        question_text: Prompt shown to the candidate (non-empty)
        code_snippet: Optional code listing the prompt refers to
        choices: Display strings for each answer choice, in label order
        correct_answers: Labels of the correct choices (non-empty)

    Invariants:
        - ordinal > 0
        - question_text is non-empty
        - correct_answers is non-empty
        - choices are NOT checked (may be empty)

    Example:
        >>> q = Question(1, "Pick one", choices=("A. x", "B. y"), correct_answers=("A",))
        >>> q.is_correct(["A"])
        True
    """

    ordinal: int
    question_text: str
    code_snippet: Optional[str] = None
    choices: Tuple[str, ...] = ()
    correct_answers: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if self.ordinal <= 0:
            raise ValueError(f"ordinal must be positive: {self.ordinal}")
        if not self.question_text:
            raise ValueError("question_text cannot be None or empty")
        if not self.correct_answers:
            raise ValueError("correct_answers cannot be None or empty")

        # Freeze caller-supplied lists so later mutation can't leak in
        object.__setattr__(self, "choices", tuple(self.choices or ()))
        object.__setattr__(self, "correct_answers", tuple(self.correct_answers))

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def choice_labels(self) -> Tuple[str, ...]:
        """Labels for each choice in order, e.g. ('A', 'B', 'C')."""
        return tuple(_label_for(index) for index in range(len(self.choices)))

    def has_code_snippet(self) -> bool:
        """Return True if a code snippet is present and not blank."""
        return self.code_snippet is not None and bool(self.code_snippet.strip())

    def count_correct(self, answers: Sequence[str]) -> int:
        """
        Count how many submitted labels are correct.

        Matching is case-insensitive. Duplicate labels are counted once
        per occurrence.

        Args:
            answers: Submitted choice labels, e.g. ['A', 'c'] or "AC"

        Returns:
            Number of entries in answers that appear in correct_answers

        Raises:
            TypeError: If answers is None
        """
        if answers is None:
            raise TypeError("answers cannot be None")

        correct = {label.upper() for label in self.correct_answers}
        return sum(1 for answer in answers if answer.upper() in correct)

    def is_correct(self, answers: Sequence[str]) -> bool:
        """
        Determine whether a submission is correct.

        A submission is correct when it has exactly as many entries as
        there are correct answers and every entry is correct. The length
        is compared, not the set, so ['A', 'A'] passes for correct
        answers ('A', 'B').

        Raises:
            TypeError: If answers is None
        """
        if answers is None:
            raise TypeError("answers cannot be None")

        expected = len(self.correct_answers)
        if len(answers) != expected:
            return False

        return self.count_correct(answers) == expected

    def get_ordinal_of(self, answer_text: str) -> Optional[str]:
        """
        Find the label of the choice whose text matches answer_text.

        Args:
            answer_text: Full choice text, compared case-insensitively

        Returns:
            Label of the first matching choice ('A', 'B', ...) or None

        Raises:
            TypeError: If answer_text is None
        """
        if answer_text is None:
            raise TypeError("answer_text cannot be None")

        wanted = answer_text.casefold()
        for index, choice in enumerate(self.choices):
            if choice.casefold() == wanted:
                return _label_for(index)
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the on-disk question record keys."""
        return {
            "ordinal": self.ordinal,
            "questionText": self.question_text,
            "codeSnippet": self.code_snippet,
            "choices": list(self.choices),
            "answers": list(self.correct_answers),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """
        Build a Question from an on-disk record.

        `answers` may be a list of labels or a string such as "AC".
        """
        answers = data.get("answers") or ()
        return cls(
            ordinal=data["ordinal"],
            question_text=data.get("questionText", ""),
            code_snippet=data.get("codeSnippet"),
            choices=tuple(data.get("choices") or ()),
            correct_answers=tuple(answers),
        )

    def __str__(self) -> str:
        from mockmate.common.text import format_question

        return format_question(self)


def _label_for(index: int) -> str:
    return chr(ord(FIRST_LABEL) + index)
