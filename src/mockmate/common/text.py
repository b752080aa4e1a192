"""
Module: common.text

Purpose:
    Plain-text formatting helpers for showing questions and chapters on a
    console.

Key Functions:
    - make_heading(): Centred "// ===[ Title ]=== \\\\" heading line
    - format_choice(): Align a choice's "A." prefix to a tab stop
    - format_code(): Tidy a code listing for display
    - format_question() / format_chapter(): Full console renderings

Used By:
    - core.models.questions.Question.__str__
    - core.models.chapters.Chapter.__str__
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from mockmate.core.models import Chapter, Question

NO_CODE_PLACEHOLDER = "<< No code snippet provided >>"

# "// " + "[ " + " ]" + " \\"
HEADING_DECORATION_WIDTH = 8


def make_heading(text: str, length: int) -> str:
    """
    Build a centred heading for use in source code comments.

    Example:
        >>> make_heading("Fields", 30)
        '// ========[ Fields ]======== \\\\\\\\'
    """
    fill = "=" * (max(length - len(text) - HEADING_DECORATION_WIDTH, 0) // 2)
    odd = "=" * (len(text) % 2)
    return f"// {fill}[ {text} ]{fill}{odd} \\\\"


def format_choice(choice: str, tab_space: int) -> str:
    """
    Align an answer choice on a tab stop.

    The "A." style prefix of the first line is padded out to tab_space
    columns and every continuation line is indented by tab_space.

    Example:
        >>> format_choice("A. int x;\\nint y;", 4)
        'A.  int x;\\n    int y;'
    """
    lines = choice.split("\n")
    first = lines[0]
    prefix_end = first.find(".") + 1
    prefix = first[:prefix_end]
    body = first[prefix_end:].lstrip()

    formatted = prefix + " " * max(tab_space - len(prefix), 0) + body
    indent = " " * tab_space
    for line in lines[1:]:
        formatted += f"\n{indent}{line}"
    return formatted


def format_code(code: str | None) -> str:
    """
    Format a code snippet for display.

    Empty lines are dropped. Numbered lines such as "3: int x;" get a tab
    after the colon so the code lines up. A missing or blank snippet
    yields a placeholder.
    """
    if code is None or not code.strip():
        return NO_CODE_PLACEHOLDER

    formatted: List[str] = []
    for line in code.split("\n"):
        if not line:
            continue
        if line[0].isdigit():
            colon = line.find(":")
            if colon != -1:
                formatted.append(f"{line[:colon + 1]}\t{line[colon + 1:]}\n")
                continue
        formatted.append(f"{line}\n")
    return "".join(formatted)


def format_question(question: "Question") -> str:
    """Render a question with its code, choices and correct answers."""
    choices = "".join(f"{choice}\n" for choice in question.choices)
    answers = ", ".join(question.correct_answers)
    return (
        f"{question.ordinal}.\t{question.question_text}\n"
        f"\n"
        f"{format_code(question.code_snippet)}\n"
        f"\n"
        f"{choices}"
        f"answers: [{answers}]\n"
    )


def format_chapter(chapter: "Chapter") -> str:
    """Render a chapter heading followed by each of its questions."""
    body = "".join(f"\n{question}" for question in chapter.get_all_questions())
    return f"Chapter {chapter.chapter_number}: {chapter.title}\n{body}"
