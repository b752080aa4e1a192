import json
import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import mockmate
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mockmate.core.models import Chapter, Question  # noqa: E402


# Common test fixtures
@pytest.fixture
def make_question():
    """Factory for valid questions; override any field by keyword."""
    def _make(ordinal: int = 1, **overrides) -> Question:
        fields = {
            "question_text": f"Question {ordinal}?",
            "code_snippet": None,
            "choices": ("A. first", "B. second", "C. third", "D. fourth"),
            "correct_answers": ("A",),
        }
        fields.update(overrides)
        return Question(ordinal, **fields)
    return _make


@pytest.fixture
def three_question_chapter(make_question) -> Chapter:
    """Chapter 1 holding questions with ordinals 1, 2, 3 in that order."""
    chapter = Chapter(1, "Building Blocks")
    for ordinal in (1, 2, 3):
        chapter.add_question(make_question(ordinal))
    return chapter


@pytest.fixture
def question_record():
    """A valid on-disk question record."""
    return {
        "ordinal": 1,
        "questionText": "Which statements compile?",
        "codeSnippet": "1: int x = 1;\n2: long y = x;",
        "choices": ["A. Line 1", "B. Line 2", "C. Neither"],
        "answers": ["A", "B"],
    }


@pytest.fixture
def write_exam(tmp_path: Path):
    """
    Build an exam resource tree under tmp_path.

    chapters maps chapter number -> (meta dict or None, list of question records).
    Returns the resource root.
    """
    def _write(code: str, chapters: dict) -> Path:
        root = tmp_path / "json"
        exam_dir = root / f"exam-{code}"
        exam_dir.mkdir(parents=True, exist_ok=True)
        for number, (meta, records) in chapters.items():
            chapter_dir = exam_dir / f"chapter{number}"
            chapter_dir.mkdir()
            if meta is not None:
                (chapter_dir / "meta.json").write_text(json.dumps(meta), encoding="utf-8")
            for index, record in enumerate(records, start=1):
                payload = record if isinstance(record, str) else json.dumps(record)
                (chapter_dir / f"q{index}.json").write_text(payload, encoding="utf-8")
        return root
    return _write
