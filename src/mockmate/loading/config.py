"""
Module: loading.config

Purpose:
    Configuration dataclass for loading exams. Immutable configuration
    with validation on construction.

Key Classes:
    - LoaderConfig: Where exam resources live and how strictly to read them

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - loading.loader: Exam loading
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .resources import bundled_resource_root


@dataclass(frozen=True)
class LoaderConfig:
    """
    Configuration for loading exams (immutable).

    Attributes:
        resource_root: Directory containing one sub-directory per exam
        exam_dir_template: Exam directory name, formatted with `code`
        chapter_dir_template: Chapter directory name, formatted with `number`
        meta_filename: Chapter metadata file name
        question_file_template: Question file name, formatted with `ordinal`
        strict_validation: Validate records against the JSON schemas
        skip_invalid_questions: Log and skip bad question files instead of failing

    Example:
        >>> config = LoaderConfig(resource_root=Path("/data/json"), strict_validation=True)
        >>> config.chapter_dir("1Z0-829", 2)
        PosixPath('/data/json/exam-1Z0-829/chapter2')
    """

    resource_root: Path = field(default_factory=bundled_resource_root)

    # Layout
    exam_dir_template: str = "exam-{code}"
    chapter_dir_template: str = "chapter{number}"
    meta_filename: str = "meta.json"
    question_file_template: str = "q{ordinal}.json"

    # Validation behaviour
    strict_validation: bool = False
    skip_invalid_questions: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        object.__setattr__(self, "resource_root", Path(self.resource_root))

        if "{code" not in self.exam_dir_template:
            raise ValueError(f"exam_dir_template must contain {{code}}: {self.exam_dir_template!r}")
        if "{number" not in self.chapter_dir_template:
            raise ValueError(
                f"chapter_dir_template must contain {{number}}: {self.chapter_dir_template!r}"
            )
        if "{ordinal" not in self.question_file_template:
            raise ValueError(
                f"question_file_template must contain {{ordinal}}: {self.question_file_template!r}"
            )
        if not self.meta_filename:
            raise ValueError("meta_filename cannot be empty")

    def exam_dir(self, code: str) -> Path:
        return self.resource_root / self.exam_dir_template.format(code=code)

    def chapter_dir(self, code: str, number: int) -> Path:
        return self.exam_dir(code) / self.chapter_dir_template.format(number=number)
