"""
Module: loading.loader

Purpose:
    Load exams and their chapters from the JSON resource tree. An Exam
    knows its code and chapter count; each Chapter is read from disk on
    demand when the caller asks for it.

Key Functions:
    - load_exam(): Create and load an Exam for an exam code
    - Exam.load_chapter(): Read one chapter and its questions
    - Exam.iter_chapters(): Read every chapter in order

Key Classes:
    - Exam: A loaded exam
    - LoaderError: Exception for loading failures

Dependencies:
    - pathlib (std)
    - mockmate.core.models: Chapter, Question
    - mockmate.common.exams: ExamCode lookup
    - loading.parser: JSON parsing
    - loading.resources: Directory counting

Used By:
    - Application layer (quiz front ends)
    - loading integration tests

Layout:
    <resource_root>/exam-<CODE>/chapter<N>/meta.json
    <resource_root>/exam-<CODE>/chapter<N>/q<K>.json
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from mockmate.common.exams import ExamCode, get_exam_code
from mockmate.core.models import Chapter

from .config import LoaderConfig
from .parser import ParseError, parse_chapter_meta, parse_question
from .resources import count_files, count_subdirs

logger = logging.getLogger(__name__)

UNKNOWN_TITLE = "Unknown"


class LoaderError(Exception):
    """Error loading an exam or chapter from resources."""
    pass


class Exam:
    """
    A certification exam backed by a directory of chapter resources.

    An Exam instance can be loaded once. To work with several exams,
    create several instances.

    Example:
        >>> exam = load_exam(ExamCode.EXAM_1Z0_829)
        >>> for chapter in exam.iter_chapters():
        ...     for question in chapter.get_all_questions():
        ...         print(question.ordinal, question.question_text)
    """

    def __init__(self, config: Optional[LoaderConfig] = None) -> None:
        self._config = config or LoaderConfig()
        self._exam: Optional[ExamCode] = None
        self._chapter_count = 0

    @property
    def config(self) -> LoaderConfig:
        return self._config

    @property
    def loaded(self) -> bool:
        return self._exam is not None

    @property
    def exam_code(self) -> str:
        return self._require_loaded().code

    @property
    def java_version(self) -> str:
        return self._require_loaded().java_version

    @property
    def chapter_count(self) -> int:
        self._require_loaded()
        return self._chapter_count

    def load(self, exam_code: Union[ExamCode, str]) -> "Exam":
        """
        Load the exam for an exam code.

        Counts the chapter directories; questions are not read until a
        chapter is requested.

        Args:
            exam_code: ExamCode member or code string like "1Z0-829"

        Returns:
            self, for chaining

        Raises:
            LoaderError: If this instance has already been loaded
            UnsupportedCodeError: If exam_code is an unknown code string
        """
        if self._exam is not None:
            raise LoaderError(f"Exam has already been loaded: {self._exam.code}")

        exam = exam_code if isinstance(exam_code, ExamCode) else get_exam_code(exam_code)
        exam_dir = self._config.exam_dir(exam.code)

        try:
            chapter_count = count_subdirs(exam_dir)
        except NotADirectoryError:
            logger.warning(f"No resources found for exam {exam.code} in {exam_dir}")
            chapter_count = 0

        self._exam = exam
        self._chapter_count = chapter_count
        logger.info(f"Loaded exam {exam.code} ({exam.java_version}) with {chapter_count} chapters")
        return self

    def load_chapter(self, chapter_number: int) -> Chapter:
        """
        Load a chapter and all of its questions.

        Process:
        1. Count the question files (every .json file except meta.json)
        2. Read the chapter title from meta.json ("Unknown" if unreadable)
        3. Parse q1.json .. qN.json in order and append them

        Args:
            chapter_number: 1-based chapter number

        Returns:
            A new Chapter with its cursor at the first question

        Raises:
            ValueError: If chapter_number is outside 1..chapter_count
            LoaderError: If the chapter directory or a question file is unusable
        """
        exam = self._require_loaded()
        if chapter_number <= 0 or chapter_number > self._chapter_count:
            raise ValueError(
                f"Invalid chapter number: {chapter_number} "
                f"(exam {exam.code} has {self._chapter_count} chapters)"
            )

        chapter_dir = self._config.chapter_dir(exam.code, chapter_number)
        question_count = self._count_questions(chapter_dir)

        chapter = Chapter(chapter_number, self._chapter_title(chapter_dir, chapter_number))
        for ordinal in range(1, question_count + 1):
            path = chapter_dir / self._config.question_file_template.format(ordinal=ordinal)
            try:
                question = parse_question(path, strict=self._config.strict_validation)
            except ParseError as e:
                if self._config.skip_invalid_questions:
                    logger.warning(f"Skipping {path.name} in chapter {chapter_number}: {e}")
                    continue
                raise LoaderError(
                    f"Failed to load {path.name} in chapter {chapter_number} of {exam.code}: {e}"
                ) from e
            chapter.add_question(question)

        logger.info(
            f"Loaded chapter {chapter_number} of {exam.code} "
            f"'{chapter.title}' with {chapter.count_questions()} questions"
        )
        return chapter

    def iter_chapters(self) -> Iterator[Chapter]:
        """Load each chapter in order, one at a time."""
        for chapter_number in range(1, self.chapter_count + 1):
            yield self.load_chapter(chapter_number)

    def _require_loaded(self) -> ExamCode:
        if self._exam is None:
            raise LoaderError("Exam has not been loaded")
        return self._exam

    def _count_questions(self, chapter_dir: Path) -> int:
        try:
            json_files = count_files(chapter_dir, ".json")
        except NotADirectoryError as e:
            raise LoaderError(f"Chapter directory not found: {chapter_dir}") from e

        if (chapter_dir / self._config.meta_filename).is_file():
            json_files -= 1
        logger.debug(f"Found {json_files} question files in {chapter_dir}")
        return json_files

    def _chapter_title(self, chapter_dir: Path, chapter_number: int) -> str:
        meta_path = chapter_dir / self._config.meta_filename
        try:
            meta = parse_chapter_meta(
                meta_path, chapter_number, strict=self._config.strict_validation
            )
        except ParseError as e:
            logger.warning(f"Using title '{UNKNOWN_TITLE}' for chapter {chapter_number}: {e}")
            return UNKNOWN_TITLE
        return meta.title

    def __repr__(self) -> str:
        if self._exam is None:
            return "Exam(<not loaded>)"
        return f"Exam(code={self._exam.code!r}, chapters={self._chapter_count})"


def load_exam(
    exam_code: Union[ExamCode, str],
    *,
    config: Optional[LoaderConfig] = None,
) -> Exam:
    """
    Create an Exam and load it.

    Args:
        exam_code: ExamCode member or code string like "1Z0-829"
        config: Optional loader configuration (bundled resources by default)

    Example:
        >>> exam = load_exam("1Z0-829")
        >>> exam.java_version
        'SE 17'
    """
    return Exam(config).load(exam_code)
