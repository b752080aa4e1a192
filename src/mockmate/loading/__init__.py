"""
Module: loading

Purpose:
    Exam and chapter loading from the bundled JSON resources.
    Builds Chapter and Question objects from chapter directories.

Key Functions:
    - load_exam(): Load an exam by code
    - parse_chapter_meta(): Parse meta.json
    - parse_question(): Parse a q<N>.json file

Dependencies:
    - mockmate.core.models: Data models
    - mockmate.core.schemas.validator: Record validation

Used By:
    - Quiz front ends
"""

from .config import LoaderConfig
from .loader import Exam, LoaderError, load_exam
from .parser import (
    ParsedChapterMeta,
    ParseError,
    parse_chapter_meta,
    parse_question,
    parse_question_from_dict,
)
from .resources import bundled_resource_root, count_files, count_subdirs

__all__ = [
    "LoaderConfig",
    "Exam",
    "LoaderError",
    "load_exam",
    "ParsedChapterMeta",
    "ParseError",
    "parse_chapter_meta",
    "parse_question",
    "parse_question_from_dict",
    "bundled_resource_root",
    "count_files",
    "count_subdirs",
]
