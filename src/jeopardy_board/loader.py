# Area: Validation
"""
jeopardy_board.loader — Question-set loading
============================================

Entry points for turning external input into a validated QuestionSet:
a decoded mapping, JSON text, or a JSON file on disk. Every failure is
raised as a QuestionSetError subclass so callers handle a single family.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Union

from .errors import QuestionSetError, QuestionSetParseError
from .models import QuestionSet
from .validator import validate_question_set

logger = logging.getLogger("jeopardy_board.loader")


def load_question_set(data: Any) -> QuestionSet:
    """Validate an already decoded document."""
    try:
        return validate_question_set(data)
    except QuestionSetError as e:
        logger.warning(f"Question set rejected: {e.error_type}: {e.message}")
        raise


def load_question_set_json(text: Union[str, bytes]) -> QuestionSet:
    """Decode JSON text and validate it."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Question set rejected: malformed JSON: {e}")
        raise QuestionSetParseError([f"Malformed JSON: {e}"]) from e
    return load_question_set(data)


def load_question_set_file(path: Union[str, Path]) -> QuestionSet:
    """
    Read, decode and validate a question-set file.

    Parameters
    ----------
    path : str or Path
        Path to a UTF-8 JSON file.

    Returns
    -------
    QuestionSet

    Raises
    ------
    QuestionSetError
        QuestionSetParseError if the file cannot be read or decoded,
        otherwise the first rule violation found.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
    except OSError as e:
        logger.warning(f"Could not read question set {file_path}: {e}")
        raise QuestionSetParseError([f"Could not read {file_path.name}: {e.strerror or e}"]) from e

    logger.info(f"Loading question set from {file_path}")
    question_set = load_question_set_json(raw)
    logger.info(f"Question set {file_path.name} loaded")
    return question_set
