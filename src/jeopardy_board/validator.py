# Area: Validation
"""
jeopardy_board.validator — Question-set validation
==================================================

Checks a question-set document against the rules of the board and
builds the frozen QuestionSet.

Checks run in a fixed order and stop at the first failure:

1. top-level shape, then category count
2. per category, in index order: shape, title, clue count, Daily
   Doubles in the category, then per clue in index order: shape, point
   value, prompt, response, image, done flag
3. Daily Double count across the whole board
4. final clue: shape, category title, prompt, response, image

All text is trimmed here, once. Nothing downstream trims again.
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional

from .constants import (
    CATEGORY_COUNT,
    CLUE_COUNT_PER_CATEGORY,
    DAILY_DOUBLE_COUNT,
    MAX_DAILY_DOUBLES_PER_CATEGORY,
    expected_point_value,
)
from .errors import (
    ClueAlreadyDone,
    EmptyCategoryTitle,
    EmptyFinalCategoryTitle,
    EmptyFinalMediaRef,
    EmptyFinalPrompt,
    EmptyFinalResponse,
    EmptyMediaRef,
    EmptyPrompt,
    EmptyResponse,
    MultipleDailyDoublesInCategory,
    WrongCategoryCount,
    WrongClueCount,
    WrongDailyDoubleCount,
    WrongPointValue,
)
from .models import Board, Category, Clue, FinalClue, QuestionSet
from .schema import (
    is_flagged_daily_double,
    parse_category,
    parse_clue,
    parse_document,
    parse_final_clue,
)

logger = logging.getLogger("jeopardy_board.validator")


# ══════════════════════════════════════════════════════════════
# MAIN VALIDATION FUNCTION
# ══════════════════════════════════════════════════════════════

def validate_question_set(data: Any) -> QuestionSet:
    """
    Validate a question-set document and build the QuestionSet.

    Parameters
    ----------
    data : Any
        A decoded JSON document or an already parsed QuestionSetDocument.

    Returns
    -------
    QuestionSet
        Frozen board and final clue with trimmed text.

    Raises
    ------
    QuestionSetError
        The first defect found. No partial result is ever returned.
    """
    document = parse_document(data)

    category_count = len(document.categories)
    if category_count != CATEGORY_COUNT:
        raise WrongCategoryCount(category_count)

    categories = [
        _validate_category(category, index)
        for index, category in enumerate(document.categories)
    ]
    board = Board(categories=tuple(categories))

    daily_doubles = board.daily_double_count
    if daily_doubles != DAILY_DOUBLE_COUNT:
        raise WrongDailyDoubleCount(daily_doubles)

    final_clue = _validate_final_clue(document.final_clue)

    logger.debug(
        f"Question set accepted: {category_count} categories, "
        f"{board.clue_count} clues, final category '{final_clue.category_title}'"
    )
    return QuestionSet(board=board, final_clue=final_clue)


# ══════════════════════════════════════════════════════════════
# PER-SCOPE CHECKS
# ══════════════════════════════════════════════════════════════

def _validate_category(raw: Any, category_index: int) -> Category:
    document = parse_category(raw, category_index)

    title = document.title.strip()
    if not title:
        raise EmptyCategoryTitle(category_index)

    clue_count = len(document.clues)
    if clue_count != CLUE_COUNT_PER_CATEGORY:
        raise WrongClueCount(clue_count, category_index)

    daily_doubles = sum(1 for clue in document.clues if is_flagged_daily_double(clue))
    if daily_doubles > MAX_DAILY_DOUBLES_PER_CATEGORY:
        raise MultipleDailyDoublesInCategory(category_index)

    clues: List[Clue] = [
        _validate_clue(clue, category_index, clue_index)
        for clue_index, clue in enumerate(document.clues)
    ]
    return Category(title=title, clues=tuple(clues))


def _validate_clue(raw: Any, category_index: int, clue_index: int) -> Clue:
    document = parse_clue(raw, category_index, clue_index)

    expected = expected_point_value(clue_index)
    if document.point_value != expected:
        raise WrongPointValue(document.point_value, expected, category_index, clue_index)

    prompt = document.answer.strip()
    if not prompt:
        raise EmptyPrompt(category_index, clue_index)

    response = document.correct_response.strip()
    if not response:
        raise EmptyResponse(category_index, clue_index)

    media = _trim_optional(document.image)
    if media == "":
        raise EmptyMediaRef(category_index, clue_index)

    if document.is_done:
        raise ClueAlreadyDone(category_index, clue_index)

    return Clue(
        point_value=document.point_value,
        prompt=prompt,
        response=response,
        is_daily_double=document.is_daily_double,
        media=media,
    )


def _validate_final_clue(raw: Any) -> FinalClue:
    document = parse_final_clue(raw)

    category_title = document.category_title.strip()
    if not category_title:
        raise EmptyFinalCategoryTitle()

    prompt = document.answer.strip()
    if not prompt:
        raise EmptyFinalPrompt()

    response = document.correct_response.strip()
    if not response:
        raise EmptyFinalResponse()

    media = _trim_optional(document.image)
    if media == "":
        raise EmptyFinalMediaRef()

    return FinalClue(
        category_title=category_title,
        prompt=prompt,
        response=response,
        media=media,
    )


def _trim_optional(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None
