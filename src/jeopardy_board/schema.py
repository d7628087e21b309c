# Area: Validation
"""
jeopardy_board.schema — Question-set document models
====================================================

pydantic models describing the shape of a question-set document.
They check only structure (keys present, JSON types); the rules of
the game are checked by ``validator.validate_question_set``.

Document shape:

    {
      "categories": [
        {"title": str,
         "clues": [{"pointValue": int?, "answer": str, "correctResponse": str,
                    "isDailyDouble": bool, "image": str?, "isDone": bool?}]}
      ],
      "finalClue": {"categoryTitle": str, "answer": str,
                    "correctResponse": str, "image": str?}
    }

``jeopardyRoundCategories`` and ``finalJeopardyClue`` are accepted in
place of ``categories`` and ``finalClue``.

Only the top level is typed up front. Categories, clues and the final
clue are parsed one at a time by the validator, in the same order as
the rule checks, so a malformed clue late on the board never hides an
earlier rule violation.
"""

from __future__ import annotations
from typing import Any, List, Optional, Type, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)

from .errors import QuestionSetParseError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ClueDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Missing is a rule violation (wrong point value), not a shape error.
    point_value: Optional[StrictInt] = Field(default=None, alias="pointValue")
    answer: StrictStr
    correct_response: StrictStr = Field(alias="correctResponse")
    is_daily_double: StrictBool = Field(alias="isDailyDouble")
    image: Optional[StrictStr] = None
    is_done: StrictBool = Field(default=False, alias="isDone")


class CategoryDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: StrictStr
    clues: List[Any]


class FinalClueDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    category_title: StrictStr = Field(alias="categoryTitle")
    answer: StrictStr
    correct_response: StrictStr = Field(alias="correctResponse")
    image: Optional[StrictStr] = None


class QuestionSetDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    categories: List[Any] = Field(
        validation_alias=AliasChoices("categories", "jeopardyRoundCategories"),
    )
    final_clue: Any = Field(
        validation_alias=AliasChoices("finalClue", "finalJeopardyClue"),
    )


def parse_document(data: Any) -> QuestionSetDocument:
    """
    Check the top-level structure of a decoded question-set document.

    Parameters
    ----------
    data : Any
        Decoded JSON (normally a dict).

    Returns
    -------
    QuestionSetDocument
        The document with its categories and final clue still raw.

    Raises
    ------
    QuestionSetParseError
        If a top-level key is missing or has the wrong JSON type.
    """
    if isinstance(data, QuestionSetDocument):
        return data
    if not isinstance(data, dict):
        raise QuestionSetParseError(
            [f"Expected a JSON object, got {type(data).__name__}"]
        )
    return _parse(QuestionSetDocument, data, path="")


def parse_category(data: Any, category_index: int) -> CategoryDocument:
    """Check the shape of one category (title and clue list)."""
    return _parse(
        CategoryDocument, data,
        path=f"categories.{category_index}",
        category_index=category_index,
    )


def parse_clue(data: Any, category_index: int, clue_index: int) -> ClueDocument:
    """Check the shape of one board clue."""
    return _parse(
        ClueDocument, data,
        path=f"categories.{category_index}.clues.{clue_index}",
        category_index=category_index,
        clue_index=clue_index,
    )


def parse_final_clue(data: Any) -> FinalClueDocument:
    return _parse(FinalClueDocument, data, path="finalClue")


def is_flagged_daily_double(data: Any) -> bool:
    """Read a clue's Daily Double flag without checking the rest of it."""
    return isinstance(data, dict) and data.get("isDailyDouble") is True


def _parse(
    model: Type[ModelT],
    data: Any,
    path: str,
    category_index: Optional[int] = None,
    clue_index: Optional[int] = None,
) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise QuestionSetParseError(
            _describe_errors(e, path),
            category_index=category_index,
            clue_index=clue_index,
        ) from e


def _describe_errors(error: ValidationError, prefix: str) -> List[str]:
    """Turn pydantic errors into 'path: message' strings."""
    messages = []
    for item in error.errors():
        parts = [prefix] if prefix else []
        parts.extend(str(part) for part in item["loc"])
        path = ".".join(parts)
        messages.append(f"{path}: {item['msg']}" if path else item["msg"])
    return messages
