"""
jeopardy_board.errors — Custom exception classes
================================================

Defines the exception hierarchy for question-set ingestion and for
wager commands. Each exception stores its structured context so that
presentation layers can build their own messages and the logging
layer can write a structured error block.

Positions are stored 0-based; the ``message`` text shown to hosts is
1-based.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .constants import (
    CATEGORY_COUNT,
    CLUE_COUNT_PER_CATEGORY,
    DAILY_DOUBLE_COUNT,
)
from .error_formatter import format_error_block


class JeopardyBoardError(Exception):
    """Base exception for all Jeopardy Board package errors."""
    pass


class ConfigError(JeopardyBoardError):
    """Raised when the configuration contains invalid values."""
    pass


# ══════════════════════════════════════════════════════════════
# QUESTION-SET ERRORS
# ══════════════════════════════════════════════════════════════

class QuestionSetError(JeopardyBoardError):
    """
    Base exception for a rejected question set.

    A question set that raises any of these errors must be discarded
    as a whole; nothing from it may be adopted.
    """

    title = "Invalid Question Set"
    category_index: Optional[int] = None
    clue_index: Optional[int] = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    @property
    def location(self) -> Optional[str]:
        """Human-readable position of the defect, if it has one."""
        if self.category_index is None:
            return None
        if self.clue_index is None:
            return f"category {self.category_index + 1}"
        return f"category {self.category_index + 1}, clue {self.clue_index + 1}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"error_type": self.error_type, "message": self.message}
        if self.category_index is not None:
            data["category_index"] = self.category_index
        if self.clue_index is not None:
            data["clue_index"] = self.clue_index
        return data

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            title=self.title,
            location=self.location,
            message=self.message,
            details=None,
        )


class QuestionSetParseError(QuestionSetError):
    """
    Raised when a document, or one part of it, does not have the
    question-set shape (missing key, wrong JSON type).

    ``category_index`` / ``clue_index`` locate the part that failed, when
    it was a category or a clue.
    """

    title = "Parsing Error"

    def __init__(
        self,
        errors: List[str],
        category_index: Optional[int] = None,
        clue_index: Optional[int] = None,
    ):
        self.errors = list(errors)
        self.category_index = category_index
        self.clue_index = clue_index
        summary = self.errors[0] if self.errors else "Unreadable question set"
        if len(self.errors) > 1:
            summary += f" (and {len(self.errors) - 1} more)"
        super().__init__(summary)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = list(self.errors)
        return data

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            title=self.title,
            location=self.location,
            message=self.message,
            details=self.errors,
        )


class WrongCategoryCount(QuestionSetError):
    def __init__(self, actual: int):
        self.actual = actual
        self.expected = CATEGORY_COUNT
        super().__init__(
            f"Incorrect number of categories (expected: {CATEGORY_COUNT}, actual: {actual})"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(actual=self.actual, expected=self.expected)
        return data


class EmptyCategoryTitle(QuestionSetError):
    def __init__(self, category_index: int):
        self.category_index = category_index
        super().__init__(f"The title of category {category_index + 1} is empty.")


class WrongClueCount(QuestionSetError):
    def __init__(self, actual: int, category_index: int):
        self.actual = actual
        self.expected = CLUE_COUNT_PER_CATEGORY
        self.category_index = category_index
        super().__init__(
            f"Incorrect number of clues in category {category_index + 1} "
            f"(expected: {CLUE_COUNT_PER_CATEGORY}, actual: {actual})"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(actual=self.actual, expected=self.expected)
        return data


class MultipleDailyDoublesInCategory(QuestionSetError):
    def __init__(self, category_index: int):
        self.category_index = category_index
        super().__init__(
            f"There cannot be more than one Daily Double in category {category_index + 1}."
        )


class WrongPointValue(QuestionSetError):
    """``actual`` is None when the clue has no point value at all."""

    def __init__(self, actual: Optional[int], expected: int, category_index: int, clue_index: int):
        self.actual = actual
        self.expected = expected
        self.category_index = category_index
        self.clue_index = clue_index
        super().__init__(
            f"Incorrect point value of clue {clue_index + 1} in category "
            f"{category_index + 1} (expected: {expected}, "
            f"actual: {'missing' if actual is None else actual})"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(actual=self.actual, expected=self.expected)
        return data


class EmptyPrompt(QuestionSetError):
    def __init__(self, category_index: int, clue_index: int):
        self.category_index = category_index
        self.clue_index = clue_index
        super().__init__(
            f"The “answer” of clue {clue_index + 1} in category "
            f"{category_index + 1} is empty."
        )


class EmptyResponse(QuestionSetError):
    def __init__(self, category_index: int, clue_index: int):
        self.category_index = category_index
        self.clue_index = clue_index
        super().__init__(
            f"The correct response to clue {clue_index + 1} in category "
            f"{category_index + 1} is empty."
        )


class EmptyMediaRef(QuestionSetError):
    def __init__(self, category_index: int, clue_index: int):
        self.category_index = category_index
        self.clue_index = clue_index
        super().__init__(
            f"The accompanying image filename for clue {clue_index + 1} in "
            f"category {category_index + 1} is empty."
        )


class ClueAlreadyDone(QuestionSetError):
    def __init__(self, category_index: int, clue_index: int):
        self.category_index = category_index
        self.clue_index = clue_index
        super().__init__(
            f"Clue {clue_index + 1} in category {category_index + 1} "
            f"cannot be marked as “done.”"
        )


class WrongDailyDoubleCount(QuestionSetError):
    def __init__(self, actual: int):
        self.actual = actual
        self.expected = DAILY_DOUBLE_COUNT
        super().__init__(
            f"Incorrect number of Daily Doubles (expected: {DAILY_DOUBLE_COUNT}, actual: {actual})"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(actual=self.actual, expected=self.expected)
        return data


class EmptyFinalCategoryTitle(QuestionSetError):
    def __init__(self):
        super().__init__("The title of the Final Jeopardy! category is empty.")


class EmptyFinalPrompt(QuestionSetError):
    def __init__(self):
        super().__init__("The “answer” of the Final Jeopardy! clue is empty.")


class EmptyFinalResponse(QuestionSetError):
    def __init__(self):
        super().__init__("The correct response to the Final Jeopardy! clue is empty.")


class EmptyFinalMediaRef(QuestionSetError):
    def __init__(self):
        super().__init__(
            "The accompanying image filename for the Final Jeopardy! clue is empty."
        )


# ══════════════════════════════════════════════════════════════
# COMMAND ERRORS
# ══════════════════════════════════════════════════════════════

class WagerError(JeopardyBoardError):
    """Base exception for a rejected wager. State is left unchanged."""

    def __init__(self, amount: int, message: str):
        self.amount = amount
        self.message = message
        super().__init__(message)


class ForbiddenWager(WagerError):
    """Raised when a wager is on the blocklist, whatever the player's score."""

    def __init__(self, amount: int):
        super().__init__(amount, f"A wager of {amount} is not allowed.")


class WagerOutOfRange(WagerError):
    """Raised when a wager falls outside the allowed inclusive range."""

    def __init__(self, amount: int, minimum: int, maximum: int):
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            amount,
            f"The wager must be between {minimum} and {maximum} (got {amount}).",
        )
