# Area: Shared Tests
"""Tests for jeopardy_board.errors — messages and structured context."""

from jeopardy_board.errors import (
    ClueAlreadyDone,
    EmptyCategoryTitle,
    EmptyFinalPrompt,
    ForbiddenWager,
    JeopardyBoardError,
    QuestionSetError,
    QuestionSetParseError,
    WagerError,
    WagerOutOfRange,
    WrongCategoryCount,
    WrongClueCount,
    WrongPointValue,
)


class TestQuestionSetErrorMessages:
    """Messages shown to hosts use 1-based positions."""

    def test_wrong_category_count(self):
        assert WrongCategoryCount(5).message == (
            "Incorrect number of categories (expected: 6, actual: 5)"
        )

    def test_empty_category_title(self):
        assert EmptyCategoryTitle(3).message == "The title of category 4 is empty."

    def test_wrong_clue_count(self):
        assert WrongClueCount(6, 3).message == (
            "Incorrect number of clues in category 4 (expected: 5, actual: 6)"
        )

    def test_wrong_point_value(self):
        assert WrongPointValue(2000, 800, 4, 3).message == (
            "Incorrect point value of clue 4 in category 5 (expected: 800, actual: 2000)"
        )

    def test_str_matches_message(self):
        error = ClueAlreadyDone(1, 4)
        assert str(error) == error.message


class TestQuestionSetErrorContext:

    def test_location_with_clue(self):
        assert WrongPointValue(2000, 800, 4, 3).location == "category 5, clue 4"

    def test_location_category_only(self):
        assert EmptyCategoryTitle(0).location == "category 1"

    def test_no_location_for_final_clue(self):
        assert EmptyFinalPrompt().location is None

    def test_to_dict_carries_indexes_and_values(self):
        data = WrongPointValue(2000, 800, 4, 3).to_dict()
        assert data["error_type"] == "WrongPointValue"
        assert data["category_index"] == 4
        assert data["clue_index"] == 3
        assert data["actual"] == 2000
        assert data["expected"] == 800

    def test_parse_error_summarizes_first_error(self):
        error = QuestionSetParseError(["categories: Field required", "finalClue: Field required"])
        assert error.message == "categories: Field required (and 1 more)"
        assert error.to_dict()["errors"] == [
            "categories: Field required", "finalClue: Field required",
        ]

    def test_format_error_log_contains_details(self):
        block = EmptyCategoryTitle(3).format_error_log()
        assert "EmptyCategoryTitle" in block
        assert "category 4" in block
        assert "QUESTION SET REJECTED" in block


class TestHierarchy:

    def test_question_set_errors_share_base(self):
        assert isinstance(EmptyFinalPrompt(), QuestionSetError)
        assert isinstance(QuestionSetParseError(["x"]), QuestionSetError)
        assert isinstance(WrongCategoryCount(1), JeopardyBoardError)

    def test_wager_errors(self):
        forbidden = ForbiddenWager(69)
        out_of_range = WagerOutOfRange(1001, 5, 1000)
        assert isinstance(forbidden, WagerError)
        assert isinstance(out_of_range, WagerError)
        assert forbidden.amount == 69
        assert (out_of_range.minimum, out_of_range.maximum) == (5, 1000)
        assert not isinstance(forbidden, QuestionSetError)
