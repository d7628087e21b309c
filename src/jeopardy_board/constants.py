# Area: Shared
"""
jeopardy_board.constants — Game rule constants
==============================================

Fixed rules of the board. Presentation layers surface these values in
their error messages; none of them can be changed through configuration.
"""

# Board shape
CATEGORY_COUNT = 6
CLUE_COUNT_PER_CATEGORY = 5
POINT_VALUE_STEP = 200          # clue n (1-based) in a category is worth n * 200
DAILY_DOUBLE_COUNT = 2          # across the whole board
MAX_DAILY_DOUBLES_PER_CATEGORY = 1

# Wagers
MIN_DAILY_DOUBLE_WAGER = 5
DEFAULT_MAX_DAILY_DOUBLE_WAGER = 1000   # used when the player's score is lower
MIN_FINAL_WAGER = 0
FORBIDDEN_WAGERS = frozenset({69, 420, 666, 1488})

# Roster
MINIMUM_PLAYER_COUNT = 3


def expected_point_value(clue_index: int) -> int:
    """Point value required for the clue at a 0-based position in its category."""
    return (clue_index + 1) * POINT_VALUE_STEP
