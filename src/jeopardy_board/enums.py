# Area: Model
"""
jeopardy_board.enums — Game state enums
=======================================

Defines the round dimension of the game state machine and the
selection sub-state tracked for every clue on the board.
"""

from enum import Enum


class Round(Enum):
    """
    Round of a game.

    State transitions:
    MAIN -> FINAL (when the last clue on the board is marked done)

    There is no transition back to MAIN.
    """
    MAIN = "main"
    FINAL = "final"


class ClueStatus(Enum):
    """
    Selection state of one clue on the board.

    State transitions:
    UNSELECTED -> SELECTED (select_clue)
    SELECTED -> DONE (mark_selected_clue_as_done)
    """
    UNSELECTED = "unselected"
    SELECTED = "selected"
    DONE = "done"
