"""
jeopardy_board — Jeopardy! Board game engine
============================================

Rules engine and question-set validator for a host-run Jeopardy!-style
game. A presentation layer renders the state exposed here and calls the
command methods; it never mutates state directly.

Quick Start:
    from jeopardy_board import GameController, GameScreen

    controller = GameController.from_config()   # config, .env and logging
    setup = controller.current_screen.setup
    setup.load_question_set_file("clues.json")
    for name in ("Ken", "Brad", "James"):
        setup.add_player(name)
    game = controller.start_game()

    clue = game.clue_views()[0][0]
    game.select_clue(clue.id)
    game.respond_to_selected_clue(game.players[0].id, is_correct=True)
    game.mark_selected_clue_as_done()

Errors
------
Rejected question sets raise QuestionSetError subclasses; rejected
wagers raise ForbiddenWager or WagerOutOfRange. Every other command
whose preconditions are not met is a silent no-op returning False.
"""

from .constants import (
    CATEGORY_COUNT,
    CLUE_COUNT_PER_CATEGORY,
    DAILY_DOUBLE_COUNT,
    DEFAULT_MAX_DAILY_DOUBLE_WAGER,
    FORBIDDEN_WAGERS,
    MIN_DAILY_DOUBLE_WAGER,
    MINIMUM_PLAYER_COUNT,
)
from .enums import ClueStatus, Round
from .errors import (
    JeopardyBoardError,
    ConfigError,
    QuestionSetError,
    QuestionSetParseError,
    WrongCategoryCount,
    EmptyCategoryTitle,
    WrongClueCount,
    MultipleDailyDoublesInCategory,
    WrongPointValue,
    EmptyPrompt,
    EmptyResponse,
    EmptyMediaRef,
    ClueAlreadyDone,
    WrongDailyDoubleCount,
    EmptyFinalCategoryTitle,
    EmptyFinalPrompt,
    EmptyFinalResponse,
    EmptyFinalMediaRef,
    WagerError,
    ForbiddenWager,
    WagerOutOfRange,
)
from .models import (
    Board,
    Category,
    Clue,
    ClueView,
    FinalClue,
    Player,
    PlayerView,
    QuestionSet,
)
from .validator import validate_question_set
from .loader import load_question_set, load_question_set_json, load_question_set_file
from .game import JeopardyGame, check_wager
from .snapshot import build_game_snapshot
from .roster import GameSetup
from .controller import GameController, SetupScreen, GameScreen, ChampionScreen
from .config import load_config
from .logging_config import setup_logging, log_question_set_error

__all__ = [
    # Main classes
    "GameController",
    "GameSetup",
    "JeopardyGame",
    # Screens
    "SetupScreen",
    "GameScreen",
    "ChampionScreen",
    # Loading and validation
    "validate_question_set",
    "load_question_set",
    "load_question_set_json",
    "load_question_set_file",
    # Queries and helpers
    "check_wager",
    "build_game_snapshot",
    "load_config",
    "setup_logging",
    "log_question_set_error",
    # Models
    "Board",
    "Category",
    "Clue",
    "ClueView",
    "FinalClue",
    "Player",
    "PlayerView",
    "QuestionSet",
    "ClueStatus",
    "Round",
    # Constants
    "CATEGORY_COUNT",
    "CLUE_COUNT_PER_CATEGORY",
    "DAILY_DOUBLE_COUNT",
    "DEFAULT_MAX_DAILY_DOUBLE_WAGER",
    "FORBIDDEN_WAGERS",
    "MIN_DAILY_DOUBLE_WAGER",
    "MINIMUM_PLAYER_COUNT",
    # Errors
    "JeopardyBoardError",
    "ConfigError",
    "QuestionSetError",
    "QuestionSetParseError",
    "WrongCategoryCount",
    "EmptyCategoryTitle",
    "WrongClueCount",
    "MultipleDailyDoublesInCategory",
    "WrongPointValue",
    "EmptyPrompt",
    "EmptyResponse",
    "EmptyMediaRef",
    "ClueAlreadyDone",
    "WrongDailyDoubleCount",
    "EmptyFinalCategoryTitle",
    "EmptyFinalPrompt",
    "EmptyFinalResponse",
    "EmptyFinalMediaRef",
    "WagerError",
    "ForbiddenWager",
    "WagerOutOfRange",
]
__version__ = "1.0.0"
