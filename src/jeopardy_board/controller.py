# Area: Controller
"""
jeopardy_board.controller — Screen controller
=============================================

GameController owns the single "current screen" value that a
presentation layer renders. There is no global app state: the UI holds
a controller, reads ``current_screen`` and calls the controller (for
screen changes) or the screen's own object (for game commands).

Screen transitions:
SetupScreen -> GameScreen (start_game, once setup can start)
GameScreen -> ChampionScreen (show_champions, once the final round is complete)
GameScreen / ChampionScreen -> SetupScreen (end_game)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .config import DEFAULT_CONFIG, load_config, log_level
from .errors import QuestionSetError
from .game import JeopardyGame
from .logging_config import log_question_set_error, setup_logging
from .models import PlayerView
from .roster import GameSetup

logger = logging.getLogger("jeopardy_board.controller")


@dataclass(frozen=True)
class SetupScreen:
    setup: GameSetup


@dataclass(frozen=True)
class GameScreen:
    game: JeopardyGame


@dataclass(frozen=True)
class ChampionScreen:
    champions: Tuple[PlayerView, ...]
    leaderboard: Tuple[PlayerView, ...]


Screen = Union[SetupScreen, GameScreen, ChampionScreen]


class GameController:
    """
    Top-level controller for one local session.

    Attributes:
        config: Configuration dict (see ``config.load_config``)
        current_screen: What the presentation layer should render
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = dict(DEFAULT_CONFIG)
        if config:
            self.config.update(config)
        self.current_screen: Screen = SetupScreen(self._new_setup())
        self._last_setup: Optional[GameSetup] = None

        path = self.config.get("question_set_path")
        if path:
            try:
                self.current_screen.setup.load_question_set_file(path)
            except QuestionSetError as e:
                log_question_set_error(e)

    @classmethod
    def from_config(
        cls,
        config_path: Optional[str] = None,
        env_file: Optional[str] = None,
    ) -> "GameController":
        """
        Create a controller from loaded configuration, with logging set up.

        Reads the config file and environment (see ``config.load_config``),
        installs the terminal and JSON file log handlers with the configured
        file and level, then builds the controller. Constructing
        ``GameController`` directly leaves logging to the caller.

        Raises:
            ConfigError: If the configuration is invalid
        """
        config = load_config(config_path, env_file)
        setup_logging(config["log_file"], log_level(config))
        logger.info(f"Configuration loaded, logging to {config['log_file']}")
        return cls(config)

    def _new_setup(self) -> GameSetup:
        return GameSetup(minimum_player_count=self.config["minimum_player_count"])

    def start_game(self) -> Optional[JeopardyGame]:
        """Leave setup and start playing. No-op unless setup can start."""
        screen = self.current_screen
        if not isinstance(screen, SetupScreen):
            logger.debug("start_game ignored: not on the setup screen")
            return None
        game = screen.setup.start_game()
        if game is None:
            return None
        self._last_setup = screen.setup
        self.current_screen = GameScreen(game)
        logger.info("Screen: setup → game")
        return game

    def show_champions(self) -> bool:
        """Show the champions once every final-round response is in."""
        screen = self.current_screen
        if not isinstance(screen, GameScreen) or not screen.game.final_round_complete:
            logger.debug("show_champions ignored: final round not complete")
            return False
        self.current_screen = ChampionScreen(
            champions=tuple(screen.game.champions()),
            leaderboard=tuple(screen.game.leaderboard()),
        )
        logger.info("Screen: game → champions")
        return True

    def end_game(self) -> bool:
        """
        Discard the current game and return to setup.

        The new setup keeps the previous roster names (as fresh players with
        a score of 0) and the previously adopted question set.
        """
        if isinstance(self.current_screen, SetupScreen):
            logger.debug("end_game ignored: already on the setup screen")
            return False

        previous = self._last_setup
        setup = self._new_setup()
        for player in previous.players:
            setup.add_player(player.name)
        if previous.question_set is not None:
            setup.adopt_question_set(previous.question_set, previous.question_set_source)

        self.current_screen = SetupScreen(setup)
        logger.info("Screen: game ended → setup")
        return True
