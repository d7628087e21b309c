# Area: Setup
"""
jeopardy_board.roster — Pre-game setup
======================================

GameSetup collects everything needed before a game starts: the roster
of contestants and an adopted question set. Players can only be added
or removed here; once a game starts its roster is fixed.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from .constants import MINIMUM_PLAYER_COUNT
from .game import JeopardyGame
from .loader import load_question_set_file
from .models import Player, PlayerView, QuestionSet

logger = logging.getLogger("jeopardy_board.roster")


class GameSetup:
    """
    Roster editing and question-set adoption before a game.

    Attributes:
        minimum_player_count: Roster size required to start
        question_set: The adopted question set, if any
        question_set_source: Where the adopted set came from (e.g. filename)
    """

    def __init__(self, minimum_player_count: int = MINIMUM_PLAYER_COUNT):
        self.minimum_player_count = minimum_player_count
        self.question_set: Optional[QuestionSet] = None
        self.question_set_source: Optional[str] = None
        self._players: Dict[str, Player] = {}

    @property
    def players(self) -> Tuple[PlayerView, ...]:
        return tuple(p.view() for p in self._players.values())

    @property
    def can_start(self) -> bool:
        return (
            self.question_set is not None
            and len(self._players) >= self.minimum_player_count
        )

    def add_player(self, name: str) -> Optional[PlayerView]:
        """Add a contestant. Names that are empty after trimming are ignored."""
        if not name.strip():
            logger.debug("add_player ignored: empty name")
            return None
        player = Player.create(name)
        self._players[player.id] = player
        logger.info(f"Player added: {player.name}")
        return player.view()

    def remove_player(self, player_id: str) -> bool:
        player = self._players.pop(player_id, None)
        if player is None:
            logger.debug(f"remove_player ignored: unknown player {player_id}")
            return False
        logger.info(f"Player removed: {player.name}")
        return True

    def adopt_question_set(self, question_set: QuestionSet, source: Optional[str] = None) -> None:
        self.question_set = question_set
        self.question_set_source = source
        logger.info(f"Question set adopted{f' from {source}' if source else ''}")

    def load_question_set_file(self, path: Union[str, Path]) -> QuestionSet:
        """
        Load and adopt a question-set file.

        Raises:
            QuestionSetError: The file was rejected; the previously adopted
                question set (if any) stays in place.
        """
        question_set = load_question_set_file(path)
        self.adopt_question_set(question_set, source=Path(path).name)
        return question_set

    def start_game(self) -> Optional[JeopardyGame]:
        """Create a game from the roster, or None if setup is incomplete."""
        if not self.can_start:
            logger.debug(
                f"start_game ignored: question set "
                f"{'adopted' if self.question_set else 'missing'}, "
                f"{len(self._players)}/{self.minimum_player_count} players"
            )
            return None
        return JeopardyGame(self.question_set, self._players.values())
