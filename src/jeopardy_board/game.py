# Area: Model
"""
jeopardy_board.game — Game state machine
========================================

JeopardyGame is the authoritative state of one played session: the
board progress, the players, the current round, the selected clue and
the pending Daily Double wager. All mutation goes through its commands.

Command semantics:

- A command whose preconditions are not met (wrong round, nothing
  selected, player already responded, unknown id, ...) is a silent
  no-op and returns False.
- A malformed wager raises ForbiddenWager or WagerOutOfRange and leaves
  the state untouched.
- A command that takes effect returns True.

Commands and queries are serialized on a re-entrant lock so that
callbacks from several UI threads cannot interleave partial updates
or read a half-applied one.
"""

from __future__ import annotations
import functools
import logging
import threading
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .constants import (
    DEFAULT_MAX_DAILY_DOUBLE_WAGER,
    FORBIDDEN_WAGERS,
    MIN_DAILY_DOUBLE_WAGER,
    MIN_FINAL_WAGER,
)
from .enums import ClueStatus, Round
from .errors import ForbiddenWager, WagerOutOfRange
from .models import Board, Clue, ClueView, FinalClue, Player, PlayerView, QuestionSet

logger = logging.getLogger("jeopardy_board.game")


def check_wager(amount: int, minimum: int, maximum: int) -> None:
    """
    Validate a wager against the blocklist and an inclusive range.

    Raises:
        ForbiddenWager: amount is on the blocklist (checked first)
        WagerOutOfRange: amount is outside [minimum, maximum]
    """
    _require_int(amount, "wager")
    if amount in FORBIDDEN_WAGERS:
        raise ForbiddenWager(amount)
    if not minimum <= amount <= maximum:
        raise WagerOutOfRange(amount, minimum, maximum)


def _require_int(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _serialized(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class JeopardyGame:
    """
    State machine for one game.

    Attributes:
        question_set: The validated board and final clue being played
    """

    def __init__(self, question_set: QuestionSet, players: Iterable):
        """
        Create a game in the main round with every clue unselected.

        Args:
            question_set: A QuestionSet produced by the validator
            players: Roster in play order; anything with ``id`` and ``name``
                (Player or PlayerView). Scores start at 0.

        Raises:
            ValueError: If the roster is empty or contains duplicate ids
        """
        roster = [Player(id=p.id, name=p.name) for p in players]
        if not roster:
            raise ValueError("A game needs at least one player")
        ids = [p.id for p in roster]
        if len(set(ids)) != len(ids):
            raise ValueError("Player ids must be unique")

        self.question_set = question_set
        self._lock = threading.RLock()

        self._players: Dict[str, Player] = {p.id: p for p in roster}
        self._positions: Dict[str, Tuple[int, int]] = {}
        self._clues: Dict[str, Clue] = {}
        self._clue_status: Dict[str, ClueStatus] = {}
        for category_index, clue_index, clue in question_set.board.iter_clues():
            self._positions[clue.id] = (category_index, clue_index)
            self._clues[clue.id] = clue
            self._clue_status[clue.id] = ClueStatus.UNSELECTED

        self._current_round = Round.MAIN
        self._selected_clue_id: Optional[str] = None
        self._daily_double_wager: Optional[int] = None
        self._eligible_player_ids: Set[str] = set()

        roster[0].can_select_clue = True
        logger.info(
            f"Game created with {len(roster)} players: "
            f"{', '.join(p.name for p in roster)}"
        )

    # ── Queries ──────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.question_set.board

    @property
    def final_clue(self) -> FinalClue:
        return self.question_set.final_clue

    @property
    def current_round(self) -> Round:
        with self._lock:
            return self._current_round

    @property
    def daily_double_wager(self) -> Optional[int]:
        with self._lock:
            return self._daily_double_wager

    @property
    def players(self) -> Tuple[PlayerView, ...]:
        with self._lock:
            return tuple(p.view() for p in self._players.values())

    @property
    def selected_clue(self) -> Optional[ClueView]:
        with self._lock:
            if self._selected_clue_id is None:
                return None
            return self._clue_view(self._selected_clue_id)

    @property
    def eligible_player_ids(self) -> FrozenSet[str]:
        """Players who may still respond to the selected clue."""
        with self._lock:
            return frozenset(self._eligible_player_ids)

    @property
    def remaining_clue_count(self) -> int:
        with self._lock:
            return sum(1 for s in self._clue_status.values() if s is not ClueStatus.DONE)

    @property
    def is_board_complete(self) -> bool:
        return self.remaining_clue_count == 0

    @property
    def final_round_complete(self) -> bool:
        """True once every player left in the final round has responded."""
        with self._lock:
            return self._current_round is Round.FINAL and all(
                p.has_responded_to_current_clue for p in self._players.values()
            )

    def player(self, player_id: str) -> Optional[PlayerView]:
        with self._lock:
            player = self._players.get(player_id)
            return player.view() if player else None

    def privileged_player(self) -> Optional[PlayerView]:
        """The player who may choose the next clue, if any."""
        with self._lock:
            player = self._privileged()
            return player.view() if player else None

    def clue(self, clue_id: str) -> Optional[ClueView]:
        if clue_id not in self._clues:
            return None
        with self._lock:
            return self._clue_view(clue_id)

    def clue_views(self) -> List[List[ClueView]]:
        """Board progress, one list of clue views per category."""
        with self._lock:
            return [
                [self._clue_view(clue.id) for clue in category.clues]
                for category in self.board.categories
            ]

    def leaderboard(self) -> List[PlayerView]:
        """Players ordered by score, highest first; ties keep roster order."""
        return sorted(self.players, key=lambda p: p.score, reverse=True)

    def champions(self) -> List[PlayerView]:
        """Players sharing the top score, provided that score is positive."""
        players = self.players
        if not players:
            return []
        top = max(p.score for p in players)
        if top <= 0:
            return []
        return [p for p in players if p.score == top]

    # ── Commands ─────────────────────────────────────────────

    @_serialized
    def select_clue(self, clue_id: str) -> bool:
        """
        Select a clue on the board.

        Only valid in the main round, for a clue that is not done, while
        no other clue is selected. For a Daily Double only the player
        holding the can-select privilege becomes eligible to respond.
        """
        if self._current_round is not Round.MAIN:
            logger.debug(f"select_clue ignored: round is {self._current_round.value}")
            return False
        status = self._clue_status.get(clue_id)
        if status is None:
            logger.debug(f"select_clue ignored: unknown clue {clue_id}")
            return False
        if status is ClueStatus.DONE:
            logger.debug(f"select_clue ignored: clue {clue_id} is done")
            return False
        if self._selected_clue_id is not None:
            logger.debug(
                f"select_clue ignored: clue {self._selected_clue_id} is already selected"
            )
            return False

        clue = self._clues[clue_id]
        self._clue_status[clue_id] = ClueStatus.SELECTED
        self._selected_clue_id = clue_id
        self._daily_double_wager = None
        for player in self._players.values():
            player.has_responded_to_current_clue = False

        if clue.is_daily_double:
            chooser = self._privileged()
            self._eligible_player_ids = {chooser.id} if chooser else set()
        else:
            self._eligible_player_ids = set(self._players)

        category_index, clue_index = self._positions[clue_id]
        logger.info(
            f"Clue selected: '{self.board.categories[category_index].title}' "
            f"for {clue.point_value}"
            + (" (Daily Double)" if clue.is_daily_double else "")
        )
        return True

    @_serialized
    def set_daily_double_wager(self, amount: int) -> bool:
        """
        Declare the wager for the selected Daily Double.

        The wager belongs to whoever holds the can-select privilege. It must
        not be on the blocklist and must lie in
        [MIN_DAILY_DOUBLE_WAGER, max(score, DEFAULT_MAX_DAILY_DOUBLE_WAGER)].
        The score is not touched until the response is ruled.

        Raises:
            ForbiddenWager: amount is on the blocklist
            WagerOutOfRange: amount is outside the allowed range
        """
        clue = self._selected()
        if clue is None or not clue.is_daily_double:
            logger.debug("set_daily_double_wager ignored: no Daily Double selected")
            return False
        player = self._privileged()
        if player is None or player.has_responded_to_current_clue:
            logger.debug("set_daily_double_wager ignored: Daily Double already resolved")
            return False

        maximum = max(player.score, DEFAULT_MAX_DAILY_DOUBLE_WAGER)
        try:
            check_wager(amount, MIN_DAILY_DOUBLE_WAGER, maximum)
        except (ForbiddenWager, WagerOutOfRange) as e:
            logger.warning(f"Daily Double wager rejected for {player.name}: {e.message}")
            raise

        self._daily_double_wager = amount
        logger.info(f"{player.name} wagers {amount} on the Daily Double")
        return True

    @_serialized
    def respond_to_selected_clue(self, player_id: str, is_correct: bool) -> bool:
        """
        Rule on a player's response to the selected clue.

        Regular clue: the point value is added or subtracted. A correct
        response gives the player the can-select privilege and closes the
        clue to further responses; after an incorrect one the remaining
        players may still respond.

        Daily Double: the declared wager is added or subtracted and the
        player keeps the can-select privilege either way. Ignored until a
        wager has been declared.
        """
        clue = self._selected()
        if clue is None:
            logger.debug("respond_to_selected_clue ignored: nothing selected")
            return False
        player = self._players.get(player_id)
        if player is None:
            logger.debug(f"respond_to_selected_clue ignored: unknown player {player_id}")
            return False
        if player.has_responded_to_current_clue:
            logger.debug(f"respond_to_selected_clue ignored: {player.name} already responded")
            return False
        if player_id not in self._eligible_player_ids:
            logger.debug(f"respond_to_selected_clue ignored: {player.name} is not eligible")
            return False

        if clue.is_daily_double:
            if self._daily_double_wager is None:
                logger.debug("respond_to_selected_clue ignored: Daily Double wager not declared")
                return False
            amount = self._daily_double_wager
            self._daily_double_wager = None
            self._eligible_player_ids = set()
            self._grant_privilege(player)
        else:
            amount = clue.point_value
            self._eligible_player_ids.discard(player_id)
            if is_correct:
                self._eligible_player_ids = set()
                self._grant_privilege(player)

        player.score += amount if is_correct else -amount
        player.has_responded_to_current_clue = True
        logger.info(
            f"{player.name} responded {'correctly' if is_correct else 'incorrectly'}: "
            f"{'+' if is_correct else '-'}{amount} -> {player.score}"
        )
        return True

    @_serialized
    def mark_selected_clue_as_done(self) -> bool:
        """
        Close the selected clue.

        When this completes the last clue on the board the game moves to the
        final round, and only players with a positive score stay in the game.
        """
        if self._current_round is not Round.MAIN or self._selected_clue_id is None:
            logger.debug("mark_selected_clue_as_done ignored: nothing selected")
            return False

        clue_id = self._selected_clue_id
        self._clue_status[clue_id] = ClueStatus.DONE
        self._selected_clue_id = None
        self._daily_double_wager = None
        self._eligible_player_ids = set()
        for player in self._players.values():
            player.has_responded_to_current_clue = False
        logger.info(f"Clue done, {self.remaining_clue_count} remaining")

        if self.is_board_complete:
            self._enter_final_round()
        return True

    @_serialized
    def respond_to_final_clue(self, player_id: str, wager: int, is_correct: bool) -> bool:
        """
        Rule on a player's final-round response and apply the wager.

        Raises:
            ForbiddenWager: wager is on the blocklist
            WagerOutOfRange: wager is outside [0, player's score]
        """
        if self._current_round is not Round.FINAL:
            logger.debug("respond_to_final_clue ignored: not in the final round")
            return False
        player = self._players.get(player_id)
        if player is None:
            logger.debug(f"respond_to_final_clue ignored: unknown player {player_id}")
            return False
        if player.has_responded_to_current_clue:
            logger.debug(f"respond_to_final_clue ignored: {player.name} already responded")
            return False

        try:
            check_wager(wager, MIN_FINAL_WAGER, player.score)
        except (ForbiddenWager, WagerOutOfRange) as e:
            logger.warning(f"Final wager rejected for {player.name}: {e.message}")
            raise

        player.score += wager if is_correct else -wager
        player.has_responded_to_current_clue = True
        logger.info(
            f"{player.name} final response {'correct' if is_correct else 'incorrect'}: "
            f"{'+' if is_correct else '-'}{wager} -> {player.score}"
        )
        return True

    @_serialized
    def set_score(self, player_id: str, new_score: int) -> bool:
        """Override a player's score (host correction). Always permitted."""
        _require_int(new_score, "score")
        player = self._players.get(player_id)
        if player is None:
            logger.debug(f"set_score ignored: unknown player {player_id}")
            return False
        logger.info(f"Score override for {player.name}: {player.score} -> {new_score}")
        player.score = new_score
        return True

    # ── Internals ────────────────────────────────────────────

    def _selected(self) -> Optional[Clue]:
        if self._selected_clue_id is None:
            return None
        return self._clues[self._selected_clue_id]

    def _privileged(self) -> Optional[Player]:
        for player in self._players.values():
            if player.can_select_clue:
                return player
        return None

    def _grant_privilege(self, player: Player) -> None:
        for other in self._players.values():
            other.can_select_clue = other.id == player.id

    def _clue_view(self, clue_id: str) -> ClueView:
        clue = self._clues[clue_id]
        category_index, clue_index = self._positions[clue_id]
        return ClueView(
            id=clue.id,
            category_index=category_index,
            clue_index=clue_index,
            point_value=clue.point_value,
            prompt=clue.prompt,
            response=clue.response,
            is_daily_double=clue.is_daily_double,
            media=clue.media,
            status=self._clue_status[clue_id],
        )

    def _enter_final_round(self) -> None:
        eliminated = [p.name for p in self._players.values() if p.score <= 0]
        self._players = {
            pid: p for pid, p in self._players.items() if p.score > 0
        }
        for player in self._players.values():
            player.can_select_clue = False
            player.has_responded_to_current_clue = False
        self._current_round = Round.FINAL
        logger.info(
            f"Round: {Round.MAIN.value} → {Round.FINAL.value}; "
            f"{len(self._players)} players advance"
            + (f", eliminated: {', '.join(eliminated)}" if eliminated else "")
        )
