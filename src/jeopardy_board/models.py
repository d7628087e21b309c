# Area: Model
"""
jeopardy_board.models — Board and player dataclasses
====================================================

The board side (Clue, Category, Board, FinalClue, QuestionSet) is
frozen: it is produced once by the validator with trimmed text and is
never modified afterwards. Per-game progress (selection, completion)
lives in the game itself, keyed by clue id.

Players are the only mutable records. The game owns them and hands
out frozen PlayerView copies to everyone else.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from .enums import ClueStatus


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid.uuid4().hex


# ══════════════════════════════════════════════════════════════
# BOARD
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Clue:
    """
    One question/answer unit on the board.

    Attributes:
        point_value: Value of the clue (200, 400, ... 1000)
        prompt: The "answer" read to the contestants
        response: The expected correct response
        is_daily_double: True if the clue is a Daily Double
        media: Optional filename of an accompanying image
        id: Opaque identity, used for every lookup
    """

    point_value: int
    prompt: str
    response: str
    is_daily_double: bool = False
    media: Optional[str] = None
    id: str = field(default_factory=new_id)


@dataclass(frozen=True)
class Category:
    """A titled column of clues, ordered by point value."""

    title: str
    clues: Tuple[Clue, ...]
    id: str = field(default_factory=new_id)


@dataclass(frozen=True)
class Board:
    """The categories of the main round."""

    categories: Tuple[Category, ...]

    def iter_clues(self) -> Iterator[Tuple[int, int, Clue]]:
        """Yield (category_index, clue_index, clue) in board order."""
        for category_index, category in enumerate(self.categories):
            for clue_index, clue in enumerate(category.clues):
                yield category_index, clue_index, clue

    def clue_at(self, category_index: int, clue_index: int) -> Clue:
        return self.categories[category_index].clues[clue_index]

    @property
    def clue_count(self) -> int:
        return sum(len(category.clues) for category in self.categories)

    @property
    def daily_double_count(self) -> int:
        return sum(1 for _, _, clue in self.iter_clues() if clue.is_daily_double)


@dataclass(frozen=True)
class FinalClue:
    """The single untimed clue of the final round."""

    category_title: str
    prompt: str
    response: str
    media: Optional[str] = None


@dataclass(frozen=True)
class QuestionSet:
    """A validated board plus its final clue."""

    board: Board
    final_clue: FinalClue


@dataclass(frozen=True)
class ClueView:
    """Read-only projection of a clue together with its progress in a game."""

    id: str
    category_index: int
    clue_index: int
    point_value: int
    prompt: str
    response: str
    is_daily_double: bool
    media: Optional[str]
    status: ClueStatus

    @property
    def is_selected(self) -> bool:
        return self.status is ClueStatus.SELECTED

    @property
    def is_done(self) -> bool:
        return self.status is ClueStatus.DONE


# ══════════════════════════════════════════════════════════════
# PLAYERS
# ══════════════════════════════════════════════════════════════

@dataclass
class Player:
    """Tracks one contestant's score and turn flags."""

    name: str
    score: int = 0
    can_select_clue: bool = False
    has_responded_to_current_clue: bool = False
    id: str = field(default_factory=new_id)

    @classmethod
    def create(cls, name: str) -> "Player":
        """Create a player with a trimmed name and a score of 0."""
        trimmed = name.strip()
        if not trimmed:
            raise ValueError("Player name must not be empty")
        return cls(name=trimmed)

    def view(self) -> "PlayerView":
        return PlayerView(
            id=self.id,
            name=self.name,
            score=self.score,
            can_select_clue=self.can_select_clue,
            has_responded_to_current_clue=self.has_responded_to_current_clue,
        )


@dataclass(frozen=True)
class PlayerView:
    """Read-only copy of a player's state."""

    id: str
    name: str
    score: int
    can_select_clue: bool
    has_responded_to_current_clue: bool
