# Area: Model
"""
jeopardy_board.snapshot — Game state snapshot builder
=====================================================

Builds a serializable view of a game for presentation layers and logs.
The snapshot is a plain dict; changing it has no effect on the game.
"""

from .game import JeopardyGame
from .models import ClueView, PlayerView


def build_game_snapshot(game: JeopardyGame) -> dict:
    """Build a JSON-compatible snapshot of the whole game."""
    selected = game.selected_clue
    return {
        "round": game.current_round.value,
        "selected_clue_id": selected.id if selected else None,
        "daily_double_wager": game.daily_double_wager,
        "remaining_clues": game.remaining_clue_count,
        "players": [_player_snapshot(p) for p in game.players],
        "categories": [
            {
                "title": category.title,
                "clues": [_clue_snapshot(view) for view in views],
            }
            for category, views in zip(game.board.categories, game.clue_views())
        ],
        "final_clue": {
            "category_title": game.final_clue.category_title,
            "media": game.final_clue.media,
        },
    }


def _player_snapshot(player: PlayerView) -> dict:
    return {
        "id": player.id,
        "name": player.name,
        "score": player.score,
        "can_select_clue": player.can_select_clue,
        "has_responded": player.has_responded_to_current_clue,
    }


def _clue_snapshot(view: ClueView) -> dict:
    """Board cell only; prompt and response stay out until the clue is opened."""
    return {
        "id": view.id,
        "point_value": view.point_value,
        "is_daily_double": view.is_daily_double,
        "status": view.status.value,
    }
