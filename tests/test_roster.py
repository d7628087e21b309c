# Area: Setup Tests
"""Tests for jeopardy_board.roster — pre-game setup."""

import json

import pytest

from jeopardy_board.demo_question_set import demo_question_set_document
from jeopardy_board.enums import Round
from jeopardy_board.errors import QuestionSetParseError, WrongDailyDoubleCount
from jeopardy_board.roster import GameSetup
from jeopardy_board.validator import validate_question_set


def _ready_setup(names=("Ken", "Brad", "James")) -> GameSetup:
    setup = GameSetup()
    setup.adopt_question_set(validate_question_set(demo_question_set_document()), "demo")
    for name in names:
        setup.add_player(name)
    return setup


class TestRosterEditing:

    def test_add_player_trims_name(self):
        setup = GameSetup()
        view = setup.add_player("  Ken  ")
        assert view.name == "Ken"
        assert view.score == 0
        assert [p.name for p in setup.players] == ["Ken"]

    def test_empty_name_ignored(self):
        setup = GameSetup()
        assert setup.add_player("   ") is None
        assert setup.players == ()

    def test_same_name_twice_gives_two_players(self):
        setup = GameSetup()
        first = setup.add_player("Ken")
        second = setup.add_player("Ken")
        assert first.id != second.id
        assert len(setup.players) == 2

    def test_remove_player(self):
        setup = GameSetup()
        ken = setup.add_player("Ken")
        setup.add_player("Brad")
        assert setup.remove_player(ken.id) is True
        assert [p.name for p in setup.players] == ["Brad"]

    def test_remove_unknown_player(self):
        assert GameSetup().remove_player("nobody") is False


class TestCanStart:

    def test_needs_question_set(self):
        setup = GameSetup()
        for name in ("Ken", "Brad", "James"):
            setup.add_player(name)
        assert setup.can_start is False
        assert setup.start_game() is None

    def test_needs_minimum_players(self):
        setup = _ready_setup(names=("Ken", "Brad"))
        assert setup.can_start is False
        assert setup.start_game() is None

    def test_custom_minimum(self):
        setup = GameSetup(minimum_player_count=1)
        setup.adopt_question_set(validate_question_set(demo_question_set_document()))
        setup.add_player("Ken")
        assert setup.can_start is True

    def test_start_game(self):
        setup = _ready_setup()
        game = setup.start_game()
        assert game is not None
        assert game.current_round is Round.MAIN
        assert [p.name for p in game.players] == ["Ken", "Brad", "James"]
        assert [p.id for p in game.players] == [p.id for p in setup.players]


class TestQuestionSetFile:

    def test_load_adopts_file(self, tmp_path):
        path = tmp_path / "clues.json"
        path.write_text(json.dumps(demo_question_set_document()), encoding="utf-8")
        setup = GameSetup()
        setup.load_question_set_file(path)
        assert setup.question_set is not None
        assert setup.question_set_source == "clues.json"

    def test_rejected_file_keeps_previous_set(self, tmp_path):
        setup = _ready_setup()
        previous = setup.question_set

        document = demo_question_set_document()
        document["categories"][1]["clues"][0]["isDailyDouble"] = True
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(document), encoding="utf-8")

        with pytest.raises(WrongDailyDoubleCount):
            setup.load_question_set_file(path)
        assert setup.question_set is previous
        assert setup.question_set_source == "demo"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(QuestionSetParseError):
            GameSetup().load_question_set_file(tmp_path / "nope.json")
