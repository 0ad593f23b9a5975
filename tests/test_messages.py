import json

import pytest

from minesboomer.game import Difficulty, Game
from minesboomer.geometry import Point
from minesboomer.messages import (
    CellSelectedMessage,
    CreateGameMessage,
    GameDefinition,
    GameStartMessage,
    JoinGameMessage,
    MessageError,
    OpenGamesMessage,
    SimpleMessage,
)


def test_simple_message_wire_format():
    assert SimpleMessage("connected").to_json() == '{"name":"connected"}'


def test_simple_message_round_trip():
    assert SimpleMessage.from_json(SimpleMessage("games_request").to_json()).name == "games_request"


def test_join_game_message_wire_format():
    message = JoinGameMessage.create("g1", "bob")
    assert message.to_json() == '{"name":"join_game","game_id":"g1","client_name":"bob"}'


def test_join_game_round_trip():
    message = JoinGameMessage.create("g1", "bob")
    assert JoinGameMessage.from_json(message.to_json()) == message


def test_create_game_message_has_empty_id():
    message = CreateGameMessage.create("alice", Difficulty.MEDIUM)
    assert json.loads(message.to_json()) == {
        "game": {"host_name": "alice", "id": "", "difficulty": "Medium"}
    }


def test_create_game_round_trip():
    message = CreateGameMessage.create("alice", Difficulty.HARD)
    parsed = CreateGameMessage.from_json(message.to_json())
    assert parsed.game.host_name == "alice"
    assert parsed.game.difficulty is Difficulty.HARD


def test_cell_selected_round_trip():
    message = CellSelectedMessage(
        game_id="g1", is_remote_sender=True, is_active_player=False, coordinates=Point(3, 4)
    )
    parsed = CellSelectedMessage.from_json(message.to_json())
    assert parsed == message
    assert json.loads(message.to_json())["coordinates"] == {"x": 3, "y": 4}


def test_open_games_round_trip():
    games = [
        GameDefinition(host_name="alice", id="a", difficulty=Difficulty.EASY),
        GameDefinition(host_name="carol", id="c", difficulty=Difficulty.HARD),
    ]
    parsed = OpenGamesMessage.from_json(OpenGamesMessage(games).to_json())
    assert parsed.games == games


def test_game_definition_dict_round_trip():
    definition = GameDefinition(host_name="alice", id="x", difficulty=Difficulty.MEDIUM)
    assert GameDefinition.from_dict(definition.to_dict()) == definition


def test_game_start_round_trip():
    game = Game.new(Difficulty.EASY)
    message = GameStartMessage(
        game_id="g1", local_player="alice", remote_player="bob", is_active=True, game=game
    )
    parsed = GameStartMessage.from_json(message.to_json())
    assert parsed.game_id == "g1"
    assert parsed.local_player == "alice"
    assert parsed.remote_player == "bob"
    assert parsed.is_active is True
    assert parsed.game.board.to_dict() == game.board.to_dict()
    assert parsed.game.total_mines == game.total_mines


def test_simple_message_ignores_unknown_fields():
    join = JoinGameMessage.create("g1", "bob").to_json()
    assert SimpleMessage.from_json(join).name == "join_game"


def test_cell_selected_rejects_simple_message():
    with pytest.raises(MessageError):
        CellSelectedMessage.from_json(SimpleMessage("connected").to_json())


def test_join_rejects_simple_message():
    with pytest.raises(MessageError):
        JoinGameMessage.from_json(SimpleMessage("games_request").to_json())


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2]",
        '{"game_id": "g", "is_remote_sender": 1, "is_active_player": true, "coordinates": {"x": 0, "y": 0}}',
        '{"game_id": "g", "is_remote_sender": true, "is_active_player": true, "coordinates": {"x": -1, "y": 0}}',
        '{"game_id": "g", "is_remote_sender": true, "is_active_player": true}',
    ],
)
def test_cell_selected_invalid(text):
    with pytest.raises(MessageError):
        CellSelectedMessage.from_json(text)


def test_unknown_difficulty_rejected():
    text = json.dumps({"game": {"host_name": "a", "id": "", "difficulty": "Insane"}})
    with pytest.raises(MessageError):
        CreateGameMessage.from_json(text)


def test_message_error_is_value_error():
    with pytest.raises(ValueError):
        OpenGamesMessage.from_json('{"games": 3}')