"""JSON messages exchanged between game clients and the server."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from minesboomer.game import Difficulty, Game
from minesboomer.geometry import Point


class MessageError(ValueError):
    """Raised when a text does not hold a well-formed message of the expected kind."""


def _dump(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _parse_object(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise MessageError(f"not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MessageError("message must be a JSON object")
    return data


def _require(data: Mapping[str, Any], name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise MessageError(f"missing field {name!r}") from None


def _string(data: Mapping[str, Any], name: str) -> str:
    value = _require(data, name)
    if not isinstance(value, str):
        raise MessageError(f"field {name!r} must be a string")
    return value


def _boolean(data: Mapping[str, Any], name: str) -> bool:
    value = _require(data, name)
    if not isinstance(value, bool):
        raise MessageError(f"field {name!r} must be a boolean")
    return value


def _object(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
    value = _require(data, name)
    if not isinstance(value, dict):
        raise MessageError(f"field {name!r} must be an object")
    return value


def _difficulty(value: Any) -> Difficulty:
    try:
        return Difficulty(value)
    except (ValueError, TypeError) as exc:
        raise MessageError(f"unknown difficulty: {value!r}") from exc


def _point(value: Any) -> Point:
    if not isinstance(value, dict):
        raise MessageError("coordinates must be an object")
    coordinates = []
    for name in ("x", "y"):
        item = _require(value, name)
        if isinstance(item, bool) or not isinstance(item, int) or item < 0:
            raise MessageError(f"coordinate {name!r} must be a non-negative integer")
        coordinates.append(item)
    return Point(*coordinates)


@dataclass
class GameDefinition:
    """A game as advertised in the lobby."""

    host_name: str
    id: str
    difficulty: Difficulty

    def to_dict(self) -> dict:
        return {"host_name": self.host_name, "id": self.id, "difficulty": self.difficulty.value}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "GameDefinition":
        if not isinstance(data, Mapping):
            raise MessageError("game definition must be an object")
        return GameDefinition(
            host_name=_string(data, "host_name"),
            id=_string(data, "id"),
            difficulty=_difficulty(_require(data, "difficulty")),
        )


@dataclass
class GameStartMessage:
    """Tells a player that their game has started and hands over the board."""

    game_id: str
    local_player: str
    remote_player: str
    is_active: bool
    game: Game

    def to_json(self) -> str:
        return _dump(
            {
                "game_id": self.game_id,
                "local_player": self.local_player,
                "remote_player": self.remote_player,
                "is_active": self.is_active,
                "game": self.game.to_dict(),
            }
        )

    @staticmethod
    def from_json(text: str) -> "GameStartMessage":
        data = _parse_object(text)
        raw_game = _object(data, "game")
        try:
            game = Game.from_dict(raw_game)
        except (ValueError, TypeError, KeyError) as exc:
            raise MessageError(f"invalid game: {exc}") from exc
        return GameStartMessage(
            game_id=_string(data, "game_id"),
            local_player=_string(data, "local_player"),
            remote_player=_string(data, "remote_player"),
            is_active=_boolean(data, "is_active"),
            game=game,
        )


@dataclass
class SimpleMessage:
    """A message carrying nothing but a name."""

    name: str

    def to_json(self) -> str:
        return _dump({"name": self.name})

    @staticmethod
    def from_json(text: str) -> "SimpleMessage":
        return SimpleMessage(name=_string(_parse_object(text), "name"))


@dataclass
class CellSelectedMessage:
    """A cell selection, with who sent it and whose turn it now is."""

    game_id: str
    is_remote_sender: bool
    is_active_player: bool
    coordinates: Point

    def to_json(self) -> str:
        return _dump(
            {
                "game_id": self.game_id,
                "is_remote_sender": self.is_remote_sender,
                "is_active_player": self.is_active_player,
                "coordinates": self.coordinates.to_dict(),
            }
        )

    @staticmethod
    def from_json(text: str) -> "CellSelectedMessage":
        data = _parse_object(text)
        return CellSelectedMessage(
            game_id=_string(data, "game_id"),
            is_remote_sender=_boolean(data, "is_remote_sender"),
            is_active_player=_boolean(data, "is_active_player"),
            coordinates=_point(_require(data, "coordinates")),
        )


@dataclass
class OpenGamesMessage:
    """The list of games waiting for an opponent."""

    games: List[GameDefinition] = field(default_factory=list)

    def to_json(self) -> str:
        return _dump({"games": [game.to_dict() for game in self.games]})

    @staticmethod
    def from_json(text: str) -> "OpenGamesMessage":
        raw_games = _require(_parse_object(text), "games")
        if not isinstance(raw_games, list):
            raise MessageError("field 'games' must be a list")
        return OpenGamesMessage(games=[GameDefinition.from_dict(raw) for raw in raw_games])


@dataclass
class CreateGameMessage:
    """A request to host a new game."""

    game: GameDefinition

    @staticmethod
    def create(name: str, difficulty: Difficulty) -> "CreateGameMessage":
        return CreateGameMessage(GameDefinition(host_name=name, id="", difficulty=difficulty))

    def to_json(self) -> str:
        return _dump({"game": self.game.to_dict()})

    @staticmethod
    def from_json(text: str) -> "CreateGameMessage":
        data = _parse_object(text)
        return CreateGameMessage(GameDefinition.from_dict(_object(data, "game")))


@dataclass
class JoinGameMessage:
    """A request to join an open game under a given name."""

    name: str
    game_id: str
    client_name: str

    @staticmethod
    def create(game_id: str, client_name: str) -> "JoinGameMessage":
        return JoinGameMessage(name="join_game", game_id=game_id, client_name=client_name)

    def to_json(self) -> str:
        return _dump({"name": self.name, "game_id": self.game_id, "client_name": self.client_name})

    @staticmethod
    def from_json(text: str) -> "JoinGameMessage":
        data = _parse_object(text)
        return JoinGameMessage(
            name=_string(data, "name"),
            game_id=_string(data, "game_id"),
            client_name=_string(data, "client_name"),
        )