"""A game held by the server: a host, an optional client and the shared board."""

from __future__ import annotations

from typing import List, Optional

from minesboomer.game import Difficulty, Game
from minesboomer.geometry import Point
from minesboomer.multiplayer import Multiplayer


class HostedGame:
    """A server-side game; the host plays the local side, the client the remote one."""

    def __init__(self, host: str, game_id: str, difficulty: Difficulty) -> None:
        self.host = str(host)
        self.id = str(game_id)
        self.client: Optional[str] = None
        self._multi_game = Multiplayer(self.id, "", "", difficulty)

    def __repr__(self) -> str:
        return f"HostedGame(id={self.id!r}, host={self.host!r}, client={self.client!r})"

    def set_local_name(self, name: str) -> None:
        self._multi_game.local_player.name = name

    def setup_multi_game(self) -> None:
        """Tie the players of the shared game to the connection ids."""
        if self.client is None:
            raise RuntimeError(f"game {self.id} has no client to set up")
        self._multi_game.local_player.id = self.host
        self._multi_game.remote_player.id = self.client

    @property
    def inner_game(self) -> Game:
        return self._multi_game.game

    def set_client(self, client: str, name: str) -> None:
        self.client = str(client)
        self._multi_game.remote_player.name = name
        self._multi_game.remote_player.id = self.client

    def remove_client(self) -> None:
        self.client = None

    def has_client(self) -> bool:
        return self.client is not None

    @property
    def host_name(self) -> str:
        return self._multi_game.local_player.name

    @property
    def client_name(self) -> str:
        return self._multi_game.remote_player.name

    @property
    def difficulty(self) -> Difficulty:
        return self._multi_game.difficulty

    def player_selected(self, coordinates: Point) -> None:
        self._multi_game.player_selected(coordinates)

    def is_player_active(self, player_id: str) -> bool:
        return self._multi_game.current_player.id == str(player_id)

    def players(self) -> List[str]:
        """Return the host followed by the client, if there is one."""
        return [self.host] if self.client is None else [self.host, self.client]