"""Two players taking turns on one board, competing to find mines."""

from __future__ import annotations

from typing import Optional

from minesboomer.board import Board
from minesboomer.game import Difficulty, Game
from minesboomer.geometry import Point, Size
from minesboomer.player import Player


class Multiplayer:
    """A shared game; a player keeps the turn while they find mines."""

    def __init__(
        self,
        game_id: str,
        local_player: str,
        remote_player: str,
        difficulty: Difficulty,
    ) -> None:
        self._setup(Game.new(difficulty), game_id, local_player, remote_player)

    @staticmethod
    def with_game(game: Game, game_id: str, local_player: str, remote_player: str) -> "Multiplayer":
        """Wrap an existing game instead of generating a new board."""
        multiplayer = Multiplayer.__new__(Multiplayer)
        multiplayer._setup(game, game_id, local_player, remote_player)
        return multiplayer

    def _setup(self, game: Game, game_id: str, local_player: str, remote_player: str) -> None:
        self.local_player = Player(local_player, is_active=True)
        self.remote_player = Player(remote_player)
        self.game_id = str(game_id)
        self.game = game

    def __repr__(self) -> str:
        return (
            f"Multiplayer(game_id={self.game_id!r}, local_player={self.local_player!r}, "
            f"remote_player={self.remote_player!r})"
        )

    @property
    def board(self) -> Board:
        return self.game.board

    @property
    def difficulty(self) -> Difficulty:
        return self.game.difficulty

    @property
    def current_player(self) -> Player:
        return self.local_player if self.local_player.is_active else self.remote_player

    @property
    def board_dimensions(self) -> Size:
        return self.game.board.size

    def _half_mines(self) -> int:
        # Half of the mines, rounded half away from zero.
        return (self.game.total_mines + 1) // 2

    def player_selected(self, coordinates: Point) -> None:
        """Apply the current player's selection and pass the turn unless a mine was found."""
        cell = self.game.board.cell_at(coordinates)
        if cell is None:
            return
        was_mine = cell.is_mine()
        was_cleared = cell.is_cleared()

        self.game.selected_at(coordinates)
        if was_mine and not was_cleared:
            self.current_player.mines_found.append(coordinates)
        elif not was_cleared:
            self._switch_active_player()

    def _switch_active_player(self) -> None:
        self.local_player.is_active = not self.local_player.is_active
        self.remote_player.is_active = not self.remote_player.is_active

    def did_game_finish(self) -> bool:
        half = self._half_mines()
        return half in (self.local_player.score(), self.remote_player.score())

    def player_winning(self) -> Optional[Player]:
        local, remote = self.local_player.score(), self.remote_player.score()
        if local > remote:
            return self.local_player
        if local < remote:
            return self.remote_player
        return None

    def remaining_to_win(self) -> int:
        best = max(self.local_player.score(), self.remote_player.score())
        return self._half_mines() - best

    def local_to_win(self) -> int:
        return self._half_mines() - self.local_player.score()

    def total_mines_to_win(self) -> int:
        return 1 + self.game.total_mines // 2

    def winner(self) -> Optional[Player]:
        if not self.did_game_finish():
            return None
        if self.local_player.score() > self.remote_player.score():
            return self.local_player
        return self.remote_player