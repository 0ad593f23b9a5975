"""Single-board minesweeper rules: difficulty presets, selection and win checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Set

from minesboomer.board import Board
from minesboomer.geometry import Point, Size


@dataclass(frozen=True)
class GameConfiguration:
    """How many mines a game has and how large its board is."""

    mines_count: int
    size: Size

    @staticmethod
    def easy() -> "GameConfiguration":
        return GameConfiguration(mines_count=21, size=Size(width=10, height=10))

    @staticmethod
    def medium() -> "GameConfiguration":
        return GameConfiguration(mines_count=101, size=Size(width=16, height=16))

    @staticmethod
    def hard() -> "GameConfiguration":
        return GameConfiguration(mines_count=250, size=Size(width=20, height=24))


class Difficulty(Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    def configuration(self) -> GameConfiguration:
        if self is Difficulty.MEDIUM:
            return GameConfiguration.medium()
        if self is Difficulty.HARD:
            return GameConfiguration.hard()
        return GameConfiguration.easy()

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Game:
    """A board together with its mine count and difficulty."""

    board: Board
    total_mines: int
    difficulty: Difficulty = Difficulty.EASY

    @staticmethod
    def new(difficulty: Difficulty) -> "Game":
        """Start a game with a freshly mined board for ``difficulty``."""
        config = difficulty.configuration()
        return Game(Board.new(config.mines_count, config.size), config.mines_count, difficulty)

    def remaining_mines(self) -> int:
        """Count the mines that are still hidden (neither cleared nor flagged)."""
        return sum(1 for _, cell in self.board if cell.is_mine() and cell.is_hidden())

    def toggle_flagged(self, coordinates: Point) -> None:
        cell = self.board.cell_at(coordinates)
        if cell is None or cell.is_cleared():
            return
        cell.toggle_flagged()

    def selected_at(self, coordinates: Point) -> None:
        """Clear the cell at ``coordinates``, flooding outwards through empty cells."""
        start = self.board.cell_at(coordinates)
        if start is not None and start.is_flagged():
            return

        stack: List[Point] = [coordinates]
        visited: Set[Point] = set()
        while stack:
            point = stack.pop()
            if point in visited:
                continue
            visited.add(point)

            cell = self.board.cell_at(point)
            if cell is None or cell.is_flagged():
                continue
            cell.clear()
            if cell.is_empty():
                stack.extend(
                    neighbor for neighbor, _ in self.board.neighbors(point)
                    if neighbor not in visited
                )

    def is_game_over(self) -> bool:
        return any(cell.is_mine() and cell.is_cleared() for _, cell in self.board)

    def is_win(self) -> bool:
        if self.remaining_mines() > 0:
            return False
        return not self.is_game_over()

    def clear_all_non_mines(self) -> None:
        for _, cell in self.board:
            if not cell.is_cleared() and not cell.is_mine():
                cell.clear()

    def clear_all(self) -> None:
        for _, cell in self.board:
            if not cell.is_cleared():
                cell.clear()

    def to_dict(self) -> dict:
        return {
            "board": self.board.to_dict(),
            "total_mines": self.total_mines,
            "difficulty": self.difficulty.value,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Game":
        try:
            board = Board.from_dict(data["board"])
            total_mines = int(data["total_mines"])
            difficulty = Difficulty(data["difficulty"])
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid game data: {data!r}") from exc
        return Game(board, total_mines, difficulty)