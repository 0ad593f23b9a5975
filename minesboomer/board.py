"""The minefield: a grid of cells with mines and neighbour counts."""

from __future__ import annotations

import random
from itertools import groupby
from typing import Any, Iterator, Mapping, Optional, Tuple

from minesboomer.cell import Cell, CellKind, CellState
from minesboomer.geometry import Grid, Point, Size

_HIDDEN_SYMBOL = "[ \u25AE]"
_FLAGGED_SYMBOL = "[ \U0001F6A9]"
_EMPTY_SYMBOL = "[  ]"
_MINE_SYMBOL = "[ *]"


def _symbol(cell: Cell) -> str:
    if cell.state is CellState.HIDDEN:
        return _HIDDEN_SYMBOL
    if cell.state is CellState.FLAGGED:
        return _FLAGGED_SYMBOL
    if cell.kind is CellKind.NUMBER:
        return f"[ {cell.number}]"
    if cell.kind is CellKind.MINE:
        return _MINE_SYMBOL
    return _EMPTY_SYMBOL


class Board:
    """A grid of cells."""

    def __init__(self, cells: Grid[Cell]) -> None:
        self.cells = cells

    @staticmethod
    def new_empty(size: Size) -> "Board":
        return Board(Grid([Cell() for _ in range(size.width * size.height)], size))

    @staticmethod
    def new(mines: int, size: Size) -> "Board":
        """Return a board with ``mines`` randomly placed mines and numbered cells."""
        board = Board.new_empty(size)
        board.add_mines(mines).add_cell_numbers()
        return board

    def add_mines(self, mines: int) -> "Board":
        """Turn ``mines`` randomly chosen non-mine cells into mines."""
        if mines < 0:
            raise ValueError(f"mine count must not be negative: {mines}")
        candidates = [point for point, cell in self if not cell.is_mine()]
        if mines > len(candidates):
            raise ValueError(
                f"cannot place {mines} mines on a board with {len(candidates)} free cells"
            )
        for point in random.sample(candidates, mines):
            self.replace_cell(Cell.new_mine(), point)
        return self

    def add_cell_numbers(self) -> "Board":
        """Replace every non-mine cell by one numbered with its adjacent mines."""
        points = [point for point, cell in self if not cell.is_mine()]
        for point in points:
            count = sum(1 for _, cell in self.neighbors(point) if cell.is_mine())
            self.replace_cell(Cell.new_number(count), point)
        return self

    def cell_at(self, coordinates: Point) -> Optional[Cell]:
        return self.cells.get(coordinates)

    @property
    def width(self) -> int:
        return self.cells.width

    @property
    def height(self) -> int:
        return self.cells.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def replace_cell(self, new_cell: Cell, coordinates: Point) -> None:
        self.cells.replace_at(new_cell, coordinates)

    def neighbors(self, coordinates: Point) -> Iterator[Tuple[Point, Cell]]:
        return self.cells.neighbors(coordinates)

    def __iter__(self) -> Iterator[Tuple[Point, Cell]]:
        return iter(self.cells)

    def __str__(self) -> str:
        rows = [
            "".join(_symbol(cell) for _, cell in row)
            for _, row in groupby(self, key=lambda item: item[0].x)
        ]
        return "\n".join(rows) + "\n"

    def __repr__(self) -> str:
        return f"Board({self.cells!r})"

    def to_dict(self) -> dict:
        return {
            "cells": {
                "data": [cell.to_dict() for _, cell in self],
                "size": self.cells.size.to_dict(),
            }
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Board":
        try:
            cells = data["cells"]
            size = Size.from_dict(cells["size"])
            raw_cells = cells["data"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid board data: {data!r}") from exc
        return Board(Grid([Cell.from_dict(raw) for raw in raw_cells], size))