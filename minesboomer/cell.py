"""A single board cell: what it holds and whether it has been revealed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class CellState(Enum):
    HIDDEN = "Hidden"
    CLEARED = "Cleared"
    FLAGGED = "Flagged"


class CellKind(Enum):
    EMPTY = "Empty"
    NUMBER = "Number"
    MINE = "Mine"


@dataclass
class Cell:
    """A cell; ``number`` counts adjacent mines when ``kind`` is NUMBER."""

    kind: CellKind = CellKind.EMPTY
    state: CellState = CellState.HIDDEN
    number: int = 0

    @staticmethod
    def new_number(number: int) -> "Cell":
        """Return a cell for ``number`` adjacent mines; zero gives an empty cell."""
        if not 0 <= number <= 255:
            raise ValueError(f"mine count out of range: {number}")
        if number == 0:
            return Cell(CellKind.EMPTY)
        return Cell(CellKind.NUMBER, number=number)

    @staticmethod
    def new_mine() -> "Cell":
        return Cell(CellKind.MINE)

    def is_mine(self) -> bool:
        return self.kind is CellKind.MINE

    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    def is_hidden(self) -> bool:
        return self.state is CellState.HIDDEN

    def is_cleared(self) -> bool:
        return self.state is CellState.CLEARED

    def is_flagged(self) -> bool:
        return self.state is CellState.FLAGGED

    def toggle_flagged(self) -> None:
        """Flag a hidden cell or unflag a flagged one; cleared cells stay as they are."""
        if self.state is CellState.HIDDEN:
            self.state = CellState.FLAGGED
        elif self.state is CellState.FLAGGED:
            self.state = CellState.HIDDEN

    def clear(self) -> None:
        self.state = CellState.CLEARED

    def to_dict(self) -> dict:
        kind: Any
        if self.kind is CellKind.NUMBER:
            kind = {"Number": self.number}
        else:
            kind = self.kind.value
        return {"kind": kind, "state": self.state.value}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Cell":
        try:
            raw_kind = data["kind"]
            state = CellState(data["state"])
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid cell data: {data!r}") from exc

        if isinstance(raw_kind, Mapping):
            if set(raw_kind) != {"Number"}:
                raise ValueError(f"invalid cell kind: {raw_kind!r}")
            try:
                number = int(raw_kind["Number"])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"invalid cell number: {raw_kind!r}") from exc
            return Cell(CellKind.NUMBER, state, number)

        if raw_kind == CellKind.EMPTY.value:
            return Cell(CellKind.EMPTY, state)
        if raw_kind == CellKind.MINE.value:
            return Cell(CellKind.MINE, state)
        raise ValueError(f"invalid cell kind: {raw_kind!r}")