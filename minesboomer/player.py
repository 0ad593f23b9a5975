"""A participant in a two-player game."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import List

from minesboomer.geometry import Point


@dataclass
class Player:
    """A named player and the mines they have found so far."""

    name: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    is_active: bool = False
    mines_found: List[Point] = field(default_factory=list)

    def score(self) -> int:
        return len(self.mines_found)

    def has_mine(self, coordinate: Point) -> bool:
        return coordinate in self.mines_found