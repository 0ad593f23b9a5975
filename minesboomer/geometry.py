"""Points, sizes and a fixed-size two-dimensional grid."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Mapping, Optional, Tuple, TypeVar

T = TypeVar("T")

_NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def _read_int_fields(data: Mapping[str, Any], *names: str) -> Tuple[int, ...]:
    try:
        return tuple(int(data[name]) for name in names)
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"invalid data {data!r}: expected integer fields {names}") from exc


@dataclass(frozen=True)
class Point:
    """A coordinate on the board: ``x`` is the row, ``y`` the column."""

    x: int = 0
    y: int = 0

    @staticmethod
    def zero() -> "Point":
        return Point(0, 0)

    @staticmethod
    def random_between(range_x: range, range_y: range) -> "Point":
        """Return a random point with coordinates drawn from the given ranges."""
        if not range_x or not range_y:
            raise ValueError("cannot pick a point from an empty range")
        return Point(random.choice(range_x), random.choice(range_y))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Point":
        x, y = _read_int_fields(data, "x", "y")
        return Point(x, y)


@dataclass(frozen=True)
class Size:
    """Dimensions of a grid."""

    width: int = 0
    height: int = 0

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Size":
        width, height = _read_int_fields(data, "width", "height")
        return Size(width, height)


class Grid(Generic[T]):
    """Elements stored row by row, addressed by :class:`Point`."""

    def __init__(self, data: Iterable[T], size: Size) -> None:
        self._data = list(data)
        self._size = size
        if len(self._data) != size.width * size.height:
            raise ValueError(
                f"grid of size {size.width}x{size.height} needs "
                f"{size.width * size.height} elements, got {len(self._data)}"
            )

    @property
    def width(self) -> int:
        return self._size.width

    @property
    def height(self) -> int:
        return self._size.height

    @property
    def size(self) -> Size:
        return self._size

    def _index(self, coordinates: Point) -> int:
        return coordinates.x * self._size.height + coordinates.y

    def get(self, coordinates: Point) -> Optional[T]:
        """Return the element at ``coordinates``, or None when outside the grid."""
        if not (0 <= coordinates.x < self.width and 0 <= coordinates.y < self.height):
            return None
        return self._data[self._index(coordinates)]

    def replace_at(self, element: T, coordinates: Point) -> None:
        index = self._index(coordinates)
        if 0 <= index < len(self._data):
            self._data[index] = element

    def neighbors(self, coordinates: Point) -> Iterator[Tuple[Point, T]]:
        """Yield the up to eight existing neighbours of ``coordinates``."""
        for dx, dy in _NEIGHBOR_OFFSETS:
            nx, ny = coordinates.x + dx, coordinates.y + dy
            if nx < 0 or ny < 0:
                continue
            point = Point(nx, ny)
            element = self.get(point)
            if element is not None:
                yield point, element

    def __iter__(self) -> Iterator[Tuple[Point, T]]:
        height = self._size.height
        for index, element in enumerate(self._data):
            x, y = divmod(index, height)
            yield Point(x, y), element

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Grid({self._data!r}, {self._size!r})"