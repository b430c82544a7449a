"""Grid coordinates and hex adjacency for the territory.

The territory is a rectangular grid of hexagonal regions laid out in
columns. Even columns sit half a cell lower than odd columns, so the two
diagonal neighbours on each side depend on the parity of the column:

    even column (c, r): up-left (c-1, r)    down-left (c-1, r+1)
                        up-right (c+1, r)   down-right (c+1, r+1)
    odd column (c, r):  up-left (c-1, r-1)  down-left (c-1, r)
                        up-right (c+1, r-1) down-right (c+1, r)

Up and down always move one row within the same column.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


@dataclass(frozen=True)
class Point:
    """Integer (column, row) position on the grid."""

    col: int
    row: int

    @classmethod
    def of(cls, col: int, row: int) -> "Point":
        return cls(col, row)

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"


class Direction(Enum):
    """The six hex directions.

    Values are the direction codes reported by the opponent signal,
    numbered clockwise starting from straight up.
    """

    UP = 1
    UP_RIGHT = 2
    DOWN_RIGHT = 3
    DOWN = 4
    DOWN_LEFT = 5
    UP_LEFT = 6

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Resolve a direction from user text such as "upright" or "up_right".

        Raises:
            ValueError: If the text names no direction
        """
        key = text.strip().lower().replace("_", "").replace("-", "")
        try:
            return _DIRECTION_NAMES[key]
        except KeyError:
            raise ValueError(f"Unknown direction: '{text}'") from None


_DIRECTION_NAMES = {d.name.lower().replace("_", ""): d for d in Direction}

# (delta_col, delta_row) per direction, indexed by column parity
_EVEN_COLUMN_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.UP_RIGHT: (1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN: (0, 1),
    Direction.DOWN_LEFT: (-1, 1),
    Direction.UP_LEFT: (-1, 0),
}
_ODD_COLUMN_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.UP_RIGHT: (1, -1),
    Direction.DOWN_RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.DOWN_LEFT: (-1, 0),
    Direction.UP_LEFT: (-1, -1),
}


def offset(direction: Direction, col: int) -> tuple[int, int]:
    """Return the (delta_col, delta_row) of one step from a cell in column ``col``."""
    table = _ODD_COLUMN_OFFSETS if col % 2 else _EVEN_COLUMN_OFFSETS
    return table[direction]


def step(point: Point, direction: Direction) -> Point:
    """Return the neighbour of ``point`` in ``direction``, unbounded."""
    dc, dr = offset(direction, point.col)
    return Point(point.col + dc, point.row + dr)


def in_bounds(point: Point, rows: int, cols: int) -> bool:
    return 0 <= point.col < cols and 0 <= point.row < rows


def neighbor(point: Point, direction: Direction, rows: int, cols: int) -> Optional[Point]:
    """Return the in-grid neighbour of ``point`` in ``direction`` or None at an edge."""
    dest = step(point, direction)
    return dest if in_bounds(dest, rows, cols) else None


def neighbors(point: Point, rows: int, cols: int) -> list[Point]:
    """Return every in-grid neighbour of ``point`` in direction order."""
    result = []
    for direction in Direction:
        dest = neighbor(point, direction, rows, cols)
        if dest is not None:
            result.append(dest)
    return result


def ray(point: Point, direction: Direction, rows: int, cols: int) -> Iterator[tuple[int, Point]]:
    """Walk from ``point`` along ``direction`` until leaving the grid.

    Yields:
        (distance, point) pairs starting at distance 1; ``point`` itself
        is not yielded
    """
    distance = 0
    current = point
    while True:
        current = step(current, direction)
        if not in_bounds(current, rows, cols):
            return
        distance += 1
        yield distance, current


def _to_axial(point: Point) -> tuple[int, int]:
    q = point.col
    r = point.row - (point.col + (point.col & 1)) // 2
    return q, r


def hex_distance(a: Point, b: Point) -> int:
    """Minimum number of single-step moves between two cells.

    Examples:
        >>> hex_distance(Point(0, 1), Point(3, 2))
        3
        >>> hex_distance(Point(1, 1), Point(1, 3))
        2
    """
    aq, ar = _to_axial(a)
    bq, br = _to_axial(b)
    dq = aq - bq
    dr = ar - br
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2
