"""Line geometry of an M x N board.

Every scan in the engine (win detection, run evaluation) walks the same
four line families. The coordinates only depend on the game configuration,
so they are built once per configuration and shared.
"""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple

from .types import GameConfig, Point

Line = tuple[Point, ...]


class LineSet(NamedTuple):
    rows: tuple[Line, ...]        # left to right
    columns: tuple[Line, ...]     # top to bottom
    down_left: tuple[Line, ...]   # x + y constant, top to bottom
    down_right: tuple[Line, ...]  # x - y constant, top to bottom

    def all_lines(self) -> tuple[Line, ...]:
        return self.rows + self.columns + self.down_left + self.down_right


@lru_cache(maxsize=None)
def lines_for(config: GameConfig) -> LineSet:
    m, n = config.m, config.n

    rows = tuple(tuple(Point(x, y) for x in range(m)) for y in range(n))
    columns = tuple(tuple(Point(x, y) for y in range(n)) for x in range(m))

    down_left = tuple(
        tuple(Point(s - y, y) for y in range(n) if 0 <= s - y < m)
        for s in range(m + n - 1)
    )

    # offset runs from -(n - 1) (bottom-left corner) to m - 1 (top-right corner)
    down_right = tuple(
        tuple(Point(y + offset, y) for y in range(n) if 0 <= y + offset < m)
        for offset in range(-(n - 1), m)
    )

    return LineSet(rows, columns, down_left, down_right)
