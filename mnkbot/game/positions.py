"""Row-major enumeration of empty cells."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from .types import EMPTY, GameConfig, Point

if TYPE_CHECKING:
    from .board import Board


def next_position(
    board: Board,
    config: GameConfig,
    point: Optional[Point] = None,
) -> Optional[Point]:
    """Return the first empty cell after `point`, scanning x fastest then y.

    Passing None starts from the top-left corner. Returns None once the
    active region is exhausted.
    """
    cells = board.cells
    if point is None:
        x, y = 0, 0
    else:
        x, y = point.x + 1, point.y
        if x >= config.m:
            x, y = 0, y + 1

    while y < config.n:
        row = cells[y]
        while x < config.m:
            if row[x] == EMPTY:
                return Point(x, y)
            x += 1
        x, y = 0, y + 1
    return None


def empty_positions(board: Board, config: GameConfig) -> Iterator[Point]:
    """Lazily yield every empty cell in scan order. Each call is a fresh pass."""
    point = next_position(board, config)
    while point is not None:
        yield point
        point = next_position(board, config, point)
