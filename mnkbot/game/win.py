"""Win detection for m,n,k boards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from .lines import Line, lines_for
from .types import EMPTY, GameConfig, Outcome, Player

if TYPE_CHECKING:
    from .board import Board

_US = int(Player.US)
_THEM = int(Player.THEM)


def _run_winner(cells: Sequence[Sequence[int]], line: Line, k: int) -> Optional[Outcome]:
    """Return the owner of the first run of k along the line, if any."""
    us_run = 0
    them_run = 0
    for x, y in line:
        value = cells[y][x]
        us_run = us_run + 1 if value == _US else 0
        them_run = them_run + 1 if value == _THEM else 0
        if us_run >= k:
            return Outcome.US_WINS
        if them_run >= k:
            return Outcome.THEM_WINS
    return None


def check_win(board: Board, config: GameConfig) -> Outcome:
    """Scan rows, columns and both diagonal families for a run of k.

    Returns the winner as soon as a run is found. Without a winner the
    board is a TIE when no empty cell was seen, otherwise NONE.
    """
    cells = board.cells
    k = config.k
    lines = lines_for(config)

    for family in (lines.rows, lines.columns, lines.down_left):
        for line in family:
            winner = _run_winner(cells, line, k)
            if winner is not None:
                return winner

    # The down-right family covers every cell, so it also looks for blanks.
    has_empty = False
    for line in lines.down_right:
        us_run = 0
        them_run = 0
        for x, y in line:
            value = cells[y][x]
            if value == EMPTY:
                has_empty = True
            us_run = us_run + 1 if value == _US else 0
            them_run = them_run + 1 if value == _THEM else 0
            if us_run >= k:
                return Outcome.US_WINS
            if them_run >= k:
                return Outcome.THEM_WINS

    return Outcome.NONE if has_empty else Outcome.TIE
