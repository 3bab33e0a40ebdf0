"""Static board evaluation (positive = good for US).

Stones in the centre of the board are worth +2, elsewhere +1. On top of
that every row, column and diagonal is scanned for runs that are not
interrupted by the opponent for at least k cells. Inside such a run the
n-th stone adds n + 1, so one stone in an open line is worth 2, two stones
5 (2 + 3), three stones 9 (2 + 3 + 4) and so on: lines closer to
completion are worth disproportionately more.

The score is antisymmetric: swapping every stone negates it.
"""

from __future__ import annotations

from typing import Sequence

from mnkbot.game.board import Board
from mnkbot.game.lines import Line, lines_for
from mnkbot.game.types import GameConfig, Player

# Highest magnitude the evaluation can reach on a 15x15 board
EVAL_MAX = 7230
EVAL_MIN = -7230

# Certain win / certain loss, outside the evaluation range
EVAL_INF = 10_000
EVAL_N_INF = -10_000

_US = int(Player.US)
_THEM = int(Player.THEM)


def position_value(x: int, y: int, config: GameConfig) -> int:
    """2 for cells in the inner third of both axes, 1 elsewhere."""
    m, n = config.m, config.n
    in_center = m // 3 <= x < m - m // 3 and n // 3 <= y < n - n // 3
    return 2 if in_center else 1


def score_line(cells: Sequence[Sequence[int]], line: Line, k: int) -> int:
    """Score the runs of both players along one line.

    A stone extends its owner's run and closes the opponent's; an empty cell
    extends both. A run is credited once it spans at least k cells, either
    when the opponent interrupts it or at the end of the line.
    """
    score = 0

    us_len = us_pieces = us_score = 0
    them_len = them_pieces = them_score = 0

    for x, y in line:
        value = cells[y][x]
        if value == _US:
            us_pieces += 1
            us_score += us_pieces + 1
            us_len += 1
            if them_len >= k:
                score -= them_score
            them_len = them_pieces = them_score = 0
        elif value == _THEM:
            them_pieces += 1
            them_score += them_pieces + 1
            them_len += 1
            if us_len >= k:
                score += us_score
            us_len = us_pieces = us_score = 0
        else:
            us_len += 1
            them_len += 1

    if them_len >= k:
        score -= them_score
    if us_len >= k:
        score += us_score
    return score


def evaluate(board: Board, config: GameConfig) -> int:
    """Heuristic score of a non-terminal board."""
    cells = board.cells
    score = 0

    for y in range(config.n):
        row = cells[y]
        for x in range(config.m):
            value = row[x]
            if value == _US:
                score += position_value(x, y, config)
            elif value == _THEM:
                score -= position_value(x, y, config)

    k = config.k
    for line in lines_for(config).all_lines():
        score += score_line(cells, line, k)

    return score
