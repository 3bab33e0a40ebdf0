"""Tactical short-circuit solver, run before the minimax search.

Looks for the obvious moves in priority order: win now, block their win,
create a fork, block their fork. Minimax would find all of these given
enough depth, but on large, mostly empty boards it can only look two plies
ahead and misses forks.

Every pass works on scratch copies; the board passed in is never modified.
"""

from __future__ import annotations

from typing import Optional

from mnkbot.game.board import Board
from mnkbot.game.positions import empty_positions
from mnkbot.game.types import GameConfig, Outcome, Player, Point
from mnkbot.game.win import check_win

_WIN_FOR = {Player.US: Outcome.US_WINS, Player.THEM: Outcome.THEM_WINS}


def count_winning_moves(board: Board, config: GameConfig, player: Player) -> int:
    """Number of empty cells where one more stone for `player` wins."""
    target = _WIN_FOR[player]
    return sum(
        1
        for point in empty_positions(board, config)
        if check_win(board.copy_with_move(point, player), config) is target
    )


def find_winning_move(board: Board, config: GameConfig, player: Player) -> Optional[Point]:
    """First empty cell where a stone for `player` wins immediately."""
    target = _WIN_FOR[player]
    for point in empty_positions(board, config):
        if check_win(board.copy_with_move(point, player), config) is target:
            return point
    return None


def find_fork(board: Board, config: GameConfig, player: Player) -> Optional[Point]:
    """First cell that gives `player` two or more winning continuations."""
    for point in empty_positions(board, config):
        after = board.copy_with_move(point, player)
        if count_winning_moves(after, config, player) >= 2:
            return point
    return None


def _fork_threats(board: Board, config: GameConfig) -> int:
    """Count the threats on `board` just after a THEM move.

    Each THEM winning continuation counts one. When there is exactly one, the
    look-ahead goes a ply further: every US reply after which US would have
    two or more winning continuations adds a threat.
    """
    threats = count_winning_moves(board, config, Player.THEM)
    if threats == 1:
        for point in empty_positions(board, config):
            reply = board.copy_with_move(point, Player.US)
            if count_winning_moves(reply, config, Player.US) >= 2:
                threats += 1
    return threats


def find_fork_block(board: Board, config: GameConfig) -> Optional[Point]:
    """First cell where THEM would fork; we should occupy it first."""
    for point in empty_positions(board, config):
        after = board.copy_with_move(point, Player.THEM)
        if _fork_threats(after, config) >= 2:
            return point
    return None


def basic_solve(board: Board, config: GameConfig) -> Optional[Point]:
    """Return an obvious move for US, or None if deeper search is needed."""
    # Win if we can
    point = find_winning_move(board, config, Player.US)
    if point is not None:
        return point

    # Block their win
    point = find_winning_move(board, config, Player.THEM)
    if point is not None:
        return point

    # Fork if we can
    point = find_fork(board, config, Player.US)
    if point is not None:
        return point

    # TODO: when they have several forks, prefer blocking one that also forces them to defend
    return find_fork_block(board, config)
