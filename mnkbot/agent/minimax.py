"""Depth-bounded minimax with alpha-beta pruning.

Plain minimax rather than negamax: US maximizes, THEM minimizes. Terminal
boards score EVAL_INF / EVAL_N_INF / 0; boards at the depth limit are
scored by the static evaluation.

When every line of play loses against a perfect opponent, the opponent we
actually face may still slip. Losses therefore get better with age: each
time a value below EVAL_MIN is passed up a level it is increased by one,
so a loss ten plies away outscores a loss two plies away.
"""

from __future__ import annotations

import logging
from typing import Optional

from mnkbot.game.board import Board
from mnkbot.game.positions import empty_positions
from mnkbot.game.types import GameConfig, Outcome, Player, Point
from mnkbot.game.win import check_win

from .evaluate import EVAL_INF, EVAL_MIN, EVAL_N_INF, evaluate

logger = logging.getLogger(__name__)


def _age_loss(value: int) -> int:
    return value + 1 if value < EVAL_MIN else value


def minimax(
    board: Board,
    config: GameConfig,
    depth: int,
    alpha: int,
    beta: int,
    maximizing: bool,
) -> tuple[int, Optional[Point]]:
    """Search `depth` plies below `board`.

    Returns (score, move), where move is the best child found for the side
    to play, or None at terminal / depth-limit nodes and when no child beat
    the initial bound.
    """
    outcome = check_win(board, config)
    if outcome is Outcome.US_WINS:
        return EVAL_INF, None
    if outcome is Outcome.THEM_WINS:
        return EVAL_N_INF, None
    if outcome is Outcome.TIE:
        return 0, None

    if depth == 0:
        return evaluate(board, config), None

    best_move: Optional[Point] = None
    if maximizing:
        value = EVAL_N_INF
        for point in empty_positions(board, config):
            child = board.copy_with_move(point, Player.US)
            child_value, _ = minimax(child, config, depth - 1, alpha, beta, False)
            if child_value > value:
                value = child_value
                best_move = point
            alpha = max(alpha, value)
            if alpha >= beta:
                break
    else:
        value = EVAL_INF
        for point in empty_positions(board, config):
            child = board.copy_with_move(point, Player.THEM)
            child_value, _ = minimax(child, config, depth - 1, alpha, beta, True)
            if child_value < value:
                value = child_value
                best_move = point
            beta = min(beta, value)
            if alpha >= beta:
                break

    return _age_loss(value), best_move


def minimax_move(board: Board, config: GameConfig, depth: int) -> tuple[int, Optional[Point]]:
    """Run a full-window search for US from `board`."""
    score, move = minimax(board, config, depth, EVAL_N_INF, EVAL_INF, True)
    logger.info("Minimax score: %d", score)
    return score, move
