"""Move selection: tactical solver, then minimax, then cheap fallbacks."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from mnkbot.agent.base import Agent
from mnkbot.agent.evaluate import EVAL_N_INF, evaluate
from mnkbot.agent.minimax import minimax_move
from mnkbot.agent.tactics import basic_solve
from mnkbot.game.board import Board, MnkGameState, format_point, render_text
from mnkbot.game.positions import empty_positions, next_position
from mnkbot.game.types import GameConfig, Player, Point

logger = logging.getLogger(__name__)

# Rough number of minimax nodes we can afford per move
MAX_SEARCH_NODES = 100_000

MAX_DEPTH = 20


class MoveSource(enum.Enum):
    TACTICAL = "tactical"
    MINIMAX = "minimax"
    HIGHEST_SCORE = "highest_score"
    BACKUP = "backup"


@dataclass
class MoveChoice:
    point: Point
    source: MoveSource
    score: Optional[int] = None

    def __str__(self) -> str:
        return f"{format_point(self.point)} ({self.source.value})"


def calculate_depth(open_cells: int, max_nodes: int, max_depth: int = MAX_DEPTH) -> int:
    """Deepest search whose full tree stays under `max_nodes`.

    A depth-d search over `open_cells` empty cells visits about
    open * (open - 1) * ... * (open - d + 1) leaves.
    """
    searched = open_cells
    for depth in range(1, max_depth + 1):
        if open_cells == 0 or searched >= max_nodes:
            return depth - 1
        open_cells -= 1
        searched *= open_cells
    return max_depth


def highest_scored_move(board: Board, config: GameConfig) -> Optional[Point]:
    """The single US move with the best static evaluation."""
    best_score = EVAL_N_INF
    best_move: Optional[Point] = None
    for point in empty_positions(board, config):
        score = evaluate(board.copy_with_move(point, Player.US), config)
        if score > best_score:
            best_score = score
            best_move = point
    return best_move


def backup_move(board: Board, config: GameConfig) -> Optional[Point]:
    """First legal move, in case everything else fails."""
    return next_position(board, config)


def choose_move(
    board: Board,
    config: GameConfig,
    max_nodes: int = MAX_SEARCH_NODES,
    max_depth: int = MAX_DEPTH,
) -> Optional[MoveChoice]:
    """Pick a move for US, or None if the board has no legal move."""
    logger.debug("Solving board:\n%s", render_text(board, config, color=False))

    point = basic_solve(board, config)
    if point is not None:
        logger.info("Basic solve found move %s", format_point(point))
        return MoveChoice(point, MoveSource.TACTICAL)
    logger.info("Basic solve didn't find a move")

    depth = calculate_depth(board.count_empty(config), max_nodes, max_depth)
    logger.info("Doing minimax with depth=%d", depth)
    score, point = minimax_move(board, config, depth)
    if point is not None:
        logger.info("Minimax found move %s", format_point(point))
        return MoveChoice(point, MoveSource.MINIMAX, score)
    logger.info("Minimax didn't find a move")

    point = highest_scored_move(board, config)
    if point is not None:
        logger.info("Highest score found move %s", format_point(point))
        return MoveChoice(point, MoveSource.HIGHEST_SCORE)
    logger.info("Highest score didn't find a move")

    point = backup_move(board, config)
    if point is not None:
        logger.info("Backup found move %s", format_point(point))
        return MoveChoice(point, MoveSource.BACKUP)

    logger.warning("Backup didn't find a move, giving up")
    return None


class HeuristicMinimaxAgent(Agent):
    """Tactical checks + alpha-beta minimax sized to a node budget."""

    def __init__(self, max_nodes: int = MAX_SEARCH_NODES, max_depth: int = MAX_DEPTH) -> None:
        self.max_nodes = max_nodes
        self.max_depth = max_depth

    @property
    def name(self) -> str:
        return f"HeuristicMinimax(n={self.max_nodes})"

    def select_move(self, game_state: MnkGameState) -> Point:
        board = game_state.board
        # The engine always plays US; flip the stones when we move for THEM.
        if game_state.current_player is Player.THEM:
            board = board.inverted()
        choice = choose_move(board, game_state.config, self.max_nodes, self.max_depth)
        assert choice is not None, "No legal moves available"
        return choice.point
