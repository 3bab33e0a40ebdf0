from mnkbot.game.board import Board
from mnkbot.game.positions import empty_positions, next_position
from mnkbot.game.types import GameConfig, Point

TTT = GameConfig(3, 3, 3)


def test_start_sentinel_returns_first_cell():
    assert next_position(Board(), TTT) == Point(0, 0)


def test_skips_occupied_cells():
    board = Board.from_rows(["XO.", "...", "..."])
    assert next_position(board, TTT) == Point(2, 0)


def test_wraps_to_next_row():
    board = Board.from_rows(["...", "X..", "..."])
    assert next_position(board, TTT, Point(2, 0)) == Point(1, 1)


def test_exhausted():
    board = Board.from_rows(["XOX", "OXO", "OX."])
    assert next_position(board, TTT, Point(2, 2)) is None
    assert next_position(Board.from_rows(["XOX", "OXO", "OXO"]), TTT) is None


def test_row_major_order():
    config = GameConfig(3, 2, 2)
    assert list(empty_positions(Board(), config)) == [
        Point(0, 0), Point(1, 0), Point(2, 0),
        Point(0, 1), Point(1, 1), Point(2, 1),
    ]


def test_stays_inside_active_region():
    config = GameConfig(2, 2, 2)
    points = list(empty_positions(Board(), config))
    assert len(points) == 4
    assert all(config.contains(p) for p in points)


def test_restartable():
    board = Board.from_rows([".X.", "O..", "..."])
    first = list(empty_positions(board, TTT))
    second = list(empty_positions(board, TTT))
    assert first == second
    assert len(first) == 7


def test_independent_passes_can_nest():
    board = Board.from_rows(["X..", "...", "..."])
    pairs = [(a, b) for a in empty_positions(board, TTT) for b in empty_positions(board, TTT)]
    assert len(pairs) == 64


def test_lazy():
    positions = empty_positions(Board(), GameConfig(15, 15, 5))
    assert next(positions) == Point(0, 0)
    assert next(positions) == Point(1, 0)
