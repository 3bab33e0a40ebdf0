from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .positions import empty_positions
from .types import CAPACITY, EMPTY, GameConfig, Outcome, Player, Point
from .win import check_win

# Column labels: A-O, one per column of the largest supported board
COL_LABELS = "ABCDEFGHIJKLMNO"

# Characters used by Board.from_rows
ROW_CHARS = {".": EMPTY, "X": int(Player.US), "O": int(Player.THEM)}

_ANSI_RESET = "\x1b[m"
_ANSI_US = "\x1b[1;32m"
_ANSI_THEM = "\x1b[1;31m"
_ANSI_HIGHLIGHT = "\x1b[1;34m"


def parse_coordinate(text: str, config: GameConfig) -> Optional[Point]:
    """Parse a coordinate string like 'C2' into a Point.

    Column is a letter (A = column 0), row is a 1-based number counted from
    the top. Returns None if the string is invalid or off the board.
    """
    text = text.strip().upper()
    if len(text) < 2 or len(text) > 3:
        return None
    col_char = text[0]
    row_str = text[1:]
    if col_char not in COL_LABELS:
        return None
    try:
        row = int(row_str)
    except ValueError:
        return None
    point = Point(COL_LABELS.index(col_char), row - 1)
    if not config.contains(point):
        return None
    return point


def format_point(point: Point) -> str:
    """Format a Point as a coordinate string like 'C2'."""
    return f"{COL_LABELS[point.x]}{point.y + 1}"


@dataclass
class Move:
    point: Point
    player: Player

    def __str__(self) -> str:
        return f"{self.player}: {format_point(self.point)}"


class Board:
    """Fixed CAPACITY x CAPACITY grid of cell values.

    Only the top-left m x n window of a game is ever written; every other
    cell stays EMPTY.
    """

    def __init__(self) -> None:
        self._grid: list[list[int]] = [[EMPTY] * CAPACITY for _ in range(CAPACITY)]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Build a board from strings, one per row: X = us, O = them, . = empty."""
        board = cls()
        for y, row in enumerate(rows):
            assert y < CAPACITY, "too many rows"
            assert len(row) <= CAPACITY, "row too long"
            for x, char in enumerate(row):
                assert char in ROW_CHARS, f"unknown cell {char!r}"
                board._grid[y][x] = ROW_CHARS[char]
        return board

    @property
    def cells(self) -> list[list[int]]:
        """Raw grid indexed as cells[y][x]. Treat as read-only."""
        return self._grid

    def get(self, point: Point) -> Optional[Player]:
        value = self._grid[point.y][point.x]
        return None if value == EMPTY else Player(value)

    def is_empty(self, point: Point) -> bool:
        return self._grid[point.y][point.x] == EMPTY

    def place(self, point: Point, player: Player) -> None:
        assert self.is_empty(point), f"{format_point(point)} is occupied"
        self._grid[point.y][point.x] = int(player)

    def remove(self, point: Point) -> None:
        self._grid[point.y][point.x] = EMPTY

    def copy(self) -> Board:
        board = Board.__new__(Board)
        board._grid = [row[:] for row in self._grid]
        return board

    def copy_with_move(self, point: Point, player: Player) -> Board:
        """Return a copy of this board with one extra stone. self is untouched."""
        board = self.copy()
        board._grid[point.y][point.x] = int(player)
        return board

    def inverted(self) -> Board:
        """Return a copy with every US stone swapped for THEM and vice versa."""
        swap = {EMPTY: EMPTY, int(Player.US): int(Player.THEM), int(Player.THEM): int(Player.US)}
        board = Board.__new__(Board)
        board._grid = [[swap[value] for value in row] for row in self._grid]
        return board

    def count_empty(self, config: GameConfig) -> int:
        return sum(
            1
            for y in range(config.n)
            for x in range(config.m)
            if self._grid[y][x] == EMPTY
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid


def render_text(
    board: Board,
    config: GameConfig,
    highlight: Optional[Point] = None,
    color: bool = True,
) -> str:
    """Render the active region as text, one row per line.

    Our stones are green, theirs red, `highlight` (usually the move about to
    be played) blue. With color=False stones are drawn as X / O / *.
    """
    lines: list[str] = []
    for y in range(config.n):
        parts: list[str] = []
        for x in range(config.m):
            point = Point(x, y)
            owner = board.get(point)
            if point == highlight:
                parts.append(f"{_ANSI_HIGHLIGHT} #{_ANSI_RESET}" if color else " *")
            elif owner is Player.US:
                parts.append(f"{_ANSI_US} #{_ANSI_RESET}" if color else " X")
            elif owner is Player.THEM:
                parts.append(f"{_ANSI_THEM} #{_ANSI_RESET}" if color else " O")
            else:
                parts.append(" .")
        lines.append("".join(parts))
    lines.append("--" * config.m)
    return "\n".join(lines)


class MnkGameState:
    """Full game state for one m,n,k game between US and THEM."""

    def __init__(self, config: GameConfig, first_player: Player = Player.THEM) -> None:
        self.config = config
        self.board = Board()
        self.first_player = first_player
        self.current_player = first_player
        self.moves: list[Move] = []
        self._outcome = Outcome.NONE
        self._resigned: Optional[Player] = None

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome.is_terminal or self._resigned is not None

    @property
    def winner(self) -> Optional[Player]:
        if self._resigned is not None:
            return self._resigned.other
        return self._outcome.winner

    @property
    def is_draw(self) -> bool:
        return self._outcome is Outcome.TIE

    def legal_moves(self) -> list[Point]:
        if self.is_over:
            return []
        return list(empty_positions(self.board, self.config))

    def apply_move(self, point: Point) -> None:
        """Place a stone for the current player and advance the turn."""
        assert not self.is_over, "Game is already over"
        assert self.config.contains(point), f"Point {point} is off the grid"
        assert self.board.is_empty(point), f"Point {format_point(point)} is occupied"

        player = self.current_player
        self.board.place(point, player)
        self.moves.append(Move(point=point, player=player))
        self._outcome = check_win(self.board, self.config)
        self.current_player = self.current_player.other

    def undo_move(self) -> Optional[Move]:
        """Undo the last move. Returns the undone Move, or None if no moves."""
        if not self.moves:
            return None
        move = self.moves.pop()
        self.board.remove(move.point)
        self.current_player = move.player
        self._outcome = Outcome.NONE
        self._resigned = None
        return move

    def resign(self, player: Player) -> None:
        assert not self.is_over, "Game is already over"
        self._resigned = player
