from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple, Optional


class Player(enum.IntEnum):
    US = 1
    THEM = 2

    @property
    def other(self) -> Player:
        return Player.THEM if self is Player.US else Player.US

    def __str__(self) -> str:
        return self.name.capitalize()


class Outcome(enum.Enum):
    NONE = 0
    US_WINS = 1
    THEM_WINS = 2
    TIE = 4

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.NONE

    @property
    def winner(self) -> Optional[Player]:
        if self is Outcome.US_WINS:
            return Player.US
        if self is Outcome.THEM_WINS:
            return Player.THEM
        return None


class Point(NamedTuple):
    x: int  # column, 0 = left
    y: int  # row, 0 = top


# Value of an unoccupied cell; occupied cells hold a Player value.
EMPTY = 0

# The grid is always CAPACITY x CAPACITY; smaller games use the top-left corner.
CAPACITY = 15


@dataclass(frozen=True)
class GameConfig:
    """Active dimensions of an m,n,k game.

    m is the number of columns, n the number of rows and k the run length
    needed to win. Values are fixed for the lifetime of a solve.
    """

    m: int
    n: int
    k: int

    def __post_init__(self) -> None:
        if not (1 <= self.m <= CAPACITY):
            raise ValueError(f"m must be between 1 and {CAPACITY}, got {self.m}")
        if not (1 <= self.n <= CAPACITY):
            raise ValueError(f"n must be between 1 and {CAPACITY}, got {self.n}")
        if self.k < 1:
            raise ValueError(f"k must be positive, got {self.k}")

    @property
    def cell_count(self) -> int:
        return self.m * self.n

    def contains(self, point: Point) -> bool:
        return 0 <= point.x < self.m and 0 <= point.y < self.n

    def __str__(self) -> str:
        return f"{self.m}x{self.n}x{self.k}"
