from __future__ import annotations

import abc

from mnkbot.game.board import MnkGameState
from mnkbot.game.types import Point


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(self, game_state: MnkGameState) -> Point:
        """Return the point where this agent wants to play."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
