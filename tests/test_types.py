import pytest

from mnkbot.game.types import CAPACITY, GameConfig, Outcome, Player, Point


def test_player_other():
    assert Player.US.other is Player.THEM
    assert Player.THEM.other is Player.US


def test_player_str():
    assert str(Player.US) == "Us"
    assert str(Player.THEM) == "Them"


def test_point_is_namedtuple():
    p = Point(3, 5)
    assert p.x == 3
    assert p.y == 5
    assert p == Point(3, 5)


def test_outcome_winner():
    assert Outcome.US_WINS.winner is Player.US
    assert Outcome.THEM_WINS.winner is Player.THEM
    assert Outcome.TIE.winner is None
    assert Outcome.NONE.winner is None


def test_outcome_is_terminal():
    assert not Outcome.NONE.is_terminal
    assert Outcome.TIE.is_terminal
    assert Outcome.US_WINS.is_terminal


class TestGameConfig:
    def test_valid(self):
        config = GameConfig(7, 6, 4)
        assert config.cell_count == 42
        assert str(config) == "7x6x4"

    def test_largest_board(self):
        GameConfig(CAPACITY, CAPACITY, 5)

    @pytest.mark.parametrize("m, n, k", [(0, 3, 3), (3, 0, 3), (3, 3, 0), (16, 3, 3), (3, 16, 3), (3, 3, -1)])
    def test_invalid(self, m, n, k):
        with pytest.raises(ValueError):
            GameConfig(m, n, k)

    def test_k_larger_than_board_allowed(self):
        config = GameConfig(3, 3, 5)
        assert config.k == 5

    def test_contains(self):
        config = GameConfig(4, 2, 2)
        assert config.contains(Point(3, 1))
        assert not config.contains(Point(4, 0))
        assert not config.contains(Point(0, 2))
        assert not config.contains(Point(-1, 0))

    def test_hashable(self):
        assert hash(GameConfig(3, 3, 3)) == hash(GameConfig(3, 3, 3))
