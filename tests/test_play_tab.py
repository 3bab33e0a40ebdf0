from mnkbot.game.types import GameConfig, Outcome, Player, Point
from mnkbot.ui.play_tab import (
    AI_PLAYER,
    HUMAN_PLAYER,
    GameSession,
    _apply_human_move,
    _new_game,
    _resign,
    _undo_move,
)


def test_human_plays_them():
    assert HUMAN_PLAYER is Player.THEM
    assert AI_PLAYER is Player.US


def test_new_game_human_first():
    session = GameSession()
    result = _new_game(3, 3, 3, "You", "Fast (10k nodes)", session)
    assert session.game.config == GameConfig(3, 3, 3)
    assert len(session.game.moves) == 0  # no AI opening move
    assert session.agent.max_nodes == 10_000
    assert result[4] == "You move first."


def test_new_game_ai_first():
    session = GameSession()
    result = _new_game(4, 4, 3, "AI", "Fast (10k nodes)", session)
    assert len(session.game.moves) == 1
    assert session.game.moves[0].player is AI_PLAYER
    assert session.game.current_player is HUMAN_PLAYER
    assert result[4] == "AI moved first."


def test_new_game_random_assigns_valid_order():
    session = GameSession()
    seen = set()
    for _ in range(50):
        _new_game(3, 3, 3, "Random", "Fast (10k nodes)", session)
        seen.add(session.game.first_player)
    assert seen == {Player.US, Player.THEM}


def test_new_game_invalid_config():
    session = GameSession()
    old_game = session.game
    result = _new_game(3, 3, 0, "You", "Fast (10k nodes)", session)
    assert "Invalid board" in result[1]
    assert session.game is old_game


def test_human_move_gets_ai_reply():
    session = GameSession()
    _new_game(3, 3, 3, "You", "Fast (10k nodes)", session)
    result = _apply_human_move("B2", session)
    assert [m.player for m in session.game.moves] == [HUMAN_PLAYER, AI_PLAYER]
    assert session.game.moves[0].point == Point(1, 1)
    assert result[4] == ""
    assert len(result[2]) == 2


def test_invalid_coordinate():
    session = GameSession()
    result = _apply_human_move("Z9", session)
    assert "Invalid coordinate" in result[1]
    assert not session.game.moves


def test_occupied_cell():
    session = GameSession()
    _apply_human_move("B2", session)
    result = _apply_human_move("B2", session)
    assert "already occupied" in result[1]


def test_undo_pair():
    session = GameSession()
    _apply_human_move("B2", session)
    _undo_move(session)
    assert not session.game.moves
    assert session.game.current_player is HUMAN_PLAYER


def test_undo_nothing():
    session = GameSession()
    result = _undo_move(session)
    assert result[1] == "Nothing to undo."


def test_resign():
    session = GameSession()
    _resign(session)
    assert session.game.is_over
    assert session.game.winner is AI_PLAYER
    assert session.game_over_banner == "AI wins!"


def test_game_over_banner_win():
    session = GameSession()
    session.game._outcome = Outcome.THEM_WINS
    assert session.game_over_banner == "You win!"


def test_game_over_banner_draw():
    session = GameSession()
    session.game._outcome = Outcome.TIE
    assert session.game_over_banner == "Draw!"


def test_game_over_banner_empty_when_playing():
    assert GameSession().game_over_banner == ""


def test_history_table():
    session = GameSession()
    _apply_human_move("A1", session)
    table = session.move_history_table
    assert table[0] == ["1", "You", "A1"]
    assert table[1][1] == "AI"


def test_status_text_counts_moves():
    session = GameSession()
    assert session.status_text.startswith("Your turn, move 1 of 9")
    _apply_human_move("B2", session)
    assert session.status_text.startswith("Your turn, move 3 of 9")


def test_status_text_draw():
    session = GameSession()
    session.game._outcome = Outcome.TIE
    assert session.status_text == "Game over: Draw! (all 9 cells filled)"


def test_status_text_resign():
    session = GameSession()
    _resign(session)
    assert session.status_text == "Game over: AI wins! (3 in a row)"
