"""Play tab: Human vs AI on a configurable m,n,k board."""

from __future__ import annotations

import logging
import random as _random
from dataclasses import dataclass, field
from typing import Optional

import gradio as gr

from mnkbot.agent.heuristic_agent import MAX_SEARCH_NODES, HeuristicMinimaxAgent
from mnkbot.game.board import MnkGameState, format_point, parse_coordinate
from mnkbot.game.types import GameConfig, Player
from mnkbot.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)

# The engine plays US; the human is always THEM.
AI_PLAYER = Player.US
HUMAN_PLAYER = Player.THEM

DEFAULT_CONFIG = GameConfig(m=3, n=3, k=3)

BUDGET_CHOICES: dict[str, int] = {
    "Fast (10k nodes)": 10_000,
    "Normal (100k nodes)": MAX_SEARCH_NODES,
    "Strong (800k nodes)": 800_000,
}


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    game: MnkGameState = field(default_factory=lambda: MnkGameState(DEFAULT_CONFIG))
    agent: HeuristicMinimaxAgent = field(default_factory=HeuristicMinimaxAgent)

    def reset(self, config: GameConfig, human_first: bool) -> None:
        first = HUMAN_PLAYER if human_first else AI_PLAYER
        self.game = MnkGameState(config, first_player=first)

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        g = self.game
        if not g.is_over:
            return ""
        if g.is_draw:
            return "Draw!"
        return "You win!" if g.winner is HUMAN_PLAYER else "AI wins!"

    @property
    def status_text(self) -> str:
        g = self.game
        k = g.config.k
        if g.is_draw:
            return f"Game over: Draw! (all {g.config.cell_count} cells filled)"
        if g.is_over:
            who = "You win!" if g.winner is HUMAN_PLAYER else "AI wins!"
            return f"Game over: {who} ({k} in a row)"
        if g.current_player is HUMAN_PLAYER:
            turn = len(g.moves) + 1
            return f"Your turn, move {turn} of {g.config.cell_count} ({g.config}, {k} in a row wins)"
        return "AI is thinking..."

    @property
    def move_history_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        for i, move in enumerate(self.game.moves):
            who = "You" if move.player is HUMAN_PLAYER else "AI"
            rows.append([str(i + 1), who, format_point(move.point)])
        return rows


def _make_board_html(session: GameSession) -> str:
    clickable = (
        not session.game.is_over
        and session.game.current_player is HUMAN_PLAYER
    )
    return render_board_svg(
        session.game,
        clickable=clickable,
        game_over_message=session.game_over_banner,
    )


def _ai_move(session: GameSession) -> None:
    """Let the AI play if it is its turn."""
    if session.game.is_over or session.game.current_player is not AI_PLAYER:
        return
    point = session.agent.select_move(session.game)
    logger.info("AI plays %s", format_point(point))
    session.game.apply_move(point)


def _outputs(session: GameSession, status: Optional[str] = None):
    return (
        _make_board_html(session),
        status if status is not None else session.status_text,
        session.move_history_table,
        session,
    )


def _apply_human_move(coord_text: str, session: GameSession):
    """Process a human move, then let the AI respond."""
    if session.game.is_over:
        return _outputs(session) + ("",)

    if session.game.current_player is not HUMAN_PLAYER:
        return _outputs(session, "Wait, it's the AI's turn.") + ("",)

    point = parse_coordinate(coord_text, session.game.config)
    if point is None:
        return _outputs(session, f"Invalid coordinate: '{coord_text}'. Use format like B2.") + ("",)

    if not session.game.board.is_empty(point):
        return _outputs(session, f"{format_point(point)} is already occupied.") + ("",)

    session.game.apply_move(point)
    _ai_move(session)
    return _outputs(session) + ("",)


def _new_game(
    m: float,
    n: float,
    k: float,
    first_choice: str,
    budget_choice: str,
    session: GameSession,
):
    """Start a new game. first_choice is 'You', 'AI', or 'Random'."""
    try:
        config = GameConfig(int(m), int(n), int(k))
    except (TypeError, ValueError) as e:
        return _outputs(session, f"Invalid board: {e}") + ("",)

    if first_choice == "Random":
        human_first = _random.choice([True, False])
    else:
        human_first = first_choice != "AI"

    session.agent = HeuristicMinimaxAgent(max_nodes=BUDGET_CHOICES.get(budget_choice, MAX_SEARCH_NODES))
    session.reset(config, human_first)
    _ai_move(session)

    info = "You move first." if human_first else "AI moved first."
    return _outputs(session) + (info,)


def _undo_move(session: GameSession):
    """Undo the last move pair (AI + human)."""
    if not session.game.moves:
        return _outputs(session, "Nothing to undo.")

    last = session.game.moves[-1]
    if last.player is AI_PLAYER:
        session.game.undo_move()  # undo AI
    if session.game.moves:
        session.game.undo_move()  # undo human
    # The AI may have opened the game; it replays its opening immediately.
    _ai_move(session)
    return _outputs(session)


def _resign(session: GameSession):
    if not session.game.is_over:
        session.game.resign(HUMAN_PLAYER)
    return _outputs(session)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    session_state = gr.State(GameSession())

    with gr.Row():
        # Left: board
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(MnkGameState(DEFAULT_CONFIG)),
                label="Board",
            )
        # Right: controls
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value="Your turn",
                label="Status",
                interactive=False,
                lines=2,
            )
            first_info = gr.Textbox(
                value="You move first.",
                label="Order",
                interactive=False,
                lines=1,
            )

            gr.Markdown("### New Game")
            with gr.Row():
                m_input = gr.Number(value=DEFAULT_CONFIG.m, label="Columns (M)", precision=0)
                n_input = gr.Number(value=DEFAULT_CONFIG.n, label="Rows (N)", precision=0)
                k_input = gr.Number(value=DEFAULT_CONFIG.k, label="To win (K)", precision=0)
            first_choice = gr.Radio(
                choices=["You", "AI", "Random"],
                value="You",
                label="First move",
            )
            budget_choice = gr.Dropdown(
                choices=list(BUDGET_CHOICES.keys()),
                value="Normal (100k nodes)",
                label="AI strength",
            )
            new_game_btn = gr.Button("New Game", variant="primary")

            with gr.Row():
                undo_btn = gr.Button("Undo")
                resign_btn = gr.Button("Resign", variant="stop")

            gr.Markdown("### Enter Move")
            coord_input = gr.Textbox(
                label="Coordinate (e.g. B2)",
                placeholder="B2",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button(
                "Submit Move",
                elem_id="coord-submit",
            )

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Move"],
                datatype=["number", "str", "str"],
                interactive=False,
            )

    # Outputs shared by most callbacks
    board_outputs = [board_html, status_text, move_table, session_state]

    coord_submit.click(
        fn=_apply_human_move,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
    )

    new_game_btn.click(
        fn=_new_game,
        inputs=[m_input, n_input, k_input, first_choice, budget_choice, session_state],
        outputs=board_outputs + [first_info],
    )

    undo_btn.click(
        fn=_undo_move,
        inputs=[session_state],
        outputs=board_outputs,
    )

    resign_btn.click(
        fn=_resign,
        inputs=[session_state],
        outputs=board_outputs,
    )
