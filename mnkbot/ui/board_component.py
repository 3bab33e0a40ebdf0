"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from typing import Optional

from mnkbot.game.board import COL_LABELS, MnkGameState, format_point
from mnkbot.game.types import Player, Point

# Layout constants
CELL_SIZE = 48
MARGIN = 36
STONE_RADIUS = 17
CLICK_SIZE = CELL_SIZE - 4  # Invisible click target, slightly inside the cell

# Colors
BG_COLOR = "#DCB35C"
LINE_COLOR = "#4A3728"
US_STONE = "#1A1A1A"
THEM_STONE = "#F5F5F5"
THEM_STROKE = "#888"
LAST_MOVE_COLOR = "#E74C3C"

# Banner text colors keyed by the first word of the message
BANNER_COLORS = {
    "You": "#4ADE80",
    "AI": "#F87171",
}
BANNER_DEFAULT_COLOR = "#FFFFFF"


def _board_px(cells: int) -> int:
    return MARGIN * 2 + CELL_SIZE * cells


def _center(point: Point) -> tuple[int, int]:
    """Pixel center of a board cell."""
    x = MARGIN + point.x * CELL_SIZE + CELL_SIZE // 2
    y = MARGIN + point.y * CELL_SIZE + CELL_SIZE // 2
    return x, y


def _banner(message: str, width: int, height: int) -> list[str]:
    color = BANNER_COLORS.get(message.split(" ", 1)[0], BANNER_DEFAULT_COLOR)
    box_h = 56
    box_y = (height - box_h) // 2
    return [
        f'<rect x="0" y="{box_y}" width="{width}" height="{box_h}" '
        f'fill="rgba(0, 0, 0, 0.65)"/>',
        f'<text x="{width // 2}" y="{box_y + 37}" text-anchor="middle" '
        f'font-size="28" font-weight="bold" font-family="sans-serif" '
        f'fill="{color}">{message}</text>',
    ]


def render_board_svg(
    game_state: MnkGameState,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
) -> str:
    """Render the active M x N board as an SVG string."""
    config = game_state.config
    width = _board_px(config.m)
    height = _board_px(config.n)
    parts: list[str] = []

    # SVG header
    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" '
        f'id="mnk-board">'
    )

    # Background
    parts.append(f'<rect width="{width}" height="{height}" fill="{BG_COLOR}" rx="4"/>')

    # Grid lines around every cell
    for i in range(config.m + 1):
        x = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{x}" y1="{MARGIN}" x2="{x}" y2="{height - MARGIN}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )
    for i in range(config.n + 1):
        y = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{MARGIN}" y1="{y}" x2="{width - MARGIN}" y2="{y}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )

    # Column labels (top) and row labels (left), matching format_point
    for c in range(config.m):
        x, _ = _center(Point(c, 0))
        parts.append(
            f'<text x="{x}" y="{MARGIN - 12}" text-anchor="middle" '
            f'font-size="14" font-family="monospace" fill="{LINE_COLOR}">'
            f'{COL_LABELS[c]}</text>'
        )
    for r in range(config.n):
        _, y = _center(Point(0, r))
        parts.append(
            f'<text x="{MARGIN - 16}" y="{y + 5}" text-anchor="middle" '
            f'font-size="14" font-family="monospace" fill="{LINE_COLOR}">'
            f'{r + 1}</text>'
        )

    # Stones
    last_point: Optional[Point] = None
    if game_state.moves:
        last_point = game_state.moves[-1].point

    for move in game_state.moves:
        x, y = _center(move.point)
        fill = US_STONE if move.player is Player.US else THEM_STONE
        stroke = "none" if move.player is Player.US else THEM_STROKE
        parts.append(
            f'<circle cx="{x}" cy="{y}" r="{STONE_RADIUS}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
        )
        if highlight_last and move.point == last_point:
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="5" '
                f'fill="{LAST_MOVE_COLOR}" opacity="0.8"/>'
            )

    # Clickable cell targets (invisible squares)
    if clickable and not game_state.is_over:
        for point in game_state.legal_moves():
            x, y = _center(point)
            coord_str = format_point(point)
            half = CLICK_SIZE // 2
            parts.append(
                f'<rect x="{x - half}" y="{y - half}" '
                f'width="{CLICK_SIZE}" height="{CLICK_SIZE}" '
                f'fill="transparent" class="board-click" '
                f'data-coord="{coord_str}" style="cursor:pointer">'
                f'<title>{coord_str}</title></rect>'
            )

    if game_over_message:
        parts.extend(_banner(game_over_message, width, height))

    parts.append("</svg>")
    # gr.HTML does not run <script> tags reliably, so the handler is also
    # bound once on page load via CLICK_JS.
    parts.append(f"<script>{_CLICK_HANDLER}</script>")
    return "\n".join(parts)


# Handles clicks on the SVG and writes the coordinate to a hidden Gradio
# Textbox, then presses the submit button.
_CLICK_HANDLER = """
(function() {
    if (window._mnkClickBound) return;
    window._mnkClickBound = true;

    document.addEventListener('click', function(e) {
        const cell = e.target.closest('.board-click');
        if (!cell) return;
        const coord = cell.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (container) {
            // Set value using native setter to trigger Gradio's change detection
            const proto = container.tagName === 'TEXTAREA'
                ? window.HTMLTextAreaElement.prototype
                : window.HTMLInputElement.prototype;
            const nativeSetter = Object.getOwnPropertyDescriptor(proto, 'value')?.set;
            if (nativeSetter) {
                nativeSetter.call(container, coord);
            } else {
                container.value = coord;
            }
            container.dispatchEvent(new Event('input', { bubbles: true }));
            const btn = document.querySelector('#coord-submit');
            if (btn) btn.click();
        }
    });
})();
"""

CLICK_JS = "() => {" + _CLICK_HANDLER + "}"
