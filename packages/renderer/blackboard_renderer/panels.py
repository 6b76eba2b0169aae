"""Panel, box and step drawers.

Every drawer takes the board, the resolved style and the current vertical
cursor, paints onto the board and returns the cursor for the next drawer.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from .models import BoardStyle
from .surface import Board
from .text import wrap_text

HEADING_GAP = 20

CALLOUT_HEADING = "Teaching Guidelines"
CALLOUT_FILL = "#fef3c7"
CALLOUT_BORDER = "#f59e0b"
CALLOUT_TEXT = "#92400e"
CALLOUT_INSET = 20
CALLOUT_HEADING_GAP = 15

FORMULA_BOX_HEIGHT = 80
FORMULA_BOX_FILL = "#f3f4f6"

PROBLEM_BOX_HEIGHT = 100
PROBLEM_BOX_FILL = "#eff6ff"
PROBLEM_BOX_INSET = 20

ANSWER_BOX_WIDTH = 400
ANSWER_BOX_HEIGHT = 60
ANSWER_BOX_FILL = "#dcfce7"
ANSWER_BOX_COLOR = "#059669"
ANSWER_PREFIX = "Answer: "

STEP_RADIUS = 20
STEP_GAP = 20
STEP_MIN_ROW = 50

DIAGRAM_FILL = "#f9fafb"
DIAGRAM_LABEL = "Diagram & Chart Area"
MUTED_TEXT = "#9ca3af"

FOOTER_LABEL = "Blackboard Generator"


def draw_title(board: Board, style: BoardStyle, title: str, y: float) -> float:
    size = style.fonts.title
    accent = style.palette.accent
    cx = style.width / 2
    baseline = y + size
    board.text(cx, baseline, title, size, accent, bold=True, anchor="middle")

    half = board.measure(title, size, True) / 2
    board.line(cx - half, baseline + 10, cx + half, baseline + 10, accent, stroke=4)
    return y + size + 30


def draw_panel(
    board: Board,
    style: BoardStyle,
    heading: str,
    items: Sequence[str],
    x: float,
    y: float,
    max_width: float | None = None,
    *,
    marker: str = "number",
    size: str = "main",
) -> float:
    """Draw a heading followed by a numbered or bulleted, word-wrapped list."""
    width = max_width if max_width is not None else style.content_width
    fonts = style.fonts
    item_size = getattr(fonts, size)
    line = style.spacing.line

    board.text(x, y + fonts.sub, heading, fonts.sub, style.palette.accent, bold=True)
    cursor = y + fonts.sub + HEADING_GAP

    for index, item in enumerate(items, start=1):
        prefix = f"{index}. " if marker == "number" else "• "
        board.text(x, cursor + item_size, prefix, item_size, style.palette.text)

        prefix_width = board.measure(prefix, item_size)
        lines = wrap_text(item, width - prefix_width, board.measurer(item_size))
        for i, text in enumerate(lines):
            board.text(x + prefix_width, cursor + item_size + i * line, text, item_size, style.palette.text)

        cursor += item_size + (max(1, len(lines)) - 1) * line + line

    return cursor


def callout_height(style: BoardStyle, count: int) -> float:
    fonts = style.fonts
    heading_block = fonts.sub + CALLOUT_HEADING_GAP
    return count * (fonts.small + style.spacing.line) + heading_block + 2 * CALLOUT_INSET


def draw_callout(board: Board, style: BoardStyle, items: Sequence[str], y: float) -> float:
    if not items:
        return y

    fonts = style.fonts
    left = style.padding.left
    height = callout_height(style, len(items))
    board.rect(left, y, style.content_width, height, fill=CALLOUT_FILL, outline=CALLOUT_BORDER, stroke=2)

    cursor = y + CALLOUT_INSET
    board.text(left + CALLOUT_INSET, cursor + fonts.sub, CALLOUT_HEADING, fonts.sub, CALLOUT_BORDER, bold=True)
    cursor += fonts.sub + CALLOUT_HEADING_GAP

    for item in items:
        board.text(left + 2 * CALLOUT_INSET, cursor + fonts.small, f"• {item}", fonts.small, CALLOUT_TEXT)
        cursor += fonts.small + style.spacing.line

    return y + height


def draw_formula_box(board: Board, style: BoardStyle, formula: str, y: float) -> float:
    accent = style.palette.accent
    board.rect(style.padding.left, y, style.content_width, FORMULA_BOX_HEIGHT, fill=FORMULA_BOX_FILL, outline=accent, stroke=3)

    size = style.fonts.title * 0.8
    baseline = y + FORMULA_BOX_HEIGHT / 2 + style.fonts.title * 0.3
    board.text(style.width / 2, baseline, formula, size, accent, bold=True, anchor="middle")
    return y + FORMULA_BOX_HEIGHT


def draw_problem_box(board: Board, style: BoardStyle, problem: str, y: float) -> float:
    left = style.padding.left
    box_width = style.content_width
    board.rect(left, y, box_width, PROBLEM_BOX_HEIGHT, fill=PROBLEM_BOX_FILL, outline=style.palette.accent, stroke=3)

    size = style.fonts.main
    lines = wrap_text(problem, box_width - 2 * PROBLEM_BOX_INSET, board.measurer(size))
    for i, text in enumerate(lines):
        board.text(left + PROBLEM_BOX_INSET, y + 30 + i * style.spacing.line, text, size, style.palette.text)
    return y + PROBLEM_BOX_HEIGHT


def draw_answer_box(board: Board, style: BoardStyle, answer: str, y: float) -> float:
    x = style.width - style.padding.right - ANSWER_BOX_WIDTH
    board.rect(x, y, ANSWER_BOX_WIDTH, ANSWER_BOX_HEIGHT, fill=ANSWER_BOX_FILL, outline=ANSWER_BOX_COLOR, stroke=3)
    board.text(
        x + ANSWER_BOX_WIDTH / 2,
        y + ANSWER_BOX_HEIGHT / 2 + 8,
        f"{ANSWER_PREFIX}{answer}",
        style.fonts.main,
        ANSWER_BOX_COLOR,
        bold=True,
        anchor="middle",
    )
    return y + ANSWER_BOX_HEIGHT


def draw_steps(board: Board, style: BoardStyle, steps: Sequence[str], y: float) -> float:
    fonts = style.fonts
    line = style.spacing.line
    circle_x = style.padding.left + STEP_RADIUS
    text_x = circle_x + STEP_RADIUS + STEP_GAP
    text_width = style.width - text_x - style.padding.right
    cursor = y

    for number, step in enumerate(steps, start=1):
        circle_y = cursor + STEP_RADIUS
        board.circle(circle_x, circle_y, STEP_RADIUS, style.palette.accent)
        board.text(circle_x, circle_y + 6, str(number), fonts.small, "#ffffff", bold=True, anchor="middle")

        lines = wrap_text(step, text_width, board.measurer(fonts.main))
        for i, text in enumerate(lines):
            board.text(text_x, cursor + 30 + i * line, text, fonts.main, style.palette.text)

        cursor += max(STEP_MIN_ROW, len(lines) * line + 20)

    return cursor


def draw_diagram_placeholder(board: Board, style: BoardStyle, x: float, y: float, w: float, h: float) -> None:
    board.rect(x, y, w, h, fill=DIAGRAM_FILL, outline=style.palette.border, stroke=2)
    board.text(x + w / 2, y + h / 2, DIAGRAM_LABEL, style.fonts.main, MUTED_TEXT, anchor="middle")


def draw_footer(board: Board, style: BoardStyle, generated_on: date) -> None:
    board.text(
        style.width - style.padding.right,
        style.height - style.padding.bottom + 30,
        f"Generated: {generated_on.isoformat()} | {FOOTER_LABEL}",
        style.fonts.small,
        MUTED_TEXT,
        anchor="end",
    )
