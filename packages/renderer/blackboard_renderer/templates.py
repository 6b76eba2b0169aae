"""Panel arrangements, one composition function per board template."""

from __future__ import annotations

import logging
from typing import Callable

from .models import BoardStyle, ContentDocument, Template
from .panels import (
    draw_answer_box,
    draw_callout,
    draw_diagram_placeholder,
    draw_formula_box,
    draw_panel,
    draw_problem_box,
    draw_steps,
)
from .surface import Board

Composer = Callable[[Board, BoardStyle, ContentDocument, float], float]

_log = logging.getLogger("blackboard.renderer.templates")

COLUMN_GUTTER = 20
DIAGRAM_WIDTH_RATIO = 0.6
DIAGRAM_HEIGHT_RATIO = 0.4
DIAGRAM_GAP = 40


def problem_solving(board: Board, style: BoardStyle, content: ContentDocument, y: float) -> float:
    left = style.padding.left
    right = style.width / 2 + COLUMN_GUTTER
    column = style.width / 2 - style.padding.right - COLUMN_GUTTER

    left_end = draw_panel(board, style, "Problems & Key Points", content.main_points, left, y, column)
    right_end = draw_panel(board, style, "Solutions & Explanations", content.secondary_points, right, y, column)

    cursor = max(left_end, right_end) + style.spacing.section
    return draw_callout(board, style, content.teaching_points, cursor)


def formula_explanation(board: Board, style: BoardStyle, content: ContentDocument, y: float) -> float:
    section = style.spacing.section
    left = style.padding.left
    formula = content.main_points[0] if content.main_points else ""

    cursor = draw_formula_box(board, style, formula, y) + section
    cursor = draw_panel(board, style, "Formula Explanation", content.secondary_points, left, cursor) + section
    examples = content.main_points[1:]
    if examples:
        cursor = draw_panel(board, style, "Examples", examples, left, cursor) + section
    return draw_callout(board, style, content.teaching_points, cursor)


def diagram_focused(board: Board, style: BoardStyle, content: ContentDocument, y: float) -> float:
    left = style.padding.left
    area_w = style.width * DIAGRAM_WIDTH_RATIO
    area_h = style.height * DIAGRAM_HEIGHT_RATIO
    draw_diagram_placeholder(board, style, left, y, area_w, area_h)

    text_x = left + area_w + DIAGRAM_GAP
    text_width = style.width - style.padding.right - text_x
    draw_panel(board, style, "Explanation", content.main_points, text_x, y, text_width)

    cursor = y + area_h + style.spacing.section
    cursor = draw_panel(board, style, "Notes & Cautions", content.secondary_points, left, cursor) + style.spacing.section
    return draw_callout(board, style, content.teaching_points, cursor)


def step_by_step(board: Board, style: BoardStyle, content: ContentDocument, y: float) -> float:
    section = style.spacing.section
    main = content.main_points

    cursor = draw_problem_box(board, style, main[0] if main else "", y) + section
    cursor = draw_steps(board, style, content.secondary_points, cursor) + section
    if len(main) > 1:
        cursor = draw_answer_box(board, style, main[-1], cursor) + section
    return draw_callout(board, style, content.teaching_points, cursor)


def default_layout(board: Board, style: BoardStyle, content: ContentDocument, y: float) -> float:
    section = style.spacing.section
    left = style.padding.left

    cursor = draw_panel(board, style, "Key Points", content.main_points, left, y) + section
    cursor = draw_panel(board, style, "Details & Supplements", content.secondary_points, left, cursor) + section
    return draw_callout(board, style, content.teaching_points, cursor)


TEMPLATES: dict[Template, Composer] = {
    Template.PROBLEM_SOLVING: problem_solving,
    Template.FORMULA_EXPLANATION: formula_explanation,
    Template.DIAGRAM_FOCUSED: diagram_focused,
    Template.STEP_BY_STEP: step_by_step,
}


def list_templates() -> list[str]:
    return [t.value for t in Template]


def select_template(value: Template | str | None) -> Composer:
    template = Template.parse(value)
    if template is None:
        if value:
            _log.warning("unknown template %r, using default layout", value, extra={"event": "configuration_fallback"})
        return default_layout
    return TEMPLATES[template]
