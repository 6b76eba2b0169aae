import sys
import unittest
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from blackboard_renderer.models import CircleOp, RectOp, RenderConfig, TextOp
from blackboard_renderer.panels import (
    ANSWER_BOX_WIDTH,
    CALLOUT_HEADING,
    callout_height,
    draw_answer_box,
    draw_callout,
    draw_formula_box,
    draw_footer,
    draw_panel,
    draw_problem_box,
    draw_steps,
    draw_title,
)
from blackboard_renderer.surface import Board
from blackboard_renderer.themes import resolve_style


def fixed_measure(text, size, bold=False):
    # 10px per character regardless of size keeps expectations exact.
    return len(text) * 10.0


class PanelTestCase(unittest.TestCase):
    def setUp(self):
        self.style = resolve_style(RenderConfig())
        self.board = Board(self.style.width, self.style.height, self.style.palette.background, measure=fixed_measure)

    def ops(self):
        return self.board.freeze(date(2026, 1, 1)).ops


class DrawPanelTests(PanelTestCase):
    def test_empty_items_advance_past_heading(self):
        y = draw_panel(self.board, self.style, "Heading", [], 60, 100)
        self.assertEqual(y, 100 + 24 + 20)
        texts = [op for op in self.ops() if isinstance(op, TextOp)]
        self.assertEqual([t.text for t in texts], ["Heading"])
        self.assertEqual(texts[0].color, self.style.palette.accent)
        self.assertTrue(texts[0].bold)

    def test_cursor_strictly_increases(self):
        start = 100
        y = draw_panel(self.board, self.style, "H", ["x"], 60, start)
        self.assertGreater(y, start)
        self.assertEqual(y, 144 + 32 + 32)

    def test_numbered_prefixes(self):
        draw_panel(self.board, self.style, "H", ["a", "b"], 60, 0)
        prefixes = [op.text for op in self.ops() if isinstance(op, TextOp) and op.x == 60 and op.text != "H"]
        self.assertEqual(prefixes, ["1. ", "2. "])

    def test_bulleted_prefix(self):
        draw_panel(self.board, self.style, "H", ["a"], 60, 0, marker="bullet", size="small")
        prefix = [op for op in self.ops() if isinstance(op, TextOp) and op.text.startswith("•")][0]
        self.assertEqual(prefix.size, self.style.fonts.small)

    def test_wrapped_item_adds_line_heights(self):
        # 60px panel minus a 30px "1. " prefix leaves room for "aaa" only.
        y = draw_panel(self.board, self.style, "H", ["aaa bbb"], 60, 0, max_width=60)
        self.assertEqual(y, 44 + 32 + 32 + 32)
        body = [op for op in self.ops() if isinstance(op, TextOp) and op.x == 90]
        self.assertEqual([op.text for op in body], ["aaa", "bbb"])
        self.assertEqual(body[1].y - body[0].y, 32)

    def test_empty_item_still_advances(self):
        y = draw_panel(self.board, self.style, "H", [""], 60, 0)
        self.assertEqual(y, 44 + 32 + 32)


class CalloutTests(PanelTestCase):
    def test_empty_items_draw_nothing(self):
        y = draw_callout(self.board, self.style, [], 300)
        self.assertEqual(y, 300)
        self.assertEqual(self.ops(), ())

    def test_box_sized_before_text(self):
        y = draw_callout(self.board, self.style, ["x", "y"], 300)
        ops = self.ops()
        box = ops[0]
        self.assertIsInstance(box, RectOp)
        self.assertEqual(box.h, callout_height(self.style, 2))
        self.assertEqual(box.h, 2 * (18 + 32) + 24 + 15 + 40)
        self.assertEqual(box.w, self.style.content_width)
        self.assertEqual(y, 300 + box.h)

        texts = [op for op in ops if isinstance(op, TextOp)]
        self.assertEqual([t.text for t in texts], [CALLOUT_HEADING, "• x", "• y"])
        last_baseline = texts[-1].y
        self.assertLess(last_baseline, box.y + box.h)


class FixedBoxTests(PanelTestCase):
    def test_formula_box_fixed_height_unwrapped(self):
        formula = "a^2 + b^2 = c^2 " * 20
        y = draw_formula_box(self.board, self.style, formula, 100)
        self.assertEqual(y, 180)
        texts = [op for op in self.ops() if isinstance(op, TextOp)]
        self.assertEqual(len(texts), 1)
        self.assertEqual(texts[0].anchor, "middle")
        self.assertEqual(texts[0].x, self.style.width / 2)

    def test_problem_box_wraps(self):
        y = draw_problem_box(self.board, self.style, "word " * 60, 100)
        self.assertEqual(y, 200)
        rect = self.ops()[0]
        self.assertEqual((rect.x, rect.w, rect.h), (60, 1800, 100))
        lines = [op for op in self.ops() if isinstance(op, TextOp)]
        self.assertGreater(len(lines), 1)
        for line in lines:
            self.assertLessEqual(fixed_measure(line.text, line.size), 1800 - 40)

    def test_answer_box_right_aligned(self):
        y = draw_answer_box(self.board, self.style, "42", 500)
        self.assertEqual(y, 560)
        rect = self.ops()[0]
        self.assertEqual(rect.w, ANSWER_BOX_WIDTH)
        self.assertEqual(rect.x + rect.w, self.style.width - self.style.padding.right)
        text = self.ops()[1]
        self.assertEqual(text.text, "Answer: 42")


class StepTests(PanelTestCase):
    def test_short_steps_use_minimum_row(self):
        y = draw_steps(self.board, self.style, ["one", "two"], 0)
        self.assertEqual(y, 52 + 52)
        circles = [op for op in self.ops() if isinstance(op, CircleOp)]
        self.assertEqual([c.cx for c in circles], [80, 80])
        numbers = [op.text for op in self.ops() if isinstance(op, TextOp) and op.anchor == "middle"]
        self.assertEqual(numbers, ["1", "2"])

    def test_long_step_grows_row(self):
        text_width = self.style.width - 120 - self.style.padding.right
        words = max(2, int(text_width // 40) * 3)
        y = draw_steps(self.board, self.style, ["abc " * words], 0)
        lines = [op for op in self.ops() if isinstance(op, TextOp) and op.x == 120]
        self.assertGreater(len(lines), 1)
        self.assertEqual(y, max(50, len(lines) * 32 + 20))

    def test_no_steps(self):
        self.assertEqual(draw_steps(self.board, self.style, [], 77), 77)


class TitleFooterTests(PanelTestCase):
    def test_title_underline_matches_measured_width(self):
        y = draw_title(self.board, self.style, "Fractions", 60)
        self.assertEqual(y, 60 + 48 + 30)
        line = self.ops()[1]
        self.assertEqual(line.x1 - line.x0, fixed_measure("Fractions", 48))
        self.assertEqual(line.stroke, 4)

    def test_footer_text(self):
        draw_footer(self.board, self.style, date(2026, 3, 9))
        footer = self.ops()[0]
        self.assertEqual(footer.text, "Generated: 2026-03-09 | Blackboard Generator")
        self.assertEqual(footer.anchor, "end")
        self.assertEqual(footer.y, 1080 - 60 + 30)


if __name__ == "__main__":
    unittest.main()
