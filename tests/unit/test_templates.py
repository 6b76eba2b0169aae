import sys
import unittest
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from blackboard_renderer.blackboard import compose
from blackboard_renderer.models import ContentDocument, RenderConfig, Template
from blackboard_renderer.panels import ANSWER_PREFIX, CALLOUT_HEADING, DIAGRAM_LABEL, callout_height
from blackboard_renderer.templates import (
    TEMPLATES,
    default_layout,
    list_templates,
    select_template,
    step_by_step,
)
from blackboard_renderer.text import measure_text
from blackboard_renderer.themes import resolve_style

DAY = date(2026, 10, 17)


def doc(title="T", main=(), secondary=(), teaching=()):
    return ContentDocument(title=title, main_points=main, secondary_points=secondary, teaching_points=teaching)


def body_texts(layout, x):
    return [op for op in layout.texts() if op.x == x]


class DispatchTests(unittest.TestCase):
    def test_each_template_has_composer(self):
        self.assertEqual(set(TEMPLATES), set(Template))
        self.assertEqual(list_templates(), ["problem_solving", "formula_explanation", "diagram_focused", "step_by_step"])

    def test_unknown_template_uses_default(self):
        with self.assertLogs("blackboard.renderer.templates", level="WARNING"):
            self.assertIs(select_template("mind_map"), default_layout)
        self.assertIs(select_template(None), default_layout)

    def test_special_arithmetic_alias(self):
        self.assertIs(select_template("special_arithmetic"), step_by_step)
        self.assertIs(select_template("Step-By-Step"), step_by_step)


class ProblemSolvingScenarioTests(unittest.TestCase):
    def setUp(self):
        self.config = RenderConfig(template=Template.PROBLEM_SOLVING, text_size="medium", color_scheme="classic")

    def test_two_columns_without_callout(self):
        layout = compose(doc(main=["a", "b"], secondary=["c"]), self.config, DAY)

        left = body_texts(layout, 60)
        self.assertEqual([op.text for op in left], ["Problems & Key Points", "1. ", "2. "])
        right = body_texts(layout, 980)
        self.assertEqual([op.text for op in right], ["Solutions & Explanations", "1. "])
        self.assertEqual(left[0].y, right[0].y)

        prefix_w = measure_text("1. ", 32)
        left_items = [op.text for op in body_texts(layout, 60 + prefix_w)]
        right_items = [op.text for op in body_texts(layout, 980 + prefix_w)]
        self.assertEqual(left_items, ["a", "b"])
        self.assertEqual(right_items, ["c"])

        self.assertEqual(layout.rects(), [])
        self.assertNotIn(CALLOUT_HEADING, [op.text for op in layout.texts()])

    def test_callout_below_both_columns(self):
        layout = compose(doc(main=["a", "b"], secondary=["c"], teaching=["x", "y"]), self.config, DAY)
        rects = layout.rects()
        self.assertEqual(len(rects), 1)
        box = rects[0]

        style = resolve_style(self.config)
        self.assertEqual(box.h, callout_height(style, 2))
        # title 60+48+30, section 40, heading 24+20, two items of 32+32, section 40
        self.assertEqual(box.y, 178 + 44 + 64 * 2 + 40)
        self.assertEqual((box.x, box.w), (60, 1800))
        bullets = [op.text for op in layout.texts() if op.text.startswith("• ")]
        self.assertEqual(bullets, ["• x", "• y"])

    def test_callout_follows_taller_right_column(self):
        layout = compose(doc(main=["a"], secondary=["c", "d", "e"], teaching=["x"]), self.config, DAY)
        box = layout.rects()[0]
        self.assertEqual(box.y, 178 + 44 + 64 * 3 + 40)


class FormulaExplanationTests(unittest.TestCase):
    def test_long_item_wraps_within_panel(self):
        sentence = (
            "a very long sentence exceeding the panel width many times over so that the "
            "renderer must break it onto several lines instead of running off the board "
            "which would make the explanation unreadable for every student in the room"
        )
        config = RenderConfig(template=Template.FORMULA_EXPLANATION)
        layout = compose(doc(main=[sentence], secondary=[sentence]), config, DAY)

        style = resolve_style(config)
        prefix_w = measure_text("1. ", style.fonts.main)
        max_width = style.content_width - prefix_w
        lines = body_texts(layout, 60 + prefix_w)
        self.assertGreater(len(lines), 1)
        for line in lines:
            self.assertLessEqual(measure_text(line.text, style.fonts.main), max_width)
        self.assertEqual(" ".join(op.text for op in lines), sentence)

        # The formula box shows the first main point as a single unwrapped line.
        formula = [op for op in layout.texts() if op.anchor == "middle" and op.bold and op.text == sentence]
        self.assertEqual(len(formula), 1)

    def test_examples_panel_only_with_extra_points(self):
        config = RenderConfig(template="formula_explanation")
        one = compose(doc(main=["E = mc^2"]), config, DAY)
        two = compose(doc(main=["E = mc^2", "m = 1kg"]), config, DAY)
        self.assertNotIn("Examples", [op.text for op in one.texts()])
        self.assertIn("Examples", [op.text for op in two.texts()])


class DiagramFocusedTests(unittest.TestCase):
    def test_placeholder_and_side_panel(self):
        layout = compose(doc(main=["look at the graph"], secondary=["mind the axes"]), RenderConfig(template="diagram_focused"), DAY)
        placeholder = layout.rects()[0]
        self.assertEqual((placeholder.x, placeholder.w, placeholder.h), (60, 1920 * 0.6, 1080 * 0.4))
        self.assertIn(DIAGRAM_LABEL, [op.text for op in layout.texts()])

        explanation = [op for op in layout.texts() if op.text == "Explanation"][0]
        self.assertEqual(explanation.x, 60 + 1920 * 0.6 + 40)
        notes = [op for op in layout.texts() if op.text == "Notes & Cautions"][0]
        self.assertEqual(notes.y, placeholder.y + placeholder.h + 40 + 24)


class StepByStepTests(unittest.TestCase):
    def test_problem_steps_answer(self):
        content = doc(main=["Two trains leave at noon.", "3 hours"], secondary=["Find the gap", "Divide"], teaching=["Draw it"])
        layout = compose(content, RenderConfig(template=Template.STEP_BY_STEP), DAY)
        texts = [op.text for op in layout.texts()]
        self.assertIn("Two trains leave at noon.", texts)
        self.assertIn(f"{ANSWER_PREFIX}3 hours", texts)
        self.assertIn("1", texts)
        self.assertIn("2", texts)
        self.assertEqual(len(layout.rects()), 3)

    def test_no_answer_for_single_main_point(self):
        layout = compose(doc(main=["only the problem"]), RenderConfig(template="step_by_step"), DAY)
        self.assertFalse(any(op.text.startswith(ANSWER_PREFIX) for op in layout.texts()))
        self.assertEqual(len(layout.rects()), 1)


class DefaultLayoutTests(unittest.TestCase):
    def test_single_column(self):
        layout = compose(doc(main=["a"], secondary=["b"]), RenderConfig(template="unknown"), DAY)
        headings = [op for op in layout.texts() if op.text in ("Key Points", "Details & Supplements")]
        self.assertEqual([h.x for h in headings], [60, 60])
        self.assertLess(headings[0].y, headings[1].y)


if __name__ == "__main__":
    unittest.main()
