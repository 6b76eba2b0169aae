"""Recording drawing surface threaded through the layout functions."""

from __future__ import annotations

from datetime import date
from typing import Callable

from .models import CircleOp, DrawOp, Layout, LineOp, RectOp, TextOp
from .text import measure_text

TextMeasure = Callable[[str, float, bool], float]


class Board:
    """Display list for a single render pass.

    Drawing calls append primitives in paint order; ``measure`` reports the
    pixel width a string would occupy so layout code can wrap and align
    before anything is drawn. A board is never shared between renders.
    """

    def __init__(self, width: int, height: int, background: str, measure: TextMeasure = measure_text) -> None:
        self.width = width
        self.height = height
        self.background = background
        self._measure = measure
        self._ops: list[DrawOp] = []

    def measure(self, text: str, size: float, bold: bool = False) -> float:
        return self._measure(text, size, bold)

    def measurer(self, size: float, bold: bool = False) -> Callable[[str], float]:
        return lambda text: self._measure(text, size, bold)

    def rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        fill: str | None = None,
        outline: str | None = None,
        stroke: int = 1,
    ) -> None:
        self._ops.append(RectOp(x=x, y=y, w=w, h=h, fill=fill, outline=outline, stroke=stroke))

    def line(self, x0: float, y0: float, x1: float, y1: float, color: str, stroke: int = 1) -> None:
        self._ops.append(LineOp(x0=x0, y0=y0, x1=x1, y1=y1, color=color, stroke=stroke))

    def circle(self, cx: float, cy: float, r: float, fill: str) -> None:
        self._ops.append(CircleOp(cx=cx, cy=cy, r=r, fill=fill))

    def text(
        self,
        x: float,
        y: float,
        text: str,
        size: float,
        color: str,
        bold: bool = False,
        anchor: str = "start",
    ) -> None:
        if anchor not in ("start", "middle", "end"):
            raise ValueError(f"Unknown text anchor: {anchor}")
        self._ops.append(TextOp(x=x, y=y, text=text, size=size, color=color, bold=bold, anchor=anchor))

    def freeze(self, generated_on: date) -> Layout:
        return Layout(
            width=self.width,
            height=self.height,
            background=self.background,
            ops=tuple(self._ops),
            generated_on=generated_on,
        )
