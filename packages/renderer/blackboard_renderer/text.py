"""Font loading, text measurement and greedy word wrapping."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable

from PIL import ImageFont

Measure = Callable[[str], float]

_REGULAR_FACES = ("DejaVuSans.ttf", "LiberationSans-Regular.ttf", "Arial.ttf")
_BOLD_FACES = ("DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf", "Arial Bold.ttf", "Arial.ttf")

# Line breaks collapse to a space; the rest of the C0 controls XML 1.0 rejects are dropped.
_LINE_BREAKS = re.compile(r"\r\n|[\n\r\x0b\x0c]")
_XML_FORBIDDEN = re.compile(r"[\x00-\x08\x0e-\x1f\ufffe\uffff\ud800-\udfff]")


@lru_cache(maxsize=64)
def load_font(size: float, bold: bool = False) -> ImageFont.FreeTypeFont:
    for face in _BOLD_FACES if bold else _REGULAR_FACES:
        try:
            return ImageFont.truetype(face, size)
        except OSError:
            continue
    return ImageFont.load_default(size)


def measure_text(text: str, size: float, bold: bool = False) -> float:
    return float(load_font(size, bold).getlength(text))


def wrap_text(text: str, max_width: float, measure: Measure) -> list[str]:
    """Greedily break ``text`` on whitespace into lines no wider than ``max_width``.

    A word that is wider than ``max_width`` on its own is kept whole on its own
    line. Whitespace-only text yields no lines.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def display_text(text: str) -> str:
    """Return ``text`` as a single drawable line that is also valid XML character data."""
    return _XML_FORBIDDEN.sub("", _LINE_BREAKS.sub(" ", text))
