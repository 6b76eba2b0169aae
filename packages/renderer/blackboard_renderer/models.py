"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, Union

from .exceptions import InvalidContentError

OUTPUT_FORMATS = ("png", "pdf", "svg")

CONTENT_TYPES = {
    "png": "image/png",
    "pdf": "application/pdf",
    "svg": "image/svg+xml",
}


class Template(str, Enum):
    PROBLEM_SOLVING = "problem_solving"
    FORMULA_EXPLANATION = "formula_explanation"
    DIAGRAM_FOCUSED = "diagram_focused"
    STEP_BY_STEP = "step_by_step"

    @classmethod
    def parse(cls, value: "Template | str | None") -> "Template | None":
        """Return the matching member, or None so callers fall back to the default layout."""
        if isinstance(value, cls):
            return value
        if not value:
            return None
        key = str(value).strip().lower().replace("-", "_")
        if key == "special_arithmetic":
            return cls.STEP_BY_STEP
        try:
            return cls(key)
        except ValueError:
            return None


class TextSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def multiplier(self) -> float:
        return _TEXT_SIZE_MULTIPLIERS[self]


_TEXT_SIZE_MULTIPLIERS = {
    TextSize.SMALL: 0.8,
    TextSize.MEDIUM: 1.0,
    TextSize.LARGE: 1.2,
}


def _as_items(name: str, value: Iterable[str] | None) -> tuple[str, ...]:
    if value is None:
        raise InvalidContentError(f"{name} is required")
    if isinstance(value, str):
        raise InvalidContentError(f"{name} must be a sequence of strings, not a string")
    items = tuple(value)
    for item in items:
        if not isinstance(item, str):
            raise InvalidContentError(f"{name} items must be strings, got {type(item).__name__}")
    return items


@dataclass(frozen=True)
class ContentDocument:
    title: str
    main_points: tuple[str, ...]
    secondary_points: tuple[str, ...]
    teaching_points: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise InvalidContentError("title must be a string")
        object.__setattr__(self, "main_points", _as_items("main_points", self.main_points))
        object.__setattr__(self, "secondary_points", _as_items("secondary_points", self.secondary_points))
        object.__setattr__(self, "teaching_points", _as_items("teaching_points", self.teaching_points))


@dataclass(frozen=True)
class Padding:
    top: int = 60
    right: int = 60
    bottom: int = 60
    left: int = 60


@dataclass(frozen=True)
class RenderConfig:
    template: Union[Template, str] = Template.PROBLEM_SOLVING
    text_size: Union[TextSize, str] = TextSize.MEDIUM
    color_scheme: str = "classic"
    width: int = 1920
    height: int = 1080
    padding: Padding = field(default_factory=Padding)
    output_format: str = "png"
    chalk_texture: bool = False

    def __post_init__(self) -> None:
        if int(self.width) <= 0 or int(self.height) <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self.output_format}")


@dataclass(frozen=True)
class Palette:
    name: str
    background: str
    text: str
    accent: str
    border: str


@dataclass(frozen=True)
class FontSizes:
    title: float
    main: float
    sub: float
    small: float


@dataclass(frozen=True)
class Spacing:
    section: int = 40
    line: int = 32


BASE_FONT_SIZES = FontSizes(title=48, main=32, sub=24, small=18)


@dataclass(frozen=True)
class BoardStyle:
    palette: Palette
    fonts: FontSizes
    spacing: Spacing
    padding: Padding
    width: int
    height: int

    @property
    def content_width(self) -> float:
        return self.width - self.padding.left - self.padding.right


# Display list primitives. Coordinates are canvas pixels, text y is the baseline.


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    w: float
    h: float
    fill: str | None = None
    outline: str | None = None
    stroke: int = 1


@dataclass(frozen=True)
class LineOp:
    x0: float
    y0: float
    x1: float
    y1: float
    color: str
    stroke: int = 1


@dataclass(frozen=True)
class CircleOp:
    cx: float
    cy: float
    r: float
    fill: str


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    size: float
    color: str
    bold: bool = False
    anchor: str = "start"


DrawOp = Union[RectOp, LineOp, CircleOp, TextOp]


@dataclass(frozen=True)
class Layout:
    width: int
    height: int
    background: str
    ops: tuple[DrawOp, ...]
    generated_on: date

    def texts(self) -> list[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    def rects(self) -> list[RectOp]:
        return [op for op in self.ops if isinstance(op, RectOp)]


@dataclass(frozen=True)
class RenderedArtifact:
    width: int
    height: int
    content_type: str
    data: bytes
