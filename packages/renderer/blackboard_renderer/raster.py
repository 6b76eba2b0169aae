"""Pillow rasterization of board layouts, PNG/PDF encoding and chalk grain."""

from __future__ import annotations

import base64
from io import BytesIO

import numpy as np
from PIL import Image, ImageDraw

from .models import CONTENT_TYPES, CircleOp, Layout, LineOp, RectOp, RenderedArtifact, TextOp
from .text import display_text, load_font

_ANCHORS = {"start": "ls", "middle": "ms", "end": "rs"}

CHALK_SEED = 1729
CHALK_STRENGTH = 9.0


def rasterize(layout: Layout, chalk_texture: bool = False) -> Image.Image:
    image = Image.new("RGB", (layout.width, layout.height), layout.background)
    draw = ImageDraw.Draw(image)

    for op in layout.ops:
        if isinstance(op, RectOp):
            draw.rectangle((op.x, op.y, op.x + op.w, op.y + op.h), fill=op.fill, outline=op.outline, width=op.stroke)
        elif isinstance(op, LineOp):
            draw.line((op.x0, op.y0, op.x1, op.y1), fill=op.color, width=op.stroke)
        elif isinstance(op, CircleOp):
            draw.ellipse((op.cx - op.r, op.cy - op.r, op.cx + op.r, op.cy + op.r), fill=op.fill)
        elif isinstance(op, TextOp):
            text = display_text(op.text)
            if not text:
                continue
            draw.text(
                (op.x, op.y),
                text,
                font=load_font(op.size, op.bold),
                fill=op.color,
                anchor=_ANCHORS[op.anchor],
            )
        else:
            raise TypeError(f"Unsupported draw op: {type(op).__name__}")

    if chalk_texture:
        image = apply_chalk_texture(image)
    return image


def apply_chalk_texture(image: Image.Image, seed: int = CHALK_SEED, strength: float = CHALK_STRENGTH) -> Image.Image:
    """Overlay fixed-seed luminance grain so repeated renders stay identical."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    rng = np.random.default_rng(seed)
    pixels = np.asarray(image, dtype=np.float32)
    grain = rng.normal(0.0, strength, size=pixels.shape[:2]).astype(np.float32)[..., None]
    out = np.clip(pixels + grain, 0, 255).astype(np.uint8)
    return Image.fromarray(out)


def encode_image(image: Image.Image, fmt: str) -> bytes:
    buf = BytesIO()
    if fmt == "png":
        image.save(buf, format="PNG")
    elif fmt == "pdf":
        image.save(buf, format="PDF", resolution=96.0)
    else:
        raise ValueError(f"Raster backend cannot encode {fmt}")
    return buf.getvalue()


def to_data_url(artifact: RenderedArtifact) -> str:
    b64 = base64.b64encode(artifact.data).decode("ascii")
    return f"data:{artifact.content_type};base64,{b64}"


def content_type(fmt: str) -> str:
    return CONTENT_TYPES[fmt]
