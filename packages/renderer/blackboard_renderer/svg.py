"""Vector (SVG) serialization of board layouts."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .models import CircleOp, Layout, LineOp, RectOp, TextOp
from .text import display_text

SVG_NS = "http://www.w3.org/2000/svg"
_XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
FONT_FAMILY = "'DejaVu Sans', 'Liberation Sans', Arial, sans-serif"


def _num(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def to_svg(layout: Layout) -> bytes:
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": str(layout.width),
            "height": str(layout.height),
            "viewBox": f"0 0 {layout.width} {layout.height}",
        },
    )
    ET.SubElement(root, "rect", {"width": str(layout.width), "height": str(layout.height), "fill": layout.background})

    for op in layout.ops:
        if isinstance(op, RectOp):
            attrs = {
                "x": _num(op.x),
                "y": _num(op.y),
                "width": _num(op.w),
                "height": _num(op.h),
                "fill": op.fill or "none",
            }
            if op.outline:
                attrs["stroke"] = op.outline
                attrs["stroke-width"] = str(op.stroke)
            ET.SubElement(root, "rect", attrs)
        elif isinstance(op, LineOp):
            ET.SubElement(
                root,
                "line",
                {
                    "x1": _num(op.x0),
                    "y1": _num(op.y0),
                    "x2": _num(op.x1),
                    "y2": _num(op.y1),
                    "stroke": op.color,
                    "stroke-width": str(op.stroke),
                },
            )
        elif isinstance(op, CircleOp):
            ET.SubElement(root, "circle", {"cx": _num(op.cx), "cy": _num(op.cy), "r": _num(op.r), "fill": op.fill})
        elif isinstance(op, TextOp):
            attrs = {
                "x": _num(op.x),
                "y": _num(op.y),
                "font-family": FONT_FAMILY,
                "font-size": _num(op.size),
                "fill": op.color,
                "text-anchor": op.anchor,
                _XML_SPACE: "preserve",
            }
            if op.bold:
                attrs["font-weight"] = "bold"
            node = ET.SubElement(root, "text", attrs)
            node.text = display_text(op.text)
        else:
            raise TypeError(f"Unsupported draw op: {type(op).__name__}")

    return ET.tostring(root, encoding="utf-8", xml_declaration=True)
