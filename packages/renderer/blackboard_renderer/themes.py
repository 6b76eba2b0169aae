"""Built-in board palettes and render configuration resolution."""

from __future__ import annotations

import logging

from .models import BASE_FONT_SIZES, BoardStyle, FontSizes, Palette, RenderConfig, Spacing, TextSize

DEFAULT_PALETTE_NAME = "classic"

_log = logging.getLogger("blackboard.renderer.themes")

PALETTES: dict[str, Palette] = {
    "classic": Palette(name="classic", background="#f8fafc", text="#1f2937", accent="#3b82f6", border="#e5e7eb"),
    "dark": Palette(name="dark", background="#1f2937", text="#f9fafb", accent="#60a5fa", border="#374151"),
    "warm": Palette(name="warm", background="#fef7ed", text="#9a3412", accent="#ea580c", border="#fed7aa"),
    "cool": Palette(name="cool", background="#f0f9ff", text="#164e63", accent="#0891b2", border="#e0f2fe"),
    "colorful": Palette(name="colorful", background="#ffffff", text="#1f2937", accent="#2563eb", border="#e5e7eb"),
    "monochrome": Palette(name="monochrome", background="#ffffff", text="#1f2937", accent="#374151", border="#e5e7eb"),
    "two_color": Palette(name="two_color", background="#ffffff", text="#1f2937", accent="#2563eb", border="#e5e7eb"),
    "chalkboard": Palette(name="chalkboard", background="#1a3b2e", text="#f8f8f8", accent="#fff176", border="#2d5a47"),
}


def list_palettes() -> list[str]:
    return sorted(PALETTES.keys())


def get_palette(name: str | None) -> Palette:
    if not name:
        return PALETTES[DEFAULT_PALETTE_NAME]
    if name in PALETTES:
        return PALETTES[name]
    _log.warning(
        "unknown color scheme %r, using %s",
        name,
        DEFAULT_PALETTE_NAME,
        extra={"event": "configuration_fallback"},
    )
    return PALETTES[DEFAULT_PALETTE_NAME]


def parse_text_size(value: TextSize | str | None) -> TextSize:
    if isinstance(value, TextSize):
        return value
    try:
        return TextSize(str(value).strip().lower())
    except ValueError:
        _log.warning(
            "unknown text size %r, using medium",
            value,
            extra={"event": "configuration_fallback"},
        )
        return TextSize.MEDIUM


def scale_font_sizes(text_size: TextSize | str | None, base: FontSizes = BASE_FONT_SIZES) -> FontSizes:
    m = parse_text_size(text_size).multiplier
    return FontSizes(title=base.title * m, main=base.main * m, sub=base.sub * m, small=base.small * m)


def resolve_style(config: RenderConfig) -> BoardStyle:
    """Turn the named selectors of a render config into concrete colors and sizes."""
    return BoardStyle(
        palette=get_palette(config.color_scheme),
        fonts=scale_font_sizes(config.text_size),
        spacing=Spacing(),
        padding=config.padding,
        width=int(config.width),
        height=int(config.height),
    )
