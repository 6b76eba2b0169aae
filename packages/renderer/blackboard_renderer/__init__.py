"""Renderer package for blackboard layout composition."""

from .blackboard import compose, preview_data_url, render, render_artifact, render_image
from .exceptions import BlackboardError, InvalidContentError, RenderingFailure
from .models import (
    OUTPUT_FORMATS,
    BoardStyle,
    ContentDocument,
    Layout,
    Padding,
    Palette,
    RenderConfig,
    RenderedArtifact,
    Template,
    TextSize,
)
from .templates import list_templates
from .text import wrap_text
from .themes import DEFAULT_PALETTE_NAME, get_palette, list_palettes, resolve_style

__all__ = [
    "BlackboardError",
    "BoardStyle",
    "ContentDocument",
    "DEFAULT_PALETTE_NAME",
    "InvalidContentError",
    "Layout",
    "OUTPUT_FORMATS",
    "Padding",
    "Palette",
    "RenderConfig",
    "RenderedArtifact",
    "RenderingFailure",
    "Template",
    "TextSize",
    "compose",
    "get_palette",
    "list_palettes",
    "list_templates",
    "preview_data_url",
    "render",
    "render_artifact",
    "render_image",
    "resolve_style",
    "wrap_text",
]
