"""Blackboard composer: title band, template panels and footer on a fixed canvas."""

from __future__ import annotations

import logging
from datetime import date

from PIL import Image

from .exceptions import RenderingFailure
from .models import ContentDocument, Layout, RenderConfig, RenderedArtifact
from .panels import draw_footer, draw_title
from .raster import content_type, encode_image, rasterize, to_data_url
from .surface import Board
from .svg import to_svg
from .templates import select_template
from .themes import resolve_style

_log = logging.getLogger("blackboard.renderer")

FAILURE_MESSAGE = "blackboard rendering failed"


def compose(content: ContentDocument, config: RenderConfig, generated_on: date | None = None) -> Layout:
    """Lay the content out and return the display list without encoding it."""
    style = resolve_style(config)
    board = Board(style.width, style.height, style.palette.background)

    cursor = draw_title(board, style, content.title, style.padding.top)
    cursor += style.spacing.section
    select_template(config.template)(board, style, content, cursor)
    day = generated_on or date.today()
    draw_footer(board, style, day)
    return board.freeze(day)


def _encode(layout: Layout, config: RenderConfig) -> bytes:
    if config.output_format == "svg":
        return to_svg(layout)
    return encode_image(rasterize(layout, chalk_texture=config.chalk_texture), config.output_format)


def render_artifact(
    content: ContentDocument,
    config: RenderConfig,
    *,
    generated_on: date | None = None,
) -> RenderedArtifact:
    _log.info(
        "rendering %s board (%s, %s)",
        config.output_format,
        getattr(config.template, "value", config.template),
        config.color_scheme,
        extra={"event": "render_started"},
    )
    try:
        layout = compose(content, config, generated_on)
        data = _encode(layout, config)
    except Exception as exc:
        _log.error(FAILURE_MESSAGE, exc_info=True, extra={"event": "render_failed"})
        raise RenderingFailure(FAILURE_MESSAGE) from exc

    _log.info("rendered %d bytes", len(data), extra={"event": "render_completed"})
    return RenderedArtifact(
        width=layout.width,
        height=layout.height,
        content_type=content_type(config.output_format),
        data=data,
    )


def render(content: ContentDocument, config: RenderConfig, *, generated_on: date | None = None) -> bytes:
    return render_artifact(content, config, generated_on=generated_on).data


def render_image(content: ContentDocument, config: RenderConfig, *, generated_on: date | None = None) -> Image.Image:
    try:
        return rasterize(compose(content, config, generated_on), chalk_texture=config.chalk_texture)
    except Exception as exc:
        _log.error(FAILURE_MESSAGE, exc_info=True, extra={"event": "render_failed"})
        raise RenderingFailure(FAILURE_MESSAGE) from exc


def preview_data_url(content: ContentDocument, config: RenderConfig, *, generated_on: date | None = None) -> str:
    return to_data_url(render_artifact(content, config, generated_on=generated_on))
