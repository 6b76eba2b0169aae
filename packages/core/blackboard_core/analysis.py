"""Map analysis payloads (LLM response JSON) onto content documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from blackboard_renderer import ContentDocument, InvalidContentError

# Field name in ContentDocument -> accepted payload keys, first match wins.
_FIELD_KEYS = {
    "main_points": ("mainContent", "main_points", "mainPoints"),
    "secondary_points": ("subContent", "secondary_points", "secondaryPoints"),
    "teaching_points": ("teachingPoints", "teaching_points"),
}


def _pick_list(payload: Mapping[str, Any], field_name: str) -> list[str]:
    for key in _FIELD_KEYS[field_name]:
        if key in payload:
            value = payload[key]
            if not isinstance(value, list):
                raise InvalidContentError(f"{key} must be a list, got {type(value).__name__}")
            return value
    raise InvalidContentError(f"analysis payload is missing {_FIELD_KEYS[field_name][0]}")


def content_from_analysis(payload: Mapping[str, Any]) -> ContentDocument:
    if not isinstance(payload, Mapping):
        raise InvalidContentError("analysis payload must be a JSON object")
    title = payload.get("title")
    if not isinstance(title, str):
        raise InvalidContentError("analysis payload is missing a string title")
    return ContentDocument(
        title=title,
        main_points=_pick_list(payload, "main_points"),
        secondary_points=_pick_list(payload, "secondary_points"),
        teaching_points=_pick_list(payload, "teaching_points"),
    )


def load_content(path: Path) -> ContentDocument:
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidContentError(f"cannot read {path}: {exc}") from exc
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise InvalidContentError(f"{path} is not valid JSON: {exc}") from exc
    return content_from_analysis(payload)
