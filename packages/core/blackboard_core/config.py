"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from blackboard_renderer import OUTPUT_FORMATS, Padding, RenderConfig, Template, TextSize

CONFIG_VERSION = 2

MIN_WIDTH, MAX_WIDTH = 320, 7680
MIN_HEIGHT, MAX_HEIGHT = 240, 4320


@dataclass
class RenderDefaults:
    template: str = Template.PROBLEM_SOLVING.value
    text_size: str = TextSize.MEDIUM.value
    color_scheme: str = "classic"
    width: int = 1920
    height: int = 1080
    padding: int = 60
    chalk_texture: bool = False


@dataclass
class OutputConfig:
    format: str = "png"
    directory: str | None = None


@dataclass
class LoggingConfig:
    keep_log_files: int = 7
    console: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderDefaults = field(default_factory=RenderDefaults)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_render_config(self, **overrides: Any) -> RenderConfig:
        values: dict[str, Any] = {
            "template": self.render.template,
            "text_size": self.render.text_size,
            "color_scheme": self.render.color_scheme,
            "width": self.render.width,
            "height": self.render.height,
            "padding": Padding(*([self.render.padding] * 4)),
            "output_format": self.output.format,
            "chalk_texture": self.render.chalk_texture,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RenderConfig(**values)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Blackboard"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Blackboard"
    return Path.home() / ".config" / "blackboard"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    r = cfg.render
    r.width = max(MIN_WIDTH, min(MAX_WIDTH, int(r.width)))
    r.height = max(MIN_HEIGHT, min(MAX_HEIGHT, int(r.height)))
    r.padding = max(0, min(r.width // 4, r.height // 4, int(r.padding)))
    if r.text_size not in [t.value for t in TextSize]:
        r.text_size = TextSize.MEDIUM.value


def _normalize_output(cfg: AppConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        cfg.output.format = "png"


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.keep_log_files = max(2, int(cfg.logging.keep_log_files))


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept the output format alongside the render defaults.
        render = dict(data.get("render", {}) or {})
        output = dict(data.get("output", {}) or {})
        if "format" in render:
            output.setdefault("format", render.pop("format"))
        data["render"] = render
        data["output"] = output
        data.setdefault("logging", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()

    if not isinstance(raw, dict):
        return AppConfig()

    # Parsed JSON of the wrong shape is treated like an unreadable file.
    try:
        data = _migrate(raw)
        cfg = AppConfig(
            config_version=int(data.get("config_version", CONFIG_VERSION)),
            render=_merge(RenderDefaults, data.get("render", {})),
            output=_merge(OutputConfig, data.get("output", {})),
            logging=_merge(LoggingConfig, data.get("logging", {})),
        )
        _normalize_render(cfg)
        _normalize_output(cfg)
        _normalize_logging(cfg)
    except (TypeError, ValueError, AttributeError):
        return AppConfig()
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
