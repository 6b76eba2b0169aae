"""CLI entrypoints for rendering boards and inspecting settings."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from importlib import metadata
from pathlib import Path

from blackboard_core import config_path, configure_logging, get_logger, load_config, load_content
from blackboard_renderer import (
    OUTPUT_FORMATS,
    BlackboardError,
    TextSize,
    list_palettes,
    list_templates,
    render_artifact,
)

_log = get_logger("cli")


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("blackboard")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _default_output(content_path: Path, fmt: str, directory: str | None) -> Path:
    base = Path(directory).expanduser() if directory else content_path.parent
    return base / f"{content_path.stem}.{fmt}"


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config()
    content_path = Path(args.content).expanduser()

    try:
        content = load_content(content_path)
        render_config = cfg.to_render_config(
            template=args.template,
            text_size=args.text_size,
            color_scheme=args.color_scheme,
            output_format=args.format,
            width=args.width,
            height=args.height,
            chalk_texture=(True if args.chalk_texture else None),
        )
        artifact = render_artifact(content, render_config)
    except (BlackboardError, ValueError) as exc:
        _log.warning(
            "render rejected: %s",
            exc,
            extra={"event": "render_rejected", "fields": {"content": str(content_path)}},
        )
        _print_json({"success": False, "error": str(exc)})
        return 2

    out = Path(args.out).expanduser() if args.out else _default_output(
        content_path, render_config.output_format, cfg.output.directory
    )
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(artifact.data)
    _log.info(
        "board written to %s",
        out,
        extra={"event": "board_written", "fields": {"output": str(out), "bytes": len(artifact.data)}},
    )

    _print_json(
        {
            "success": True,
            "output": str(out),
            "content_type": artifact.content_type,
            "width": artifact.width,
            "height": artifact.height,
            "bytes": len(artifact.data),
        }
    )
    return 0


def cmd_palettes(_args: argparse.Namespace) -> int:
    _print_json(list_palettes())
    return 0


def cmd_templates(_args: argparse.Namespace) -> int:
    _print_json(list_templates())
    return 0


def cmd_config_show(_args: argparse.Namespace) -> int:
    _print_json(asdict(load_config()))
    return 0


def cmd_config_path(_args: argparse.Namespace) -> int:
    print(config_path())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blackboard", description="Render instructional blackboard images")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render an analysis JSON file to an image")
    render_cmd.add_argument("content", help="Path to analysis JSON (title, mainContent, subContent, teachingPoints)")
    render_cmd.add_argument("--out", default=None, help="Output file path")
    render_cmd.add_argument("--template", default=None, help=f"One of {', '.join(list_templates())}")
    render_cmd.add_argument("--text-size", choices=[t.value for t in TextSize], default=None)
    render_cmd.add_argument("--color-scheme", default=None, help="Palette name, see `blackboard palettes`")
    render_cmd.add_argument("--format", choices=list(OUTPUT_FORMATS), default=None)
    render_cmd.add_argument("--width", type=int, default=None)
    render_cmd.add_argument("--height", type=int, default=None)
    render_cmd.add_argument("--chalk-texture", action="store_true", help="Add chalk grain to raster output")
    render_cmd.set_defaults(func=cmd_render)

    palettes_cmd = sub.add_parser("palettes", help="List color schemes")
    palettes_cmd.set_defaults(func=cmd_palettes)

    templates_cmd = sub.add_parser("templates", help="List board templates")
    templates_cmd.set_defaults(func=cmd_templates)

    config_cmd = sub.add_parser("config", help="Inspect saved settings")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective settings")
    show_cmd.set_defaults(func=cmd_config_show)
    path_cmd = config_sub.add_parser("path", help="Print settings file location")
    path_cmd.set_defaults(func=cmd_config_path)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.logging.keep_log_files, console=cfg.logging.console)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
