"""Core app services for settings, logging, and analysis payload loading."""

from .analysis import content_from_analysis, load_content
from .config import AppConfig, config_path, load_config, save_config
from .logging_setup import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "config_path",
    "configure_logging",
    "content_from_analysis",
    "get_logger",
    "load_config",
    "load_content",
    "save_config",
]
