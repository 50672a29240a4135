"""Configuration loading for Fuzzy TUI.

Settings live in a TOML file. Lookup order is an explicit path, then the
``FUZZY_TUI_CONFIG`` environment variable, then
``~/.config/fuzzy-tui/config.toml``. A missing default file means defaults.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from rich.errors import StyleSyntaxError
from rich.style import Style

__all__ = [
    "Config",
    "ConfigError",
    "DisplayConfig",
    "SearchConfig",
    "default_config_path",
    "load_config",
]

CONFIG_ENV_VAR = "FUZZY_TUI_CONFIG"


class ConfigError(Exception):
    """Raised when a config file can't be read or holds invalid values."""


@dataclass
class SearchConfig:
    """Search behaviour settings."""

    max_results: int = 100  # 0 means no limit
    debounce_delay: float = 0.1
    workers: int = 1


@dataclass
class DisplayConfig:
    """Display settings for CLI and TUI output."""

    highlight_style: str = "bold red"
    show_weights: bool = False


@dataclass
class Config:
    """Main configuration container."""

    search: SearchConfig = field(default_factory=SearchConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    data_path: Optional[Path] = None


def default_config_path() -> Path:
    """Default config location under the user's config directory."""
    return Path.home() / ".config" / "fuzzy-tui" / "config.toml"


def _non_negative(section: str, name: str, value: Any, kind: type) -> Any:
    # bool is an int subclass but never a valid count or delay
    if isinstance(value, bool) or not isinstance(value, kind) or value < 0:
        raise ConfigError(f"[{section}] {name} must be a non-negative {kind.__name__}")
    return value


def _parse_search(data: dict[str, Any]) -> SearchConfig:
    config = SearchConfig()
    if "max_results" in data:
        config.max_results = _non_negative("search", "max_results", data["max_results"], int)
    if "debounce_delay" in data:
        delay = data["debounce_delay"]
        if isinstance(delay, int) and not isinstance(delay, bool):
            delay = float(delay)
        config.debounce_delay = _non_negative("search", "debounce_delay", delay, float)
    if "workers" in data:
        config.workers = _non_negative("search", "workers", data["workers"], int)
    return config


def _parse_display(data: dict[str, Any]) -> DisplayConfig:
    config = DisplayConfig()
    if "highlight_style" in data:
        if not isinstance(data["highlight_style"], str):
            raise ConfigError("[display] highlight_style must be a string")
        try:
            Style.parse(data["highlight_style"])
        except StyleSyntaxError as e:
            raise ConfigError(f"[display] invalid highlight_style: {e}") from e
        config.highlight_style = data["highlight_style"]
    if "show_weights" in data:
        if not isinstance(data["show_weights"], bool):
            raise ConfigError("[display] show_weights must be true or false")
        config.show_weights = data["show_weights"]
    return config


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from a TOML file.

    Args:
        path: Explicit config file. Must exist when given.

    Returns:
        Config populated from the file, with defaults for anything missing.

    Raises:
        ConfigError: If the file can't be read or a value is invalid.
    """
    explicit = path is not None
    if path is None and os.environ.get(CONFIG_ENV_VAR):
        path = Path(os.environ[CONFIG_ENV_VAR])
        explicit = True
    if path is None:
        path = default_config_path()

    path = path.expanduser()
    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return Config()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    search = data.get("search", {})
    display = data.get("display", {})
    if not isinstance(search, dict) or not isinstance(display, dict):
        raise ConfigError("[search] and [display] must be tables")

    data_path = data.get("data_path")
    if data_path is not None and not isinstance(data_path, str):
        raise ConfigError("data_path must be a string")

    return Config(
        search=_parse_search(search),
        display=_parse_display(display),
        data_path=Path(data_path).expanduser() if data_path else None,
    )
