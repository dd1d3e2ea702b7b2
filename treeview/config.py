"""Persistent JSON config helpers.

Stores the UI theme, hidden-file and icon preferences, and the default
viewport height. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "treeview"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write failures are logged."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_bool(key: str) -> bool | None:
    value = load_config().get(key)
    return value if isinstance(value, bool) else None


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    _save_value("theme", stripped)


def load_show_hidden() -> bool:
    """Return persisted hidden-file preference; non-booleans mean ``False``."""
    return bool(_load_bool("show_hidden"))


def save_show_hidden(show_hidden: bool) -> None:
    _save_value("show_hidden", bool(show_hidden))


def load_show_icons() -> bool:
    """Return persisted icon preference; defaults to ``True`` when unset."""
    value = _load_bool("show_icons")
    return True if value is None else value


def save_show_icons(show_icons: bool) -> None:
    _save_value("show_icons", bool(show_icons))


def load_viewport_height() -> int | None:
    """Load the default viewport height.

    Booleans, non-integers, and values below 1 are treated as unset.
    """
    value = load_config().get("viewport_height")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def save_viewport_height(height: int) -> None:
    if height <= 0:
        return
    _save_value("viewport_height", int(height))


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_theme_name",
    "save_theme_name",
    "load_show_hidden",
    "save_show_hidden",
    "load_show_icons",
    "save_show_icons",
    "load_viewport_height",
    "save_viewport_height",
]
