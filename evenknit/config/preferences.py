"""
User preferences stored as YAML.

Only the display theme is persisted.  The file lives at ``$EVENKNIT_CONFIG``
if set, otherwise ``~/.config/evenknit/preferences.yaml``.  A missing or
empty file means defaults; anything unreadable raises PreferencesError.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EVENKNIT_CONFIG"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    PLAIN = "plain"


class PreferencesError(ValueError):
    """The preferences file exists but cannot be used."""


@dataclass(frozen=True)
class Preferences:
    theme: Theme = Theme.LIGHT

    def to_dict(self) -> dict[str, Any]:
        return {"theme": self.theme.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Preferences:
        raw_theme = data.get("theme", Theme.LIGHT.value)
        try:
            theme = Theme(raw_theme)
        except ValueError:
            choices = ", ".join(t.value for t in Theme)
            raise PreferencesError(
                f"unknown theme {raw_theme!r} (expected one of: {choices})"
            ) from None
        return cls(theme=theme)


def default_path() -> Path:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / "evenknit" / "preferences.yaml"


def load_preferences(path: Path | None = None) -> Preferences:
    """
    Read preferences from *path* (default: default_path()).

    Raises:
        PreferencesError: If the file cannot be read, is not valid YAML,
            is not a mapping, or names an unknown theme.
    """
    path = path or default_path()
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.debug("no preferences file at %s, using defaults", path)
        return Preferences()
    except yaml.YAMLError as exc:
        raise PreferencesError(f"Failed to parse preferences file {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise PreferencesError(f"Cannot read preferences file {path}: {exc}") from exc

    if data is None:
        return Preferences()
    if not isinstance(data, dict):
        raise PreferencesError(
            f"preferences file {path} must contain a mapping, got {type(data).__name__}"
        )
    return Preferences.from_dict(data)


def save_preferences(preferences: Preferences, path: Path | None = None) -> Path:
    """
    Write *preferences* to *path* (default: default_path()) and return the path.

    Raises:
        PreferencesError: If the file or its parent directory cannot be written.
    """
    path = path or default_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(preferences.to_dict(), f, default_flow_style=False)
    except OSError as exc:
        raise PreferencesError(f"Cannot write preferences file {path}: {exc}") from exc
    logger.info("saved preferences to %s", path)
    return path
