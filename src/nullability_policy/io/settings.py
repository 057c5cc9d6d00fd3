"""Settings file loading for nullability-policy.

Reads a JSON settings file at XDG_CONFIG_HOME/nullability-policy/settings.json,
or wherever NULLABILITY_POLICY_CONFIG or ``--config`` points.

Import as: import nullability_policy.io.settings
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Return path to settings file.

    NULLABILITY_POLICY_CONFIG wins; otherwise XDG_CONFIG_HOME (default ~/.config)
    / nullability-policy / settings.json.
    """
    explicit = os.environ.get("NULLABILITY_POLICY_CONFIG")
    if explicit:
        return Path(explicit)
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "nullability-policy" / "settings.json"


def load_settings(path: Optional[Path] = None, *, required: bool = False) -> dict:
    """Load settings from a JSON file.

    The default location is optional: a missing or corrupt file yields ``{}``.
    With ``required=True`` (a path the user named) those cases raise ValueError.
    """
    path = Path(path or get_config_path())
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        if required:
            raise ValueError(f"Settings file not found: {path}") from None
        return {}
    except (json.JSONDecodeError, OSError) as exc:
        if required:
            raise ValueError(f"Cannot read settings file {path}: {exc}") from exc
        logger.warning("ignoring unreadable settings file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        if required:
            raise ValueError(f"Settings file {path} must contain a JSON object")
        logger.warning("ignoring settings file %s: top level is not an object", path)
        return {}
    return data
