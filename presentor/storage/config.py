"""Editor settings (storage directory choice, onboarding flag, AI provider)."""

import json
import os
from pathlib import Path
from typing import Any

import platformdirs

from .core import APP_FOLDER, ensure_directory
from .errors import StorageIOError

_SETTINGS_DEFAULTS: dict[str, Any] = {
    "storage_directory": None,
    "onboarded": False,
    "ai": {
        "provider": "openai",
        "api_key": "",
        "base_url": "",
        "model_name": "gpt-5-mini",
    },
}


def default_config_dir() -> Path:
    override = os.getenv("PRESENTOR_CONFIG_DIR", "")
    if override:
        return Path(override)
    return Path(platformdirs.user_config_dir(APP_FOLDER))


def _settings_path(config_dir: Path) -> Path:
    return Path(config_dir) / "settings.json"


def get_settings(config_dir: Path) -> dict[str, Any]:
    """Read settings, returning defaults merged with stored values."""
    settings: dict[str, Any] = {
        "storage_directory": _SETTINGS_DEFAULTS["storage_directory"],
        "onboarded": _SETTINGS_DEFAULTS["onboarded"],
        "ai": dict(_SETTINGS_DEFAULTS["ai"]),
    }
    path = _settings_path(config_dir)
    if path.is_file():
        try:
            stored = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageIOError(f"Failed to read settings {path}", e) from e
        if not isinstance(stored, dict):
            raise StorageIOError(f"Invalid settings file {path}: expected a JSON object")
        if "storage_directory" in stored:
            settings["storage_directory"] = stored["storage_directory"]
        if "onboarded" in stored:
            settings["onboarded"] = stored["onboarded"]
        if isinstance(stored.get("ai"), dict):
            settings["ai"].update(
                {k: v for k, v in stored["ai"].items() if k in settings["ai"]}
            )
    return settings


def update_settings(config_dir: Path, fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into settings and persist. Returns full settings.

    Scalars are overwritten, "ai" is merged key-by-key, unknown keys dropped.
    """
    settings = get_settings(config_dir)
    if "storage_directory" in fields:
        settings["storage_directory"] = fields["storage_directory"]
    if "onboarded" in fields:
        settings["onboarded"] = bool(fields["onboarded"])
    if isinstance(fields.get("ai"), dict):
        for key, value in fields["ai"].items():
            if key in settings["ai"]:
                settings["ai"][key] = value
    ensure_directory(Path(config_dir))
    path = _settings_path(config_dir)
    try:
        path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
    except OSError as e:
        raise StorageIOError(f"Failed to save settings {path}", e) from e
    return settings
