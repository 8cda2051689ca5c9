from __future__ import annotations

from typing import Optional

from .model import Settings
from .settings import SettingsError, SettingsLoader


def load_settings(settings_path: Optional[str] = None) -> Settings:
    """Public API (Settings)

    Contract:
    - None: defaults (output_dir="output", log_level="INFO", csv_quoting="minimal").
    - JSON object; missing keys fall back to defaults.
    - Missing file, bad JSON or unknown csv_quoting raise SettingsError.
    """
    return SettingsLoader().load(settings_path)
