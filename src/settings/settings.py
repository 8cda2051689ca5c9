from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from src.writer.api import QUOTING_MODES
from .model import Settings


class SettingsError(RuntimeError):
    pass


class SettingsLoader:
    def load(self, settings_path: Optional[str]) -> Settings:
        if settings_path is None:
            return Settings()

        path = Path(settings_path)
        if not path.exists():
            raise SettingsError(f"Settings file not found: {path}")

        try:
            data: Dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
        except Exception as e:
            raise SettingsError(f"Cannot parse settings JSON: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError("Settings JSON must be an object")

        defaults = Settings()
        quoting = data.get("csv_quoting", defaults.csv_quoting)
        if quoting not in QUOTING_MODES:
            raise SettingsError(f"Unknown csv_quoting: {quoting} (expected one of {list(QUOTING_MODES)})")

        return Settings(
            output_dir=str(data.get("output_dir", defaults.output_dir)),
            log_level=str(data.get("log_level", defaults.log_level)),
            csv_quoting=quoting,
            log_file=data.get("log_file", defaults.log_file),
        )
