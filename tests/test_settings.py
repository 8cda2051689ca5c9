import json
from pathlib import Path

import pytest

from src.settings.api import SettingsError, load_settings


def test_defaults():
    s = load_settings()
    assert s.output_dir == "output"
    assert s.log_level == "INFO"
    assert s.csv_quoting == "minimal"
    assert s.log_file is None


def test_load_partial_file(tmp_path: Path):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"output_dir": "csv", "csv_quoting": "none"}), encoding="utf-8")
    s = load_settings(str(p))
    assert s.output_dir == "csv"
    assert s.csv_quoting == "none"
    assert s.log_level == "INFO"


def test_bad_quoting(tmp_path: Path):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"csv_quoting": "all"}), encoding="utf-8")
    with pytest.raises(SettingsError, match="Unknown csv_quoting"):
        load_settings(str(p))


def test_bad_json_and_missing_file(tmp_path: Path):
    p = tmp_path / "settings.json"
    p.write_text("{oops", encoding="utf-8")
    with pytest.raises(SettingsError, match="Cannot parse"):
        load_settings(str(p))
    with pytest.raises(SettingsError, match="not found"):
        load_settings(str(tmp_path / "missing.json"))
