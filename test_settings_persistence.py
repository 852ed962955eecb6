"""Settings persistence: defaults, round trip and tolerance of bad files."""

import json

import pytest

import hijri_settings
from hijri_settings import load_settings, save_settings


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(hijri_settings, "_SETTINGS_PATH", str(path))
    return path


def test_defaults_when_missing(settings_file):
    loaded = load_settings()
    assert loaded["dark_mode"] is False
    assert loaded["upcoming_days"] == 30
    assert loaded["log_level"] == "WARNING"
    assert loaded["categories"] == [
        "obligatory", "recommended", "historical", "commemorative"]


def test_round_trip(settings_file):
    s = load_settings()
    s["dark_mode"] = True
    s["categories"] = ["obligatory"]
    s["upcoming_days"] = 7
    s["log_level"] = "DEBUG"
    save_settings(s)

    restored = load_settings()
    assert restored == s


def test_defaults_not_shared_between_loads(settings_file):
    first = load_settings()
    first["categories"].clear()
    assert load_settings()["categories"] != []


def test_corrupt_file_falls_back(settings_file, caplog):
    settings_file.write_text("{not json", encoding="utf-8")
    with caplog.at_level("WARNING", logger="hijri_settings"):
        loaded = load_settings()
    assert loaded["upcoming_days"] == 30
    assert "unreadable" in caplog.text


def test_invalid_values_ignored(settings_file):
    settings_file.write_text(json.dumps({
        "dark_mode": "yes",
        "categories": ["obligatory", "bogus", 3],
        "upcoming_days": -1,
        "log_level": "chatty",
    }), encoding="utf-8")
    loaded = load_settings()
    assert loaded["dark_mode"] is False
    assert loaded["categories"] == ["obligatory"]
    assert loaded["upcoming_days"] == 30
    assert loaded["log_level"] == "WARNING"


def test_non_object_file_ignored(settings_file):
    settings_file.write_text("[1, 2]", encoding="utf-8")
    assert load_settings()["dark_mode"] is False


def test_log_level_normalised(settings_file):
    settings_file.write_text(json.dumps({"log_level": "info"}), encoding="utf-8")
    assert load_settings()["log_level"] == "INFO"
