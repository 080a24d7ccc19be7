import json

from ress.constants import CACHE_FILE_NAME, RUNTIME
from ress.settings import default_settings, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    s = load_settings(tmp_path / "launcher_settings.json")
    assert s == default_settings()
    assert s["target_executable"] == RUNTIME
    assert s["cache_file"] == CACHE_FILE_NAME
    assert s["runner"] == []


def test_partial_file_is_merged_with_defaults(tmp_path):
    p = tmp_path / "launcher_settings.json"
    p.write_text(json.dumps({"runner": "wine", "recheck_interval_ms": 250}), encoding="utf-8")
    s = load_settings(p)
    assert s["runner"] == ["wine"]
    assert s["recheck_interval_ms"] == 250
    assert s["target_executable"] == RUNTIME


def test_broken_file_falls_back_to_defaults(tmp_path):
    p = tmp_path / "launcher_settings.json"
    p.write_text("{not json", encoding="utf-8")
    assert load_settings(p) == default_settings()
    p.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(p) == default_settings()


def test_save_and_reload(tmp_path):
    p = tmp_path / "launcher_settings.json"
    s = default_settings()
    s["cache_file"] = str(tmp_path / "other.dat")
    save_settings(p, s)
    assert load_settings(p) == s


def test_wrongly_typed_values_fall_back_per_key(tmp_path):
    p = tmp_path / "launcher_settings.json"
    p.write_text(json.dumps({
        "recheck_interval_ms": "fast",
        "notification_timeout_ms": True,
        "runner": {"cmd": "wine"},
        "target_executable": None,
        "cache_file": "",
        "launch_message": "Go!",
    }), encoding="utf-8")
    s = load_settings(p)
    d = default_settings()
    assert s["recheck_interval_ms"] == d["recheck_interval_ms"]
    assert s["notification_timeout_ms"] == d["notification_timeout_ms"]
    assert s["runner"] == []
    assert s["target_executable"] == RUNTIME
    assert s["cache_file"] == CACHE_FILE_NAME
    assert s["launch_message"] == "Go!"


def test_runner_list_with_non_strings_is_rejected(tmp_path):
    p = tmp_path / "launcher_settings.json"
    p.write_text(json.dumps({"runner": ["wine", 5]}), encoding="utf-8")
    assert load_settings(p)["runner"] == []
