"""
Tests for the JSON config loader.
"""
import json

from plugin_logger.configuration import ConfigManager
from plugin_logger.logging import LogLevel


def write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_means_defaults(tmp_path):
    config = ConfigManager(tmp_path / "absent.json")

    assert config.load_config_data() == {}
    assert config.get_uploads_dir() is None
    assert config.get_global_debug_flag() == "DEBUG"
    assert config.get_flags() == {}


def test_reads_known_keys(tmp_path):
    path = write_config(tmp_path / "config.json", {
        "uploads_dir": "/srv/uploads",
        "global_debug_flag": "WP_DEBUG",
        "flags": {"MY_PLUGIN_DEBUG": True},
    })
    config = ConfigManager(path)

    assert config.config_path == path
    assert config.get_uploads_dir() == "/srv/uploads"
    assert config.get_global_debug_flag() == "WP_DEBUG"
    assert config.get_flags() == {"MY_PLUGIN_DEBUG": True}


def test_config_is_loaded_once(tmp_path):
    path = write_config(tmp_path / "config.json", {"uploads_dir": "/first"})
    config = ConfigManager(path)
    config.load_config_data()

    write_config(path, {"uploads_dir": "/second"})

    assert config.get_uploads_dir() == "/first"


def test_default_path_comes_from_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path / "env.json", {"uploads_dir": "/from-env"})
    monkeypatch.setenv("PLUGIN_LOGGER_CONFIG", str(path))

    assert ConfigManager().get_uploads_dir() == "/from-env"


def test_malformed_json_is_reported_and_ignored(tmp_path, diagnostics):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert ConfigManager(path).load_config_data() == {}
    assert any("Could not load config" in m for m in diagnostics.messages(LogLevel.WARNING))


def test_non_object_config_is_ignored(tmp_path, diagnostics):
    path = write_config(tmp_path / "config.json", ["not", "an", "object"])

    assert ConfigManager(path).load_config_data() == {}
    assert diagnostics.messages(LogLevel.WARNING)


def test_non_object_flags_are_ignored(tmp_path):
    path = write_config(tmp_path / "config.json", {"flags": ["DEBUG"]})

    assert ConfigManager(path).get_flags() == {}
