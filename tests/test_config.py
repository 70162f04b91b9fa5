# tests/test_config.py

import json

import pytest
from cooccur_trie.utils.config_manager import DEFAULTS, Config, ConfigError


def test_defaults_without_file():
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg["list_all_token"] == "!"


def test_missing_file_keeps_defaults(tmp_path):
    cfg = Config(tmp_path / "nope.json")
    assert cfg.data == DEFAULTS
    assert not (tmp_path / "nope.json").exists()


def test_load_overrides(write_file):
    path = write_file("cfg.json", json.dumps({"subtrie_prefix": "* ", "log_file": "run.log"}))
    cfg = Config(path)
    assert cfg["subtrie_prefix"] == "* "
    assert cfg["log_file"] == "run.log"
    assert cfg["sentence_end"] == "."


def test_bad_json_raises(write_file):
    with pytest.raises(ConfigError):
        Config(write_file("cfg.json", "{not json"))
    with pytest.raises(ConfigError):
        Config(write_file("list.json", "[1, 2]"))


def test_unknown_key_rejected(write_file):
    with pytest.raises(KeyError):
        Config().set("theme", "dark")
    with pytest.raises(KeyError):
        Config(write_file("cfg.json", json.dumps({"theme": "dark"})))


def test_save_round_trip(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(path)
    cfg.set("list_all_token", "*")
    cfg.save()
    assert Config(path)["list_all_token"] == "*"


def test_save_without_path():
    with pytest.raises(ValueError):
        Config().save()


@pytest.mark.parametrize("key", ["sentence_end", "list_all_token"])
def test_empty_markers_rejected(key):
    cfg = Config()
    with pytest.raises(ValueError):
        cfg.set(key, "")
    with pytest.raises(ValueError):
        cfg.set(key, None)
    assert cfg[key] == DEFAULTS[key]


def test_empty_marker_in_file_rejected(write_file):
    with pytest.raises(ValueError):
        Config(write_file("cfg.json", json.dumps({"sentence_end": ""})))


def test_empty_subtrie_prefix_allowed():
    cfg = Config()
    cfg.set("subtrie_prefix", "")
    assert cfg["subtrie_prefix"] == ""
