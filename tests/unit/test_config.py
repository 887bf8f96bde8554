"""
Runtime Configuration Unit Tests
Tests for merkle_core/config/runtime.py and merkle_cli/config.py
"""
from unittest.mock import patch

import pytest

from merkle_core.config import (
    RuntimeConfig,
    get_default_config,
    get_default_config_template,
    set_default_config,
)
from merkle_core.config.runtime import ZERO_LEAF
from merkle_cli.config import load_config


_CLEAN_ENV = {
    "MERKLE_DEPTH": "",
    "MERKLE_INITIAL_LEAF": "",
    "MERKLE_LOG_LEVEL": "",
    "MERKLE_LOG_FILE": "",
}


class TestRuntimeConfig:
    """Tests for RuntimeConfig loading."""

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.tree.depth == 20
        assert config.tree.initial_leaf == ZERO_LEAF
        assert config.logging.level == "INFO"
        assert config.logging.file is None

    def test_from_dict_partial(self):
        config = RuntimeConfig.from_dict({"tree": {"depth": 5}})

        assert config.tree.depth == 5
        assert config.tree.initial_leaf == ZERO_LEAF
        assert config.logging.level == "INFO"

    def test_from_env(self):
        env = dict(_CLEAN_ENV, MERKLE_DEPTH="7", MERKLE_LOG_LEVEL="DEBUG")
        with patch.dict("os.environ", env):
            config = RuntimeConfig.from_env()

        assert config.tree.depth == 7
        assert config.logging.level == "DEBUG"

    def test_from_env_rejects_bad_integer(self):
        with patch.dict("os.environ", dict(_CLEAN_ENV, MERKLE_DEPTH="deep")):
            with pytest.raises(ValueError, match="MERKLE_DEPTH"):
                RuntimeConfig.from_env()

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text("tree:\n  depth: 4\nlogging:\n  level: WARNING\n")

        config = RuntimeConfig.from_yaml(path)

        assert config.tree.depth == 4
        assert config.logging.level == "WARNING"

    @pytest.mark.parametrize("level", [None, 10, "LOUD"])
    def test_from_dict_rejects_bad_log_level(self, level):
        with pytest.raises(ValueError, match="logging.level"):
            RuntimeConfig.from_dict({"logging": {"level": level}})

    def test_log_level_is_case_insensitive(self):
        config = RuntimeConfig.from_dict({"logging": {"level": "debug"}})

        assert config.logging.level == "debug"

    def test_from_yaml_null_log_level(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text("logging:\n  level: null\n")

        with pytest.raises(ValueError, match="logging.level"):
            RuntimeConfig.from_yaml(path)

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path).tree.depth == 20

    def test_from_yaml_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "nope.yaml")

    def test_template_round_trips(self, tmp_path):
        path = tmp_path / "merkle.yaml"
        path.write_text(get_default_config_template())

        config = RuntimeConfig.from_yaml(path)

        assert config.to_dict() == RuntimeConfig().to_dict()

    def test_with_env_overrides(self):
        base = RuntimeConfig.from_dict({"tree": {"depth": 3}})
        with patch.dict("os.environ", dict(_CLEAN_ENV, MERKLE_INITIAL_LEAF="0x" + "ab" * 32)):
            config = base.with_env_overrides()

        assert config.tree.depth == 3
        assert config.tree.initial_leaf == "0x" + "ab" * 32
        assert base.tree.initial_leaf == ZERO_LEAF

    def test_with_env_overrides_validates_log_level(self):
        base = RuntimeConfig()
        with patch.dict("os.environ", dict(_CLEAN_ENV, MERKLE_LOG_LEVEL="chatty")):
            with pytest.raises(ValueError, match="logging.level"):
                base.with_env_overrides()

    def test_with_env_overrides_noop(self):
        base = RuntimeConfig()
        with patch.dict("os.environ", _CLEAN_ENV):
            assert base.with_env_overrides() is base

    def test_default_config_singleton(self):
        custom = RuntimeConfig.from_dict({"tree": {"depth": 9}})
        set_default_config(custom)

        assert get_default_config() is custom


class TestLoadConfig:
    """Tests for the CLI config loader."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("tree:\n  depth: 6\n")

        with patch.dict("os.environ", _CLEAN_ENV):
            config = load_config(path)

        assert config.tree.depth == 6

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("tree:\n  depth: 6\n")

        with patch.dict("os.environ", dict(_CLEAN_ENV, MERKLE_DEPTH="8")):
            config = load_config(path)

        assert config.tree.depth == 8

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_default_location_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "merkle.yaml").write_text("tree:\n  depth: 11\n")
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        monkeypatch.chdir(tmp_path)

        with patch.dict("os.environ", _CLEAN_ENV):
            config = load_config()

        assert config.tree.depth == 11

    def test_default_location_in_home(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        config_dir = home / ".config" / "merkle-heap"
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("tree:\n  depth: 13\n")
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.chdir(tmp_path)

        with patch.dict("os.environ", _CLEAN_ENV):
            config = load_config()

        assert config.tree.depth == 13

    def test_cwd_takes_precedence_over_home(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        config_dir = home / ".config" / "merkle-heap"
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("tree:\n  depth: 13\n")
        (tmp_path / "merkle.yaml").write_text("tree:\n  depth: 11\n")
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.chdir(tmp_path)

        with patch.dict("os.environ", _CLEAN_ENV):
            config = load_config()

        assert config.tree.depth == 11
