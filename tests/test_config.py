# -*- coding: utf-8 -*-
"""
tests/test_config.py
======================
Config singleton: env > JSON > default, typed getters, schema validation.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import json

import pytest
from core.config import CONFIG_SCHEMA, Config
from exceptions import ConfigurationError


class TestPriority:

    def test_json_value(self, make_config):
        cfg = make_config({"CHANGEPASS_MODE": "establish_new"})
        assert cfg.get("CHANGEPASS_MODE") == "establish_new"

    def test_env_overrides_json(self, make_config, monkeypatch):
        monkeypatch.setenv("CHANGEPASS_MODE", "change_forgotten")
        cfg = make_config({"CHANGEPASS_MODE": "establish_new"})
        assert cfg.get("CHANGEPASS_MODE") == "change_forgotten"
        assert cfg.get("CHANGEPASS_MODE", from_env=False) == "establish_new"

    def test_default(self, make_config):
        assert make_config().get("CHANGEPASS_TEST_ABSENT", "fallback") == "fallback"

    def test_required_missing(self, make_config):
        with pytest.raises(ConfigurationError) as exc_info:
            make_config().get("CHANGEPASS_TEST_ABSENT", required=True)
        assert exc_info.value.code == "CONFIG_MISSING"

    def test_dotenv_file_loaded(self, make_config, monkeypatch):
        monkeypatch.delenv("CHANGEPASS_TEST_DOTENV", raising=False)
        cfg = make_config(env_text="CHANGEPASS_TEST_DOTENV=from-dotenv\n")
        try:
            assert cfg.get("CHANGEPASS_TEST_DOTENV") == "from-dotenv"
        finally:
            os.environ.pop("CHANGEPASS_TEST_DOTENV", None)

    def test_broken_json_file_ignored(self, tmp_path):
        broken = tmp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        Config.clear_instance()
        try:
            cfg = Config(config_file=str(broken), env_file=str(tmp_path / ".env"))
            assert cfg.get("CHANGEPASS_MODE", from_env=False) is None
        finally:
            Config.clear_instance()

    def test_singleton(self, make_config):
        cfg = make_config()
        assert Config() is cfg
        assert Config.get_instance() is cfg


class TestTypedGetters:

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("1", True), ("on", True), ("no", False), ("false", False),
    ])
    def test_get_bool(self, make_config, raw, expected):
        assert make_config({"FLAG": raw}).get_bool("FLAG") is expected

    def test_get_mapping_from_json_object(self, make_config):
        cfg = make_config({"PASSWORD_POLICY": {"min_length": 10}})
        assert cfg.get_mapping("PASSWORD_POLICY") == {"min_length": 10}

    def test_get_mapping_from_string(self, make_config):
        cfg = make_config({"PASSWORD_POLICY": json.dumps({"min_digits": 1})})
        assert cfg.get_mapping("PASSWORD_POLICY") == {"min_digits": 1}

    def test_get_mapping_default(self, make_config):
        assert make_config().get_mapping("CHANGEPASS_TEST_ABSENT") == {}

    def test_get_mapping_wrong_type(self, make_config):
        with pytest.raises(ConfigurationError) as exc_info:
            make_config({"PASSWORD_POLICY": [1, 2]}).get_mapping("PASSWORD_POLICY")
        assert exc_info.value.code == "CONFIG_BAD_TYPE"


class TestValidate:

    def test_schema_accepts_valid(self, make_config):
        make_config({"CHANGEPASS_MODE": "change_known", "LOG_LEVEL": "DEBUG"}).validate(CONFIG_SCHEMA)

    def test_schema_rejects_bad_mode(self, make_config, monkeypatch):
        monkeypatch.delenv("CHANGEPASS_MODE", raising=False)
        cfg = make_config({"CHANGEPASS_MODE": "forgot"})
        with pytest.raises(ConfigurationError) as exc_info:
            cfg.validate(CONFIG_SCHEMA)
        assert exc_info.value.code == "CONFIG_INVALID"
        assert "CHANGEPASS_MODE" in exc_info.value.message

    def test_settings_are_read_only(self, make_config):
        cfg = make_config({})
        for name in ("set", "reload", "get_int", "get_list", "_save_json_config"):
            assert not hasattr(cfg, name)
