# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for the configuration system."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from query_method.core.config import Config, config_properties, env_key_for
from query_method.kernel.exceptions import ConfigurationException


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "forms", "port": 8080}})
        assert config.get("app.name") == "forms"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_through_scalar_returns_default(self):
        config = Config({"app": "scalar"})
        assert config.get("app.name", "fallback") == "fallback"

    def test_get_section(self):
        config = Config({"query_method": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("query_method.logging.level") == {"root": "DEBUG"}
        assert config.get_section("query_method.missing") == {}

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("QUERY_METHOD_APP_NAME", "env-forms")
        config = Config({"app": {"name": "file-forms"}})
        assert config.get("app.name") == "env-forms"

    def test_env_key_strips_package_prefix(self):
        assert env_key_for("query_method.strict_mode") == "QUERY_METHOD_STRICT_MODE"
        assert env_key_for("query_method.logging.format") == "QUERY_METHOD_LOGGING_FORMAT"


class TestConfigFiles:
    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "settings.yaml"
        path.write_text("query_method:\n  parameter_name: _verb\n  strict_mode: true\n")
        config = Config.from_file(path)
        assert config.get("query_method.parameter_name") == "_verb"
        assert config.get("query_method.strict_mode") is True
        assert config.loaded_sources == [str(path)]

    def test_load_toml(self, tmp_path: Path):
        path = tmp_path / "settings.toml"
        path.write_text('[query_method]\nparameter_name = "_verb"\n')
        assert Config.from_file(path).get("query_method.parameter_name") == "_verb"

    def test_profile_overlay_wins(self, tmp_path: Path):
        (tmp_path / "settings.yaml").write_text("query_method:\n  strict_mode: false\n  parameter_name: _m\n")
        (tmp_path / "settings-prod.yaml").write_text("query_method:\n  strict_mode: true\n")
        config = Config.from_file(tmp_path / "settings.yaml", active_profiles=["prod"])
        assert config.get("query_method.strict_mode") is True
        assert config.get("query_method.parameter_name") == "_m"
        assert len(config.loaded_sources) == 2

    def test_missing_file_gives_empty_config(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_non_mapping_yaml_rejected(self, tmp_path: Path):
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationException):
            Config.from_file(path)


class TestBind:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="server")
        @dataclass
        class ServerConfig:
            host: str = "127.0.0.1"
            port: int = 8000
            ratio: float = 1.0

        config = Config({"server": {"host": "0.0.0.0", "port": "9000", "ratio": "0.5"}})
        bound = config.bind(ServerConfig)
        assert bound.host == "0.0.0.0"
        assert bound.port == 9000
        assert bound.ratio == 0.5

    def test_bind_uses_defaults(self):
        @config_properties(prefix="server")
        @dataclass
        class ServerConfig:
            port: int = 8000

        assert Config({}).bind(ServerConfig).port == 8000

    def test_bind_undecorated_class_fails(self):
        @dataclass
        class Plain:
            value: int = 1

        with pytest.raises(ConfigurationException):
            Config({}).bind(Plain)

    def test_bind_bad_number_fails(self):
        @config_properties(prefix="server")
        @dataclass
        class ServerConfig:
            port: int = 8000

        with pytest.raises(ConfigurationException) as exc_info:
            Config({"server": {"port": "eighty"}}).bind(ServerConfig)
        assert exc_info.value.context == {"key": "server.port", "value": "eighty"}

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("on", True), ("YES", True), ("off", False), ("no", False), ("0", False)],
    )
    def test_bind_bool_words(self, raw, expected):
        @config_properties(prefix="server")
        @dataclass
        class ServerConfig:
            debug: bool = False

        assert Config({"server": {"debug": raw}}).bind(ServerConfig).debug is expected

    def test_bind_unknown_bool_word_fails(self, monkeypatch):
        @config_properties(prefix="server")
        @dataclass
        class ServerConfig:
            debug: bool = True

        monkeypatch.setenv("QUERY_METHOD_SERVER_DEBUG", "ture")
        with pytest.raises(ConfigurationException) as exc_info:
            Config({}).bind(ServerConfig)
        assert exc_info.value.code == "CONFIG_BAD_VALUE"
        assert exc_info.value.context == {"key": "server.debug", "value": "ture"}
