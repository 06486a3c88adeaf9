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
"""Tests for Config — file loading, env overrides, placeholders and binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from pyinteractor.core.config import Config, config_properties
from pyinteractor.kernel.exceptions import ConfigurationError


class TestConfig:
    def test_get_simple_value(self):
        config = Config({"app": {"name": "orders"}})
        assert config.get("app.name") == "orders"

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_false_value(self):
        config = Config({"pyinteractor": {"interactor": {"log_failures": False}}})
        assert config.get("pyinteractor.interactor.log_failures", True) is False

    def test_get_section(self):
        config = Config({"pyinteractor": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("pyinteractor.logging.level") == {"root": "DEBUG"}
        assert config.get_section("pyinteractor.missing") == {}

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "app.yaml"
        config_file.write_text("pyinteractor:\n  interactor:\n    rollback_on_failure: false\n")
        config = Config.from_file(config_file)
        assert config.get("pyinteractor.interactor.rollback_on_failure") is False

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "app.toml"
        config_file.write_text('[pyinteractor.logging]\nformat = "json"\n')
        config = Config.from_file(config_file)
        assert config.get("pyinteractor.logging.format") == "json"

    def test_load_empty_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert Config.from_file(config_file).to_dict() == {}

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigurationError):
            Config.from_file(tmp_path / "nope.yaml")

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PYINTERACTOR_LOGGING_FORMAT", "json")
        config = Config({"pyinteractor": {"logging": {"format": "console"}}})
        assert config.get("pyinteractor.logging.format") == "json"


class TestPlaceholders:
    def test_resolves_env_var(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ORDERS_MODE", "strict")
        config = Config({"app": {"mode": "${ORDERS_MODE}"}})
        assert config.get("app.mode") == "strict"

    def test_resolves_config_reference(self):
        config = Config({"app": {"name": "orders", "label": "${app.name}-svc"}})
        assert config.get("app.label") == "orders-svc"

    def test_uses_default(self):
        config = Config({"app": {"mode": "${UNSET_ORDERS_MODE_VAR:lenient}"}})
        assert config.get("app.mode") == "lenient"

    def test_unresolvable_raises(self):
        config = Config({"app": {"mode": "${UNSET_ORDERS_MODE_VAR}"}})
        with pytest.raises(ConfigurationError):
            config.get("app.mode")

    def test_circular_reference_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ConfigurationError):
            config.get("a")


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="orders")
        @dataclass
        class OrdersProperties:
            retries: int = 1
            strict: bool = False

        config = Config({"orders": {"retries": 3, "strict": True}})
        props = config.bind(OrdersProperties)
        assert props.retries == 3
        assert props.strict is True

    def test_bind_uses_defaults(self):
        @config_properties(prefix="orders")
        @dataclass
        class OrdersProperties:
            retries: int = 1

        assert Config({}).bind(OrdersProperties).retries == 1

    def test_bind_coerces_env_strings(self, monkeypatch: pytest.MonkeyPatch):
        @config_properties(prefix="pyinteractor.orders")
        @dataclass
        class OrdersProperties:
            retries: int = 1
            ratio: float = 0.5
            strict: bool = False

        monkeypatch.setenv("PYINTERACTOR_ORDERS_RETRIES", "7")
        monkeypatch.setenv("PYINTERACTOR_ORDERS_RATIO", "0.25")
        monkeypatch.setenv("PYINTERACTOR_ORDERS_STRICT", "yes")
        props = Config({}).bind(OrdersProperties)
        assert props.retries == 7
        assert props.ratio == 0.25
        assert props.strict is True

    def test_bind_invalid_number_raises(self):
        @config_properties(prefix="orders")
        @dataclass
        class OrdersProperties:
            retries: int = 1

        with pytest.raises(ConfigurationError):
            Config({"orders": {"retries": "many"}}).bind(OrdersProperties)

    def test_bind_undecorated_class_raises(self):
        @dataclass
        class Plain:
            value: int = 0

        with pytest.raises(ConfigurationError):
            Config({}).bind(Plain)
