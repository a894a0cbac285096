"""Tests for protonav.config."""

import pytest

from protonav.config import EnvConfig, build_environment, load_config
from protonav.entity import Header, Package, ServiceSpec
from protonav.errors import UnknownPackageError


def _catalog() -> list[Package]:
    return [Package("greet", services=[ServiceSpec("Greeter")])]


class TestEnvConfig:
    def test_from_mapping(self):
        cfg = EnvConfig.from_mapping({
            "package": "greet",
            "service": "Greeter",
            "headers": {"x-id": 42, "debug": True},
        })
        assert cfg.package == "greet"
        assert cfg.service == "Greeter"
        assert cfg.headers == {"x-id": "42", "debug": "True"}

    def test_defaults(self):
        cfg = EnvConfig.from_mapping({})
        assert cfg == EnvConfig()

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="unknown config keys"):
            EnvConfig.from_mapping({"pkg": "greet"})

    def test_bad_package_type(self):
        with pytest.raises(ValueError, match="package must be a string"):
            EnvConfig.from_mapping({"package": ["greet"]})

    def test_falsy_non_string_package(self):
        with pytest.raises(ValueError, match="package must be a string"):
            EnvConfig.from_mapping({"package": 0})
        with pytest.raises(ValueError, match="service must be a string"):
            EnvConfig.from_mapping({"service": False})

    def test_null_selection_is_unselected(self):
        cfg = EnvConfig.from_mapping({"package": None, "service": None})
        assert cfg.package == ""
        assert cfg.service == ""

    def test_bad_headers_type(self):
        with pytest.raises(ValueError, match="headers"):
            EnvConfig.from_mapping({"headers": ["a=1"]})


class TestLoadConfig:
    def test_empty_header_value(self, tmp_path):
        path = tmp_path / "protonav.yaml"
        path.write_text("headers:\n  authorization:\n")
        cfg = load_config(path)
        assert cfg.headers == {"authorization": ""}
        assert cfg.default_headers() == [Header("authorization", "")]

    def test_load(self, tmp_path):
        path = tmp_path / "protonav.yaml"
        path.write_text("package: greet\nheaders:\n  authorization: Bearer t\n")
        cfg = load_config(path)
        assert cfg.package == "greet"
        assert cfg.default_headers() == [Header("authorization", "Bearer t")]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == EnvConfig()

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- greet\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")


class TestBuildEnvironment:
    def test_applies_selection_and_headers(self):
        cfg = EnvConfig(package="greet", service="Greeter", headers={"k": "v"})
        env = build_environment(_catalog(), cfg)
        assert env.address() == "greet.Greeter"
        assert env.headers() == [Header("k", "v")]

    def test_no_selection(self):
        env = build_environment(_catalog(), EnvConfig())
        assert env.address() == ""

    def test_unknown_package_propagates(self):
        with pytest.raises(UnknownPackageError):
            build_environment(_catalog(), EnvConfig(package="nope"))
