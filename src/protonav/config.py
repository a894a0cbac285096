"""Startup configuration — default headers and initial selection.

A config file is YAML::

    package: greet
    service: Greeter
    headers:
      authorization: Bearer token
      x-request-id: "42"

All keys are optional.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from protonav.entity import Header, Package
from protonav.env import Environment

logger = logging.getLogger(__name__)


@dataclass
class EnvConfig:
    """Initial package/service selection and default headers."""

    package: str = ""
    service: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EnvConfig:
        """Build a config from parsed YAML. Raises ValueError on bad shapes."""
        unknown = set(data) - {"package", "service", "headers"}
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")

        selection: dict[str, str] = {}
        for key in ("package", "service"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{key} must be a string, got {type(value).__name__}")
            selection[key] = value or ""

        raw_headers = data.get("headers") or {}
        if not isinstance(raw_headers, Mapping):
            raise ValueError("headers must be a mapping of key to value")
        # YAML turns unquoted numbers and booleans into non-strings; an empty
        # value is null.
        headers = {
            str(k): "" if v is None else str(v) for k, v in raw_headers.items()
        }

        return cls(
            package=selection["package"],
            service=selection["service"],
            headers=headers,
        )

    def default_headers(self) -> list[Header]:
        return [Header(key=k, value=v) for k, v in self.headers.items()]


def load_config(path: str | Path) -> EnvConfig:
    """Read an :class:`EnvConfig` from a YAML file. An empty file yields defaults."""
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        return EnvConfig()
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: top level must be a mapping")
    logger.debug("Loaded config from %s", path)
    return EnvConfig.from_mapping(data)


def build_environment(packages: Sequence[Package], config: EnvConfig) -> Environment:
    """Create an :class:`Environment` and apply the configured selection.

    The package is selected before the service, so a config may name a
    service relative to its package. Selection errors propagate.
    """
    env = Environment(packages, config.default_headers())
    if config.package:
        env.select_package(config.package)
    if config.service:
        env.select_service(config.service)
    return env
