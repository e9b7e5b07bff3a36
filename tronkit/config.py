"""Command-line defaults stored as YAML in the user's config directory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_NODE_ADDR = "grpc.trongrid.io:50051"
DEFAULT_TIMEOUT = 20
DEFAULT_PORT = "50051"
CONFIG_FILE_NAME = "config.default"

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_BOOL_PARAMS = {
    "ledger": "ledger",
    "verbose": "verbose",
    "nopretty": "no_pretty",
    "withTLS": "with_tls",
}
# attribute, YAML key, JSON key, type
_FIELDS = (
    ("node", "node", "Node", str),
    ("ledger", "ledger", "Ledger", bool),
    ("verbose", "verbose", "Verbose", bool),
    ("timeout", "timeout", "Timeout", int),
    ("no_pretty", "noPretty", "NoPretty", bool),
    ("api_key", "apiKey", "APIKey", str),
    ("with_tls", "withTLS", "WithTLS", bool),
)


class ConfigError(ValueError):
    """Raised when a config value or file is invalid."""


def parse_bool(text: str) -> bool:
    """Parse a boolean the way command-line flags accept it."""
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"invalid syntax for bool: {text!r}")


@dataclass
class Config:
    """The stored command-line defaults."""

    node: str = ""
    ledger: bool = False
    verbose: bool = False
    timeout: int = 0
    no_pretty: bool = False
    api_key: str = ""
    with_tls: bool = False

    def set(self, param: str, value: str) -> None:
        """Set one parameter from its text form."""
        if param == "node":
            if ":" not in value:
                value = f"{value}:{DEFAULT_PORT}"
            self.node = value
        elif param in _BOOL_PARAMS:
            setattr(self, _BOOL_PARAMS[param], parse_bool(value))
        elif param == "apiKey":
            self.api_key = value
        else:
            raise ConfigError("parameter not found")

    def get(self, param: str) -> Any:
        """Return one parameter, or the whole config as a dict for ``all``."""
        if param == "all":
            return self.to_dict()
        if param == "node":
            return self.node
        if param in _BOOL_PARAMS:
            return getattr(self, _BOOL_PARAMS[param])
        if param == "apiKey":
            return self.api_key
        raise ConfigError("parameter not found")

    def to_dict(self) -> dict[str, Any]:
        """Return the config with its JSON key names."""
        return {json_key: getattr(self, attr) for attr, _, json_key, _ in _FIELDS}

    def _to_yaml_dict(self) -> dict[str, Any]:
        return {yaml_key: getattr(self, attr) for attr, yaml_key, _, _ in _FIELDS}

    @classmethod
    def _from_yaml_dict(cls, data: dict[str, Any]) -> Config:
        config = cls()
        for attr, yaml_key, _, kind in _FIELDS:
            if yaml_key not in data or data[yaml_key] is None:
                continue
            value = data[yaml_key]
            if kind is int:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigError(f"invalid {yaml_key}: {value!r}")
                if not 0 <= value < 1 << 32:
                    raise ConfigError(f"{yaml_key} out of range: {value}")
            elif kind is str:
                if isinstance(value, (bool, list, dict)):
                    raise ConfigError(f"invalid {yaml_key}: {value!r}")
                value = str(value)
            elif not isinstance(value, bool):
                raise ConfigError(f"invalid {yaml_key}: {value!r}")
            setattr(config, attr, value)
        return config


def _defaults() -> Config:
    return Config(node=DEFAULT_NODE_ADDR, timeout=DEFAULT_TIMEOUT)


def default_config_dir() -> Path:
    """Return the directory that holds the config file."""
    return Path.home() / ".config" / "tronctl"


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read a YAML config file.

    A missing file raises FileNotFoundError; bad content raises ConfigError.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"invalid config file {path}: not a mapping")
    return Config._from_yaml_dict(data)


def save_config(config: Config, path: str | os.PathLike[str]) -> None:
    """Write the config as YAML, readable by the owner only."""
    out = yaml.safe_dump(config._to_yaml_dict(), sort_keys=False)
    try:
        descriptor = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
            handle.write(out)
    except OSError as exc:
        raise ConfigError(f"Failed to write to config file {path}.") from exc


def init_config(config_dir: str | os.PathLike[str] | None = None) -> Config:
    """Load the config from ``config_dir``, writing defaults when needed."""
    directory = Path(config_dir) if config_dir is not None else default_config_dir()
    directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    path = directory / CONFIG_FILE_NAME
    try:
        config = load_config(path)
    except (FileNotFoundError, ConfigError):
        config = Config()
    if not config.node:
        config = _defaults()
        save_config(config, path)
    return config