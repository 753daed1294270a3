"""Readers for the individual configuration sources and their cache."""

from __future__ import annotations

import importlib
import importlib.util
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Any

from layerconf.coercion import convert_type
from layerconf.errors import ConfigParseError
from layerconf.keys import MISSING, get_value

__all__ = [
    "ConfigCache",
    "YamlSupport",
    "YamlParser",
    "parse_dotenv",
    "read_environ_value",
    "read_dotenv_value",
    "read_json_value",
    "read_yaml_value",
]

logger = logging.getLogger(__name__)


@dataclass
class ConfigCache:
    """Parsed file contents, kept until ``clear()``.

    Files found absent are remembered as ``MISSING`` and are not checked
    again until the cache is cleared.
    """

    dot_env: dict[str, str] | None = None
    json: dict[str, Any] = field(default_factory=dict)
    yaml: dict[str, Any] = field(default_factory=dict)

    def clear(self) -> None:
        self.dot_env = None
        self.json = {}
        self.yaml = {}


class YamlSupport(str, Enum):
    """Availability of a YAML parser in the running interpreter."""

    UNKNOWN = "unknown"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class YamlParser:
    """YAML parsing capability, probed once on first use."""

    def __init__(self, module_name: str = "yaml") -> None:
        self._module_name = module_name
        self._status = YamlSupport.UNKNOWN
        self._module: ModuleType | None = None

    @property
    def status(self) -> YamlSupport:
        return self._status

    def probe(self) -> YamlSupport:
        if self._status is YamlSupport.UNKNOWN:
            if importlib.util.find_spec(self._module_name) is None:
                self._status = YamlSupport.UNAVAILABLE
            else:
                self._module = importlib.import_module(self._module_name)
                self._status = YamlSupport.AVAILABLE
        return self._status

    @property
    def available(self) -> bool:
        return self.probe() is YamlSupport.AVAILABLE

    def parse(self, path: str, text: str) -> Any:
        if not self.available or self._module is None:
            raise RuntimeError("YAML support is not available")
        try:
            return self._module.safe_load(text)
        except self._module.YAMLError as e:
            raise ConfigParseError(path=path, reason=f"invalid YAML: {e}", cause=e) from e


def parse_dotenv(content: str) -> dict[str, str]:
    """Parse ``NAME=value`` lines verbatim; later lines win."""
    entries: dict[str, str] = {}
    for line in content.replace("\r\n", "\n").split("\n"):
        name, _, value = line.partition("=")
        entries[name] = value
    return entries


def _read_text(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(path=str(path), reason=f"invalid {label} encoding: {e}", cause=e) from e


def read_environ_value(environ: Mapping[str, str], name: str) -> Any:
    value = environ.get(name)
    if value is None:
        return MISSING
    return convert_type(value)


def read_dotenv_value(cache: ConfigCache, path: Path, name: str) -> Any:
    if cache.dot_env is None:
        if path.is_file():
            cache.dot_env = parse_dotenv(_read_text(path, "env file"))
            logger.debug("Loaded %d entries from %s", len(cache.dot_env), path)
        else:
            logger.debug("No env file at %s", path)
            cache.dot_env = {}

    if name not in cache.dot_env:
        return MISSING
    return convert_type(cache.dot_env[name])


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _load_json(path: Path) -> Any:
    text = _read_text(path, "JSON")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise ConfigParseError(path=str(path), reason=f"invalid JSON: {e}", cause=e) from e


def read_json_value(cache: ConfigCache, path: Path, key: str) -> Any:
    cache_key = str(path)
    if cache_key not in cache.json:
        if path.is_file():
            cache.json[cache_key] = _load_json(path)
            logger.debug("Loaded JSON config %s", path)
        else:
            cache.json[cache_key] = MISSING
    return get_value(cache.json[cache_key], key)


def read_yaml_value(cache: ConfigCache, path: Path, key: str, parser: YamlParser) -> Any:
    cache_key = str(path)
    if cache_key not in cache.yaml:
        if not path.is_file():
            cache.yaml[cache_key] = MISSING
        elif not parser.available:
            logger.warning("Impossible to read %s. The package \"PyYAML\" is not installed.", path)
            cache.yaml[cache_key] = MISSING
        else:
            cache.yaml[cache_key] = parser.parse(str(path), _read_text(path, "YAML"))
            logger.debug("Loaded YAML config %s", path)
    return get_value(cache.yaml[cache_key], key)
