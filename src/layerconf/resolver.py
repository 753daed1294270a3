"""ConfigResolver: cascading lookup across environment and files."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any, Union

from layerconf.errors import ConfigNotFoundError, ConfigTypeError
from layerconf.keys import MISSING, dot_to_underscore
from layerconf.settings import ResolverSettings
from layerconf.sources import (
    ConfigCache,
    YamlParser,
    read_dotenv_value,
    read_environ_value,
    read_json_value,
    read_yaml_value,
)

__all__ = ["ConfigResolver", "ConfigValue", "VALUE_KINDS"]

logger = logging.getLogger(__name__)

ConfigValue = Union[bool, int, float, str, None, list[Any], dict[str, Any]]

VALUE_KINDS = frozenset({"any", "string", "number", "boolean", "boolean|string", "number|string"})


def _kind_of(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    if isinstance(value, list):
        return "array"
    return "object"


class ConfigResolver:
    """Resolve configuration keys from the environment, ``.env`` and config files.

    Calling ``get("settings.session.secret")`` checks, in order:

    1. The environment variable ``SETTINGS_SESSION_SECRET``.
    2. The line ``SETTINGS_SESSION_SECRET=`` of the ``.env`` file.
    3. The path ``settings.session.secret`` in ``config/<mode>.json``.
    4. The same path in ``config/<mode>.yml``.
    5. The same path in ``config/default.json``.
    6. The same path in ``config/default.yml``.

    ``<mode>`` is read from the ``APP_ENV`` variable and falls back to
    ``development``. Parsed files are cached per resolver until
    ``clear_cache()`` is called.
    """

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        environ: Mapping[str, str] | None = None,
        yaml_parser: YamlParser | None = None,
    ) -> None:
        self._settings = settings or ResolverSettings()
        self._environ: Mapping[str, str] = environ if environ is not None else os.environ
        self._yaml_parser = yaml_parser or YamlParser()
        self._cache = ConfigCache()

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    @property
    def cache(self) -> ConfigCache:
        return self._cache

    @property
    def mode(self) -> str:
        """The execution mode selecting ``config/<mode>.*`` files."""
        return self._environ.get(self._settings.mode_variable) or self._settings.default_mode

    def _file_paths(self) -> tuple[str, str, str, str]:
        s = self._settings
        mode = self.mode
        return (s.json_path(mode), s.yaml_path(mode), s.json_path("default"), s.yaml_path("default"))

    def lookup(self, key: str) -> Any:
        """Return the first value defined for ``key``, or ``MISSING``."""
        name = dot_to_underscore(key)

        value = read_environ_value(self._environ, name)
        if value is not MISSING:
            return value

        value = read_dotenv_value(self._cache, self._settings.dotenv_path(), name)
        if value is not MISSING:
            return value

        base = self._settings.base_dir()
        env_json, env_yaml, default_json, default_yaml = self._file_paths()
        for relative, is_yaml in ((env_json, False), (env_yaml, True), (default_json, False), (default_yaml, True)):
            path = base / relative
            if is_yaml:
                value = read_yaml_value(self._cache, path, key, self._yaml_parser)
            else:
                value = read_json_value(self._cache, path, key)
            if value is not MISSING:
                return value

        return MISSING

    def get(self, key: str, default: Any = None) -> ConfigValue:
        """Return the value of ``key``, or ``default`` if no source defines it."""
        value = self.lookup(key)
        if value is MISSING:
            return default
        return value

    def require(self, key: str, kind: str | None = None, message: str | None = None) -> ConfigValue:
        """Like ``get`` but raise when ``key`` is undefined or of the wrong kind.

        Raises:
            ConfigNotFoundError: No source defines ``key``.
            ConfigTypeError: ``kind`` is given and the value does not match it.
            ValueError: ``kind`` is not one of ``VALUE_KINDS``.
        """
        if kind is not None and kind not in VALUE_KINDS:
            raise ValueError(f"Unknown value kind: {kind!r}")

        value = self.lookup(key)
        if value is MISSING:
            raise ConfigNotFoundError(key, message, sources=self.candidate_sources(key))

        if kind is None or kind == "any":
            return value
        actual = _kind_of(value)
        if actual not in kind.split("|"):
            raise ConfigTypeError(key, kind, actual)
        return value

    def candidate_sources(self, key: str) -> list[str]:
        """Describe every place a value for ``key`` may be supplied."""
        name = dot_to_underscore(key)
        env_json, env_yaml, default_json, default_yaml = self._file_paths()
        return [
            f"the environment variable {name}",
            f'the "{self._settings.dotenv_file}" file with the variable {name}',
            f'the JSON file "{env_json}" with the path "{key}"',
            f'the YAML file "{env_yaml}" with the path "{key}"',
            f'the JSON file "{default_json}" with the path "{key}"',
            f'the YAML file "{default_yaml}" with the path "{key}"',
        ]

    def clear_cache(self) -> None:
        """Forget every parsed file so the next lookup reads from disk."""
        self._cache.clear()
        logger.debug("Configuration cache cleared")
