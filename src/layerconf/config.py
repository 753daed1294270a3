"""Process-wide configuration access."""

from __future__ import annotations

from typing import Any

from layerconf.resolver import ConfigResolver, ConfigValue

__all__ = ["Config", "get", "clear_cache", "default_resolver", "set_default_resolver"]

_default_resolver: ConfigResolver | None = None


def default_resolver() -> ConfigResolver:
    """Return the resolver shared by the module-level functions."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ConfigResolver()
    return _default_resolver


def set_default_resolver(resolver: ConfigResolver | None) -> None:
    """Replace the shared resolver; ``None`` resets to a fresh default one."""
    global _default_resolver
    _default_resolver = resolver


def get(key: str, default: Any = None) -> ConfigValue:
    """Get a configuration value by dot-path key."""
    return default_resolver().get(key, default)


def clear_cache() -> None:
    """Clear the cache of the loaded files."""
    default_resolver().clear_cache()


class Config:
    """Configuration accessor that can be injected as a service.

    Without a resolver every call goes through the module-level functions,
    so all ``Config()`` instances share one cache.
    """

    def __init__(self, resolver: ConfigResolver | None = None) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> ConfigResolver:
        return self._resolver if self._resolver is not None else default_resolver()

    def get(self, key: str, default: Any = None) -> ConfigValue:
        """Get a configuration value by dot-path key."""
        if self._resolver is None:
            return get(key, default)
        return self._resolver.get(key, default)

    def require(self, key: str, kind: str | None = None, message: str | None = None) -> ConfigValue:
        """Get a configuration value or raise if it is missing or of the wrong kind."""
        return self.resolver.require(key, kind, message)

    def clear_cache(self) -> None:
        self.resolver.clear_cache()
