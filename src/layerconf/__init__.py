"""layerconf - Cascading configuration lookup from environment, .env, JSON and YAML."""

from __future__ import annotations

# Access
from layerconf.config import Config, clear_cache, default_resolver, get, set_default_resolver
from layerconf.resolver import VALUE_KINDS, ConfigResolver, ConfigValue
from layerconf.settings import ResolverSettings

# Sources
from layerconf.sources import ConfigCache, YamlParser, YamlSupport

# Helpers
from layerconf.coercion import convert_type
from layerconf.keys import MISSING, dot_to_underscore, get_value

# Errors
from layerconf.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigTypeError,
    ErrorCodes,
    LayerconfError,
)

__version__ = "0.1.0"

__all__ = [
    # Access
    "Config",
    "ConfigResolver",
    "ConfigValue",
    "ResolverSettings",
    "VALUE_KINDS",
    "get",
    "clear_cache",
    "default_resolver",
    "set_default_resolver",
    # Sources
    "ConfigCache",
    "YamlParser",
    "YamlSupport",
    # Helpers
    "MISSING",
    "convert_type",
    "dot_to_underscore",
    "get_value",
    # Errors
    "ErrorCodes",
    "LayerconfError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigTypeError",
]
