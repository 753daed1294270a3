"""Tests for the layerconf public API surface.

Verifies that all expected names are importable from the top-level
``layerconf`` package and that ``__all__`` is comprehensive.
"""

import layerconf


class TestPublicAPIImports:
    """Every public component must be importable from ``import layerconf``."""

    def test_config_importable(self):
        from layerconf import Config

        assert Config is not None

    def test_resolver_importable(self):
        from layerconf import ConfigResolver, ResolverSettings

        assert ConfigResolver is not None
        assert ResolverSettings is not None

    def test_functions_importable(self):
        from layerconf import clear_cache, get

        assert callable(get)
        assert callable(clear_cache)

    def test_errors_importable(self):
        from layerconf import ConfigNotFoundError, ConfigTypeError, LayerconfError

        assert issubclass(ConfigNotFoundError, LayerconfError)
        assert issubclass(ConfigTypeError, LayerconfError)


class TestAllList:
    def test_every_name_in_all_exists(self):
        for name in layerconf.__all__:
            assert hasattr(layerconf, name), f"{name} listed in __all__ but missing"

    def test_no_duplicates(self):
        assert len(layerconf.__all__) == len(set(layerconf.__all__))

    def test_version(self):
        assert isinstance(layerconf.__version__, str)
