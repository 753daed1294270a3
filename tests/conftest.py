"""Shared fixtures for the layerconf test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from layerconf.config import set_default_resolver
from layerconf.resolver import ConfigResolver
from layerconf.settings import ResolverSettings


@pytest.fixture(autouse=True)
def _reset_default_resolver() -> Any:
    set_default_resolver(None)
    yield
    set_default_resolver(None)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A temporary working directory with no mode variable set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("APP_ENV", raising=False)
    return tmp_path


@pytest.fixture
def environ() -> dict[str, str]:
    """An isolated environment mapping."""
    return {}


@pytest.fixture
def resolver(tmp_path: Path, environ: dict[str, str]) -> ConfigResolver:
    """Resolver rooted at ``tmp_path`` reading ``environ`` instead of os.environ."""
    return ConfigResolver(ResolverSettings(root_dir=tmp_path), environ=environ)
