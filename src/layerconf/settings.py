"""Settings that control where a resolver looks for configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ResolverSettings"]


class ResolverSettings(BaseModel):
    """Locations and naming conventions used by ``ConfigResolver``.

    Relative paths are resolved against ``root_dir``; when ``root_dir`` is
    ``None`` the current working directory at lookup time is used.
    """

    model_config = ConfigDict(frozen=True)

    root_dir: Path | None = None
    config_dir: str = "config"
    dotenv_file: str = ".env"
    mode_variable: str = Field(default="APP_ENV", min_length=1)
    default_mode: str = Field(default="development", min_length=1)
    json_extension: str = ".json"
    yaml_extension: str = ".yml"

    def base_dir(self) -> Path:
        return self.root_dir if self.root_dir is not None else Path.cwd()

    def dotenv_path(self) -> Path:
        return self.base_dir() / self.dotenv_file

    def json_path(self, name: str) -> str:
        """Relative path of the JSON file for ``name`` (a mode or ``default``)."""
        return f"{self.config_dir}/{name}{self.json_extension}"

    def yaml_path(self, name: str) -> str:
        """Relative path of the YAML file for ``name`` (a mode or ``default``)."""
        return f"{self.config_dir}/{name}{self.yaml_extension}"
