"""Configuration management for cpptimer."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import BUILD_KEYWORD, BUILD_TIMEOUT, CONFIG_FILE, POLL_INTERVAL, REFRESH_INTERVAL
from .errors import ConfigError


class TimerConfig(BaseModel):
    """Which files are timed and how often the status refreshes."""

    extensions: list[str] = Field(default=[".cpp"], description="Tracked file suffixes")
    refresh_interval: float = Field(default=REFRESH_INTERVAL, gt=0)

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, value: list[str]) -> list[str]:
        """Lowercase suffixes and make sure each starts with a dot."""
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]

    def is_tracked(self, path: str | Path) -> bool:
        """Return True if path has one of the tracked suffixes."""
        return Path(path).suffix.lower() in self.extensions


class BuildConfig(BaseModel):
    """How build completions are recognized and correlated to sources."""

    keyword: str = Field(default=BUILD_KEYWORD, description="Label substring of a build task")
    compilers: list[str] = Field(default=["g++", "clang++", "c++"])
    timeout: int = Field(default=BUILD_TIMEOUT, gt=0, description="Build timeout in seconds")


class WatchConfig(BaseModel):
    """Filesystem polling for the watch command."""

    poll_interval: float = Field(default=POLL_INTERVAL, gt=0)
    ignore: list[str] = Field(default=["build", ".git"], description="Directory names to skip")


class CppTimerConfig(BaseModel):
    """Root configuration for cpptimer."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    watch: WatchConfig = Field(default_factory=WatchConfig)


def load_config(workspace_root: Path | None) -> CppTimerConfig:
    """Load config from <workspace>/.cpp-timer.toml.

    Args:
        workspace_root: Workspace root, or None when no workspace is open

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    if workspace_root is None:
        return CppTimerConfig()
    config_path = workspace_root / CONFIG_FILE
    if not config_path.exists():
        return CppTimerConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return CppTimerConfig.model_validate(data)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def write_config_template(workspace_root: Path) -> Path:
    """Write the default .cpp-timer.toml template.

    Args:
        workspace_root: Workspace root directory

    Returns:
        Path to the written config file
    """
    config_path = workspace_root / CONFIG_FILE
    with open(config_path, "wb") as f:
        tomli_w.dump(CppTimerConfig().model_dump(), f)
    return config_path
