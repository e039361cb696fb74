"""Configuration management for symbol font resolution."""

from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


def default_application_dirs() -> list[Path]:
    """Directories scanned for application bundles."""
    return [Path("/Applications"), Path.home() / "Applications"]


class ResolverConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SFSYMBOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font resolution configuration."""

    # Companion application
    companion_bundle_id: str = Field(
        "com.apple.SFSymbols", description="Bundle identifier of the SF Symbols app"
    )
    fallback_resource: str = Field(
        "SFSymbolsFallback.ttf", description="Fallback font file inside the app bundle"
    )
    application_dirs: list[Path] = Field(
        default_factory=default_application_dirs, description="Application search directories"
    )
    use_spotlight: bool = Field(True, description="Query Spotlight (mdfind) for the app")

    # System fonts
    font_directories: list[Path] = Field(
        default_factory=list, description="Font directories (empty = platform defaults)"
    )
    use_fontconfig: bool = Field(True, description="Use fc-match for system lookup")

    subprocess_timeout: float = Field(10.0, gt=0.0, description="Timeout for helper tools")
    log_level: str = Field("INFO", description="Log level")

    @field_validator("companion_bundle_id", "fallback_resource")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "ResolverConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "ResolverConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if config_data is None:
        raise ConfigurationError(f"Empty configuration file: {config_path}")
    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

    # YAML-based configs don't read .env
    class TempConfig(config_class):
        model_config = SettingsConfigDict(
            env_file=None,
            case_sensitive=False,
            extra="ignore",
        )

    try:
        return TempConfig(**config_data)
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e
