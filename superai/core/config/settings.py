"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from superai.core.config.loader import DEFAULT_CONFIG_PATH, ConfigLoader
from superai.core.exceptions.errors import ConfigurationError

# Checkout that contains the superai package; it doubles as the bundle source.
DEFAULT_BUNDLE_ROOT = Path(__file__).resolve().parent.parent.parent.parent

DEFAULT_STATE_FILE = ".super-ai-install.json"


class InstallerSettings(BaseSettings):
    """Installer configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="SUPERAI_INSTALLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bundle_root: Path | None = Field(
        default=None,
        description="Bundle source directory (None = the superai checkout)",
    )
    state_file: str = Field(
        default=DEFAULT_STATE_FILE,
        description="Install-state file name, relative to the project root",
    )

    @field_validator("bundle_root", mode="before")
    @classmethod
    def validate_bundle_root(cls, v: str | None) -> Path | None:
        """Validate and convert bundle_root to Path."""
        if v is None or v == "":
            return None
        return Path(v)

    @field_validator("state_file")
    @classmethod
    def validate_state_file(cls, v: str) -> str:
        """Reject empty or absolute state file names."""
        if not v or Path(v).is_absolute():
            raise ValueError(f"Invalid state file name: {v!r}. Must be a relative path")
        return v

    def resolve_bundle_root(self) -> Path:
        """Return the configured bundle root or the package checkout."""
        return (self.bundle_root or DEFAULT_BUNDLE_ROOT).resolve()


class GitSettings(BaseSettings):
    """Git operation configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="SUPERAI_GIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    remote: str = Field(
        default="origin",
        description="Remote to pull bundle updates from",
    )
    branches: list[str] = Field(
        default_factory=lambda: ["main", "master"],
        description="Branches tried in order when pulling updates",
    )

    @field_validator("branches")
    @classmethod
    def validate_branches(cls, v: list[str]) -> list[str]:
        """Require at least one branch."""
        branches = [b.strip() for b in v if b and b.strip()]
        if not branches:
            raise ValueError("At least one branch must be configured")
        return branches


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="SUPERAI_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SUPERAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    installer: InstallerSettings = Field(default_factory=InstallerSettings)
    git: GitSettings = Field(default_factory=GitSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Values present in the file take precedence over the environment.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            installer=InstallerSettings(**loader.get_section("installer")),
            git=GitSettings(**loader.get_section("git")),
            logging=LoggingSettings(**loader.get_section("logging")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Returns:
            Settings instance.

        Raises:
            ConfigurationError: If the YAML file or any setting is invalid.
        """
        try:
            if DEFAULT_CONFIG_PATH.exists():
                return cls.from_yaml(DEFAULT_CONFIG_PATH)

            # Environment variables and .env are automatically loaded by pydantic-settings
            return cls()
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join([e.title, *(str(part) for part in first["loc"])])
            raise ConfigurationError(
                f"Invalid setting {key}: {first['msg']}",
                config_key=key,
                details={"errors": e.error_count()},
            ) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
