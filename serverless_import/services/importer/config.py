"""Settings for the config importer.

Settings are loaded from environment variables (prefix ``SERVERLESS_IMPORT_``)
or a ``.env`` file, with defaults matching the serverless conventions.
"""
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ImporterSettings(BaseSettings):
    """Config importer settings.

    Attributes:
        conventional_name: Base name of the config file looked up in a
            directory or package (``serverless`` -> ``serverless.yml``)
        config_extensions: Recognized config extensions, in lookup order
        template_extension: Extension of executable template sources
        template_export: Name of the callable a template source must define
        import_key: Key under ``custom`` holding import declarations
        log_level: Logging level
        json_logs: Emit structured JSON logs
    """

    model_config = SettingsConfigDict(
        env_prefix="SERVERLESS_IMPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==================== Resolution ====================
    conventional_name: str = Field(
        default="serverless",
        description="Config file base name searched for in directories and packages"
    )
    config_extensions: List[str] = Field(
        default=[".yml", ".yaml", ".json", ".py"],
        description="Recognized config extensions, tried in this order"
    )

    # ==================== Templates ====================
    template_extension: str = Field(
        default=".py",
        description="Extension of executable config templates"
    )
    template_export: str = Field(
        default="config",
        description="Callable a template module must define; called with the import inputs"
    )

    # ==================== Declarations ====================
    import_key: str = Field(
        default="import",
        description="Key under `custom` listing the imports"
    )

    # ==================== Observability ====================
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    json_logs: bool = Field(
        default=False,
        description="Emit structured JSON logs"
    )

    @field_validator("config_extensions")
    @classmethod
    def validate_config_extensions(cls, v: List[str]) -> List[str]:
        """Validate every extension is non-empty and dotted."""
        if not v:
            raise ValueError("config_extensions must not be empty")
        for ext in v:
            if len(ext) < 2 or not ext.startswith("."):
                raise ValueError(f"config extension must start with a dot: {ext!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def validate_template_extension(self) -> "ImporterSettings":
        """Validate the template extension is a recognized extension."""
        if self.template_extension not in self.config_extensions:
            raise ValueError("template_extension must be one of config_extensions")
        return self

    @property
    def conventional_files(self) -> List[str]:
        """Conventional config file names, in lookup order."""
        return [self.conventional_name + ext for ext in self.config_extensions]


# Global settings instance
_settings: Optional[ImporterSettings] = None


def get_settings() -> ImporterSettings:
    """Get or create the global settings instance.

    Returns:
        ImporterSettings instance
    """
    global _settings
    if _settings is None:
        _settings = ImporterSettings()
    return _settings


def set_settings(settings: Optional[ImporterSettings]) -> None:
    """Set (or with None, reset) the global settings instance.

    Args:
        settings: ImporterSettings instance to use
    """
    global _settings
    _settings = settings
