from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env once at module import so every BaseSettings subclass sees the env vars
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class HookSettings(BaseSettings):
    """Plugin hook runner settings. Env vars prefixed with HOOKS_."""

    model_config = SettingsConfigDict(env_prefix="HOOKS_")

    # False re-raises handler failures as HookHandlerError; the tool hook
    # layer still degrades them to pass-through.
    catch_errors: bool = True


class LoggingSettings(BaseSettings):
    """Logging settings. Env vars prefixed with LOG_."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    json_output: bool = True

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        normalized = v.strip().upper()
        if normalized not in LOG_LEVELS:
            msg = f"LOG_LEVEL must be one of {LOG_LEVELS} (got '{v}')"
            raise ValueError(msg)
        return normalized


class Settings(BaseSettings):
    """Root settings composing all sub-configurations."""

    model_config = SettingsConfigDict(extra="ignore")

    hooks: HookSettings = Field(default_factory=HookSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def get_settings() -> Settings:
    """Load and validate settings. Raises ValidationError on invalid values."""
    return Settings()
