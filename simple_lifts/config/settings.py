from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from simple_lifts.plans.constants import DEFAULT_HORIZON_WEEKS


def get_default_data_dir() -> Path:
    """Get the default directory for stored plans and templates."""
    return Path.home() / ".simple_lifts"


class Settings(BaseSettings):
    data_dir: Path = Field(
        default_factory=get_default_data_dir,
        validation_alias="SIMPLE_LIFTS_DATA_DIR",
        description="Directory holding per-user plan.json and templates.json",
    )
    horizon_weeks: int = Field(
        default=DEFAULT_HORIZON_WEEKS,
        validation_alias="SIMPLE_LIFTS_HORIZON_WEEKS",
        description="Number of weeks covered by a generated plan",
    )
    default_user_id: str = Field(default="local", validation_alias="SIMPLE_LIFTS_USER_ID")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="SIMPLE_LIFTS_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("horizon_weeks")
    @classmethod
    def validate_horizon_weeks(cls, value: int) -> int:
        if value < 1:
            logger.warning(f"Invalid SIMPLE_LIFTS_HORIZON_WEEKS '{value}'. Defaulting to {DEFAULT_HORIZON_WEEKS}.")
            return DEFAULT_HORIZON_WEEKS
        return value


settings = Settings()
