"""Library configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from validation_fields.core.dates import DateFormat


class Settings(BaseSettings):
    """Validator defaults loaded from VALIDATION_FIELDS_* environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="VALIDATION_FIELDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    default_date_format: str = DateFormat.DB.value
    cpf_reject_repeated_digits: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("default_date_format")
    @classmethod
    def validate_default_date_format(cls, value: str) -> str:
        """Default date format must be one of the supported formats."""
        lower_value = value.lower()
        valid_formats = {fmt.value for fmt in DateFormat}
        if lower_value not in valid_formats:
            msg = f"default_date_format must be one of {', '.join(sorted(valid_formats))}"
            raise ValueError(msg)
        return lower_value
