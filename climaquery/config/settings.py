"""Runtime settings for the climate query service.

Values come from the process environment, falling back to a `.env` file in the working directory.
They pick the target dataset, the result file format and the log level.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from climaquery.request.schema import DEFAULT_DATASET_NAME, DataFormat


class Settings(BaseSettings):
    """Dataset, format and logging options, keyed by their environment variable names."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    dataset_name: str = Field(default=DEFAULT_DATASET_NAME, alias="DATASET_NAME")
    data_format: DataFormat = Field(default=DataFormat.grib, alias="DATA_FORMAT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("dataset_name")
    @classmethod
    def validate_dataset_name(cls, value: str) -> str:
        """Reject blank dataset names; every request must target a concrete dataset."""

        value = value.strip()
        if not value:
            raise ValueError("DATASET_NAME must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported LOG_LEVEL: {value}")
        return value


def load_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        RuntimeError: If a variable holds a value the service cannot use (e.g. `DATA_FORMAT=csv`).
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
