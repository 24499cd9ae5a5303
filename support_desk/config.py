"""Application configuration via Pydantic Settings.

NOTE: env variable names are mapped explicitly (LOG_LEVEL, DEBUG, ...) to avoid
silent misconfiguration from prefix guessing.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_title: str = Field(default="Support Desk Dispatcher", validation_alias="APP_TITLE")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s | %(name)s | %(message)s",
        validation_alias="LOG_FORMAT",
    )

    # HTTP
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
