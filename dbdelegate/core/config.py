import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """dbdelegate settings using Pydantic Settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DBDELEGATE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Cassandra
    cassandra_cql_port: int = Field(
        default=9042, description="Native protocol port exposed inside the Cassandra container"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level for the dbdelegate logger")


def configure_logging(level: str = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    package_logger = logging.getLogger("dbdelegate")
    package_logger.setLevel((level or settings.log_level).upper())
    return package_logger


# Global settings instance
settings = Settings()
