"""Package configuration from environment variables."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    orientkit_env: str = "development"
    orientkit_log_level: str = "info"

    # Name of the registered sign evaluator used when index() gets none
    orientkit_sign_evaluator: str = "double_double"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("orientkit_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler. Library code never calls this on import."""
    load_dotenv()
    name = (level or settings.orientkit_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
