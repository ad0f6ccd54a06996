import logging
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # App Config
    app_name: str = "Task Tracker"

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    model_config = SettingsConfigDict(env_prefix="TASK_TRACKER_", env_file=None, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level
