"""Config model for selrange"""

import logging

from pydantic import BaseModel, field_validator


class SelrangeConfig(BaseModel):
    """Configuration for selrange - stored in .selrange/config.yaml"""

    log_level: str = "WARNING"
    snapshot_suffix: str = ".sel.yaml"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level"""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got: {v}")
        return level

    @field_validator("snapshot_suffix")
    @classmethod
    def validate_snapshot_suffix(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(f"snapshot_suffix must start with '.', got: {v}")
        return v

    @property
    def log_level_number(self) -> int:
        """Get log_level as a logging module constant"""
        return logging.getLevelName(self.log_level)
