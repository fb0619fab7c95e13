"""Configuration models using Pydantic for validation."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConflictPolicy(str, Enum):
    """What to do when the destination file already exists."""

    FAIL = "fail"
    OVERWRITE = "overwrite"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class MoveSettings(BaseModel):
    """Defaults for a move run; command-line flags take precedence."""

    recursive: bool = Field(default=False, description="Traverse the source recursively")
    skip_error: bool = Field(default=False, description="Continue past per-file errors")
    on_conflict: ConflictPolicy = Field(
        default=ConflictPolicy.FAIL, description="Policy when the destination file exists"
    )


class FenmovConfig(BaseModel):
    """Main configuration for fenmov."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
    moving: MoveSettings = Field(default_factory=MoveSettings, description="Move defaults")
