"""Configuration module for fenmov."""

from .arguments import MoveArguments, validate_source, validate_target
from .manager import ConfigManager
from .models import ConflictPolicy, FenmovConfig, LoggingSettings, MoveSettings

__all__ = [
    "FenmovConfig",
    "LoggingSettings",
    "MoveSettings",
    "ConflictPolicy",
    "ConfigManager",
    "MoveArguments",
    "validate_source",
    "validate_target",
]
