"""Common models and helpers used across parkme modules."""

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo
from .paths import get_data_directory, resolve_working_directory, to_forward_slashes

__all__ = [
    "AppInfo",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory",
    "resolve_working_directory",
    "setup_cli_logging",
    "to_forward_slashes",
]
