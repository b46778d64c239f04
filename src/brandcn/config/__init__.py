"""Configuration and settings management."""

from brandcn.config.constants import (
    DEFAULT_SRC_TARGET_DIR,
    DEFAULT_TARGET_DIR,
    LOGO_EXT,
    VARIANT_SUFFIXES,
    ExitCode,
)
from brandcn.config.logging import get_logger, setup_logging
from brandcn.config.settings import (
    Settings,
    clear_settings_cache,
    get_bundled_library_dir,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "get_bundled_library_dir",
    "setup_logging",
    "get_logger",
    "LOGO_EXT",
    "VARIANT_SUFFIXES",
    "DEFAULT_TARGET_DIR",
    "DEFAULT_SRC_TARGET_DIR",
    "ExitCode",
]
