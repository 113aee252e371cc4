"""Infrastructure configuration module.

Centralized configuration management using Pydantic Settings.
"""

from depcycle.infrastructure.config.settings import (
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
