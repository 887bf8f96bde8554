"""
Runtime Configuration Module

Provides configuration loading and management.
"""

from .runtime import (
    LoggingConfig,
    RuntimeConfig,
    TreeConfig,
    get_default_config,
    get_default_config_template,
    set_default_config,
)

__all__ = [
    "LoggingConfig",
    "RuntimeConfig",
    "TreeConfig",
    "get_default_config",
    "get_default_config_template",
    "set_default_config",
]
