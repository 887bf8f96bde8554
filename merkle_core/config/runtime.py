"""
Runtime Configuration

Defaults for building trees and for logging, loadable from the environment,
a YAML file, or a dictionary.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()


ENV_PREFIX = "MERKLE_"

ZERO_LEAF = "0x" + "00" * 32

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TreeConfig:
    """Defaults used when a tree is built without explicit parameters."""
    depth: int = 20
    initial_leaf: str = ZERO_LEAF


@dataclass
class LoggingConfig:
    """Logging level and optional log file."""
    level: str = "INFO"
    file: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.level, str) or self.level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}"
            )
        if self.file is not None and not isinstance(self.file, str):
            raise ValueError(f"logging.file must be a path string, got {self.file!r}")


def _env_int(name: str) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (a .env file is honoured via python-dotenv)
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLE_DEPTH: default tree depth
        - MERKLE_INITIAL_LEAF: default initial leaf (hex)
        - MERKLE_LOG_LEVEL: log level
        - MERKLE_LOG_FILE: log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}DEPTH"):
            overrides.setdefault("tree", {})["depth"] = _env_int(f"{ENV_PREFIX}DEPTH")
        if os.getenv(f"{ENV_PREFIX}INITIAL_LEAF"):
            overrides.setdefault("tree", {})["initial_leaf"] = os.getenv(f"{ENV_PREFIX}INITIAL_LEAF")

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {})
        logging_data = data.get("logging", {})

        tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
        log = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        return cls(
            tree=tree,
            logging=log,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        new_config.tree = replace(new_config.tree, **overrides.get("tree", {}))
        # replace() re-runs __post_init__, so env values are validated too
        new_config.logging = replace(new_config.logging, **overrides.get("logging", {}))

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "depth": self.tree.depth,
                "initial_leaf": self.tree.initial_leaf,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }


def get_default_config_template() -> str:
    """YAML template written by `config --init`."""
    return (
        "# merkle-heap-tree configuration\n"
        "tree:\n"
        "  depth: 20\n"
        f"  initial_leaf: \"{ZERO_LEAF}\"\n"
        "logging:\n"
        "  level: INFO\n"
        "  file: null\n"
    )


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
