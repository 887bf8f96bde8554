"""
CLI Configuration

Locates and loads the YAML configuration file, then overlays environment
variables (MERKLE_* prefix).
"""

from __future__ import annotations

from pathlib import Path

from merkle_core.config import RuntimeConfig


def default_config_paths() -> list[Path]:
    return [
        Path.cwd() / "merkle.yaml",
        Path.cwd() / ".merkle.yaml",
        Path.home() / ".config" / "merkle-heap" / "config.yaml",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    An explicit config_path must exist. Without one, the first default
    location that exists is used. Environment variables override file
    settings.
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_yaml(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = RuntimeConfig.from_yaml(default_path)
                break

    return config.with_env_overrides()
