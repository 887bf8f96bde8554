"""
CLI command modules.
"""

from merkle_cli.commands import build, verify

__all__ = ["build", "verify"]
