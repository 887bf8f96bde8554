"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkle_cli root [--depth N] [--leaf HEX] [--set I=HEX ...] [--json]
    python -m merkle_cli proof --index I [--depth N] [--leaf HEX] [--set I=HEX ...] [--out PATH]
    python -m merkle_cli verify <proof_path> [--leaf HEX] [--root HEX] [--json]
    python -m merkle_cli config --init | --show

Environment Variables:
    MERKLE_DEPTH            Default tree depth (default: 20)
    MERKLE_INITIAL_LEAF     Default initial leaf (default: 32 zero bytes)
    MERKLE_LOG_LEVEL        Log level (default: INFO)
    MERKLE_LOG_FILE         Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from merkle_cli import __version__
from merkle_cli.commands.build import proof_cmd, root_cmd
from merkle_cli.commands.verify import verify_cmd
from merkle_cli.config import load_config
from merkle_cli.exit_codes import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
)
from merkle_core.config import (
    get_default_config,
    get_default_config_template,
    set_default_config,
)



def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _add_tree_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=None,
        help="One-indexed tree depth, at most 30 (default: from config)",
    )
    parser.add_argument(
        "--leaf", "-l",
        type=str,
        default=None,
        help="Initial value for every leaf, 32-byte hex (default: from config)",
    )
    parser.add_argument(
        "--set", "-s",
        action="append",
        metavar="INDEX=HEX",
        default=None,
        help="Set a leaf after construction; may be repeated",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="JSON output",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkle-heap",
        description="Build fixed-depth Merkle trees, generate inclusion proofs and verify them.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./merkle.yaml or ~/.config/merkle-heap/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Build a tree and print its root",
    )
    _add_tree_arguments(root_parser)
    root_parser.set_defaults(func=root_cmd)

    # --- proof command ---
    proof_parser = subparsers.add_parser(
        "proof",
        help="Build a tree and emit an inclusion proof for one leaf",
    )
    proof_parser.add_argument(
        "--index", "-i",
        type=int,
        required=True,
        help="0-based leaf index to prove",
    )
    proof_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Write the proof JSON to this path",
    )
    _add_tree_arguments(proof_parser)
    proof_parser.set_defaults(func=proof_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an inclusion proof file",
        description="Fold a proof and compare the result with a trusted root.",
    )
    verify_parser.add_argument(
        "proof_path",
        type=str,
        help="Path to an inclusion proof JSON file",
    )
    verify_parser.add_argument(
        "--leaf",
        type=str,
        default=None,
        help="Claimed leaf value (default: leaf stored in the proof)",
    )
    verify_parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Trusted root (default: root stored in the proof)",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="JSON output",
    )
    verify_parser.set_defaults(func=verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="merkle.yaml",
        help="Path for config file (default: merkle.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (MERKLE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(get_default_config().to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: merkle-heap config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    try:
        setup_logging(level=log_level, log_file=config.logging.file)
    except (OSError, ValueError) as e:
        print(f"Error configuring logging: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Commands read the loaded config through get_default_config()
    set_default_config(config)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
