#!/usr/bin/env python3
"""
Book library CLI - command-line interface for managing library categories.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Manage book categories
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli categories seed
    python -m cli categories list --page 0 --size 10
    python -m cli categories create --name Poetry --description "Verse"
    python -m cli categories show --name Poetry
"""

import sys
import argparse
from cli import categories, migrate
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging, get_logger


def build_parser():
    """Build the top-level parser with every command registered."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Book library - category management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config()
        setup_logging(config)

        # migrate works on raw connections, everything else goes through services
        if args.command == "migrate":
            args.func(args, DatabaseManager(config))
        else:
            args.func(args, Services(config))
    except Exception as e:
        get_logger().error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
