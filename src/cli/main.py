"""Main CLI entry point for the docs API generator."""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli.commands.generate import generate_command  # noqa: E402
from src.cli.commands.stats import stats_command  # noqa: E402
from src.cli.config import Config  # noqa: E402
from src.utils.logging_config import setup_logging  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-api",
        description="Docs API - static JSON documentation API for agents and search",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    generate_parser = subparsers.add_parser(
        "generate", help="Build index, search, categories, routes, metadata and per-document JSON"
    )
    generate_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    generate_parser.add_argument("--source", help="Directory containing markdown files (default: ./docs)")
    generate_parser.add_argument("--output", help="Directory to write JSON files to (default: ./docs/public/api)")
    generate_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report errors",
    )

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Print corpus statistics without writing files")
    stats_parser.add_argument("--config", help="Path to .env configuration file", default=None)
    stats_parser.add_argument("--source", help="Directory containing markdown files (default: ./docs)")
    stats_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show processing progress",
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    # Generate shows progress by default (it's a long-running operation)
    if args.command == "generate":
        setup_logging(verbose=not args.quiet)
    else:
        setup_logging(verbose=args.verbose)

    # Load configuration
    config = Config(args.config)

    # Execute command
    if args.command == "generate":
        generate_command(config=config, source_dir=args.source, output_dir=args.output)
    elif args.command == "stats":
        stats_command(config=config, source_dir=args.source)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
