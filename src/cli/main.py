"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the application bootstrap
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from src._package import DESCRIPTION, PACKAGE_NAME
from src._version import __version__
from src.cli.formatters import format_output
from src.config.defaults import LogLevel
from src.domain.base.exceptions import DomainException
from src.infrastructure.logging.logger import get_logger

OUTPUT_FORMATS = ["json", "yaml", "table", "list"]
LOG_LEVELS = [level.value for level in LogLevel]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else PACKAGE_NAME,
        description=f"Pattern Gallery - {DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list                          # List all patterns
  %(prog)s patterns list --category structural    # Only structural patterns
  %(prog)s patterns show builder --format yaml    # Describe one pattern
  %(prog)s patterns run abstract-factory          # Run a demo (prompts for input)
  %(prog)s patterns run factory-method --machine-type 3
  %(prog)s patterns run-all                       # Run every demo in order
  %(prog)s config show                            # Show effective configuration
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override the configured logging level")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="json", help="Output format")
    parser.add_argument("--quiet", action="store_true", help="Suppress error messages")
    parser.add_argument("--verbose", action="store_true", help="Print tracebacks for unexpected errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="resource", help="Available resources")

    # Patterns resource
    patterns_parser = subparsers.add_parser("patterns", help="Browse and run pattern demos")
    patterns_subparsers = patterns_parser.add_subparsers(dest="action", help="Pattern actions")

    patterns_list = patterns_subparsers.add_parser("list", help="List all patterns")
    patterns_list.add_argument("--category", choices=["creational", "structural"], help="Filter by pattern family")
    patterns_list.add_argument("--format", dest="action_format", choices=OUTPUT_FORMATS, help="Output format")

    patterns_show = patterns_subparsers.add_parser("show", help="Show pattern details")
    patterns_show.add_argument("name", help="Pattern name, e.g. abstract-factory")
    patterns_show.add_argument("--format", dest="action_format", choices=OUTPUT_FORMATS, help="Output format")

    patterns_run = patterns_subparsers.add_parser("run", help="Run one pattern demo")
    patterns_run.add_argument("name", help="Pattern name, e.g. abstract-factory")
    patterns_run.add_argument("--choice", type=int, help="Coffee type for abstract-factory instead of prompting")
    patterns_run.add_argument("--machine-type", type=int, help="Single machine type for factory-method")

    patterns_subparsers.add_parser("run-all", help="Run every demo in catalog order")

    # Config resource
    config_parser = subparsers.add_parser("config", help="Inspect configuration")
    config_subparsers = config_parser.add_subparsers(dest="action", help="Config actions")

    config_show = config_subparsers.add_parser("show", help="Show effective configuration")
    config_show.add_argument("--format", dest="action_format", choices=OUTPUT_FORMATS, help="Output format")

    config_validate = config_subparsers.add_parser("validate", help="Validate configuration")
    config_validate.add_argument("--file", help="Configuration file to validate (defaults to --config)")

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, app) -> Dict[str, Any]:
    """Execute a catalog or config command and return its result."""
    if args.resource == "patterns":
        if args.action == "list":
            return app.list_patterns(args.category)
        if args.action == "show":
            return app.show_pattern(args.name)
    elif args.resource == "config":
        if args.action == "show":
            return app.show_config()
        if args.action == "validate":
            return app.validate_config(args.file)
    raise ValueError(f"Unknown command: {args.resource} {args.action}")


def run_demo_command(args: argparse.Namespace, app) -> int:
    """Execute ``patterns run`` or ``patterns run-all`` and return the exit code."""
    if args.action == "run-all":
        return app.run_all()
    return app.run_pattern(args.name, choice=args.choice, machine_type=args.machine_type)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
            sys.exit(1)

        if not args.action:
            print(
                f"Error: No action specified for {args.resource}. Use --help for usage information.",
                file=sys.stderr,
            )
            sys.exit(1)

        try:
            from src.bootstrap import create_application

            app = create_application(args.config)
            app.initialize(args.log_level)

            if args.resource == "patterns" and args.action in ("run", "run-all"):
                sys.exit(run_demo_command(args, app))

            result = execute_command(args, app)
            output_format = getattr(args, "action_format", None) or args.format
            print(format_output(result, output_format))

        except DomainException as e:
            logger.debug("Domain error", error_code=e.error_code, error=str(e))
            if not args.quiet:
                print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                import traceback

                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
