"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing to the catalog service
- Output formatting and exit codes
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from pattern_catalog import __version__
from pattern_catalog.application.catalog import CatalogService
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config.defaults import LogLevel, OutputFormat
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.domain.core.exceptions import DomainException
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.registry import PatternCategory

FORMAT_CHOICES = [f.value for f in OutputFormat]
CATEGORY_CHOICES = [c.value for c in PatternCategory]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with global options and subcommands."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalog",
        description="Pattern Catalog - runnable demonstrations of classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all demos
  %(prog)s list --category structural        # List structural pattern demos
  %(prog)s show memento                      # Describe one demo
  %(prog)s run flyweight --seed 7            # Run a demo with a fixed seed
  %(prog)s --format table run-all            # Run everything, summary table
  %(prog)s config show --format yaml         # Show effective configuration
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Override the configured log level')
    parser.add_argument('--format', choices=FORMAT_CHOICES,
                        help='Output format (default: from configuration)')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List registered demos')
    list_parser.add_argument('--category', choices=CATEGORY_CHOICES, help='Filter by pattern category')

    show_parser = subparsers.add_parser('show', help='Describe a demo')
    show_parser.add_argument('name', help='Demo name')

    run_parser = subparsers.add_parser('run', help='Run a demo and print its transcript')
    run_parser.add_argument('name', help='Demo name')
    run_parser.add_argument('--seed', type=int, help='Seed for demos that use randomness')

    run_all_parser = subparsers.add_parser('run-all', help='Run every demo')
    run_all_parser.add_argument('--category', choices=CATEGORY_CHOICES, help='Filter by pattern category')
    run_all_parser.add_argument('--seed', type=int, help='Seed for demos that use randomness')

    config_parser = subparsers.add_parser('config', help='Inspect configuration')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Configuration actions')
    config_subparsers.add_parser('show', help='Show the effective configuration')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def create_config_manager(args: argparse.Namespace) -> ConfigurationManager:
    """Create a configuration manager honouring command line overrides."""
    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides["LOGGING_CONFIG"] = {"level": args.log_level}
    return ConfigurationManager(args.config, overrides=overrides)


def execute_command(args: argparse.Namespace,
                    service: CatalogService,
                    config_manager: ConfigurationManager) -> Dict[str, Any]:
    """Route a parsed command to the catalog service."""
    if args.command == 'list':
        return {"demos": [demo.to_dict() for demo in service.list_demos(args.category)]}
    if args.command == 'show':
        return {"demo": service.describe(args.name).to_dict()}
    if args.command == 'run':
        return {"runs": [service.run_demo(args.name, args.seed).to_dict()]}
    if args.command == 'run-all':
        return {"runs": [run.to_dict() for run in service.run_all(args.category, args.seed)]}
    if args.command == 'config' and args.action == 'show':
        return {"config": config_manager.get_config()}
    raise DomainException(f"Unknown command: {args.command}")


def write_output(text: str, output: Optional[str]) -> None:
    if output:
        with open(output, 'w') as f:
            f.write(text + "\n")
        print(f"Output written to {output}")
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = parse_args(argv)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.")
        return 1
    if args.command == 'config' and not args.action:
        print("Error: No action specified for config. Use --help for usage information.")
        return 1

    try:
        config_manager = create_config_manager(args)
        setup_logging(config_manager.logging)
        logger = get_logger(__name__)

        service = CatalogService(config=config_manager.catalog)
        result = execute_command(args, service, config_manager)

        output_format = args.format or config_manager.catalog.output_format
        write_output(format_output(result, output_format), args.output)
    except DomainException as e:
        get_logger(__name__).error("Domain error", error=str(e))
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"Error: {e}")
        return 1

    failed = [run["name"] for run in result.get("runs", []) if not run["success"]]
    if failed:
        logger.warning("Demos failed", demos=failed)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
