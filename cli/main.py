"""
Main CLI entry point for the key/value data provider.

This module provides a command-line host for the data providers. It supports:
- Loading .env, .ini and .properties files as JSON records
- Saving a JSON key/value record list as .properties text
- Listing supported data file types

Usage:
    python -m cli.main --load config/app.properties
    python -m cli.main --save out.properties --records records.json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from core.config import ConfigError, Settings, load_settings
from core.notifications import Notifier
from core.registry import DataProviderRegistry

# Import providers
from providers import PropertiesDataProvider


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description='Load and save key/value config data files (.env, .ini, .properties)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print .ini file entries as JSON records
  %(prog)s --load settings.ini

  # Save edited key/value records as a .properties file
  %(prog)s --save app.properties --records records.json

  # List supported data file types
  %(prog)s --list-types
        """
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        '--load',
        type=Path,
        help='Data file to load and print as JSON records'
    )

    mode.add_argument(
        '--save',
        type=Path,
        help='Data file to save records to (requires --records)'
    )

    mode.add_argument(
        '--list-types',
        action='store_true',
        help='List supported data file types'
    )

    parser.add_argument(
        '--records',
        type=Path,
        help='JSON file with a list of {"key": ..., "value": ...} records to save'
    )

    parser.add_argument(
        '--table-name',
        type=str,
        help='Table name for data files with multiple tables support'
    )

    parser.add_argument(
        '--settings',
        type=Path,
        help='Custom path for settings file (default: ~/.kv_data_provider.yaml)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output with debug logging'
    )

    return parser


def setup_registry(settings: Optional[Settings] = None,
                   notifier: Optional[Notifier] = None) -> DataProviderRegistry:
    """
    Initialize data provider registry with all available providers.

    Returns:
        DataProviderRegistry with registered providers
    """
    registry = DataProviderRegistry()

    # Register providers
    registry.register(PropertiesDataProvider(settings=settings, notifier=notifier))

    return registry


def load_data_file(args, registry: DataProviderRegistry) -> int:
    """
    Load a data file and print its records as JSON.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    data_file = str(args.load.expanduser())
    provider = registry.detect_provider(data_file)
    if not provider:
        print(f"Error: Unsupported data file type: {data_file}", file=sys.stderr)
        return 1

    result = asyncio.run(provider.load(data_file))
    if not result.ok:
        # provider already reported the error
        return 1

    print(json.dumps(result.records, indent=2, ensure_ascii=False, default=str))
    return 0


def save_data_file(args, registry: DataProviderRegistry) -> int:
    """
    Save JSON records to a data file.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if not args.records:
        print("Error: --records is required with --save", file=sys.stderr)
        return 1

    output_file = str(args.save.expanduser())
    provider = registry.detect_provider(output_file)
    if not provider:
        print(f"Error: Unsupported data file type: {output_file}", file=sys.stderr)
        return 1

    records_file = args.records.expanduser()
    try:
        with open(records_file, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: Cannot read records from {records_file}: {e}", file=sys.stderr)
        return 1

    outcome = {}
    asyncio.run(provider.save_data(output_file, records, args.table_name,
                                   lambda error: outcome.update(error=error)))

    if 'error' not in outcome:
        # nothing was written, provider already warned
        return 1
    if outcome['error'] is not None:
        print(f"Error: {outcome['error']}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Saved {len(records)} records to {output_file}")
    return 0


def main(argv: Optional[list] = None):
    """
    Main entry point for CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if args.verbose:
        settings.log_level = 'DEBUG'

    registry = setup_registry(settings=settings)

    if args.list_types:
        for file_type in registry.list_file_types():
            print(file_type)
        return 0

    try:
        if args.load:
            return load_data_file(args, registry)
        return save_data_file(args, registry)
    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
