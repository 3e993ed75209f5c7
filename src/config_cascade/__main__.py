"""
Print the resolved configuration for a config directory.

Usage:
    # Resolve ./config for the current NODE_ENV
    python -m config_cascade config

    # YAML sources instead of Python modules
    python -m config_cascade config --yaml

    # Print YAML instead of JSON
    python -m config_cascade config --format yaml

    # Include the root index file and store DATABASE_URL under "db"
    python -m config_cascade config --include-root-index --database-key db
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import yaml

from config_cascade.config.fragments import PythonFragmentResolver, YAMLFragmentResolver
from config_cascade.config.loader import resolve
from config_cascade.config.options import (
    DEFAULT_DATABASE_KEY,
    DEFAULT_DATABASE_URL_ENV_KEY,
    ResolutionOptions,
)
from config_cascade.exceptions.config import ConfigError
from config_cascade.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="config_cascade",
        description="Resolve a cascading configuration directory and print it as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "config_directory",
        nargs="?",
        default=None,
        help="Base config directory (default: current directory)",
    )
    parser.add_argument(
        "--include-root-index",
        action="store_true",
        help="Also load the base directory's index file",
    )
    parser.add_argument(
        "--yaml",
        action="store_true",
        help="Read .yaml/.yml sources instead of .py modules",
    )
    parser.add_argument(
        "--database-key",
        default=DEFAULT_DATABASE_KEY,
        help=f"Key receiving the parsed connection string (default: {DEFAULT_DATABASE_KEY})",
    )
    parser.add_argument(
        "--database-url-env-key",
        default=DEFAULT_DATABASE_URL_ENV_KEY,
        help=f"Variable holding the connection string (default: {DEFAULT_DATABASE_URL_ENV_KEY})",
    )
    parser.add_argument(
        "--format",
        default="json",
        choices=["json", "yaml"],
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for diagnostics written to stderr (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Resolve and print configuration. Returns the process exit code."""
    args = parse_args(argv)
    configure_logging(service_name="config_cascade", level=args.log_level)

    options = ResolutionOptions(
        config_directory=args.config_directory,
        include_root_index=args.include_root_index,
        database_key=args.database_key,
        database_url_env_key=args.database_url_env_key,
    )
    resolver = YAMLFragmentResolver() if args.yaml else PythonFragmentResolver()

    try:
        config = resolve(options=options, resolver=resolver)
    except ConfigError as e:
        logger.error(
            "Config resolution failed",
            extra={"error_code": e.error_code, "details": e.details},
        )
        print(str(e), file=sys.stderr)
        return 1

    if args.format == "yaml":
        plain = json.loads(json.dumps(config, default=str))
        yaml.safe_dump(plain, sys.stdout, default_flow_style=False, sort_keys=True)
    else:
        json.dump(config, sys.stdout, indent=2, sort_keys=True, default=str)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
