"""Command line entry point.

Composes a config file with everything it imports and prints the result.

Usage:
    python -m serverless_import serverless.yml
    python -m serverless_import serverless.yml --format json --log-level DEBUG
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

import yaml

from serverless_import.shared.exceptions.base import ServerlessImportError
from serverless_import.shared.utils.config.yaml_loader import YAMLLoader
from serverless_import.shared.utils.logging.context import correlation_id_generator, log_context
from serverless_import.shared.utils.logging.factory import configure_logging
from serverless_import.services.importer.config import ImporterSettings
from serverless_import.services.importer.services.orchestrator import ImportOrchestrator


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serverless-import",
        description="Merge a serverless config with the fragments it imports",
    )
    parser.add_argument("config", help="Root config file (YAML or JSON)")
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: from settings)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit structured JSON logs on stderr",
    )
    return parser


@correlation_id_generator
def compose(config_path: str, settings: ImporterSettings) -> dict:
    """Load a root config and merge all of its imports into it.

    Declarations in the root are resolved relative to the root file's
    directory; handler paths are made relative to the working directory.
    """
    with log_context(operation_name="compose"):
        config = YAMLLoader().load(config_path)
        orchestrator = ImportOrchestrator(config, settings=settings)
        orchestrator.process(config, os.path.dirname(os.path.abspath(config_path)))
        logger.info(
            f"Composed {config_path}",
            extra={"imports": list(orchestrator.imported)},
        )
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = ImporterSettings()
    level_name = (args.log_level or settings.log_level).upper()
    configure_logging(
        level=getattr(logging, level_name, logging.INFO),
        json_logs=args.json_logs or settings.json_logs,
    )

    try:
        config = compose(args.config, settings)
    except ServerlessImportError as e:
        logger.error(f"Failed to compose {args.config}", extra={"error": e.to_dict()})
        print(str(e), file=sys.stderr)
        return 1

    if args.format == "json":
        json.dump(config, sys.stdout, indent=2, default=str)
        sys.stdout.write("\n")
    else:
        yaml.safe_dump(config, sys.stdout, sort_keys=False, default_flow_style=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
