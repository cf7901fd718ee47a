#!/usr/bin/env python3
"""
Command-line entry point.

Usage examples:
  doccorpus validate docs/
  doccorpus validate docs/ --config doccorpus.yaml --format json

Exit codes: 0 when no issues are found, 1 when issues are reported, 2 when the
content root cannot be read.
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from doccorpus.config import ValidationConfig
from doccorpus.exceptions import ContentRootError
from doccorpus.utils import get_logger
from doccorpus.validation import run_validation

__all__ = ["main", "build_parser"]

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doccorpus",
        description="Validate the cross-references of a documentation corpus.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate", help="Check every page under a content root."
    )
    validate_parser.add_argument(
        "content_root",
        type=Path,
        help="Directory containing the .md/.mdx pages.",
    )
    validate_parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML file with validation settings.",
    )
    validate_parser.add_argument(
        "-f",
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format, one issue per line (default: text).",
    )
    return parser


def _load_config(path: Path | None) -> ValidationConfig:
    if path is None:
        return ValidationConfig()
    return ValidationConfig.from_yaml_path(path)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the validation, and print issues to stdout."""
    args = build_parser().parse_args(argv)
    logger = get_logger(name="cli", level=logging.INFO)

    try:
        config = _load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error("Invalid config %s: %s", args.config, e)
        print(f"error: invalid config '{args.config}': {e}", file=sys.stderr)
        return EXIT_FATAL

    try:
        issues = run_validation(args.content_root, config)
    except ContentRootError as e:
        logger.error("Aborting: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FATAL

    for issue in issues:
        print(issue.to_json() if args.format == "json" else issue.format())

    logger.info("Reported %d issues for %s", len(issues), args.content_root)
    return EXIT_ISSUES if issues else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
