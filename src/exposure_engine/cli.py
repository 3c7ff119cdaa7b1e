#!/usr/bin/env python3
"""
CLI tool for rendering data through entity definitions.

Usage:
    python -m exposure_engine.cli render entities.yaml user users.yaml
    python -m exposure_engine.cli render entities.yaml user users.json --format yaml --option admin=true
    python -m exposure_engine.cli describe entities.yaml
    python -m exposure_engine.cli describe entities.yaml user
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from .config import Config, configure_logging
from .definitions import EntityCatalog, load_entities
from .errors import EntityError
from .output import render, write

logger = logging.getLogger(__name__)


def parse_option(text: str) -> tuple[str, Any]:
    """Parse a KEY=VALUE option; the value is read as a YAML scalar."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{text}'")
    return key, yaml.safe_load(value) if value else None


def load_input(path: str | Path) -> Any:
    """Load the data to represent from a YAML or JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def load_config(path: str | None) -> Config:
    """Load config from a YAML or JSON file, or use defaults."""
    if not path:
        return Config()
    if path.endswith(".json"):
        return Config.from_json(path)
    return Config.from_yaml(path)


def cmd_render(args, config: Config) -> int:
    """Render an input file through an entity."""
    catalog = load_entities(args.definitions)
    entity = catalog.get_or_raise(args.entity)

    options = dict(args.option or [])
    representation = entity.represent(load_input(args.input), options)

    output_config = config.output
    if args.format:
        output_config.format = args.format

    if args.output:
        write(representation, args.output, output_config)
        logger.info(f"Wrote {args.entity} representation to {args.output}")
    else:
        print(render(representation, output_config))
    return 0


def cmd_describe(args, config: Config) -> int:
    """Describe the output keys of loaded entities."""
    catalog = load_entities(args.definitions)
    names = [args.entity] if args.entity else catalog.names()

    for name in names:
        _describe_entity(catalog, name)
    return 0


def _describe_entity(catalog: EntityCatalog, name: str) -> None:
    entity = catalog.get_or_raise(name)
    print(f"{name} ({entity.__name__}):")
    for exposure in entity.exposures.values():
        details = [exposure.kind.value]
        if exposure.output_key != exposure.attribute:
            details.append(f"from {exposure.attribute}")
        if exposure.has_conditions():
            details.append("conditional")
        print(f"  {exposure.output_key}: {', '.join(details)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exposure-engine",
        description="Render data through declarative entity definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        help="Config file (YAML or JSON)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # render command
    render_parser = subparsers.add_parser("render", help="Render a data file through an entity")
    render_parser.add_argument("definitions", help="Entity definition file (YAML or JSON)")
    render_parser.add_argument("entity", help="Entity name")
    render_parser.add_argument("input", help="Data file; a list is represented as a collection")
    render_parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        help="Output format (default from config, json)",
    )
    render_parser.add_argument(
        "--option",
        action="append",
        type=parse_option,
        metavar="KEY=VALUE",
        help="Option passed to the representation (repeatable)",
    )
    render_parser.add_argument("--output", "-o", help="Write to a file instead of stdout")

    # describe command
    desc_parser = subparsers.add_parser("describe", help="List the output keys of entities")
    desc_parser.add_argument("definitions", help="Entity definition file (YAML or JSON)")
    desc_parser.add_argument("entity", nargs="?", help="Entity name (default: all)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        configure_logging(config.logging)

        if args.command == "render":
            return cmd_render(args, config)
        elif args.command == "describe":
            return cmd_describe(args, config)
    except (EntityError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
