"""clawmemory CLI: inspect and validate memory plugin configs.

Usage:
    clawmemory check config.yaml    # Validate and print the normalized config
    clawmemory check                # Same, using $CLAWMEMORY_CONFIG
    clawmemory models               # List supported embedding models
    clawmemory hints                # Dump UI hint metadata as JSON
"""

import argparse
import json
import logging
import sys
from typing import Optional

import yaml

from .categories import MEMORY_CATEGORIES
from .config import (
    ConfigError,
    EMBEDDING_DIMENSIONS,
    MemoryConfig,
    memory_config_schema,
)


def _masked(config: MemoryConfig) -> dict:
    """Raw-shape dict with the API key hidden."""
    data = config.to_dict()
    if "apiKey" in data["embedding"]:
        data["embedding"]["apiKey"] = "***"
    return data


def cmd_check(args: argparse.Namespace) -> int:
    """Validate a config file and print the normalized result."""
    try:
        if args.config:
            config = MemoryConfig.from_file(args.config)
        else:
            config = MemoryConfig.from_env()
    except FileNotFoundError as e:
        print(f"error: config file not found: {e.filename}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot read config file: {e}", file=sys.stderr)
        return 1
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        print(f"error: malformed config file: {e}", file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    output = _masked(config)
    output["vectorDims"] = config.vector_dims
    print(json.dumps(output, indent=2))
    return 0


def cmd_models(args: argparse.Namespace) -> int:
    """Print supported embedding models and their dimensions."""
    if args.json:
        print(json.dumps(dict(EMBEDDING_DIMENSIONS), indent=2))
        return 0
    width = max(len(model) for model in EMBEDDING_DIMENSIONS)
    for model, dims in EMBEDDING_DIMENSIONS.items():
        print(f"{model:<{width}}  {dims}")
    return 0


def cmd_hints(args: argparse.Namespace) -> int:
    """Print UI hints and memory categories as JSON."""
    print(json.dumps(
        {
            "uiHints": {
                path: dict(hint) for path, hint in memory_config_schema.ui_hints.items()
            },
            "categories": list(MEMORY_CATEGORIES),
        },
        indent=2,
    ))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clawmemory",
        description="clawmemory: memory plugin configuration tools",
    )
    parser.add_argument("--log-level", type=str, default="warning",
                        choices=["debug", "info", "warning", "error"])
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check
    check_parser = subparsers.add_parser(
        "check", help="Validate a config file and print the normalized config"
    )
    check_parser.add_argument("config", nargs="?", default=None,
                              help="Path to YAML/JSON config (default: $CLAWMEMORY_CONFIG)")

    # models
    models_parser = subparsers.add_parser("models", help="List supported embedding models")
    models_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # hints
    subparsers.add_parser("hints", help="Dump UI hint metadata")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        sys.exit(cmd_check(args))
    elif args.command == "models":
        sys.exit(cmd_models(args))
    elif args.command == "hints":
        sys.exit(cmd_hints(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
