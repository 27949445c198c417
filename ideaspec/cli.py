"""CLI entrypoints for ideaspec commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .config import ConfigError, load_config
from .engine import Engine
from .logging import configure_logging, get_logger
from .models import OUTPUT_LANGS, SITE_TYPES
from .prompting.builder import DocumentBuilder

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .ideaspec.yml or its directory (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ideaspec",
        description="Turn a short website idea into a structured build brief.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    improve_parser = subparsers.add_parser(
        "improve",
        help="Print the improved brief for an idea.",
    )
    _add_verbose_option(improve_parser, suppress_default=True)
    _add_config_option(improve_parser)
    improve_parser.add_argument(
        "idea",
        nargs="?",
        default="-",
        help="Idea text, or '-' to read it from stdin (default).",
    )
    improve_parser.add_argument(
        "--lang",
        choices=OUTPUT_LANGS,
        default=None,
        help="Output language for the rendered documents.",
    )
    improve_parser.add_argument(
        "--site-type",
        choices=SITE_TYPES,
        default=None,
        help="Override the detected site type.",
    )
    improve_parser.add_argument(
        "--project",
        action="store_true",
        help="Also render the project blueprint.",
    )
    improve_parser.add_argument(
        "--hints",
        type=Path,
        default=None,
        help="YAML or JSON file with additional hints.",
    )
    improve_parser.add_argument(
        "--details",
        action="store_true",
        help="Include the feature vector (and blueprint) in --json output.",
    )
    improve_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the service response shape as JSON instead of plain text.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_config_option(serve_parser)
    serve_parser.add_argument("--host", default="0.0.0.0", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ideaspec commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    configure_logging(
        verbose=bool(args.verbose) or config.logging.verbose,
        log_file=config.logging.log_file,
        levels=config.logging.levels,
    )

    if args.command == "improve":
        try:
            hints = _collect_hints(args)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            parser.exit(1, f"Could not read hints: {exc}\n")
        idea = _read_idea(args.idea)
        if not idea.strip():
            parser.exit(1, "Idea text is empty.\n")
        engine = Engine(builder=DocumentBuilder(templates_dir=config.templates_dir))
        result = engine.improve(idea[: config.service.max_idea_chars], hints)
        if args.json:
            print(json.dumps(result.to_response(bool(args.details)), ensure_ascii=False, indent=2))
        else:
            print(result.improved)
            if result.blueprint is not None:
                print()
                print(result.blueprint)
    elif args.command == "serve":
        from .service.app import run_service

        run_service(
            host=args.host, port=args.port, config_path=args.config, verbose=bool(args.verbose)
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _read_idea(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _collect_hints(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    """Merge the hints file with flag overrides; flags win."""
    hints: Dict[str, Any] = {}
    if args.hints is not None:
        loaded = yaml.safe_load(args.hints.read_text(encoding="utf-8")) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{args.hints} must contain a mapping")
        hints.update(loaded)
    if args.lang:
        hints["outputLang"] = args.lang
    if args.site_type:
        hints["siteType"] = args.site_type
    if args.project:
        hints["projectMode"] = True
    logger.debug("Resolved CLI hints: %s", sorted(hints))
    return hints or None


if __name__ == "__main__":
    main(sys.argv[1:])
