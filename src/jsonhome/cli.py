"""
Command line entry point for jsonhome.
"""

from __future__ import annotations

import argparse
import json
import sys
from importlib.metadata import PackageNotFoundError, version

from pydantic import ValidationError

from .config import GeneratorConfig
from .errors import JsonHomeError
from .generator import JsonHomeGenerator, load_route_groups
from .logging import configure_logging
from .models.document import JsonHome, empty_json_home


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonhome",
        description="jsonhome CLI.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the installed jsonhome version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Emit logs on stderr (-v for INFO, -vv for DEBUG).",
    )
    parser.add_argument(
        "--log-level",
        help="Explicit log level (DEBUG, INFO, WARNING, ERROR). Overrides -v.",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate",
        help="Generate a json-home document from a route descriptor file.",
    )
    generate.add_argument(
        "routes",
        help="JSON file with a list of route groups.",
    )
    generate.add_argument(
        "--root-uri",
        help="Root URI prepended to hrefs and relative relation types (default: $JSONHOME_ROOT_URI).",
    )
    generate.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation of the output.",
    )

    merge = subparsers.add_parser(
        "merge",
        help="Merge json-home documents, in the given order.",
    )
    merge.add_argument(
        "documents",
        nargs="+",
        help="json-home document files.",
    )
    merge.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation of the output.",
    )
    return parser


def _resolve_log_level(args: argparse.Namespace) -> str | None:
    if args.log_level:
        return args.log_level
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return None


def _load_document(parser: argparse.ArgumentParser, path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        parser.error(f"Document file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Failed to parse {path}: {exc}")


def _parse_document(parser: argparse.ArgumentParser, path: str) -> JsonHome:
    payload = _load_document(parser, path)
    try:
        return JsonHome.from_json(payload)
    except (ValidationError, JsonHomeError) as exc:
        parser.error(f"Invalid json-home document {path}: {exc}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        try:
            print(version("jsonhome"))
        except PackageNotFoundError:
            print("jsonhome (not installed)")
        return 0

    configure_logging(_resolve_log_level(args))

    if args.command == "generate":
        try:
            groups = load_route_groups(args.routes)
        except FileNotFoundError as exc:
            parser.error(str(exc))
        except json.JSONDecodeError as exc:
            parser.error(f"Failed to parse {args.routes}: {exc}")
        except (ValidationError, JsonHomeError) as exc:
            parser.error(f"Invalid route data in {args.routes}: {exc}")

        generator = JsonHomeGenerator(GeneratorConfig.from_env(root_uri=args.root_uri))
        try:
            document = generator.generate(groups)
        except JsonHomeError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(document.dumps(indent=args.indent))
        return 0

    if args.command == "merge":
        documents = [_parse_document(parser, path) for path in args.documents]
        document = empty_json_home()
        try:
            for other in documents:
                document = document.merge_with(other)
        except JsonHomeError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(document.dumps(indent=args.indent))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
