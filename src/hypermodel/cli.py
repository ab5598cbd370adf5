"""
Command line entry point for hypermodel.
"""

from __future__ import annotations

import argparse
import json
from importlib.metadata import PackageNotFoundError, version

from .builder import ModelBuilder
from .coerce import coerce_links_input
from .embedding.wrappers import EmbeddedWrappers
from .logging import configure_logging, logger
from .models.links import Link
from .models.representation import EntityModel


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hypermodel",
        description="hypermodel CLI: build hypermedia representations from JSON.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the installed hypermodel version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Emit diagnostics on stderr (-v for INFO, -vv for DEBUG).",
    )
    parser.add_argument(
        "--log-level",
        help="Explicit log level (overrides -v).",
    )
    subparsers = parser.add_subparsers(dest="command")

    resource = subparsers.add_parser(
        "resource",
        help="Wrap a JSON value as a resource, optionally promoted to a collection.",
    )
    resource.add_argument("--value", required=True, help="Domain value as JSON.")
    resource.add_argument(
        "--item",
        action="append",
        default=[],
        help="Additional sibling item as JSON (repeatable). Turns the output into a collection.",
    )
    resource.add_argument(
        "--link",
        action="append",
        default=[],
        help="Link as rel=href (repeatable). Malformed values are skipped with a warning.",
    )

    embedded = subparsers.add_parser(
        "embedded",
        help="Group JSON values by relation into an embedded collection.",
    )
    embedded.add_argument(
        "--embed",
        action="append",
        default=[],
        help="Embedded item as rel=JSON (repeatable, at least one).",
    )
    embedded.add_argument(
        "--link",
        action="append",
        default=[],
        help="Collection link as rel=href (repeatable).",
    )
    embedded.add_argument(
        "--prefer-collections",
        action="store_true",
        help="Wrap every embedded item as a one-item collection.",
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


def _parse_json(parser: argparse.ArgumentParser, raw: str, option: str):
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        parser.error(f"Failed to parse {option} JSON: {exc}")


def _parse_links(raw_links: list[str]) -> list[Link]:
    links = coerce_links_input(raw_links)
    if len(links) < len(raw_links):
        logger.info(f"Skipped {len(raw_links) - len(links)} invalid --link values")
    return links


def _run_resource(parser: argparse.ArgumentParser, args: argparse.Namespace):
    value = _parse_json(parser, args.value, "--value")
    items = [EntityModel(content=_parse_json(parser, raw, "--item")) for raw in args.item]
    links = _parse_links(args.link)

    builder = ModelBuilder.resource(value)
    for item in items:
        builder = builder.add_sub_resource(item)
    for link in links:
        builder = builder.add_link(link)

    logger.info(f"Built resource with {len(items)} additional items and {len(links)} links")
    return builder.build()


def _run_embedded(parser: argparse.ArgumentParser, args: argparse.Namespace):
    if not args.embed:
        parser.error("embedded requires at least one --embed rel=JSON")

    entries = []
    for raw in args.embed:
        rel, sep, payload = raw.partition("=")
        if not sep or not rel.strip():
            parser.error(f"--embed must be formatted as rel=JSON, got {raw!r}")
        entries.append((rel.strip(), EntityModel(content=_parse_json(parser, payload, "--embed"))))
    links = _parse_links(args.link)

    wrappers = EmbeddedWrappers(prefer_collections=args.prefer_collections)
    (first_rel, first_model), rest = entries[0], entries[1:]
    builder = ModelBuilder.embedded(first_rel, first_model, wrappers=wrappers)
    for rel, model in rest:
        builder.add_sub_resource(rel, model)
    for link in links:
        builder.add_link(link)

    logger.info(f"Built embedded collection with {len(entries)} items and {len(links)} links")
    return builder.build()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(_resolve_log_level(args))

    if args.version:
        try:
            print(version("hypermodel"))
        except PackageNotFoundError:
            print("hypermodel (not installed)")
        return 0

    if args.command == "resource":
        representation = _run_resource(parser, args)
    elif args.command == "embedded":
        representation = _run_embedded(parser, args)
    else:
        parser.print_help()
        return 0

    print(json.dumps(representation.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
