"""CLI entrypoint for Graphgate."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from graphgate import __version__
from graphgate.cli.handlers import (
    handle_check_host,
    handle_normalize,
    handle_translate,
    handle_validate_config,
)
from graphgate.constants.branding import CLI_DESCRIPTION


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding graphgate.yaml")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="graphgate",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    translate = subparsers.add_parser("translate", help="Translate a chart URL into a concrete request")
    translate.add_argument("url", help="Chart URL, e.g. wikiraw:///Page/data")
    translate.add_argument("-d", "--domain", default="", help="Default domain for host-less URLs")
    translate.add_argument("-l", "--lang", default=None, help="Site language for tabular/map requests")
    translate.add_argument(
        "-n",
        "--navigate",
        action="store_true",
        help="Translate as a link to open rather than data to fetch",
    )
    _add_config_args(translate)

    normalize = subparsers.add_parser("normalize", help="Normalize a saved backend response")
    normalize.add_argument("-p", "--protocol", required=True, help="Original pseudo-protocol, e.g. wikidatasparql")
    normalize.add_argument("file", nargs="?", type=Path, default=None, help="Response file (stdin if omitted)")

    check_host = subparsers.add_parser("check-host", help="Show which transport a host is allowed to use")
    check_host.add_argument("host", help="Host name or alias")
    _add_config_args(check_host)

    validate = subparsers.add_parser("validate-config", help="Validate configuration")
    _add_config_args(validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "translate":
        return handle_translate(args)
    if args.command == "normalize":
        return handle_normalize(args)
    if args.command == "check-host":
        return handle_check_host(args)
    if args.command == "validate-config":
        return handle_validate_config(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
