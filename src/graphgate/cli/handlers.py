"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys

from graphgate.config import load_config, validate_config_file
from graphgate.exceptions import ConfigError, GraphGateError
from graphgate.exceptions.validation import format_errors
from graphgate.mediator import GraphMediator
from graphgate.model import RequestContext


def _build_mediator(args: argparse.Namespace) -> GraphMediator:
    return GraphMediator(load_config(args.root, args.config))


def handle_translate(args: argparse.Namespace) -> int:
    """Print the concrete URL for a chart URL, plus CORS flag and headers."""
    context = RequestContext(
        raw_url=args.url,
        kind="navigate" if args.navigate else "fetch",
        default_domain=args.domain,
        site_language=args.lang,
    )
    try:
        mediator = _build_mediator(args)
        url = mediator.translate_url(context)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except GraphGateError as exc:
        print(f"{exc.kind}: {exc}", file=sys.stderr)
        return 1

    print(url)
    if context.cors_needed:
        print("cors: required")
    for name, value in sorted(context.extra_headers.items()):
        print(f"header: {name}: {value}")
    return 0


def handle_normalize(args: argparse.Namespace) -> int:
    """Normalize a saved response and print it as JSON."""
    try:
        raw = args.file.read_bytes() if args.file is not None else sys.stdin.buffer.read()
    except OSError as exc:
        print(f"Cannot read response: {exc}", file=sys.stderr)
        return 2

    try:
        result = GraphMediator().normalize(raw, args.protocol)
    except GraphGateError as exc:
        print(f"{exc.kind}: {exc}", file=sys.stderr)
        return 1

    if isinstance(result, bytes):
        sys.stdout.buffer.write(result)
        return 0
    print(json.dumps(result, indent=2, ensure_ascii=False) if not isinstance(result, str) else result)
    return 0


def handle_check_host(args: argparse.Namespace) -> int:
    """Print the sanitized host and its allowed transport."""
    try:
        sanitized = _build_mediator(args).sanitize_host(args.host)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except GraphGateError as exc:
        print(f"{exc.kind}: {exc}", file=sys.stderr)
        return 1

    print(f"{sanitized.protocol}://{sanitized.host}")
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
