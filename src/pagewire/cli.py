"""pagewire CLI.

Entry point registered as ``pagewire`` in ``pyproject.toml``::

    [project.scripts]
    pagewire = "pagewire.cli:main"
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys

from .api import ApiTable
from .config import ServerConfig
from .errors import ConfigurationError
from .server import PageServer


LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def resolve_api(import_string: str) -> ApiTable:
    """Import an ApiTable from a ``module:attribute`` string."""
    module_name, sep, attr = import_string.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"expected 'module:attribute', got {import_string!r}")

    module = importlib.import_module(module_name)
    try:
        table = getattr(module, attr)
    except AttributeError:
        raise ConfigurationError(f"{module_name!r} has no attribute {attr!r}") from None
    if not isinstance(table, ApiTable):
        raise ConfigurationError(f"{import_string} is not an ApiTable")
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagewire",
        description="Serve pages, scripts and API handlers over HTTP.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host address")
    parser.add_argument("--port", type=int, default=9000, help="Bind port number")
    parser.add_argument("--root", default=".", help="Directory holding pages/ and js/")
    parser.add_argument(
        "--api",
        default=None,
        help="ApiTable import string (e.g. myapp.api:table)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Answer missing pages and API paths with a real 404",
    )
    parser.add_argument("--max-connections", type=int, default=100)
    parser.add_argument(
        "--request-timeout",
        type=float,
        default=30.0,
        help="Seconds to wait for a request head (0 disables)",
    )
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default="info",
        help="Logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pagewire`` command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ServerConfig(
            host=args.host,
            port=args.port,
            content_root=args.root,
            strict=args.strict,
            max_connections=args.max_connections,
            request_timeout=args.request_timeout or None,
        )
        api = resolve_api(args.api) if args.api else ApiTable()
    except (ConfigurationError, ImportError) as e:
        print(f"pagewire: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        PageServer(config, api=api).run()
    except KeyboardInterrupt:
        pass
