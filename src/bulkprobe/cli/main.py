from __future__ import annotations

"""
bulkprobe, concurrent HTTP probing with payload shape detection.
Copyright (C) 2025  Theori Inc.

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published
by the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

"""bulkprobe CLI."""

import argparse
import logging
import os
import sys

import colorama

from ..config import (
    DEFAULT_BLOCKED_EXTENSIONS,
    DEFAULT_BLOCKED_STATUSES,
    HttpSettings,
    ProbeConfig,
    default_workers,
    load_http_settings,
    parse_status_blocklist,
)
from ..errors import BulkProbeError, SetupError
from ..log import setup_logging
from ..models import FieldSelection, Verb
from ..runtime import BulkProbe
from ..scan.targets import parse_extension_blocklist
from ..version import __version__

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bulkprobe",
        description="Send one HTTP request per URL concurrently and summarize each response on one line",
    )
    parser.add_argument("url_or_file", help="URL or file with one URL per line")
    parser.add_argument("-X", "--verb", type=str.upper, choices=[v.value for v in Verb], default=Verb.GET.value, help="HTTP verb")
    parser.add_argument("-d", "--data", default="", help="Raw request body, sent with every verb")
    parser.add_argument(
        "-p",
        "--workers",
        type=_positive_int,
        default=default_workers(),
        help="Number of parallel threads sending requests",
    )
    parser.add_argument("--timeout", type=_positive_float, default=None, help="Per-request timeout in seconds")
    parser.add_argument(
        "--filter-ext",
        default=DEFAULT_BLOCKED_EXTENSIONS,
        help="Comma-separated URL suffixes to skip (empty string disables)",
    )
    parser.add_argument(
        "--filter-status",
        default=DEFAULT_BLOCKED_STATUSES,
        help="Comma-separated status codes to hide",
    )
    parser.add_argument("--all", action="store_true", help="Display all statuses (ignores --filter-status)")
    parser.add_argument("-o", "--output", default=None, help="Write the size-sorted results to this file")

    fields = parser.add_argument_group("columns")
    fields.add_argument("--no-status", action="store_true", help="Hide the status code")
    fields.add_argument("--no-size", action="store_true", help="Hide the response size")
    fields.add_argument("--no-verb", action="store_true", help="Hide the HTTP verb")
    fields.add_argument("--no-format", action="store_true", help="Hide the detected payload format")
    fields.add_argument("--no-keys", action="store_true", help="Hide the extracted JSON/XML keys")
    fields.add_argument("--no-content-type", action="store_true", help="Hide the Content-Type header")
    fields.add_argument("--no-url", action="store_true", help="Hide the URL")
    fields.add_argument("-b", "--body", action="store_true", help="Show the response body")

    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--verify-ssl",
        action="store_true",
        help="Verify TLS certificates and hostnames (disabled by default for probing lab hosts)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log failed and filtered requests to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _use_color(args: argparse.Namespace) -> bool:
    if args.no_color or os.getenv("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def build_config(args: argparse.Namespace) -> ProbeConfig:
    """Translate parsed arguments into the immutable run configuration."""
    fields = FieldSelection(
        status=not args.no_status,
        size=not args.no_size,
        verb=not args.no_verb,
        format=not args.no_format,
        keys=not args.no_keys,
        content_type=not args.no_content_type,
        url=not args.no_url,
        body=args.body,
    )
    blocked_statuses = frozenset() if args.all else parse_status_blocklist(args.filter_status)
    return ProbeConfig(
        verb=Verb.parse(args.verb),
        body=args.data or "",
        workers=args.workers,
        blocked_extensions=parse_extension_blocklist(args.filter_ext),
        blocked_statuses=blocked_statuses,
        output=args.output,
        fields=fields,
        color=_use_color(args),
        timeout=args.timeout,
    )


def build_http_settings(args: argparse.Namespace) -> HttpSettings:
    settings = load_http_settings()
    if args.timeout is not None:
        settings.timeout = args.timeout
    if args.verify_ssl:
        settings.verify_ssl = True
    return settings


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)
    colorama.just_fix_windows_console()

    try:
        config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        with BulkProbe(config, http_settings=build_http_settings(args)) as probe:
            probe.run(args.url_or_file)
    except SetupError as exc:
        logger.error("Setup failed: %s", exc)
        return 1
    except (BulkProbeError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
