"""CLI entrypoint for checking versions against constraints.

Usage:
  version-constraints --constraint ">=1.2.3" --candidate 1.4.0
  version-constraints --manifest dependencies.json [--warn-only] [--summary]
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from .checker import check_manifest
from .config import load_manifest
from .errors import ConfigError, ConstraintError
from .logging_ import setup_logging
from .models.version import Version
from .parsers.comparator import parse_version_comparator
from .summary import render_summary

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_ALLOWED = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check versions against constraints")
    parser.add_argument("--constraint", type=str, default=None, help="Constraint such as '>=1.2.3'")
    parser.add_argument("--candidate", type=str, default=None, help="Version to test")
    parser.add_argument(
        "--manifest",
        type=str,
        default=None,
        help="Path to a JSON dependency manifest (defaults to $VERSION_CONSTRAINTS_MANIFEST "
        "or dependencies.json)",
    )
    parser.add_argument("--warn-only", action="store_true", help="Exit 0 even with findings")
    parser.add_argument("--summary", action="store_true", help="Print a Markdown summary")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if (args.constraint is None) != (args.candidate is None):
        parser.error("--constraint and --candidate must be given together")
    if args.constraint is not None and args.manifest is not None:
        parser.error("--manifest cannot be combined with --constraint")
    return args


def _check_single(constraint: str, candidate: str) -> int:
    comparator = parse_version_comparator(constraint)
    version = Version.parse(candidate)
    if comparator.allows(version):
        print(f"{candidate} fulfills '{constraint}'")
        return EXIT_OK
    print(f"{candidate} does not fulfill '{constraint}'")
    return EXIT_NOT_ALLOWED


def _check_manifest(path: str | None, warn_only: bool, summary: bool) -> int:
    report = check_manifest(load_manifest(path))
    if summary:
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))

    if report["hasFindings"] and not warn_only:
        warn_env = os.getenv("VERSION_CONSTRAINTS_WARN_ONLY", "").strip().lower()
        if warn_env in {"1", "true", "yes", "y"}:
            return EXIT_OK
        return EXIT_NOT_ALLOWED
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.constraint is not None:
            return _check_single(args.constraint, args.candidate)
        return _check_manifest(args.manifest, args.warn_only, args.summary)
    except ConstraintError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
