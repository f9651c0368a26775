#!/usr/bin/env python3
"""Local entrypoint to run the checker from a source checkout.

Usage:
  python scripts/check.py --manifest dependencies.json [--warn-only] [--summary]
  python scripts/check.py --constraint ">=1.2.3" --candidate 1.4.0

This calls the same main as the installed version-constraints command.
"""

from __future__ import annotations

from version_constraints.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
