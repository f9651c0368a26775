"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any


def aggregate(results: list[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate per-dependency results into a single report.

    The input ``results`` is expected to be a list of dicts with at least
    ``name``, ``ok`` and ``problem`` keys, as produced by the checker.
    Totals and the top-level flag are computed; results pass through as is.
    """

    total_findings = sum(1 for r in results if not r.get("ok"))

    report: dict[str, Any] = {
        "version": "1",
        "hasFindings": total_findings > 0,
        "dependencies": results,
        "totals": {
            "dependencies": len(results),
            "findings": total_findings,
        },
    }

    return report
