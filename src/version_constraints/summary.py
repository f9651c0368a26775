"""Human-readable Markdown summary of a check report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of checked dependencies."""
    totals = report.get("totals", {})
    results = report.get("dependencies", [])

    lines = []
    lines.append("# version-constraints Summary")
    lines.append("")
    lines.append(
        f"Total dependencies: {totals.get('dependencies', 0)} | Findings: {totals.get('findings', 0)}"
    )
    lines.append("")
    lines.append("| Dependency | Type | Constraint | Installed | Status |")
    lines.append("| --- | --- | --- | --- | --- |")

    for result in results:
        name = result.get("name", "")
        if result.get("optional"):
            name += " (optional)"
        dep_type = result.get("type", "")
        constraint = result.get("version") or "any"
        installed = result.get("installed") or "n/a"
        status = "ok" if result.get("ok") else result.get("problem", "")
        lines.append(f"| {name} | {dep_type} | {constraint} | {installed} | {status} |")

    if not results:
        lines.append("| (no dependencies declared) | n/a | n/a | n/a | ok |")

    return "\n".join(lines) + "\n"
