"""Render a PackageReport to JSON."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from pkgdeps.model import PackageReport


def _report_to_json(report: PackageReport) -> str:
    """Serialize *report*; ``base_packages`` is included for convenience."""
    data = asdict(report)
    data["base_packages"] = report.base_packages
    return json.dumps(data, indent=2)


def render_json(report: PackageReport, output_path: Path) -> None:
    """Write the JSON report to *output_path*."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(_report_to_json(report) + "\n", encoding="utf-8")
