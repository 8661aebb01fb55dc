"""Render a PackageReport to a Markdown document."""

from __future__ import annotations

from pathlib import Path
from string import Template

from pkgdeps.model import BasePackageDetail, PackageReport

_TEMPLATE_PATH = Path(__file__).with_name("template.md")


def _code(name: str) -> str:
    return f"`{name}`"


def _bullets(names: list[str], indent: str = "") -> str:
    return "".join(f"{indent}- {_code(n)}\n" for n in names)


def _library_section(report: PackageReport) -> str:
    if not report.library_usage:
        return ""
    rows = "".join(
        f"| {_code(u.keyword)} | {u.count} |\n" for u in report.library_usage
    )
    return f"## Library Usage\n\n| Library | Classes |\n| --- | --- |\n{rows}\n"


def _base_packages_section(report: PackageReport) -> str:
    out = ""
    if report.external_packages:
        out += "### External Dependencies\n\n"
        out += _bullets(report.external_packages) + "\n"
    if report.internal_packages:
        out += "### Internal Packages\n\n"
        out += _bullets(report.internal_packages) + "\n"
    return out


def _relationships_section(report: PackageReport) -> str:
    if not report.dependencies:
        return "*No dependencies between base packages found.*\n\n"
    out = ""
    for source, targets in report.dependencies.items():
        out += f"- {_code(source)} depends on:\n" + _bullets(targets, "  ") + "\n"
    return out


def _detail_block(detail: BasePackageDetail) -> str:
    kind = "External Dependency" if detail.is_external else "Internal Package"
    deps = ", ".join(_code(d) for d in detail.dependencies) or "None"
    out = (
        f"### {_code(detail.name)}\n\n"
        f"- **Type**: {kind}\n"
        f"- **Sub-packages**: {detail.sub_package_count}\n"
        f"- **Classes**: {detail.class_count}\n"
        f"- **Dependencies**: {deps}\n\n"
    )
    if detail.sub_packages:
        out += "Includes these sub-packages:\n\n"
        out += _bullets(detail.sub_packages) + "\n"
    return out


def markdown_text(report: PackageReport) -> str:
    """Return the Markdown document for *report*."""
    template = Template(_TEMPLATE_PATH.read_text(encoding="utf-8"))
    return template.safe_substitute(
        LIBRARY_USAGE=_library_section(report),
        BASE_PACKAGES=_base_packages_section(report),
        RELATIONSHIPS=_relationships_section(report),
        DETAILS="".join(_detail_block(d) for d in report.details),
    )


def render_markdown(report: PackageReport, output_path: Path) -> None:
    """Write the Markdown report to *output_path*."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markdown_text(report), encoding="utf-8")
