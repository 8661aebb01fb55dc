"""Orchestrator: read -> aggregate -> report -> render."""

from __future__ import annotations

import logging
from pathlib import Path

from pkgdeps.config import PkgDepsConfig
from pkgdeps.errors import OutputUnwritableError
from pkgdeps.extractor import PackageDependencyExtractor
from pkgdeps.model import PackageReport
from pkgdeps.records import read_lines
from pkgdeps.renderer import RENDERERS
from pkgdeps.report import build_report

logger = logging.getLogger(__name__)


def analyze(input_path: Path | str, config: PkgDepsConfig) -> PackageReport:
    """Read *input_path* and return the report model.

    Raises :class:`~pkgdeps.errors.InputUnavailableError` if the input
    cannot be read; undecodable lines are only logged.
    """
    extractor = PackageDependencyExtractor(
        libraries=config.libraries,
        two_segment_roots=config.two_segment_roots,
    )

    logger.info("Parsing dependencies from %s...", input_path)
    stats = extractor.ingest_lines(read_lines(input_path))
    logger.info(
        "Read %d lines: %d records, %d skipped; %d packages, %d package edges",
        stats.lines,
        stats.records,
        stats.skipped,
        len(extractor.packages),
        sum(len(v) for v in extractor.dependencies.values()),
    )

    extractor.build_base_package_dependencies()
    return build_report(extractor)


def write_report(report: PackageReport, output_path: Path, fmt: str) -> None:
    """Render *report* to *output_path*, creating parent directories."""
    renderer = RENDERERS[fmt]
    try:
        renderer(report, output_path)
    except OSError as e:
        raise OutputUnwritableError(output_path, str(e)) from e


def run(input_path: Path | str, config: PkgDepsConfig | None = None) -> Path:
    """Run the full pipeline and return the output path."""
    config = config or PkgDepsConfig()
    report = analyze(input_path, config)

    out_path = config.output_path
    logger.info("Generating %s output to %s...", config.format, out_path)
    write_report(report, out_path, config.format)
    logger.info("Report written to %s", out_path)
    return out_path
