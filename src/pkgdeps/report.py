"""Assemble the read-only report model from a finished extractor."""

from __future__ import annotations

import logging

from pkgdeps.analysis import is_external_base
from pkgdeps.extractor import PackageDependencyExtractor
from pkgdeps.model import BasePackageDetail, LibraryUsage, PackageReport

logger = logging.getLogger(__name__)


def build_report(extractor: PackageDependencyExtractor) -> PackageReport:
    """Project the extractor's final state into a :class:`PackageReport`.

    Runs the base-package pass first if the caller has not done so.
    """
    if not extractor.finished:
        extractor.build_base_package_dependencies()

    groups = extractor.base_packages
    base_deps = extractor.base_dependencies
    report = PackageReport(
        library_usage=[
            LibraryUsage(keyword=lib, count=count)
            for lib, count in extractor.library_usage()
        ],
    )

    for base in sorted(groups):
        members = groups[base]
        external = is_external_base(members, extractor.packages)
        if external:
            report.external_packages.append(base)
        else:
            report.internal_packages.append(base)

        # Not deduplicated across sub-packages.
        class_count = sum(len(extractor.packages[pkg].classes) for pkg in members)
        report.details.append(
            BasePackageDetail(
                name=base,
                is_external=external,
                sub_package_count=len(members),
                class_count=class_count,
                dependencies=sorted(base_deps.get(base, ())),
                sub_packages=sorted(members),
            )
        )

    report.dependencies = {
        src: sorted(targets) for src, targets in sorted(base_deps.items()) if targets
    }
    report.artifact_packages = {
        artifact: sorted(pkgs)
        for artifact, pkgs in sorted(extractor.artifact_packages.items())
    }

    logger.debug(
        "Report: %d external, %d internal base packages",
        len(report.external_packages),
        len(report.internal_packages),
    )
    return report
