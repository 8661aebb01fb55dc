"""pkgdeps — roll class-level Java call dependencies up to base packages."""

from __future__ import annotations

from pkgdeps.extractor import PackageDependencyExtractor
from pkgdeps.model import PackageReport
from pkgdeps.report import build_report

__all__ = ["PackageDependencyExtractor", "PackageReport", "build_report"]
