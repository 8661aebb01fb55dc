"""Data model for package aggregation state and the final report."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PackageInfo:
    """A fine-grained Java package and the simple class names seen in it."""

    name: str
    classes: set[str] = field(default_factory=set)
    is_external: bool = False  # first registration wins


@dataclass
class IngestStats:
    """Counters for one ingestion run."""

    lines: int = 0
    records: int = 0
    skipped: int = 0


@dataclass
class LibraryUsage:
    keyword: str
    count: int


@dataclass
class BasePackageDetail:
    """Per-base-package section of the report."""

    name: str
    is_external: bool
    sub_package_count: int
    class_count: int
    dependencies: list[str] = field(default_factory=list)  # empty means "None"
    sub_packages: list[str] = field(default_factory=list)


@dataclass
class PackageReport:
    """Read-only projection handed to a renderer.

    All lists are sorted; ``library_usage`` follows the configured keyword
    order.
    """

    library_usage: list[LibraryUsage] = field(default_factory=list)
    external_packages: list[str] = field(default_factory=list)
    internal_packages: list[str] = field(default_factory=list)
    dependencies: dict[str, list[str]] = field(default_factory=dict)
    details: list[BasePackageDetail] = field(default_factory=list)
    artifact_packages: dict[str, list[str]] = field(default_factory=dict)

    @property
    def base_packages(self) -> list[str]:
        return sorted(self.external_packages + self.internal_packages)
