"""Accumulate package, edge and library-usage state from dependency records."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence

from pkgdeps.analysis import (
    DEFAULT_TWO_SEGMENT_ROOTS,
    group_base_packages,
    roll_up_dependencies,
)
from pkgdeps.errors import RecordDecodeError
from pkgdeps.model import IngestStats, PackageInfo
from pkgdeps.names import split_class_name
from pkgdeps.records import DependencyRecord, decode_record, log_skipped

logger = logging.getLogger(__name__)

DEFAULT_LIBRARIES: tuple[str, ...] = ("struts", "commons", "log4j", "cryptix")


class PackageDependencyExtractor:
    """Owns all aggregation state for a single report run.

    Feed records with :meth:`ingest` or :meth:`ingest_lines`, then call
    :meth:`build_base_package_dependencies` once.  Instances are not meant
    to be shared between runs.
    """

    def __init__(
        self,
        libraries: Sequence[str] = DEFAULT_LIBRARIES,
        two_segment_roots: Collection[str] = DEFAULT_TWO_SEGMENT_ROOTS,
    ) -> None:
        # Trimmed and lower-cased, empties dropped, first occurrence wins.
        keywords = (lib.strip().lower() for lib in libraries)
        self.libraries: list[str] = list(dict.fromkeys(k for k in keywords if k))
        self.two_segment_roots = frozenset(two_segment_roots)

        self.packages: dict[str, PackageInfo] = {}
        self.dependencies: dict[str, set[str]] = {}
        self.artifact_packages: dict[str, set[str]] = {}
        self.library_classes: dict[str, set[str]] = {
            lib: set() for lib in self.libraries
        }
        self.stats = IngestStats()

        self.base_packages: dict[str, set[str]] = {}
        self.base_dependencies: dict[str, set[str]] = {}
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once the base-package pass has run."""
        return self._finished

    def ingest_lines(self, lines: Iterable[str]) -> IngestStats:
        """Decode and ingest JSONL *lines*, skipping (and logging) bad ones."""
        for number, line in enumerate(lines, start=1):
            self.stats.lines += 1
            if not line.strip():
                continue
            try:
                record = decode_record(line, number)
            except RecordDecodeError as e:
                self.stats.skipped += 1
                log_skipped(e)
                continue
            self.ingest(record)
        return self.stats

    def ingest(self, record: DependencyRecord) -> None:
        if self._finished:
            raise RuntimeError("cannot ingest after base packages were built")
        self.stats.records += 1

        src_pkg, src_class = split_class_name(record.source_class)
        self.add_package(src_pkg, src_class, is_external=False)

        tgt_pkg, tgt_class = split_class_name(record.target_class)
        # Prefix test on the raw (possibly array-wrapped) class name.
        is_external = not record.target_class.startswith(record.artifact_group)
        self.add_package(tgt_pkg, tgt_class, is_external=is_external)

        if src_pkg != tgt_pkg:
            self.dependencies.setdefault(src_pkg, set()).add(tgt_pkg)

        artifact = self.artifact_packages.setdefault(record.artifact_id, set())
        artifact.add(src_pkg)
        artifact.add(tgt_pkg)

        self.count_library_usage(record.target_class)

    def add_package(self, name: str, class_name: str, *, is_external: bool) -> None:
        """Register *class_name* in package *name*.

        The external flag is set when the package is first seen and never
        overwritten afterwards.
        """
        info = self.packages.get(name)
        if info is None:
            info = PackageInfo(name=name, is_external=is_external)
            self.packages[name] = info
        info.classes.add(class_name)

    def count_library_usage(self, target_class: str) -> None:
        lowered = target_class.lower()
        for lib in self.libraries:
            if lib in lowered:
                self.library_classes[lib].add(target_class)

    def library_usage(self) -> list[tuple[str, int]]:
        """Distinct matching class counts, in configured keyword order."""
        return [(lib, len(self.library_classes[lib])) for lib in self.libraries]

    def build_base_package_dependencies(self) -> dict[str, set[str]]:
        """Group packages into base packages and roll edges up to them."""
        self.base_packages = group_base_packages(
            self.packages, self.two_segment_roots
        )
        self.base_dependencies = roll_up_dependencies(
            self.dependencies, self.base_packages
        )
        self._finished = True
        logger.debug(
            "Base packages: %d (from %d packages), base edges: %d",
            len(self.base_packages),
            len(self.packages),
            sum(len(v) for v in self.base_dependencies.values()),
        )
        return self.base_dependencies
