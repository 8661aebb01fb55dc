"""Post-ingestion analysis: base-package grouping and dependency rollup."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping

from pkgdeps.model import PackageInfo

# Top-level namespaces whose base package is only two segments deep.  The
# classic rule set is {java, javax, org, com, net}; "com" is left out so that
# com.<org>.<product> packages keep three segments.
DEFAULT_TWO_SEGMENT_ROOTS: tuple[str, ...] = ("java", "javax", "org", "net")


def base_package_of(
    package_name: str,
    two_segment_roots: Collection[str] = DEFAULT_TWO_SEGMENT_ROOTS,
) -> str | None:
    """Return the base package for *package_name*, or None if it has < 2 segments.

    Packages under one of *two_segment_roots* collapse to two segments
    (``java.lang.reflect`` -> ``java.lang``); anything else keeps up to
    three (``com.example.sample.component`` -> ``com.example.sample``,
    ``x.y`` -> ``x.y``).
    """
    segments = package_name.split(".")
    if len(segments) < 2:
        return None
    if segments[0] in two_segment_roots:
        return ".".join(segments[:2])
    return ".".join(segments[:3])


def group_base_packages(
    package_names: Iterable[str],
    two_segment_roots: Collection[str] = DEFAULT_TWO_SEGMENT_ROOTS,
) -> dict[str, set[str]]:
    """Group fine package names under their base package.

    Packages with fewer than two segments (including the default package
    ``""``) are left out.
    """
    groups: dict[str, set[str]] = {}
    for name in package_names:
        base = base_package_of(name, two_segment_roots)
        if base is None:
            continue
        groups.setdefault(base, set()).add(name)
    return groups


def roll_up_dependencies(
    dependencies: Mapping[str, Iterable[str]],
    groups: Mapping[str, Iterable[str]],
) -> dict[str, set[str]]:
    """Project fine package edges onto base packages.

    Edges whose endpoints share a base package, or where either endpoint
    has no base package, are dropped.  A source base only gets an entry
    once it has at least one surviving edge.
    """
    package_to_base: dict[str, str] = {}
    for base, members in groups.items():
        for member in members:
            package_to_base[member] = base

    rolled: dict[str, set[str]] = {}
    for src_pkg, tgt_pkgs in dependencies.items():
        src_base = package_to_base.get(src_pkg)
        if src_base is None:
            continue
        for tgt_pkg in tgt_pkgs:
            tgt_base = package_to_base.get(tgt_pkg)
            if tgt_base is None or tgt_base == src_base:
                continue
            rolled.setdefault(src_base, set()).add(tgt_base)
    return rolled


def is_external_base(
    members: Iterable[str], packages: Mapping[str, PackageInfo]
) -> bool:
    """True if any member package of a base package was registered external."""
    return any(packages[name].is_external for name in members if name in packages)
