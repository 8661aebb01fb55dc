"""Configuration: defaults, optional TOML config files, CLI overrides."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pkgdeps.analysis import DEFAULT_TWO_SEGMENT_ROOTS
from pkgdeps.extractor import DEFAULT_LIBRARIES

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("package-dependencies.md")
FORMATS = ("markdown", "json")


@dataclass
class PkgDepsConfig:
    libraries: list[str] = field(default_factory=lambda: list(DEFAULT_LIBRARIES))
    two_segment_roots: list[str] = field(
        default_factory=lambda: list(DEFAULT_TWO_SEGMENT_ROOTS)
    )
    output: Path | None = None
    format: str = "markdown"

    @property
    def output_path(self) -> Path:
        return self.output or DEFAULT_OUTPUT


def parse_name_list(value: str | list[str]) -> list[str]:
    """Normalize a name list given as ``"a, b"`` or ``["a", "b"]``.

    Entries are trimmed and lower-cased; empty and repeated entries are
    dropped.
    """
    items = value.split(",") if isinstance(value, str) else value
    keywords = (str(item).strip().lower() for item in items)
    return list(dict.fromkeys(k for k in keywords if k))


def _load_toml(path: Path) -> dict:
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        return tomllib.load(f)


def read_config_file(directory: Path) -> dict:
    """Return the pkgdeps settings table from .pkgdeps.toml or pyproject.toml."""
    # Try .pkgdeps.toml first
    pkgdeps_toml = directory / ".pkgdeps.toml"
    if pkgdeps_toml.exists():
        try:
            return _load_toml(pkgdeps_toml).get("pkgdeps", {})
        except (OSError, ValueError) as e:
            logger.debug("Could not read %s: %s", pkgdeps_toml, e)

    # Fall back to [tool.pkgdeps] in pyproject.toml
    pyproject = directory / "pyproject.toml"
    if pyproject.exists():
        try:
            return _load_toml(pyproject).get("tool", {}).get("pkgdeps", {})
        except (OSError, ValueError) as e:
            logger.debug("Could not read %s: %s", pyproject, e)

    return {}


def load_config(directory: Path | None = None) -> PkgDepsConfig:
    """Build a config from defaults overlaid with any config file in *directory*."""
    config = PkgDepsConfig()
    settings = read_config_file(directory or Path.cwd())

    for key in ("libraries", "two_segment_roots"):
        if key not in settings:
            continue
        value = settings[key]
        if isinstance(value, str) or (
            isinstance(value, list) and all(isinstance(v, str) for v in value)
        ):
            setattr(config, key, parse_name_list(value))
        else:
            logger.warning("Ignoring invalid %s value %r in config", key, value)
    if settings.get("output"):
        config.output = Path(settings["output"])
    fmt = settings.get("format")
    if fmt in FORMATS:
        config.format = fmt
    elif fmt is not None:
        logger.warning("Ignoring unknown output format %r in config", fmt)

    return config
