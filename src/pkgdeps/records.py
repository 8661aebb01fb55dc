"""Decode JSONL dependency records produced by bytecode analysis."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from pkgdeps.errors import InputUnavailableError, RecordDecodeError

logger = logging.getLogger(__name__)

# JSON key -> DependencyRecord attribute
_REQUIRED_FIELDS = {
    "sourceClass": "source_class",
    "targetClass": "target_class",
    "artifactId": "artifact_id",
    "artifactGroup": "artifact_group",
}
_OPTIONAL_FIELDS = {
    "appSetName": "app_set_name",
    "applicationName": "application_name",
    "artifactFileName": "artifact_file_name",
    "artifactVersion": "artifact_version",
    "sourceMethod": "source_method",
    "targetMethod": "target_method",
}

_MAX_LOGGED_LINE = 200


@dataclass(frozen=True)
class DependencyRecord:
    """One method-level call edge between two classes."""

    source_class: str
    target_class: str
    artifact_id: str
    artifact_group: str
    # Carried along but not used for aggregation.
    app_set_name: str | None = None
    application_name: str | None = None
    artifact_file_name: str | None = None
    artifact_version: str | None = None
    source_method: str | None = None
    target_method: str | None = None


def decode_record(line: str, line_number: int | None = None) -> DependencyRecord:
    """Parse one JSONL line into a :class:`DependencyRecord`.

    Raises :class:`RecordDecodeError` if the line is not a JSON object or any
    of the four required fields is missing or not a string.  Unknown keys are
    ignored.
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise RecordDecodeError(line, f"invalid JSON ({e})", line_number) from e

    if not isinstance(data, dict):
        raise RecordDecodeError(
            line, f"expected a JSON object, got {type(data).__name__}", line_number
        )

    kwargs: dict[str, str | None] = {}
    for key, attr in _REQUIRED_FIELDS.items():
        value = data.get(key)
        if value is None:
            raise RecordDecodeError(line, f"missing field '{key}'", line_number)
        if not isinstance(value, str):
            raise RecordDecodeError(
                line, f"field '{key}' must be a string", line_number
            )
        kwargs[attr] = value

    for key, attr in _OPTIONAL_FIELDS.items():
        value = data.get(key)
        kwargs[attr] = value if isinstance(value, str) else None

    return DependencyRecord(**kwargs)  # type: ignore[arg-type]


def read_lines(path: Path | str) -> Iterator[str]:
    """Yield lines from *path* (or stdin for ``-``) without their line endings.

    Lines are streamed, never buffered as a whole.  Undecodable bytes are
    replaced, so a bad line fails JSON decoding and is skipped instead of
    ending the run.  Failure to open or read the source raises
    :class:`InputUnavailableError`.
    """
    if str(path) == "-":
        stream = sys.stdin
        try:
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(errors="replace")
            for line in stream:
                yield line.rstrip("\r\n")
        except OSError as e:
            raise InputUnavailableError("-", str(e)) from e
        return

    path = Path(path)
    if not path.exists():
        raise InputUnavailableError(path, "file does not exist")
    if path.is_dir():
        raise InputUnavailableError(path, "is a directory")

    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except OSError as e:
        raise InputUnavailableError(path, str(e)) from e


def log_skipped(error: RecordDecodeError) -> None:
    shown = error.line
    if len(shown) > _MAX_LOGGED_LINE:
        shown = shown[:_MAX_LOGGED_LINE] + "..."
    logger.warning(
        "Error parsing line %s: %s (%s)", error.line_number, shown, error.reason
    )
