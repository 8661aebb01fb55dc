from __future__ import annotations

import json

import pytest

from pkgdeps.records import DependencyRecord


def _record(
    source: str,
    target: str,
    group: str = "com.example",
    artifact: str = "m1",
) -> DependencyRecord:
    return DependencyRecord(
        source_class=source,
        target_class=target,
        artifact_id=artifact,
        artifact_group=group,
    )


def _record_line(
    source: str,
    target: str,
    group: str = "com.example",
    artifact: str = "m1",
    **extra,
) -> str:
    data = {
        "appSetName": "set",
        "applicationName": "app",
        "artifactFileName": f"{artifact}.jar",
        "artifactId": artifact,
        "artifactGroup": group,
        "artifactVersion": "1.0",
        "sourceClass": source,
        "sourceMethod": "run",
        "targetClass": target,
        "targetMethod": "call",
    }
    data.update(extra)
    return json.dumps(data)


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def make_line():
    return _record_line


@pytest.fixture
def jsonl_file(tmp_path):
    def _write(lines: list[str], name: str = "deps.jsonl"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
