from __future__ import annotations

import logging
from pathlib import Path

from pkgdeps.config import DEFAULT_OUTPUT, load_config, parse_name_list


def test_parse_name_list():
    assert parse_name_list("Struts, ,Log4J,struts") == ["struts", "log4j"]
    assert parse_name_list([" A ", "b"]) == ["a", "b"]
    assert parse_name_list("") == []


def test_defaults(tmp_path):
    config = load_config(tmp_path)
    assert config.libraries == ["struts", "commons", "log4j", "cryptix"]
    assert config.two_segment_roots == ["java", "javax", "org", "net"]
    assert config.output_path == DEFAULT_OUTPUT
    assert config.format == "markdown"


def test_pkgdeps_toml(tmp_path):
    (tmp_path / ".pkgdeps.toml").write_text(
        '[pkgdeps]\nlibraries = "Spring, hibernate"\noutput = "out/deps.json"\n'
        'format = "json"\n',
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.libraries == ["spring", "hibernate"]
    assert config.output_path == Path("out/deps.json")
    assert config.format == "json"


def test_pyproject_tool_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.pkgdeps]\nlibraries = ["Log4j"]\n'
        'two_segment_roots = ["java", "com"]\n',
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.libraries == ["log4j"]
    assert config.two_segment_roots == ["java", "com"]


def test_broken_config_is_ignored(tmp_path):
    (tmp_path / ".pkgdeps.toml").write_text("[pkgdeps\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.libraries == ["struts", "commons", "log4j", "cryptix"]


def test_unknown_format_is_ignored(tmp_path):
    (tmp_path / ".pkgdeps.toml").write_text(
        '[pkgdeps]\nformat = "html"\n', encoding="utf-8"
    )
    assert load_config(tmp_path).format == "markdown"


def test_invalid_name_lists_are_ignored(tmp_path, caplog):
    (tmp_path / ".pkgdeps.toml").write_text(
        "[pkgdeps]\nlibraries = 5\ntwo_segment_roots = [1, 2]\n", encoding="utf-8"
    )
    with caplog.at_level(logging.WARNING, logger="pkgdeps"):
        config = load_config(tmp_path)
    assert config.libraries == ["struts", "commons", "log4j", "cryptix"]
    assert config.two_segment_roots == ["java", "javax", "org", "net"]
    assert any("invalid libraries" in r.getMessage() for r in caplog.records)
