from __future__ import annotations

import logging

import pytest

from pkgdeps.extractor import PackageDependencyExtractor


def test_source_and_target_packages_registered(make_record):
    ex = PackageDependencyExtractor()
    ex.ingest(
        make_record(
            "com.example.SourceClass", "java.lang.String", artifact="exampleModule"
        )
    )

    assert ex.packages["com.example"].classes == {"SourceClass"}
    assert ex.packages["com.example"].is_external is False
    assert ex.packages["java.lang"].classes == {"String"}
    assert ex.packages["java.lang"].is_external is True
    assert ex.dependencies == {"com.example": {"java.lang"}}
    assert ex.artifact_packages == {"exampleModule": {"com.example", "java.lang"}}


def test_classes_accumulate_per_package(make_record):
    ex = PackageDependencyExtractor()
    ex.ingest(make_record("com.example.A", "java.lang.String"))
    ex.ingest(make_record("com.example.A", "java.lang.Integer"))
    assert ex.packages["java.lang"].classes == {"String", "Integer"}
    assert ex.packages["com.example"].classes == {"A"}


def test_same_package_edge_is_not_tracked(make_record):
    ex = PackageDependencyExtractor()
    ex.ingest(make_record("com.example.SourceClass", "com.example.TargetClass"))
    assert ex.packages["com.example"].classes == {"SourceClass", "TargetClass"}
    assert ex.dependencies == {}


def test_array_target_in_same_package(make_record):
    ex = PackageDependencyExtractor()
    ex.ingest(make_record("com.example.Enum$Value", "[Lcom.example.Enum$Value;"))
    assert ex.packages["com.example"].classes == {"Enum$Value"}
    assert ex.dependencies == {}


def test_external_check_uses_wrapped_target_name(make_record):
    ex = PackageDependencyExtractor()
    # "[Lcom.example..." does not start with "com.example"
    ex.ingest(make_record("acme.app.Main", "[Lcom.example.model.Item;"))
    assert ex.packages["com.example.model"].is_external is True


def test_external_flag_first_write_wins(make_record):
    ex = PackageDependencyExtractor()
    ex.ingest(make_record("com.example.app.A", "org.acme.util.Helper"))
    assert ex.packages["org.acme.util"].is_external is True
    # Same package seen later as internal: flag is not overwritten.
    ex.ingest(make_record("org.acme.core.B", "org.acme.util.Other", group="org.acme"))
    assert ex.packages["org.acme.util"].is_external is True
    assert ex.packages["org.acme.util"].classes == {"Helper", "Other"}


def test_internal_first_then_external_stays_internal(make_record):
    ex = PackageDependencyExtractor()
    ex.ingest(make_record("com.example.app.A", "java.lang.Object"))
    ex.ingest(make_record("java.lang.Thread", "com.example.app.A", group="java"))
    assert ex.packages["com.example.app"].is_external is False


def test_edges_are_deduplicated(make_record):
    ex = PackageDependencyExtractor()
    for _ in range(3):
        ex.ingest(make_record("com.example.A", "java.util.List"))
    assert ex.dependencies == {"com.example": {"java.util"}}


def test_library_counts_distinct_exact_strings(make_record):
    ex = PackageDependencyExtractor(libraries=["log4j"])
    ex.ingest(make_record("com.example.A", "org.apache.log4j.Logger"))
    ex.ingest(make_record("com.example.B", "org.apache.log4j.Logger"))
    ex.ingest(make_record("com.example.B", "org.apache.log4j.Level"))
    assert ex.library_usage() == [("log4j", 2)]


def test_library_matching_is_case_insensitive_substring(make_record):
    ex = PackageDependencyExtractor(libraries=["Commons"])
    ex.ingest(make_record("com.example.A", "org.apache.Commons.Lang"))
    ex.ingest(make_record("com.example.A", "acme.mycommonsstuff.Foo"))
    assert ex.libraries == ["commons"]
    assert ex.library_classes["commons"] == {
        "org.apache.Commons.Lang",
        "acme.mycommonsstuff.Foo",
    }


def test_library_usage_keeps_configured_order():
    ex = PackageDependencyExtractor(libraries=["log4j", "struts", "log4j"])
    assert ex.library_usage() == [("log4j", 0), ("struts", 0)]


def test_no_libraries_means_empty_usage(make_record):
    ex = PackageDependencyExtractor(libraries=[])
    ex.ingest(make_record("com.example.A", "org.apache.struts.Action"))
    assert ex.library_usage() == []


def test_ingest_lines_skips_bad_lines(caplog, make_line):
    ex = PackageDependencyExtractor()
    lines = [
        make_line("com.example.A", "java.lang.Object"),
        "",
        "not json",
        '{"sourceClass": "com.example.A"}',
        "   ",
        make_line("com.example.B", "java.util.List"),
    ]
    with caplog.at_level(logging.WARNING, logger="pkgdeps"):
        stats = ex.ingest_lines(lines)

    assert stats.lines == 6
    assert stats.records == 2
    assert stats.skipped == 2
    assert ex.dependencies == {"com.example": {"java.lang", "java.util"}}
    messages = [r.getMessage() for r in caplog.records]
    assert any("line 3" in m and "not json" in m for m in messages)
    assert any("line 4" in m and "sourceClass" in m for m in messages)


def test_ingest_after_build_is_rejected(make_record):
    ex = PackageDependencyExtractor()
    ex.build_base_package_dependencies()
    assert ex.finished
    with pytest.raises(RuntimeError):
        ex.ingest(make_record("com.example.A", "java.lang.Object"))


def test_blank_keywords_are_dropped(make_record):
    ex = PackageDependencyExtractor(libraries=["", " Log4J ", "  "])
    ex.ingest(make_record("com.example.A", "java.lang.Object"))
    assert ex.libraries == ["log4j"]
    assert ex.library_usage() == [("log4j", 0)]
