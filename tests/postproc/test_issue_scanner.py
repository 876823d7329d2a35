"""Tests for refdoc.postproc.issues."""

from __future__ import annotations

from refdoc.postproc.issues import MISSING_EXAMPLE_CODE, IssueScanner


def test_scanner_reports_each_placeholder_with_its_method() -> None:
    markdown = (
        "# Lib\n\n## Full Reference\n\n"
        "### `Lib::foo()`\n\n#### Usage\n\nNo examples available\n\n"
        "### `Lib::bar()`\n\n#### Usage\n\n```code\nLib::bar(); // 1\n```\n\n"
        "### `Lib::baz()`\n\n#### Usage\n\nNo examples available\n"
    )
    issues = IssueScanner().scan(markdown)

    assert [issue.member for issue in issues] == ["Lib::foo()", "Lib::baz()"]
    assert all(issue.code == MISSING_EXAMPLE_CODE for issue in issues)
    assert issues[0].message == "No examples available for `Lib::foo()`"


def test_scanner_finds_nothing_in_clean_markdown() -> None:
    assert IssueScanner().scan("# Lib\n\nAll good.\n") == []


def test_placeholder_outside_methods_is_still_reported() -> None:
    issues = IssueScanner().scan("# Lib\n\nNo examples available\n")
    assert len(issues) == 1
    assert issues[0].member is None
    assert issues[0].message == "No examples available for the document"


def test_headings_inside_code_fences_are_ignored() -> None:
    markdown = "### `Lib::foo()`\n\n```code\n### not a heading\n```\n\nNo examples available\n"
    issues = IssueScanner().scan(markdown)
    assert issues[0].member == "Lib::foo()"
