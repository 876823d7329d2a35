"""Tests for refdoc.examples.extractor."""

from __future__ import annotations

import pytest

from refdoc.errors import ExampleSourceError
from refdoc.examples.extractor import (
    Example,
    ExampleExtractor,
    ExampleSet,
    find_declaration_line,
    stringify_result,
)

SOURCE = """<?php

$examples = examples([
    Number::format(1),
    Number::spell(2),
    Number::ordinal(3),
]);
"""


def test_results_pair_with_consecutive_source_lines() -> None:
    examples = ExampleExtractor().extract(SOURCE, 4, ["1.00", "two", "3rd"])

    assert list(examples) == [
        Example("Number::format(1)", "1.00"),
        Example("Number::spell(2)", "two"),
        Example("Number::ordinal(3)", "3rd"),
    ]


def test_examples_for_method_selects_matching_prefix() -> None:
    examples = ExampleExtractor().extract(SOURCE, 4, ["1.00", "two", "3rd"])

    matches = examples.examples_for_method("Number", "spell")

    assert len(matches) == 1
    assert matches[0].source_expression == "Number::spell(2)"
    assert matches[0].evaluated_result == "two"


def test_examples_for_method_returns_empty_list_when_missing() -> None:
    examples = ExampleExtractor().extract(SOURCE, 4, ["1.00"])
    assert examples.examples_for_method("Number", "spell") == []
    assert examples.examples_for_method("Other", "format") == []


def test_examples_for_method_does_not_match_longer_method_names() -> None:
    examples = ExampleExtractor().from_pairs(
        [("Number::spellOut(2)", "two"), ("Number::spell(3)", "three")]
    )
    matches = examples.examples_for_method("Number", "spell")
    assert [example.source_expression for example in matches] == ["Number::spell(3)"]


def test_examples_for_method_preserves_declaration_order() -> None:
    examples = ExampleSet(
        [
            Example("Number::spell(1)", "one"),
            Example("Number::format(1)", "1.00"),
            Example("Number::spell(2)", "two"),
        ]
    )
    matches = examples.examples_for_method("Number", "spell")
    assert [example.evaluated_result for example in matches] == ["one", "two"]


def test_separator_characters_are_trimmed() -> None:
    source = "\t  Number::spell(2),\x00\r\n"
    examples = ExampleExtractor().extract(source, 1, ["two"])
    assert list(examples)[0].source_expression == "Number::spell(2)"


def test_results_past_end_of_source_raise() -> None:
    with pytest.raises(ExampleSourceError):
        ExampleExtractor().extract("Number::spell(2),\n", 1, ["two", "three"])


def test_start_line_must_be_positive() -> None:
    with pytest.raises(ExampleSourceError):
        ExampleExtractor().extract(SOURCE, 0, ["x"])


def test_marker_locates_declaration_start() -> None:
    assert find_declaration_line(SOURCE, "examples([") == 4
    examples = ExampleExtractor().extract_marked(SOURCE, "examples([", [True, None, 3])
    assert [example.evaluated_result for example in examples] == ["true", "null", "3"]


def test_unknown_marker_raises() -> None:
    with pytest.raises(ExampleSourceError):
        find_declaration_line(SOURCE, "nope(")


def test_example_renders_with_result_comment() -> None:
    assert Example("Number::spell(2)", "two").render() == "Number::spell(2); // two"


def test_stringify_keeps_strings_verbatim() -> None:
    assert stringify_result("'two'") == "'two'"
    assert stringify_result(1.5) == "1.5"
    assert stringify_result(False) == "false"


def test_form_feed_and_unicode_separators_do_not_shift_lines() -> None:
    source = "<?php\n$sep = '\x0c';\n$para = '\u2028';\n$examples = examples([\n    Number::spell(2),\n]);\n"

    examples = ExampleExtractor().extract(source, 5, ["two"])

    assert list(examples) == [Example("Number::spell(2)", "two")]
    assert find_declaration_line(source, "examples([") == 5
