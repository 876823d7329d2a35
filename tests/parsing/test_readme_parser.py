"""Tests for refdoc.parsing.readme."""

from __future__ import annotations

import pytest

from refdoc.errors import MalformedDocument, MissingSection
from refdoc.parsing.readme import ReadmeParser

README = """# Number

Format, spell and rank numbers.

## Basic Usage

```php
echo Number::spell(2);
```

## License

MIT

## Attributions

None
"""


def test_parse_collects_sections_in_order() -> None:
    document = ReadmeParser().parse(README)

    assert [section.title for section in document] == [
        "Number",
        "Basic Usage",
        "License",
        "Attributions",
    ]
    assert document.title == "Number"
    assert document.description == "Format, spell and rank numbers."
    assert document.license.content == "MIT"
    assert document.attributions.content == "None"
    assert document.basic_usage is not None
    assert document.basic_usage.content == "```php\necho Number::spell(2);\n```"


def test_heading_level_counts_leading_hashes() -> None:
    document = ReadmeParser().parse("# Top\n\n### Deep Dive\n\ntext\n")
    deep = document.require("deep-dive")
    assert deep.heading.level == 3
    assert deep.heading.text == "Deep Dive"


def test_blank_lines_inside_content_are_preserved() -> None:
    document = ReadmeParser().parse("# T\n\none\n\n\ntwo\n\n")
    assert document.description == "one\n\n\ntwo"


def test_duplicate_headings_receive_numeric_suffixes() -> None:
    text = "# Doc\n\n## Notes\n\nfirst\n\n## Notes\n\nsecond\n\n## Notes\n\nthird\n"
    document = ReadmeParser().parse(text)

    assert list(document.slugs) == ["doc", "notes", "notes-1", "notes-2"]
    assert document.require("notes").content == "first"
    assert document.require("notes-1").content == "second"
    assert document.require("notes-2").content == "third"


def test_suffix_skips_slugs_already_taken_by_headings() -> None:
    text = "# Doc\n\n## Notes-1\n\nliteral\n\n## Notes\n\na\n\n## Notes\n\nb\n"
    document = ReadmeParser().parse(text)

    assert list(document.slugs) == ["doc", "notes-1", "notes", "notes-2"]
    assert document.require("notes-1").content == "literal"
    assert document.require("notes-2").content == "b"


def test_leading_blank_lines_are_ignored() -> None:
    document = ReadmeParser().parse("\n\n# Title\nbody\n")
    assert document.title == "Title"
    assert document.description == "body"


def test_text_before_first_heading_is_malformed() -> None:
    with pytest.raises(MalformedDocument):
        ReadmeParser().parse("Intro text\n# Title\n")


def test_empty_document_is_malformed() -> None:
    with pytest.raises(MalformedDocument):
        ReadmeParser().parse("   \n\n")


def test_missing_license_raises_missing_section() -> None:
    document = ReadmeParser().parse("# Lib\n\nDesc\n\n## Attributions\n\nNone\n")
    with pytest.raises(MissingSection) as excinfo:
        _ = document.license
    assert excinfo.value.slug == "license"


def test_optional_sections_return_none_when_absent() -> None:
    document = ReadmeParser().parse("# Lib\n\nDesc\n")
    assert document.contributing is None
    assert document.basic_usage is None
    assert document.get("license") is None


def test_only_newlines_split_sections() -> None:
    document = ReadmeParser().parse("# Title\r\n\r\nPage\x0cbreak here\r\n## License\r\n\r\nMIT\r\n")

    assert [section.heading.text for section in document] == ["Title", "License"]
    assert document.description == "Page\x0cbreak here"
    assert document.license.content == "MIT"
