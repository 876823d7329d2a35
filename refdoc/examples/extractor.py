"""Correlate evaluated example results with the literal source that produced them.

Results are matched to source positionally: result ``i`` is assumed to come from the
physical line ``declaration_start_line + i`` of the declaring file. This only holds for a
literal list written one expression per line, so reformatting the declaration silently
shifts every example. Prefer :meth:`ExampleExtractor.from_pairs` when the expressions
can be listed explicitly.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..errors import ExampleSourceError
from ..logging import get_logger
from ..models import MEMBER_SEPARATOR
from ..utils import split_lines

SEPARATOR_CHARS = "\t\n\r\x0b\x00, "

_IDENTIFIER_CHAR = re.compile(r"[A-Za-z0-9_]")


@dataclass(frozen=True)
class Example:
    """One literal invocation and the stringified value it produced."""

    source_expression: str
    evaluated_result: str

    def render(self) -> str:
        return f"{self.source_expression}; // {self.evaluated_result}"


def stringify_result(value: object) -> str:
    """Render an evaluator result; strings pass through, scalars use JSON spelling."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def find_declaration_line(source_text: str, marker: str) -> int:
    """Return the 1-based line following the first line that contains ``marker``."""
    for number, line in enumerate(split_lines(source_text), start=1):
        if marker in line:
            return number + 1
    raise ExampleSourceError(f"Example marker {marker!r} not found in source")


class ExampleSet:
    """Read-only, order-preserving collection of examples."""

    def __init__(self, examples: Iterable[Example] = ()) -> None:
        self._examples: Tuple[Example, ...] = tuple(examples)

    def __iter__(self) -> Iterator[Example]:
        return iter(self._examples)

    def __len__(self) -> int:
        return len(self._examples)

    def examples_for_method(self, owner: str, method_name: str) -> List[Example]:
        prefix = f"{owner}{MEMBER_SEPARATOR}{method_name}"
        matches: List[Example] = []
        for example in self._examples:
            expression = example.source_expression
            if not expression.startswith(prefix):
                continue
            following = expression[len(prefix) : len(prefix) + 1]
            if following and _IDENTIFIER_CHAR.match(following):
                continue
            matches.append(example)
        return matches


class ExampleExtractor:
    """Builds :class:`ExampleSet` instances from source text or explicit pairs."""

    def __init__(self) -> None:
        self.logger = get_logger("examples")

    def extract(
        self,
        source_text: str,
        declaration_start_line: int,
        results: Sequence[object],
    ) -> ExampleSet:
        if declaration_start_line < 1:
            raise ExampleSourceError(
                f"Declaration start line must be >= 1, got {declaration_start_line}"
            )
        lines = split_lines(source_text)
        examples: List[Example] = []
        for index, result in enumerate(results):
            line_number = declaration_start_line + index
            if line_number > len(lines):
                raise ExampleSourceError(
                    f"Result #{index + 1} maps to line {line_number}, "
                    f"but the source only has {len(lines)} lines"
                )
            expression = lines[line_number - 1].strip(SEPARATOR_CHARS)
            examples.append(Example(expression, stringify_result(result)))
        self.logger.debug(
            "Extracted %d examples starting at line %d", len(examples), declaration_start_line
        )
        return ExampleSet(examples)

    def from_pairs(self, pairs: Iterable[Tuple[str, object]]) -> ExampleSet:
        examples = [
            Example(expression.strip(SEPARATOR_CHARS), stringify_result(result))
            for expression, result in pairs
        ]
        return ExampleSet(examples)

    def extract_marked(
        self,
        source_text: str,
        marker: str,
        results: Sequence[object],
    ) -> ExampleSet:
        """Extract examples whose declaration begins right after ``marker``."""
        line = find_declaration_line(source_text, marker)
        return self.extract(source_text, line, results)


__all__ = [
    "Example",
    "ExampleExtractor",
    "ExampleSet",
    "SEPARATOR_CHARS",
    "find_declaration_line",
    "stringify_result",
]
