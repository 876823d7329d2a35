"""Example correlation between evaluated results and their literal source."""

from .extractor import (
    Example,
    ExampleExtractor,
    ExampleSet,
    find_declaration_line,
    stringify_result,
)
from .loader import load_pairs, load_results

__all__ = [
    "Example",
    "ExampleExtractor",
    "ExampleSet",
    "find_declaration_line",
    "load_pairs",
    "load_results",
    "stringify_result",
]
