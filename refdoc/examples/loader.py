"""Load evaluator output and explicit example lists from disk."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from ..errors import ExampleSourceError
from ..utils import load_structured


def load_results(path: Path) -> List[object]:
    """Return the ordered evaluator results stored in ``path``."""
    data = load_structured(path, error=ExampleSourceError)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ExampleSourceError(f"{path.name} must contain a list of results")
    return data


def load_pairs(path: Path) -> List[Tuple[str, object]]:
    """Return ``(expression, result)`` pairs from a list of mappings."""
    data = load_structured(path, error=ExampleSourceError)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ExampleSourceError(f"{path.name} must contain a list of examples")
    pairs: List[Tuple[str, object]] = []
    for index, entry in enumerate(data, start=1):
        if not isinstance(entry, dict) or not isinstance(entry.get("expression"), str):
            raise ExampleSourceError(
                f"Example #{index} in {path.name} needs an 'expression' string"
            )
        pairs.append((entry["expression"], entry.get("result")))
    return pairs


__all__ = ["load_pairs", "load_results"]
