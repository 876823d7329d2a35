"""Collision-aware key allocation shared by README sections and doc-comment tags."""

from __future__ import annotations

from typing import Set


def slugify(text: str) -> str:
    """Lower-case ``text`` and replace spaces with hyphens."""
    return text.lower().replace(" ", "-")


class SlugRegistry:
    """Hands out unique keys, suffixing repeats with the smallest free ``-N``."""

    def __init__(self) -> None:
        self._taken: Set[str] = set()

    def claim(self, base: str) -> str:
        key = base
        counter = 1
        while key in self._taken:
            key = f"{base}-{counter}"
            counter += 1
        self._taken.add(key)
        return key

    def __contains__(self, key: object) -> bool:
        return key in self._taken


__all__ = ["SlugRegistry", "slugify"]
