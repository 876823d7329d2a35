"""Markdown value types used to compose the generated reference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Heading:
    """A hash-prefixed Markdown title."""

    text: str
    level: int = 1

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Heading level must be >= 1, got {self.level}")

    def render(self) -> str:
        return f"{'#' * self.level} {self.text}"


@dataclass(frozen=True)
class MarkdownBlock:
    """A titled section with body text and optional nested blocks."""

    heading: Heading
    content: str = ""
    children: Tuple["MarkdownBlock", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", self.content.strip())
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def title(self) -> str:
        return self.heading.text

    def render(self) -> str:
        """Render the block as ``"<hashes> <heading>\\n\\n<content>"`` plus any children."""
        parts = [self.heading.render()]
        if self.content or not self.children:
            parts.append(self.content)
        parts.extend(child.render() for child in self.children)
        return "\n\n".join(parts)


Section = MarkdownBlock


def fenced(body: str, language: str = "") -> str:
    """Wrap ``body`` in a fenced code block tagged with ``language``."""
    return f"```{language}\n{body}\n```"


__all__ = ["Heading", "MarkdownBlock", "Section", "fenced"]
