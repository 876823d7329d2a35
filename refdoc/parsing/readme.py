"""Split a README into slug-addressable sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import MalformedDocument, MissingSection
from ..logging import get_logger
from ..markdown import Heading, Section
from ..utils import split_lines
from .slugs import SlugRegistry, slugify

LICENSE_SLUG = "license"
ATTRIBUTIONS_SLUG = "attributions"
CONTRIBUTING_SLUG = "contributing"
BASIC_USAGE_SLUG = "basic-usage"


@dataclass(frozen=True)
class Document:
    """Ordered README sections plus a slug lookup table."""

    sections: Tuple[Section, ...]
    slugs: Dict[str, Section] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    @property
    def title(self) -> str:
        return self.sections[0].heading.text

    @property
    def description(self) -> str:
        return self.sections[0].content

    @property
    def license(self) -> Section:
        return self.require(LICENSE_SLUG)

    @property
    def attributions(self) -> Section:
        return self.require(ATTRIBUTIONS_SLUG)

    @property
    def contributing(self) -> Optional[Section]:
        return self.get(CONTRIBUTING_SLUG)

    @property
    def basic_usage(self) -> Optional[Section]:
        return self.get(BASIC_USAGE_SLUG)

    def get(self, slug: str) -> Optional[Section]:
        return self.slugs.get(slug)

    def require(self, slug: str) -> Section:
        section = self.slugs.get(slug)
        if section is None:
            raise MissingSection(slug)
        return section


class ReadmeParser:
    """Line-oriented parser that turns hash headings into sections."""

    def __init__(self) -> None:
        self.logger = get_logger("parsing.readme")

    def parse(self, text: str) -> Document:
        pending: List[Tuple[Heading, List[str]]] = []
        for line in split_lines(text):
            line = line.rstrip("\r")
            heading = self._heading_for(line)
            if heading is not None:
                pending.append((heading, []))
                continue
            if not pending:
                if not line.strip():
                    continue
                raise MalformedDocument(
                    f"README must start with a heading, found: {line.strip()[:60]!r}"
                )
            pending[-1][1].append(line)

        if not pending:
            raise MalformedDocument("README does not contain any heading")

        registry = SlugRegistry()
        sections: List[Section] = []
        slugs: Dict[str, Section] = {}
        for heading, lines in pending:
            section = Section(heading=heading, content="\n".join(lines))
            slug = registry.claim(slugify(heading.text))
            sections.append(section)
            slugs[slug] = section
        self.logger.debug("Parsed README into %d sections: %s", len(sections), ", ".join(slugs))
        return Document(sections=tuple(sections), slugs=slugs)

    @staticmethod
    def _heading_for(line: str) -> Optional[Heading]:
        if not line.startswith("#"):
            return None
        stripped = line.lstrip("#")
        level = len(line) - len(stripped)
        return Heading(text=stripped.strip(), level=level)


__all__ = [
    "ATTRIBUTIONS_SLUG",
    "BASIC_USAGE_SLUG",
    "CONTRIBUTING_SLUG",
    "Document",
    "LICENSE_SLUG",
    "ReadmeParser",
]
