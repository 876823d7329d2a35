"""Parse ``/** ... */`` doc-comments into a description and tag fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..logging import get_logger
from ..utils import split_lines
from .slugs import SlugRegistry

_OPEN = "/**"
_CLOSE = "*/"


@dataclass(frozen=True)
class ParsedDocComment:
    """Description and tags extracted from a single doc-comment.

    ``description`` is ``None`` when the comment carried no free text at all, and an
    empty string when it only contained blank comment lines.
    """

    description: Optional[str] = None
    return_type: Optional[str] = None
    params: Dict[str, str] = field(default_factory=dict)
    extra_tags: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        """Look up a non-param, non-return tag by its (possibly suffixed) id."""
        return self.extra_tags.get(key)


class TagCommentParser:
    """Splits doc-comment text into description lines and ``@tag`` lines."""

    def __init__(self) -> None:
        self.logger = get_logger("parsing.doc_comment")

    def parse(self, raw_comment: Optional[str]) -> ParsedDocComment:
        description: List[str] = []
        seen_text = False
        return_type: Optional[str] = None
        params: Dict[str, str] = {}
        extra_tags: Dict[str, str] = {}
        registry = SlugRegistry()

        for raw_line in split_lines(raw_comment or ""):
            line, decoration_only = self._strip_decoration(raw_line)
            if decoration_only:
                continue
            if not line.startswith("@"):
                description.append(line + "\n")
                seen_text = True
                continue

            tokens = line[1:].split()
            if not tokens:
                continue
            name, body = tokens[0], tokens[1:]
            if name == "return":
                return_type = body[0] if body else None
            elif name == "param":
                if len(body) < 2:
                    self.logger.debug("Ignoring incomplete @param tag: %s", line)
                    continue
                param_type = body[0]
                # Variadic and by-reference markers precede the variable name.
                param_name = body[1].lstrip("&").removeprefix("...").lstrip("&")
                if param_name.startswith("$"):
                    param_name = param_name[1:]
                params[param_name] = param_type
            else:
                extra_tags[registry.claim(name)] = " ".join(body)

        return ParsedDocComment(
            description="".join(description).strip() if seen_text else None,
            return_type=return_type,
            params=params,
            extra_tags=extra_tags,
        )

    @staticmethod
    def _strip_decoration(raw_line: str) -> tuple[str, bool]:
        """Return the plain text of a line and whether it held only comment markers."""
        line = raw_line.strip()
        had_marker = False
        if line.startswith(_OPEN):
            line = line[len(_OPEN):]
            had_marker = True
        if line.endswith(_CLOSE):
            line = line[: -len(_CLOSE)]
            had_marker = True
        line = line.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        return line, had_marker and not line


__all__ = ["ParsedDocComment", "TagCommentParser"]
