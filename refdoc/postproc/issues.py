"""Scan generated markdown for placeholder text left by missing examples."""

from __future__ import annotations

import re
from typing import List, Optional

from ..models import GenerationIssue

MISSING_EXAMPLES_PLACEHOLDER = "No examples available"
MISSING_EXAMPLE_CODE = "missing-example"

_METHOD_HEADING = re.compile(r"^###\s+(.*)$")


class IssueScanner:
    """Reports one issue per placeholder occurrence, attributed to the enclosing method."""

    def __init__(self, placeholder: str = MISSING_EXAMPLES_PLACEHOLDER) -> None:
        self.placeholder = placeholder

    def scan(self, markdown: str) -> List[GenerationIssue]:
        issues: List[GenerationIssue] = []
        current: Optional[str] = None
        in_code = False
        for line in markdown.splitlines():
            stripped = line.strip()
            if stripped.startswith("```"):
                in_code = not in_code
            elif not in_code:
                match = _METHOD_HEADING.match(stripped)
                if match:
                    current = match.group(1).strip().strip("`")
            for _ in range(line.count(self.placeholder)):
                issues.append(self._issue_for(current))
        return issues

    def _issue_for(self, member: Optional[str]) -> GenerationIssue:
        where = f"`{member}`" if member else "the document"
        return GenerationIssue(
            code=MISSING_EXAMPLE_CODE,
            message=f"No examples available for {where}",
            member=member,
        )


__all__ = ["IssueScanner", "MISSING_EXAMPLES_PLACEHOLDER", "MISSING_EXAMPLE_CODE"]
