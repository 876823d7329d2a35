"""Extract member descriptors from PHP-style class source without executing it."""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Tuple

from ..logging import get_logger
from ..models import MemberDescriptor, ParameterDescriptor

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_MEMBER_PATTERN = re.compile(
    r"(?P<doc>/\*\*(?:(?!\*/).)*\*/)?\s*"
    r"(?P<modifiers>(?:(?:public|protected|private|static|final|abstract)\s+)*)"
    r"function\s+&?\s*(?P<name>[A-Za-z_]\w*)\s*\(",
    re.DOTALL,
)
_RETURN_PATTERN = re.compile(r"\s*(?::\s*(?P<type>[^{;]+?))?\s*[{;]")
_PROMOTION_MODIFIERS = {"public", "protected", "private", "readonly"}
_OPENERS = {"(": ")", "[": "]", "{": "}"}

logger = get_logger("members.source_scanner")


def scan_class_source(text: str, class_name: Optional[str] = None) -> List[MemberDescriptor]:
    """Return descriptors for every method declared in ``text``, in source order.

    When ``class_name`` is given only the body of that class is scanned.
    """
    body = _class_body(text, class_name) if class_name else text
    members = list(_iter_members(body))
    logger.debug("Scanned %d members%s", len(members), f" in {class_name}" if class_name else "")
    return members


def _iter_members(text: str) -> Iterator[MemberDescriptor]:
    position = 0
    while True:
        match = _MEMBER_PATTERN.search(text, position)
        if match is None:
            return
        open_index = match.end() - 1
        close_index = _matching_close(text, open_index)
        if close_index is None:
            logger.warning("Unbalanced parameter list for %s", match.group("name"))
            return
        return_match = _RETURN_PATTERN.match(text, close_index + 1)
        return_type = None
        resume = close_index + 1
        if return_match:
            if return_match.group("type"):
                return_type = return_match.group("type").strip()
            terminator = return_match.end() - 1
            resume = terminator + 1
            if text[terminator] == "{":
                body_close = _matching_close(text, terminator)
                if body_close is None:
                    logger.warning("Unbalanced body for %s", match.group("name"))
                    body_close = len(text) - 1
                resume = body_close + 1

        modifiers = match.group("modifiers").split()
        visibility = next(
            (item for item in modifiers if item in {"public", "protected", "private"}),
            "public",
        )
        yield MemberDescriptor(
            name=match.group("name"),
            parameters=tuple(_parse_parameters(text[open_index + 1 : close_index])),
            return_type=return_type,
            doc_comment=match.group("doc"),
            visibility=visibility,
            static="static" in modifiers,
        )
        position = resume


def _parse_parameters(raw: str) -> List[ParameterDescriptor]:
    parameters: List[ParameterDescriptor] = []
    for chunk in _split_top_level(raw, ","):
        chunk = chunk.strip()
        if not chunk:
            continue
        head, has_default = _split_default(chunk)
        tokens = [token for token in head.split() if token not in _PROMOTION_MODIFIERS]
        if not tokens:
            continue
        variable = tokens[-1]
        variadic = "..." in variable
        name = variable.replace("&", "").replace("...", "").lstrip("$")
        type_string = " ".join(tokens[:-1]) or None
        parameters.append(
            ParameterDescriptor(name=name, type=type_string, optional=has_default or variadic)
        )
    return parameters


def _split_default(chunk: str) -> Tuple[str, bool]:
    parts = _split_top_level(chunk, "=", limit=1)
    return parts[0], len(parts) > 1


def _split_top_level(text: str, separator: str, limit: int = -1) -> List[str]:
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    quote: Optional[str] = None
    escaped = False
    for char in text:
        if quote:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in {"'", '"'}:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _OPENERS.values():
            depth -= 1
        elif char == separator and depth == 0 and (limit < 0 or len(parts) < limit):
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def _matching_close(text: str, open_index: int) -> Optional[int]:
    """Find the bracket closing ``text[open_index]``, skipping strings and comments."""
    opener = text[open_index]
    closer = _OPENERS[opener]
    depth = 0
    index = open_index
    while index < len(text):
        char = text[index]
        if text.startswith("/*", index):
            end = text.find("*/", index + 2)
            index = len(text) if end == -1 else end + 2
            continue
        if text.startswith("//", index) or char == "#" and not text.startswith("#[", index):
            end = text.find("\n", index)
            index = len(text) if end == -1 else end + 1
            continue
        if char in {"'", '"'}:
            index = _skip_string(text, index)
            continue
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return None


def _skip_string(text: str, start: int) -> int:
    quote = text[start]
    index = start + 1
    while index < len(text):
        if text[index] == "\\":
            index += 2
            continue
        if text[index] == quote:
            return index + 1
        index += 1
    return index


def _class_body(text: str, class_name: str) -> str:
    match = re.search(rf"\bclass\s+{re.escape(class_name)}\b[^{{]*\{{", text)
    if match is None:
        logger.warning("Class %s not found; scanning the whole file", class_name)
        return text
    open_index = match.end() - 1
    close_index = _matching_close(text, open_index)
    end = close_index if close_index is not None else len(text)
    return text[open_index + 1 : end]


__all__ = ["scan_class_source"]
