"""Merge declared member metadata with doc-comment types into call signatures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..models import MEMBER_SEPARATOR, MemberDescriptor
from ..parsing.doc_comment import ParsedDocComment

FALLBACK_TYPE = "mixed"


@dataclass(frozen=True)
class ParameterSignature:
    """A parameter as it appears in a rendered signature."""

    name: str
    type_string: str
    optional: bool = False

    def render(self) -> str:
        marker = "?" if self.optional and not self.type_string.startswith("?") else ""
        return f"{marker}{self.type_string} ${self.name}"


@dataclass(frozen=True)
class MemberSignature:
    """Canonical call signature of one documented method."""

    owner: str
    method_name: str
    parameters: Tuple[ParameterSignature, ...] = field(default_factory=tuple)
    return_type: str = FALLBACK_TYPE

    def render(self) -> str:
        params = ", ".join(parameter.render() for parameter in self.parameters)
        return f"{self.owner}{MEMBER_SEPARATOR}{self.method_name}({params}): {self.return_type}"


class MemberSignatureBuilder:
    """Doc-comment types win over declared types; ``mixed`` fills any gap."""

    def __init__(self, owner: str) -> None:
        self.owner = owner

    def build(self, member: MemberDescriptor, doc: ParsedDocComment) -> MemberSignature:
        parameters = tuple(
            ParameterSignature(
                name=parameter.name,
                type_string=doc.params.get(parameter.name) or parameter.type or FALLBACK_TYPE,
                optional=parameter.optional,
            )
            for parameter in member.parameters
        )
        return MemberSignature(
            owner=self.owner,
            method_name=member.name,
            parameters=parameters,
            return_type=doc.return_type or member.return_type or FALLBACK_TYPE,
        )


__all__ = ["FALLBACK_TYPE", "MemberSignature", "MemberSignatureBuilder", "ParameterSignature"]
