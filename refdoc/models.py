"""Core data models shared across refdoc components."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

MEMBER_SEPARATOR = "::"
CONSTRUCTOR_NAMES = frozenset({"__construct", "__destruct"})


@dataclass(frozen=True)
class ParameterDescriptor:
    """A declared formal parameter of a documented method."""

    name: str
    type: Optional[str] = None
    optional: bool = False


@dataclass(frozen=True)
class MemberDescriptor:
    """Structural metadata for one method of the target class, in declaration order."""

    name: str
    parameters: Tuple[ParameterDescriptor, ...] = field(default_factory=tuple)
    return_type: Optional[str] = None
    doc_comment: Optional[str] = None
    visibility: str = "public"
    static: bool = False

    @property
    def is_documented(self) -> bool:
        """Public members other than constructors and destructors are documented."""
        return self.visibility == "public" and self.name not in CONSTRUCTOR_NAMES


@dataclass(frozen=True)
class PackageMetadata:
    """Package identity used in the installation section."""

    name: str
    kind: str
    install_command: str


@dataclass(frozen=True)
class GenerationIssue:
    """Non-fatal finding recorded while generating the reference."""

    code: str
    message: str
    member: Optional[str] = None
