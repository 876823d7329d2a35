"""Error taxonomy for reference generation runs."""

from __future__ import annotations


class RefDocError(RuntimeError):
    """Base class for fatal refdoc failures."""


class MalformedDocument(RefDocError):
    """Raised when a README does not start with a heading."""


class MissingSection(RefDocError):
    """Raised when a required README section cannot be found."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"README is missing required section '{slug}'")
        self.slug = slug


class ExampleSourceError(RefDocError):
    """Raised when evaluated results cannot be matched to source lines."""


class MetadataError(RefDocError):
    """Raised when package metadata lacks a usable package name."""


__all__ = [
    "ExampleSourceError",
    "MalformedDocument",
    "MetadataError",
    "MissingSection",
    "RefDocError",
]
