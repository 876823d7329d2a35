"""Parsers for README documents and doc-comments."""

from .doc_comment import ParsedDocComment, TagCommentParser
from .readme import Document, ReadmeParser
from .slugs import SlugRegistry, slugify

__all__ = [
    "Document",
    "ParsedDocComment",
    "ReadmeParser",
    "SlugRegistry",
    "TagCommentParser",
    "slugify",
]
