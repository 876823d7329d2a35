"""Member descriptor providers and signature rendering."""

from .signature import MemberSignature, MemberSignatureBuilder, ParameterSignature
from .source_scanner import scan_class_source
from .table import load_descriptor_table

__all__ = [
    "MemberSignature",
    "MemberSignatureBuilder",
    "ParameterSignature",
    "load_descriptor_table",
    "scan_class_source",
]
