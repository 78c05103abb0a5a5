"""modeltext text analyzers."""

from .base import Severity, TextFinding, format_location
from .dump import emit_occurrence
from .terms import find_terms

__all__ = [
    "Severity",
    "TextFinding",
    "emit_occurrence",
    "find_terms",
    "format_location",
]
