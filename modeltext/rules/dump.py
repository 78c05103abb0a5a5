"""Analyzer that reports every occurrence, for inspecting what a scan sees."""

from modeltext.text.occurrence import TextOccurrence
from modeltext.text.scanner import Emit

from .base import Severity, TextFinding


def emit_occurrence(occurrence: TextOccurrence, emit: Emit) -> None:
    emit(
        TextFinding(
            rule_name="occurrence",
            message=occurrence.text,
            occurrence=occurrence,
            severity=Severity.INFO,
        )
    )
