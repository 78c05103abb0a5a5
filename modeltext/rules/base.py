"""Base contracts for text analyzers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from modeltext.text.occurrence import LocationKind, TextOccurrence


class Severity(Enum):
    """Standardized severity levels."""

    DANGER = "danger"
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    INFO = "info"


def format_location(occurrence: TextOccurrence) -> str:
    """Render where an occurrence lives, e.g. ``ns#Foo$bar -> ns#doc @ list[0]``."""
    if occurrence.location_kind is LocationKind.NAMESPACE:
        return occurrence.text

    location = str(occurrence.shape.id)
    if occurrence.trait is not None:
        location += f" -> {occurrence.trait.id}"
        if occurrence.path:
            location += f" @ {''.join(occurrence.path)}"
    return location


@dataclass
class TextFinding:
    """Standardized output from all text analyzers."""

    rule_name: str
    message: str
    occurrence: TextOccurrence

    severity: Severity | str = Severity.WARNING
    additional_info: dict[str, Any] | None = None

    @property
    def location(self) -> str:
        return format_location(self.occurrence)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        occurrence = self.occurrence
        result = {
            "rule": self.rule_name,
            "message": self.message,
            "severity": self.severity.value
            if isinstance(self.severity, Severity)
            else self.severity,
            "location_kind": occurrence.location_kind.value,
            "location": self.location,
            "text": occurrence.text,
            "shape": str(occurrence.shape.id) if occurrence.shape is not None else None,
            "trait": str(occurrence.trait.id) if occurrence.trait is not None else None,
            "path": list(occurrence.path),
        }

        if self.additional_info:
            result["details"] = self.additional_info

        return result
