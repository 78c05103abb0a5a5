"""Exceptions raised by the text traversal core."""

from enum import Enum


class ValidationFailure(Enum):
    """Which occurrence invariant was violated."""

    MISSING_LOCATION_KIND = "MissingLocationKind"
    MISSING_ELEMENT = "MissingElement"
    MISSING_TEXT = "MissingText"
    MISSING_ANNOTATION = "MissingAnnotation"
    UNEXPECTED_ANNOTATION = "UnexpectedAnnotation"


class OccurrenceValidationError(ValueError):
    """Raised when a TextOccurrence would violate its structural invariants.

    This is always a defect in the traversal, never bad user input, so callers
    must let it propagate.

    Attributes:
        reason: The ValidationFailure that was detected
        details: Dict with the offending field values
    """

    def __init__(self, reason: ValidationFailure, message: str, details: dict | None = None):
        super().__init__(f"{reason.value}: {message}")
        self.reason = reason
        self.details = details or {}
