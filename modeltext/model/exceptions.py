"""Custom exceptions for the model package."""


class ModelLoadError(Exception):
    """Raised when a JSON model document cannot be turned into a Model.

    Attributes:
        message: Human-readable error description
        details: Dict with the offending source, shape id or value
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}
