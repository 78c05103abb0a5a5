"""Centralized exit codes for the modeltext CLI."""


class ExitCodes:
    """Standard exit codes for modeltext CLI commands."""

    SUCCESS = 0

    FINDINGS_REPORTED = 1

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - No findings reported",
            cls.FINDINGS_REPORTED: "Analyzer reported findings",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
