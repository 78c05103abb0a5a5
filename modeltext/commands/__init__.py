"""modeltext CLI commands."""
