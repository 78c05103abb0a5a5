"""Console output helpers for modeltext commands."""
