"""Text traversal core: occurrences, walkers, scan cache and dispatch."""

from .cache import ScanCache, default_cache, reset_default_cache
from .exceptions import OccurrenceValidationError, ValidationFailure
from .occurrence import LocationKind, ScanResult, TextOccurrence, TextOccurrenceBuilder
from .scanner import Analyzer, Emit, ModelTextValidator, scan
from .walker import DEFAULT_SKIP_TRAITS, collect_occurrences, walk_shape, walk_trait_value

__all__ = [
    "Analyzer",
    "Emit",
    "DEFAULT_SKIP_TRAITS",
    "LocationKind",
    "ModelTextValidator",
    "OccurrenceValidationError",
    "ScanCache",
    "ScanResult",
    "TextOccurrence",
    "TextOccurrenceBuilder",
    "ValidationFailure",
    "collect_occurrences",
    "default_cache",
    "reset_default_cache",
    "scan",
    "walk_shape",
    "walk_trait_value",
]
