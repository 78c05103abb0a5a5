"""modeltext - full text discovery over shape models.

Walks every shape, member and trait value of a model once, producing ordered
text occurrences that pluggable analyzers inspect:

    from modeltext import load_model, scan
    from modeltext.rules import find_terms

    findings = scan(load_model("weather.json"), find_terms(["blacklist"]))
"""

__version__ = "0.3.0"

from modeltext.model import Model, ShapeId, load_model, load_models, model_from_dict
from modeltext.text import (
    LocationKind,
    ModelTextValidator,
    OccurrenceValidationError,
    ScanCache,
    TextOccurrence,
    scan,
)

__all__ = [
    "__version__",
    "LocationKind",
    "Model",
    "ModelTextValidator",
    "OccurrenceValidationError",
    "ScanCache",
    "ShapeId",
    "TextOccurrence",
    "load_model",
    "load_models",
    "model_from_dict",
    "scan",
]
