"""Public entry point: scan a model and dispatch each occurrence to an analyzer."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from modeltext.model.shapes import Model
from modeltext.utils.logging import logger

from .cache import ScanCache, default_cache
from .occurrence import TextOccurrence

if TYPE_CHECKING:
    from modeltext.rules.base import TextFinding

Emit = Callable[["TextFinding"], None]

# Called once per occurrence; emits zero or more findings
Analyzer = Callable[[TextOccurrence, Emit], None]


def scan(model: Model, analyzer: Analyzer, cache: ScanCache | None = None) -> list["TextFinding"]:
    """Feed every text occurrence of a model through an analyzer.

    The structural walk is taken from the cache (walked on first use). The
    analyzer is invoked once per occurrence in order, structural occurrences
    first and one NAMESPACE occurrence per namespace last. Everything it emits
    is returned in emission order; analyzer exceptions propagate.
    """
    if cache is None:
        cache = default_cache()

    result = cache.get(model)

    findings: list["TextFinding"] = []
    for occurrence in result.occurrences:
        analyzer(occurrence, findings.append)

    logger.debug(f"Scanned {len(result)} occurrences of {model!r}: {len(findings)} findings")
    return findings


class ModelTextValidator:
    """Base class for analyzers that want to perform a full text search on a model.

    Subclasses implement get_validation_events() to:
      1) decide if the occurrence is at a relevant location,
      2) analyze its text,
      3) emit a TextFinding, if necessary.
    """

    name = "model_text"

    def __init__(self, cache: ScanCache | None = None):
        self._cache = cache

    def get_validation_events(self, occurrence: TextOccurrence, emit: Emit) -> None:
        raise NotImplementedError

    def validate(self, model: Model) -> list["TextFinding"]:
        return scan(model, self.get_validation_events, self._cache)
