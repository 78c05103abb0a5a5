"""Term search analyzer.

Flags every occurrence whose text contains one of a configured set of terms,
case-insensitively. Useful on its own for banned-word checks and as the
reference shape for writing other analyzers.
"""

from collections.abc import Iterable

from modeltext.text.occurrence import LocationKind, TextOccurrence
from modeltext.text.scanner import Analyzer, Emit

from .base import Severity, TextFinding, format_location

ALL_KINDS = frozenset(LocationKind)


def _describe(occurrence: TextOccurrence) -> str:
    kind = occurrence.location_kind
    if kind is LocationKind.NAMESPACE:
        return "namespace"
    if kind is LocationKind.ELEMENT:
        return "member name" if occurrence.shape.is_member() else "shape name"
    if kind is LocationKind.ANNOTATION_KEY:
        return "trait key"
    return "trait value"


def find_terms(
    terms: Iterable[str],
    rule_name: str = "terms",
    severity: Severity = Severity.WARNING,
    kinds: Iterable[LocationKind] = ALL_KINDS,
) -> Analyzer:
    """Build an analyzer that emits one finding per matched term per occurrence."""
    lowered = sorted({term.lower() for term in terms if term})
    if not lowered:
        raise ValueError("find_terms needs at least one non-empty term")
    wanted_kinds = frozenset(kinds)

    def analyze(occurrence: TextOccurrence, emit: Emit) -> None:
        if occurrence.location_kind not in wanted_kinds:
            return

        text = occurrence.text.lower()
        for term in lowered:
            if term not in text:
                continue
            emit(
                TextFinding(
                    rule_name=rule_name,
                    message=(
                        f"{_describe(occurrence).capitalize()} '{occurrence.text}' at "
                        f"{format_location(occurrence)} contains the term '{term}'"
                    ),
                    occurrence=occurrence,
                    severity=severity,
                    additional_info={"term": term},
                )
            )

    return analyze
