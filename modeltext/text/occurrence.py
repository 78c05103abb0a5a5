"""Text occurrence records and their validating builder."""

from dataclasses import dataclass, field
from enum import Enum

from modeltext.model.shapes import MemberShape, Shape, Trait

from .exceptions import OccurrenceValidationError, ValidationFailure


class LocationKind(Enum):
    """Where in the model a piece of text was found."""

    ELEMENT = "element"
    ANNOTATION_VALUE = "annotation_value"
    ANNOTATION_KEY = "annotation_key"
    NAMESPACE = "namespace"


TRAIT_KINDS = frozenset({LocationKind.ANNOTATION_VALUE, LocationKind.ANNOTATION_KEY})


def _as_path(path) -> tuple[str, ...]:
    if path is None:
        return ()
    if isinstance(path, str):
        return (path,)
    return tuple(path)


def _check_invariants(location_kind, text, shape, trait) -> None:
    if location_kind is None:
        raise OccurrenceValidationError(
            ValidationFailure.MISSING_LOCATION_KIND,
            "location kind must be specified",
        )
    if location_kind is not LocationKind.NAMESPACE and shape is None:
        raise OccurrenceValidationError(
            ValidationFailure.MISSING_ELEMENT,
            f"shape must be specified for location kind {location_kind.name}",
            details={"location_kind": location_kind.name, "text": text},
        )
    if text is None:
        raise OccurrenceValidationError(
            ValidationFailure.MISSING_TEXT,
            "text must be specified",
            details={"location_kind": location_kind.name},
        )
    if location_kind in TRAIT_KINDS and trait is None:
        raise OccurrenceValidationError(
            ValidationFailure.MISSING_ANNOTATION,
            f"trait must be specified for location kind {location_kind.name}",
            details={"location_kind": location_kind.name, "text": text},
        )
    if location_kind not in TRAIT_KINDS and trait is not None:
        raise OccurrenceValidationError(
            ValidationFailure.UNEXPECTED_ANNOTATION,
            f"trait is only allowed for trait keys and values, not {location_kind.name}",
            details={"location_kind": location_kind.name, "text": text},
        )


@dataclass(frozen=True)
class TextOccurrence:
    """One string found in a model plus the context needed to report on it.

    - location_kind: common label for where the text is located
    - text:          the text snippet to examine
    - shape:         owning shape or member (None only for NAMESPACE)
    - trait:         owning trait, present only for trait keys and values
    - path:          property path inside the trait value, e.g. ("list", "[0]")
    """

    location_kind: LocationKind
    text: str
    shape: Shape | MemberShape | None = None
    trait: Trait | None = None
    path: tuple[str, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "path", _as_path(self.path))
        _check_invariants(self.location_kind, self.text, self.shape, self.trait)

    @classmethod
    def shape_name(cls, text: str, shape: Shape | MemberShape) -> "TextOccurrence":
        return cls(LocationKind.ELEMENT, text, shape=shape)

    @classmethod
    def trait_value(cls, text: str, shape, trait: Trait, path=()) -> "TextOccurrence":
        return cls(LocationKind.ANNOTATION_VALUE, text, shape=shape, trait=trait, path=path)

    @classmethod
    def trait_key(cls, text: str, shape, trait: Trait, path=()) -> "TextOccurrence":
        return cls(LocationKind.ANNOTATION_KEY, text, shape=shape, trait=trait, path=path)

    @classmethod
    def namespace(cls, text: str) -> "TextOccurrence":
        return cls(LocationKind.NAMESPACE, text)

    @staticmethod
    def builder() -> "TextOccurrenceBuilder":
        return TextOccurrenceBuilder()


class TextOccurrenceBuilder:
    """Order-independent construction of a TextOccurrence.

    Fields may be assigned in any order; invariants are only checked by build().
    """

    def __init__(self):
        self._location_kind: LocationKind | None = None
        self._text: str | None = None
        self._shape = None
        self._trait: Trait | None = None
        self._path: tuple[str, ...] = ()

    def location_kind(self, location_kind: LocationKind) -> "TextOccurrenceBuilder":
        self._location_kind = location_kind
        return self

    def text(self, text: str) -> "TextOccurrenceBuilder":
        self._text = text
        return self

    def shape(self, shape) -> "TextOccurrenceBuilder":
        self._shape = shape
        return self

    def trait(self, trait: Trait) -> "TextOccurrenceBuilder":
        self._trait = trait
        return self

    def path(self, path) -> "TextOccurrenceBuilder":
        # Copy of the caller's sequence; a bare string is one segment
        self._path = _as_path(path)
        return self

    def build(self) -> TextOccurrence:
        return TextOccurrence(
            location_kind=self._location_kind,
            text=self._text,
            shape=self._shape,
            trait=self._trait,
            path=self._path,
        )


@dataclass(frozen=True)
class ScanResult:
    """Structural occurrences of one model plus the namespaces seen while walking it."""

    structural: tuple[TextOccurrence, ...]
    namespaces: frozenset[str]
    occurrences: tuple[TextOccurrence, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        namespace_occurrences = tuple(
            TextOccurrence.namespace(namespace) for namespace in sorted(self.namespaces)
        )
        object.__setattr__(self, "occurrences", tuple(self.structural) + namespace_occurrences)

    def __len__(self) -> int:
        return len(self.occurrences)

    def __iter__(self):
        return iter(self.occurrences)
