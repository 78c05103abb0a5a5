"""Full text traversal over a Model.

Descends into every top-level shape, its members and every trait value,
yielding a TextOccurrence for each string of interest. The traversal has no
knowledge of what analyzers are looking for.

Trait value paths are immutable tuples handed down by value, so concurrent
walks never share state. Key segments carry a leading "." except at the trait
root; list elements are "[i]":

    {"greeting": "hi", "list": ["a", "b"]}
      -> ("greeting",) for key and value "hi"
      -> ("list",) for key "list", ("list", "[0]") and ("list", "[1]") for values
"""

from collections.abc import Iterable, Iterator, Mapping

from modeltext.model.shapes import MemberShape, Model, Shape, ShapeId, Trait
from modeltext.utils.constants import PRELUDE_NAMESPACE, REFERENCES_TRAIT
from modeltext.utils.logging import logger

from .occurrence import ScanResult, TextOccurrence

DEFAULT_SKIP_TRAITS = frozenset({ShapeId.parse(REFERENCES_TRAIT)})


def walk_trait_value(
    node,
    trait: Trait,
    shape: Shape | MemberShape,
    path: tuple[str, ...] = (),
    skip_traits: frozenset[ShapeId] = DEFAULT_SKIP_TRAITS,
) -> Iterator[TextOccurrence]:
    """Yield key and value occurrences for one trait value.

    Traits in skip_traits only refer to shapes that the shape walk already
    covers, so they yield nothing at all.
    """
    if trait.id in skip_traits:
        return
    yield from _walk_node(node, trait, shape, tuple(path))


def _walk_node(node, trait, shape, path) -> Iterator[TextOccurrence]:
    if isinstance(node, str):
        yield TextOccurrence.trait_value(node, shape, trait, path)

    elif isinstance(node, Mapping):
        for key, value in node.items():
            key = str(key)
            entry_path = path + ((f".{key}" if path else key),)
            yield TextOccurrence.trait_key(key, shape, trait, entry_path)
            yield from _walk_node(value, trait, shape, entry_path)

    elif isinstance(node, (list, tuple)):
        for index, element in enumerate(node):
            yield from _walk_node(element, trait, shape, path + (f"[{index}]",))

    # bool, numbers and null carry no text


def _walk_traits(
    traits: Iterable[Trait],
    shape: Shape | MemberShape,
    namespaces: set[str],
    skip_traits: frozenset[ShapeId],
) -> Iterator[TextOccurrence]:
    for trait in traits:
        namespaces.add(trait.id.namespace)
        yield from walk_trait_value(trait.value, trait, shape, (), skip_traits)


def walk_shape(
    shape: Shape | MemberShape,
    namespaces: set[str],
    skip_traits: frozenset[ShapeId] = DEFAULT_SKIP_TRAITS,
) -> Iterator[TextOccurrence]:
    """Yield every occurrence owned by one shape, recording namespaces as it goes.

    Order: shape name, then each member name followed by that member's traits,
    then the shape's own traits. A member shape yields only its member name and
    its own traits.
    """
    namespaces.add(shape.id.namespace)

    if shape.is_member():
        yield TextOccurrence.shape_name(shape.member_name, shape)
    else:
        yield TextOccurrence.shape_name(shape.id.name, shape)

        for member in shape.members():
            yield TextOccurrence.shape_name(member.member_name, member)
            yield from _walk_traits(member.get_all_traits(), member, namespaces, skip_traits)

    yield from _walk_traits(shape.get_all_traits(), shape, namespaces, skip_traits)


def collect_occurrences(
    model: Model,
    prelude_namespace: str = PRELUDE_NAMESPACE,
    skip_traits: frozenset[ShapeId] = DEFAULT_SKIP_TRAITS,
) -> ScanResult:
    """Walk every non-prelude shape of a model and return the scan result."""
    namespaces: set[str] = set()
    occurrences: list[TextOccurrence] = []
    skipped = 0

    for shape in model.shapes():
        if shape.id.namespace == prelude_namespace:
            skipped += 1
            continue
        occurrences.extend(walk_shape(shape, namespaces, skip_traits))

    logger.debug(
        f"Collected {len(occurrences)} text occurrences across {len(namespaces)} namespaces "
        f"({skipped} prelude shapes skipped)"
    )
    return ScanResult(tuple(occurrences), frozenset(namespaces))
