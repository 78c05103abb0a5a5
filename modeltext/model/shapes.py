"""Read-only shape model consumed by the text traversal.

A Model holds top-level shapes. Aggregate shapes own MemberShapes in
declaration order. Traits carry their value as plain JSON data.
"""

from dataclasses import dataclass, field
from typing import Any

from .exceptions import ModelLoadError


@dataclass(frozen=True)
class ShapeId:
    """Absolute shape identifier: ``namespace#Name`` or ``namespace#Name$member``."""

    namespace: str
    name: str
    member: str | None = None

    @classmethod
    def parse(cls, text: str, default_namespace: str | None = None) -> "ShapeId":
        """Parse an absolute id, or a relative one when default_namespace is given."""
        if not isinstance(text, str) or not text:
            raise ModelLoadError(f"Invalid shape id: {text!r}", details={"id": text})

        if "#" in text:
            namespace, _, rest = text.partition("#")
        elif default_namespace:
            namespace, rest = default_namespace, text
        else:
            raise ModelLoadError(f"Shape id is not absolute: {text!r}", details={"id": text})

        name, sep, member = rest.partition("$")
        if not namespace or not name or (sep and not member):
            raise ModelLoadError(f"Invalid shape id: {text!r}", details={"id": text})

        return cls(namespace, name, member or None)

    def with_member(self, member: str) -> "ShapeId":
        return ShapeId(self.namespace, self.name, member)

    def __str__(self) -> str:
        base = f"{self.namespace}#{self.name}"
        return f"{base}${self.member}" if self.member else base


@dataclass(frozen=True, eq=False)
class Trait:
    """A trait applied to a shape; value is str, dict, list, bool, number or None."""

    id: ShapeId
    value: Any = field(default_factory=dict)


@dataclass(eq=False)
class MemberShape:
    """Named child slot of an aggregate shape."""

    id: ShapeId
    target: ShapeId | None = None
    traits: dict[ShapeId, Trait] = field(default_factory=dict)

    @property
    def member_name(self) -> str:
        return self.id.member

    def is_member(self) -> bool:
        return True

    def get_all_traits(self) -> list[Trait]:
        return list(self.traits.values())


@dataclass(eq=False)
class Shape:
    """Top-level shape definition (structure, service, string, ...)."""

    id: ShapeId
    type: str
    traits: dict[ShapeId, Trait] = field(default_factory=dict)
    member_shapes: dict[str, MemberShape] = field(default_factory=dict)

    def is_member(self) -> bool:
        return False

    def members(self) -> list[MemberShape]:
        return list(self.member_shapes.values())

    def get_member(self, name: str) -> MemberShape | None:
        return self.member_shapes.get(name)

    def get_all_traits(self) -> list[Trait]:
        return list(self.traits.values())


class Model:
    """Immutable collection of top-level shapes.

    Equality and hashing are by identity: two loads of the same file are two
    models, and each gets its own scan cache entry.
    """

    def __init__(self, shapes=None):
        self._shapes: dict[ShapeId, Shape] = {}
        for shape in shapes or ():
            self._shapes[shape.id] = shape

    def shapes(self) -> list[Shape]:
        """Top-level shapes in insertion order; members are reached via their container."""
        return list(self._shapes.values())

    def get_shape(self, shape_id: ShapeId | str) -> Shape | MemberShape | None:
        if isinstance(shape_id, str):
            shape_id = ShapeId.parse(shape_id)
        container = self._shapes.get(ShapeId(shape_id.namespace, shape_id.name))
        if container is None or shape_id.member is None:
            return container
        return container.get_member(shape_id.member)

    def namespaces(self) -> set[str]:
        return {shape_id.namespace for shape_id in self._shapes}

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self):
        return iter(self.shapes())

    def __repr__(self) -> str:
        return f"Model(shapes={len(self._shapes)})"
