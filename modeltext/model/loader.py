"""Load JSON AST model documents into a Model.

Accepted document shape:

    {
      "smithy": "2.0",
      "shapes": {
        "example.weather#Forecast": {
          "type": "structure",
          "members": {"city": {"target": "smithy.api#String", "traits": {...}}},
          "traits": {"smithy.api#documentation": "..."}
        }
      }
    }

Relative trait ids (``"documentation"``) resolve to the prelude namespace.
"""

from pathlib import Path
from typing import Any

from modeltext.utils.constants import PRELUDE_NAMESPACE
from modeltext.utils.helpers import load_json_file
from modeltext.utils.logging import logger

from .exceptions import ModelLoadError
from .shapes import MemberShape, Model, Shape, ShapeId, Trait


def _parse_traits(raw: Any, owner: str) -> dict[ShapeId, Trait]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ModelLoadError(
            f"Traits of {owner} must be an object, got {type(raw).__name__}",
            details={"shape": owner},
        )

    traits: dict[ShapeId, Trait] = {}
    for trait_name, value in raw.items():
        trait_id = ShapeId.parse(trait_name, default_namespace=PRELUDE_NAMESPACE)
        traits[trait_id] = Trait(trait_id, value)
    return traits


def _parse_members(shape_id: ShapeId, raw: Any) -> dict[str, MemberShape]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ModelLoadError(
            f"Members of {shape_id} must be an object, got {type(raw).__name__}",
            details={"shape": str(shape_id)},
        )

    members: dict[str, MemberShape] = {}
    for member_name, body in raw.items():
        member_id = shape_id.with_member(member_name)
        body = body or {}
        if not isinstance(body, dict):
            raise ModelLoadError(
                f"Member {member_id} must be an object",
                details={"shape": str(member_id)},
            )
        target = body.get("target")
        members[member_name] = MemberShape(
            id=member_id,
            target=ShapeId.parse(target, default_namespace=PRELUDE_NAMESPACE) if target else None,
            traits=_parse_traits(body.get("traits"), str(member_id)),
        )
    return members


def _parse_shape(name: str, body: Any) -> Shape:
    shape_id = ShapeId.parse(name)
    if shape_id.member is not None:
        raise ModelLoadError(
            f"Top-level shape id must not name a member: {name}",
            details={"shape": name},
        )
    if not isinstance(body, dict) or "type" not in body:
        raise ModelLoadError(
            f"Shape {name} must be an object with a 'type'",
            details={"shape": name},
        )

    return Shape(
        id=shape_id,
        type=body["type"],
        traits=_parse_traits(body.get("traits"), name),
        member_shapes=_parse_members(shape_id, body.get("members")),
    )


def model_from_dict(data: Any, source: str = "<memory>") -> Model:
    """Build a Model from one parsed JSON AST document."""
    return Model(_shapes_from_dict(data, source).values())


def _shapes_from_dict(data: Any, source: str) -> dict[ShapeId, Shape]:
    if not isinstance(data, dict):
        raise ModelLoadError(
            f"Model document {source} must be a JSON object",
            details={"source": source},
        )

    raw_shapes = data.get("shapes", {})
    if not isinstance(raw_shapes, dict):
        raise ModelLoadError(
            f"'shapes' in {source} must be an object",
            details={"source": source},
        )

    shapes: dict[ShapeId, Shape] = {}
    for name, body in raw_shapes.items():
        shape = _parse_shape(name, body)
        shapes[shape.id] = shape
    return shapes


def load_model(path: str | Path) -> Model:
    """Load a single JSON AST file."""
    return load_models([path])


def load_models(paths) -> Model:
    """Load and merge several JSON AST files; later definitions of an id win."""
    shapes: dict[ShapeId, Shape] = {}
    for path in paths:
        data = load_json_file(path)
        loaded = _shapes_from_dict(data, str(path))
        logger.debug(f"Loaded {len(loaded)} shapes from {path}")
        shapes.update(loaded)
    return Model(shapes.values())
