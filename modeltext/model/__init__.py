"""Shape model package: ids, shapes, traits and the JSON AST loader."""

from .exceptions import ModelLoadError
from .loader import load_model, load_models, model_from_dict
from .shapes import MemberShape, Model, Shape, ShapeId, Trait

__all__ = [
    "ModelLoadError",
    "MemberShape",
    "Model",
    "Shape",
    "ShapeId",
    "Trait",
    "load_model",
    "load_models",
    "model_from_dict",
]
