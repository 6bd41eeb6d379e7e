"""
Shape Transformer - Deep structural rewrites and dot-path addressing.

Describes nested records and arrays as explicit Shape values and provides
deep partial, required, readonly, mutable and intersection rewrites plus
path enumeration and resolution, all bounded by a depth budget.
"""

from typing import Set, Union

from .engines import DeepTransformEngine, PathAlgebra
from .models import shape_from_dict, shape_to_dict
from .shape_detector import ShapeDetector
from .types import (
    DEFAULT_DEPTH,
    ArrayOf,
    ErrorType,
    Field,
    InvalidShapeKind,
    Leaf,
    NotFound,
    PathNotFoundError,
    RecordOf,
    Shape,
    ShapeError,
    ShapeKind,
)
from .utils import ShapeValidation
from .walker import ShapeWalker

__version__ = "1.0.0"

_engine = DeepTransformEngine()
_paths = PathAlgebra()


def deep_partial(shape: Shape, depth: int = DEFAULT_DEPTH) -> Shape:
    """Make every field optional at every level."""
    return _engine.deep_partial(shape, depth)


def deep_required(shape: Shape, depth: int = DEFAULT_DEPTH) -> Shape:
    """Make every field required at every level."""
    return _engine.deep_required(shape, depth)


def deep_readonly(shape: Shape, depth: int = DEFAULT_DEPTH) -> Shape:
    """Make every field readonly at every level."""
    return _engine.deep_readonly(shape, depth)


def deep_mutable(shape: Shape, depth: int = DEFAULT_DEPTH) -> Shape:
    """Make every field present and mutable at every level."""
    return _engine.deep_mutable(shape, depth)


def deep_intersection(primary: Shape, secondary: Shape,
                      depth: int = DEFAULT_DEPTH) -> Shape:
    """Fill the name gaps of every record level of primary from secondary."""
    return _engine.deep_intersection(primary, secondary, depth)


def paths(shape: Shape, depth: int = DEFAULT_DEPTH) -> Set[str]:
    """Enumerate every dot-path reachable from the root."""
    return _paths.paths(shape, depth)


def resolve(shape: Shape, path: str) -> Union[Shape, NotFound]:
    """Resolve a dot-path to the shape at that location."""
    return _paths.resolve(shape, path)


__all__ = [
    "DEFAULT_DEPTH",
    "ArrayOf",
    "DeepTransformEngine",
    "ErrorType",
    "Field",
    "InvalidShapeKind",
    "Leaf",
    "NotFound",
    "PathAlgebra",
    "PathNotFoundError",
    "RecordOf",
    "Shape",
    "ShapeDetector",
    "ShapeError",
    "ShapeKind",
    "ShapeValidation",
    "ShapeWalker",
    "deep_intersection",
    "deep_mutable",
    "deep_partial",
    "deep_readonly",
    "deep_required",
    "paths",
    "resolve",
    "shape_from_dict",
    "shape_to_dict",
]
