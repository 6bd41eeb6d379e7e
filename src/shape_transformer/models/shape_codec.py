"""Dictionary form of shapes for interchange with callers."""

from typing import Any, Dict, List, Optional

from ..types import (
    ArrayOf,
    ErrorType,
    Field,
    InvalidShapeKind,
    Leaf,
    RecordOf,
    Shape,
    ShapeError,
    ShapeKind,
)


def shape_to_dict(shape: Shape) -> Dict[str, Any]:
    """
    Convert a shape to a plain dictionary.

    Args:
        shape: Acyclic shape to convert

    Returns:
        Dictionary with a ``kind`` tag and the variant's attributes

    Raises:
        ShapeError: If the shape refers back to one of its ancestors
        InvalidShapeKind: If a node is not a recognized variant
    """
    return _encode(shape, [], [])


def shape_from_dict(data: Dict[str, Any]) -> Shape:
    """
    Create a shape from its dictionary form.

    Args:
        data: Dictionary produced by ``shape_to_dict``

    Returns:
        Reconstructed shape

    Raises:
        InvalidShapeKind: If a ``kind`` tag is missing or unknown
        ShapeError: If an entry lacks a key its kind requires
    """
    return _decode(data, "")


def _encode(shape: Shape, ancestors: List[int], path: List[str]) -> Dict[str, Any]:
    if isinstance(shape, Leaf):
        return {"kind": ShapeKind.LEAF.value, "typeId": shape.type_id, "opaque": shape.opaque}

    location = ".".join(path) or "root"
    if id(shape) in ancestors:
        raise ShapeError(
            f"Circular shape reference at '{location}'", ErrorType.CIRCULAR, context=location
        )

    if isinstance(shape, ArrayOf):
        return {
            "kind": ShapeKind.ARRAY.value,
            "element": _encode(shape.element, ancestors + [id(shape)], path),
        }
    elif isinstance(shape, RecordOf):
        fields = {}
        for name, field in shape.fields.items():
            fields[name] = {
                "shape": _encode(field.shape, ancestors + [id(shape)], path + [name]),
                "optional": field.optional,
                "readonly": field.readonly,
            }
        return {"kind": ShapeKind.RECORD.value, "fields": fields}
    else:
        raise InvalidShapeKind(shape, location)


def _decode(data: Any, location: str) -> Shape:
    kind = _kind_of(data, location)

    if kind is ShapeKind.LEAF:
        return Leaf(type_id=_entry(data, "typeId", location), opaque=data.get("opaque", False))
    elif kind is ShapeKind.ARRAY:
        return ArrayOf(_decode(_entry(data, "element", location), location))

    fields = {}
    for name, entry in data.get("fields", {}).items():
        child_location = f"{location}.{name}" if location else name
        fields[name] = Field(
            shape=_decode(_entry(entry, "shape", child_location), child_location),
            optional=entry.get("optional", False),
            readonly=entry.get("readonly", False),
        )
    return RecordOf(fields)


def _entry(data: Any, key: str, location: str) -> Any:
    if not isinstance(data, dict) or key not in data:
        where = location or "root"
        raise ShapeError(
            f"Missing '{key}' in shape entry at '{where}'", ErrorType.STRUCTURE, context=where
        )
    return data[key]


def _kind_of(data: Any, location: str) -> ShapeKind:
    tag: Optional[Any] = data.get("kind") if isinstance(data, dict) else None
    try:
        return ShapeKind(tag)
    except ValueError:
        raise InvalidShapeKind(data, location or None) from None
