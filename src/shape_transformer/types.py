"""Core type definitions for the Shape Transformer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Set, Union


DEFAULT_DEPTH = 5


class ShapeKind(Enum):
    """Enumeration of shape variants."""
    LEAF = "leaf"
    ARRAY = "array"
    RECORD = "record"


class ErrorType(Enum):
    """Enumeration of error types."""
    KIND = "kind"
    PATH = "path"
    CIRCULAR = "circular"
    STRUCTURE = "structure"


@dataclass(frozen=True)
class Leaf:
    """Terminal value. Opaque leaves are callable-like and never decomposed."""
    type_id: str
    opaque: bool = False


@dataclass(frozen=True)
class ArrayOf:
    """Homogeneous sequence of ``element``."""
    element: "Shape"


@dataclass(frozen=True)
class Field:
    """A named slot of a record together with its modifiers."""
    shape: "Shape"
    optional: bool = False
    readonly: bool = False


@dataclass(frozen=True)
class RecordOf:
    """
    Named structure.

    Field order follows insertion order of ``fields`` and is preserved by
    every transform. ``fields`` is a read-only view. Records are unhashable
    because a record may refer to itself.
    """
    fields: Mapping[str, Field] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def recursive(cls, build: Callable[["RecordOf"], Dict[str, Field]]) -> "RecordOf":
        """
        Create a self-referential record.

        Args:
            build: Receives the record under construction and returns its fields

        Returns:
            The finished record, whose fields may reference it
        """
        backing: Dict[str, Field] = {}
        record = cls(MappingProxyType(backing))
        backing.update(build(record))
        return record


Shape = Union[Leaf, ArrayOf, RecordOf]


@dataclass(frozen=True)
class NotFound:
    """Outcome of resolving a path that addresses nothing."""
    path: str
    segment: str

    def __bool__(self) -> bool:
        return False


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of shape validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


class ShapeError(Exception):
    """Base exception for shape errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class InvalidShapeKind(ShapeError):
    """Raised when a value is not one of the recognized shape variants."""

    def __init__(self, value: Any, location: Optional[str] = None):
        where = f" at '{location}'" if location else ""
        super().__init__(
            f"Unrecognized shape kind{where}: {type(value).__name__}",
            ErrorType.KIND,
            context=value,
        )
        self.location = location


class PathNotFoundError(ShapeError, KeyError):
    """Raised by strict path lookups when the path addresses nothing."""

    def __init__(self, not_found: NotFound):
        super().__init__(
            f"Path '{not_found.path}' not found: no field '{not_found.segment}'",
            ErrorType.PATH,
            context=not_found,
        )
        self.not_found = not_found

    def __str__(self) -> str:
        return self.args[0]


# Abstract base classes for interfaces

class DeepTransformEngineInterface(ABC):
    """Abstract interface for deep structural rewrites."""

    @abstractmethod
    def deep_partial(self, shape: Shape, depth: Optional[int] = None) -> Shape:
        """Mark every field optional."""
        pass

    @abstractmethod
    def deep_required(self, shape: Shape, depth: Optional[int] = None) -> Shape:
        """Mark every field required."""
        pass

    @abstractmethod
    def deep_readonly(self, shape: Shape, depth: Optional[int] = None) -> Shape:
        """Mark every field readonly."""
        pass

    @abstractmethod
    def deep_mutable(self, shape: Shape, depth: Optional[int] = None) -> Shape:
        """Mark every field present and mutable."""
        pass

    @abstractmethod
    def deep_intersection(self, primary: Shape, secondary: Shape,
                          depth: Optional[int] = None) -> Shape:
        """Fill name gaps of primary with fields of secondary."""
        pass


class PathAlgebraInterface(ABC):
    """Abstract interface for path enumeration and resolution."""

    @abstractmethod
    def paths(self, shape: Shape, depth: Optional[int] = None) -> Set[str]:
        """Enumerate every dot-path reachable from the root."""
        pass

    @abstractmethod
    def resolve(self, shape: Shape, path: str) -> Union[Shape, NotFound]:
        """Resolve a dot-path to the shape at that location."""
        pass
