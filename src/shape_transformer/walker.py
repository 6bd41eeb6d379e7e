"""Classification and navigation primitives shared by every shape operation."""

import logging
from typing import Any, List, Optional, Tuple

from .types import (
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


class ShapeWalker:
    """
    Classifies shape nodes and exposes their immediate children.

    The walker never recurses on its own; callers drive the traversal and
    thread their own depth budget through it.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the shape walker.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, shape: Any) -> ShapeKind:
        """
        Classify a single shape node.

        Args:
            shape: Shape node to classify

        Returns:
            ShapeKind of the node

        Raises:
            InvalidShapeKind: If the node is not a Leaf, ArrayOf or RecordOf
        """
        if isinstance(shape, Leaf):
            return ShapeKind.LEAF
        elif isinstance(shape, ArrayOf):
            return ShapeKind.ARRAY
        elif isinstance(shape, RecordOf):
            return ShapeKind.RECORD
        else:
            self.logger.debug(f"Rejected shape node of type {type(shape).__name__}")
            raise InvalidShapeKind(shape)

    def is_container(self, shape: Shape) -> bool:
        """Whether a node can be descended into."""
        return self.classify(shape) is not ShapeKind.LEAF

    def children(self, shape: Shape) -> List[Tuple[str, Field]]:
        """
        Get the named fields of a record in declaration order.

        Args:
            shape: Shape node

        Returns:
            List of (name, field) pairs; empty for leaves and arrays
        """
        if self.classify(shape) is ShapeKind.RECORD:
            return list(shape.fields.items())
        return []

    def unwrap_array(self, shape: Shape) -> Shape:
        """Strip every ArrayOf wrapper around a node."""
        while self.classify(shape) is ShapeKind.ARRAY:
            shape = shape.element
        return shape

    def element_of(self, shape: Shape) -> Optional[Shape]:
        """
        Get the element shape of an array.

        Args:
            shape: Shape node

        Returns:
            Element shape, or None when the node is not an array
        """
        if self.classify(shape) is ShapeKind.ARRAY:
            return shape.element
        return None

    def flat(self, shape: Shape) -> ArrayOf:
        """
        Flatten one level of array nesting.

        Args:
            shape: ArrayOf node

        Returns:
            ArrayOf whose element is no longer an array at the first level

        Raises:
            ShapeError: If the node is not an array
        """
        kind = self.classify(shape)
        if kind is not ShapeKind.ARRAY:
            raise ShapeError(
                f"Cannot flatten a {kind.value} shape", ErrorType.STRUCTURE, context=shape
            )

        element = shape.element
        if self.classify(element) is ShapeKind.ARRAY:
            return ArrayOf(element.element)
        return shape
