"""Deep structural rewrites over shapes."""

import logging
from dataclasses import replace
from typing import Callable, Optional

from ..types import (
    DEFAULT_DEPTH,
    ArrayOf,
    DeepTransformEngineInterface,
    Field,
    RecordOf,
    Shape,
    ShapeKind,
)
from ..walker import ShapeWalker


FieldRewrite = Callable[[Field], Field]


class DeepTransformEngine(DeepTransformEngineInterface):
    """
    Engine applying recursive field-modifier rewrites to shapes.

    Every rewrite walks the shape depth first. Descending from a record into
    one of its fields costs one unit of the depth budget, while an array hands
    its budget to its element unchanged. Once the budget is spent the
    remaining subtree is returned as is.
    """

    def __init__(self, walker: Optional[ShapeWalker] = None,
                 logger: Optional[logging.Logger] = None,
                 default_depth: int = DEFAULT_DEPTH):
        """
        Initialize the transform engine.

        Args:
            walker: Optional ShapeWalker instance
            logger: Optional logger instance
            default_depth: Depth budget used when a call does not pass one
        """
        self.walker = walker or ShapeWalker()
        self.logger = logger or logging.getLogger(__name__)
        self.default_depth = default_depth

    def deep_partial(self, shape: Shape, depth: Optional[int] = None) -> Shape:
        """
        Make every field optional at every level.

        Args:
            shape: Shape to rewrite
            depth: Depth budget, defaults to ``default_depth``

        Returns:
            New shape with all fields optional
        """
        return self._apply("deep_partial", shape, depth,
                           lambda f: replace(f, optional=True))

    def deep_required(self, shape: Shape, depth: Optional[int] = None) -> Shape:
        """
        Make every field required at every level.

        Args:
            shape: Shape to rewrite
            depth: Depth budget, defaults to ``default_depth``

        Returns:
            New shape with no optional fields
        """
        return self._apply("deep_required", shape, depth,
                           lambda f: replace(f, optional=False))

    def deep_readonly(self, shape: Shape, depth: Optional[int] = None) -> Shape:
        """
        Make every field readonly at every level.

        Leaves, opaque or not, are never decomposed; only the fields holding
        them are flagged.

        Args:
            shape: Shape to rewrite
            depth: Depth budget, defaults to ``default_depth``

        Returns:
            New shape with all fields readonly
        """
        return self._apply("deep_readonly", shape, depth,
                           lambda f: replace(f, readonly=True))

    def deep_mutable(self, shape: Shape, depth: Optional[int] = None) -> Shape:
        """
        Make every field present and mutable at every level.

        Clears ``readonly`` and ``optional`` together, whatever their prior
        state.

        Args:
            shape: Shape to rewrite
            depth: Depth budget, defaults to ``default_depth``

        Returns:
            New shape with all field modifiers cleared
        """
        return self._apply("deep_mutable", shape, depth,
                           lambda f: replace(f, optional=False, readonly=False))

    def deep_intersection(self, primary: Shape, secondary: Shape,
                          depth: Optional[int] = None) -> Shape:
        """
        Merge the fields of ``secondary`` into every record level of ``primary``.

        Each record-valued field of ``primary`` is intersected with the whole
        of ``secondary``, not with a same-named field of it. Fields of
        ``primary`` always win: ``secondary`` only fills names that
        ``primary`` lacks at that level.

        Args:
            primary: Shape whose fields are kept
            secondary: Shape supplying missing fields
            depth: Depth budget, defaults to ``default_depth``

        Returns:
            New merged shape
        """
        budget = self._budget(depth)
        self.logger.debug(f"deep_intersection with depth budget {budget}")
        return self._intersect(primary, secondary, budget)

    def _budget(self, depth: Optional[int]) -> int:
        return self.default_depth if depth is None else depth

    def _apply(self, operation: str, shape: Shape, depth: Optional[int],
               rewrite_field: FieldRewrite) -> Shape:
        budget = self._budget(depth)
        self.logger.debug(f"{operation} with depth budget {budget}")
        return self._rewrite(shape, budget, rewrite_field)

    def _rewrite(self, shape: Shape, depth: int, rewrite_field: FieldRewrite) -> Shape:
        """Rebuild a shape, applying ``rewrite_field`` to every record field."""
        if depth <= 0:
            return shape

        kind = self.walker.classify(shape)

        if kind is ShapeKind.LEAF:
            return shape
        elif kind is ShapeKind.ARRAY:
            return ArrayOf(self._rewrite(shape.element, depth, rewrite_field))

        fields = {}
        for name, field in self.walker.children(shape):
            nested = self._rewrite(field.shape, depth - 1, rewrite_field)
            fields[name] = rewrite_field(replace(field, shape=nested))
        return RecordOf(fields)

    def _intersect(self, primary: Shape, secondary: Shape, depth: int) -> Shape:
        if depth <= 0 or self.walker.classify(primary) is not ShapeKind.RECORD:
            return primary

        fields = {}
        for name, field in self.walker.children(primary):
            if self.walker.classify(field.shape) is ShapeKind.RECORD:
                field = replace(field, shape=self._intersect(field.shape, secondary, depth - 1))
            fields[name] = field

        for name, field in self.walker.children(secondary):
            if name not in primary.fields:
                fields[name] = field

        return RecordOf(fields)
