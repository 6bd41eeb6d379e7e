"""Dot-path enumeration and resolution over shapes."""

import logging
from typing import Optional, Set, Union

from ..types import (
    DEFAULT_DEPTH,
    NotFound,
    PathAlgebraInterface,
    PathNotFoundError,
    Shape,
    ShapeKind,
)
from ..walker import ShapeWalker


PATH_SEPARATOR = "."


class PathAlgebra(PathAlgebraInterface):
    """
    Enumerates and resolves dot-joined field paths.

    Arrays contribute no segment: the paths of an array's element are
    exposed under the path of the field holding the array.
    """

    def __init__(self, walker: Optional[ShapeWalker] = None,
                 logger: Optional[logging.Logger] = None,
                 default_depth: int = DEFAULT_DEPTH):
        """
        Initialize the path algebra.

        Args:
            walker: Optional ShapeWalker instance
            logger: Optional logger instance
            default_depth: Depth budget used when a call does not pass one
        """
        self.walker = walker or ShapeWalker()
        self.logger = logger or logging.getLogger(__name__)
        self.default_depth = default_depth

    def paths(self, shape: Shape, depth: Optional[int] = None) -> Set[str]:
        """
        Enumerate every path reachable from the root.

        Intermediate container paths are included, not only leaves. A
        record reached with no budget left still contributes its field
        names, but nothing is joined beneath them.

        Args:
            shape: Shape to enumerate
            depth: Maximum number of joins in a path, defaults to ``default_depth``

        Returns:
            Set of dot-joined paths; ``{""}`` for a leaf or an empty record
        """
        budget = self.default_depth if depth is None else depth
        result = self._collect(shape, budget)
        self.logger.debug(f"Enumerated {len(result)} paths with depth budget {budget}")
        return result

    def resolve(self, shape: Shape, path: str) -> Union[Shape, NotFound]:
        """
        Resolve a dot-path to the shape at that location.

        The empty path resolves to ``shape`` itself.

        Args:
            shape: Root shape
            path: Dot-joined field names

        Returns:
            Shape at the path, or NotFound naming the first segment that
            could not be followed
        """
        if path == "":
            return shape

        current = shape
        for segment in path.split(PATH_SEPARATOR):
            current = self.walker.unwrap_array(current)
            if self.walker.classify(current) is not ShapeKind.RECORD:
                return NotFound(path, segment)

            field = current.fields.get(segment)
            if field is None:
                return NotFound(path, segment)
            current = field.shape

        return current

    def require(self, shape: Shape, path: str) -> Shape:
        """
        Resolve a dot-path, raising when it addresses nothing.

        Args:
            shape: Root shape
            path: Dot-joined field names

        Returns:
            Shape at the path

        Raises:
            PathNotFoundError: If the path cannot be followed
        """
        result = self.resolve(shape, path)
        if isinstance(result, NotFound):
            raise PathNotFoundError(result)
        return result

    def _collect(self, shape: Shape, depth: int) -> Set[str]:
        if depth < 0:
            return set()

        shape = self.walker.unwrap_array(shape)
        children = self.walker.children(shape)
        if not children:
            return {""}

        result = set()
        for name, field in children:
            result.add(name)
            if not self.walker.is_container(field.shape):
                continue
            for suffix in self._collect(field.shape, depth - 1):
                if suffix:
                    result.add(f"{name}{PATH_SEPARATOR}{suffix}")
        return result
