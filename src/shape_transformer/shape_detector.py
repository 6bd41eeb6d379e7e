"""Shape detection from sample Python data."""

import logging
from typing import Any, Dict, Optional, Set

from .types import ArrayOf, Field, Leaf, RecordOf, Shape


UNKNOWN_TYPE_ID = "unknown"
FUNCTION_TYPE_ID = "function"


class ShapeDetector:
    """
    Infers a shape from a sample value.

    Dictionaries become records, lists and tuples become arrays of their
    first item's shape, callables become opaque leaves, and everything else
    becomes a leaf named after its Python type. Detection describes
    structure only and does not check that sibling items agree.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the shape detector.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def detect_shape(self, sample: Any) -> Shape:
        """
        Detect the shape of a sample value.

        Args:
            sample: Value to describe

        Returns:
            Shape describing the sample
        """
        return self._detect(sample, set())

    def _detect(self, sample: Any, active: Set[int]) -> Shape:
        if isinstance(sample, dict):
            return self._detect_record(sample, active)
        elif isinstance(sample, (list, tuple)):
            if not sample:
                return ArrayOf(Leaf(UNKNOWN_TYPE_ID))
            return ArrayOf(self._detect_nested(sample, sample[0], active))
        elif callable(sample):
            return Leaf(FUNCTION_TYPE_ID, opaque=True)
        elif sample is None:
            return Leaf("null")
        else:
            return Leaf(type(sample).__name__)

    def _detect_record(self, sample: Dict[Any, Any], active: Set[int]) -> RecordOf:
        fields = {}
        for key, value in sample.items():
            fields[str(key)] = Field(self._detect_nested(sample, value, active))
        return RecordOf(fields)

    def _detect_nested(self, container: Any, value: Any, active: Set[int]) -> Shape:
        # Sample data referring back to an enclosing container stops here.
        if id(value) in active or value is container:
            self.logger.warning(f"Circular reference in sample data at {type(value).__name__}")
            return Leaf(UNKNOWN_TYPE_ID)

        active.add(id(container))
        try:
            return self._detect(value, active)
        finally:
            active.discard(id(container))
