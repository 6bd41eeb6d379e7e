"""Validation utilities for caller-constructed shapes."""

from typing import Any, List, Set

from ..types import (
    DEFAULT_DEPTH,
    ArrayOf,
    ErrorType,
    Field,
    Leaf,
    RecordOf,
    ValidationError,
    ValidationResult,
)


class ShapeValidation:
    """Utility class for validating shape graphs."""

    @staticmethod
    def validate_shape(shape: Any, depth: int = DEFAULT_DEPTH) -> ValidationResult:
        """
        Validate a shape graph.

        Malformed nodes are errors. Self-references, nesting beyond the depth
        budget and field names that cannot be addressed by a dot-path are
        reported as warnings, since every operation still terminates on them.

        Args:
            shape: Shape to validate
            depth: Depth budget the shape is meant to be used with

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        ShapeValidation._check_node(shape, [], set(), errors, warnings)

        max_depth = ShapeValidation._calculate_max_depth(shape, set())
        if max_depth > depth:
            warnings.append(
                f"Nesting depth {max_depth} exceeds depth budget {depth}; "
                f"deeper levels will be left untouched."
            )

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _check_node(node: Any, path: List[str], active: Set[int],
                    errors: List[ValidationError], warnings: List[str]) -> None:
        location = ".".join(path) or "root"

        if isinstance(node, Leaf):
            return

        if not isinstance(node, (ArrayOf, RecordOf)):
            errors.append(ValidationError(
                type=ErrorType.KIND,
                message=f"Unrecognized shape kind: {type(node).__name__}",
                location=location
            ))
            return

        if id(node) in active:
            warnings.append(f"Circular shape reference at '{location}'")
            return

        active.add(id(node))
        if isinstance(node, ArrayOf):
            ShapeValidation._check_node(node.element, path, active, errors, warnings)
        else:
            for name, field in node.fields.items():
                child_path = path + [str(name)]
                if not isinstance(field, Field):
                    errors.append(ValidationError(
                        type=ErrorType.STRUCTURE,
                        message=f"Record entry must be a Field, got {type(field).__name__}",
                        location=".".join(child_path)
                    ))
                    continue
                if not isinstance(name, str) or "." in name or not name:
                    warnings.append(f"Field name {name!r} is not addressable by a dot-path")
                ShapeValidation._check_node(field.shape, child_path, active, errors, warnings)
        active.remove(id(node))

    @staticmethod
    def _calculate_max_depth(node: Any, active: Set[int]) -> int:
        """Calculate the number of record field descents on the longest acyclic branch."""
        if isinstance(node, ArrayOf):
            return ShapeValidation._calculate_max_depth(node.element, active)
        if not isinstance(node, RecordOf) or id(node) in active:
            return 0

        active.add(id(node))
        max_child_depth = 0
        for field in node.fields.values():
            if isinstance(field, Field):
                child_depth = 1 + ShapeValidation._calculate_max_depth(field.shape, active)
                max_child_depth = max(max_child_depth, child_depth)
        active.remove(id(node))

        return max_child_depth
