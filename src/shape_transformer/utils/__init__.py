"""Utility functions for the Shape Transformer."""

from .validation import ShapeValidation

__all__ = ["ShapeValidation"]
