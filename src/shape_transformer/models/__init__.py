"""Data models for the Shape Transformer."""

from .shape_codec import shape_from_dict, shape_to_dict

__all__ = ["shape_from_dict", "shape_to_dict"]
