"""Core engines for the Shape Transformer."""

from .path_algebra import PathAlgebra
from .transform_engine import DeepTransformEngine

__all__ = ["DeepTransformEngine", "PathAlgebra"]
