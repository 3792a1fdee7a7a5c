"""
Shaped containers over owned buffers.

Public API:
    Vector       - rank 1
    Matrix       - rank 2, row-major
    ShapedArray  - rank N, row-major
"""

from numerix.containers.base import Container
from numerix.containers.vector import Vector
from numerix.containers.matrix import Matrix
from numerix.containers.shaped import ShapedArray

__all__ = [
    "Container",
    "Vector",
    "Matrix",
    "ShapedArray",
]
