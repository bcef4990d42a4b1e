"""
Domain models and value objects.

Contains the geometric value types: Point and AffineTransform.
"""

from src.core.domain.affine_transform import AffineTransform
from src.core.domain.point import Point

__all__ = [
    "AffineTransform",
    "Point",
]
