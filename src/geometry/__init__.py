"""
Geometry — подгонка аффинного преобразования и операции над точками
"""

from src.geometry.affine_builder import (
    QUAD_POINT_COUNT,
    DegenerateConfiguration,
    build_affine_system,
    centroid,
    compute_affine_transform,
    fit_affine_transform,
    fit_affine_transform_from_contract,
)
from src.geometry.point_ops import rotate_point, scale_point

__all__ = [
    # Constants
    "QUAD_POINT_COUNT",
    # Exceptions
    "DegenerateConfiguration",
    # Affine fit
    "build_affine_system",
    "centroid",
    "compute_affine_transform",
    "fit_affine_transform",
    "fit_affine_transform_from_contract",
    # Point ops
    "rotate_point",
    "scale_point",
]
