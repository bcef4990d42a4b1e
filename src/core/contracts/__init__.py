"""
Contract Validation Module

Модуль для валидации JSON контрактов аффинной подгонки.
"""

from .validators import (
    AffineFitRequestValidator,
    AffineTransformValidator,
    ContractValidator,
    SchemaLoader,
    validate_affine_fit_request,
    validate_affine_transform,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AffineFitRequestValidator",
    "AffineTransformValidator",
    # Functions
    "validate_affine_fit_request",
    "validate_affine_transform",
]
