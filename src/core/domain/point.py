"""
Point — 2D координата

Immutable Pydantic модель точки на плоскости. Идентичности нет:
две точки с одинаковыми координатами равны и имеют одинаковый hash.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import is_valid_float


class Point(BaseModel):
    """
    Точка (x, y) на плоскости.

    Immutable модель (frozen=True). Координаты обязаны быть finite:
    NaN/Inf в аффинной подгонке дают бессмысленную систему уравнений.
    """

    x: float = Field(..., description="Координата X")
    y: float = Field(..., description="Координата Y")

    model_config = {"frozen": True}  # Immutable

    @field_validator("x", "y")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Запрет NaN/Inf координат."""
        if not is_valid_float(v):
            raise ValueError(f"coordinate must be finite, got {v}")
        return v

    @classmethod
    def of(cls, x: float, y: float) -> "Point":
        """Позиционный конструктор: Point.of(1.0, 2.0)."""
        return cls(x=x, y=y)

    def as_tuple(self) -> tuple[float, float]:
        """Координаты как кортеж (x, y)."""
        return (self.x, self.y)
