"""
AffineTransform — 2D аффинное преобразование

Immutable Pydantic модель из 6 коэффициентов (a, b, c, d, e, f):

    x' = a·x + c·y + e
    y' = b·x + d·y + f

Порядок коэффициентов совпадает с canvas/DOMMatrix (setTransform(a, b, c, d, e, f)).
В однородных координатах:

    | a  c  e |
    | b  d  f |
    | 0  0  1 |
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from src.core.domain.point import Point
from src.core.math.numerical_safeguards import is_close, is_valid_float


class AffineTransform(BaseModel):
    """
    Аффинное преобразование плоскости.

    Immutable модель (frozen=True). Создаётся один раз на вызов подгонки
    и возвращается вызывающему коду.
    """

    a: float = Field(..., description="Масштаб/поворот: вклад x в x'")
    b: float = Field(..., description="Сдвиг/поворот: вклад x в y'")
    c: float = Field(..., description="Сдвиг/поворот: вклад y в x'")
    d: float = Field(..., description="Масштаб/поворот: вклад y в y'")
    e: float = Field(..., description="Перенос по X")
    f: float = Field(..., description="Перенос по Y")

    model_config = {"frozen": True}  # Immutable

    @field_validator("a", "b", "c", "d", "e", "f")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Запрет NaN/Inf коэффициентов."""
        if not is_valid_float(v):
            raise ValueError(f"coefficient must be finite, got {v}")
        return v

    @classmethod
    def identity(cls) -> "AffineTransform":
        """Тождественное преобразование (1, 0, 0, 1, 0, 0)."""
        return cls(a=1.0, b=0.0, c=0.0, d=1.0, e=0.0, f=0.0)

    def coefficients(self) -> tuple[float, float, float, float, float, float]:
        """Коэффициенты в каноническом порядке (a, b, c, d, e, f)."""
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def apply(self, point: Point) -> Point:
        """
        Применение преобразования к точке.

        Args:
            point: Исходная точка

        Returns:
            Новая точка (a·x + c·y + e, b·x + d·y + f)
        """
        return Point(
            x=self.a * point.x + self.c * point.y + self.e,
            y=self.b * point.x + self.d * point.y + self.f,
        )

    def as_matrix(self) -> list[list[float]]:
        """Матрица 3×3 в однородных координатах."""
        return [
            [self.a, self.c, self.e],
            [self.b, self.d, self.f],
            [0.0, 0.0, 1.0],
        ]

    def is_close(self, other: "AffineTransform", abs_tol: float = 1e-9) -> bool:
        """Покоэффициентное сравнение с абсолютной толерантностью."""
        return all(
            is_close(mine, theirs, rel_tol=0.0, abs_tol=abs_tol)
            for mine, theirs in zip(self.coefficients(), other.coefficients())
        )

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в контракт affine_transform."""
        return {"coefficients": dict(zip("abcdef", self.coefficients()))}

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "AffineTransform":
        """Десериализация из контракта affine_transform."""
        return cls(**data["coefficients"])
