"""
Numerical Safeguards — epsilon-защиты для плотной линейной алгебры

Модуль содержит численные константы и проверки, используемые солвером:
- Epsilon-параметры для детекции вырожденного pivot
- Проверки NaN/Inf для векторов и матриц
- Сравнение float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Pivot с |pivot| <= tolerance считается нулевым (матрица вырождена)
2. Точный ноль всегда считается вырожденным pivot
3. NaN/Inf никогда не возвращаются вызывающему коду
"""

import math
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительный порог вырожденности pivot (доля от max|A|)
# Нормальные уравнения возводят обусловленность в квадрат, поэтому порог
# выбран заметно выше машинного epsilon
EPS_PIVOT_REL: Final[float] = 1e-12

# Абсолютный порог вырожденности pivot
# 0.0 означает: только точный ноль (плюс относительный порог)
EPS_PIVOT_ABS: Final[float] = 0.0

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def all_finite(values: Sequence[float]) -> bool:
    """True если все элементы вектора finite (пустой вектор — True)."""
    return all(is_valid_float(v) for v in values)


def max_abs_entry(matrix: Sequence[Sequence[float]]) -> float:
    """
    Максимальный модуль элемента матрицы.

    Используется как масштаб для относительного порога pivot.

    Returns:
        max|A[i][j]|, либо 0.0 для матрицы без элементов
    """
    return max((abs(v) for row in matrix for v in row), default=0.0)


# =============================================================================
# PIVOT TOLERANCE
# =============================================================================


def pivot_tolerance(
    scale: float,
    rel_eps: float = EPS_PIVOT_REL,
    abs_eps: float = EPS_PIVOT_ABS,
) -> float:
    """
    Порог, ниже которого pivot считается нулевым.

    Формула:
        tol = max(abs_eps, rel_eps * scale)

    Args:
        scale: Масштаб матрицы (обычно max_abs_entry(A))
        rel_eps: Относительная толерантность (>= 0)
        abs_eps: Абсолютная толерантность (>= 0)

    Returns:
        Неотрицательный порог

    Raises:
        ValueError: Если eps отрицательный или NaN/Inf

    Examples:
        >>> pivot_tolerance(1000.0, rel_eps=1e-12)
        1e-09
        >>> pivot_tolerance(0.0)
        0.0
    """
    for name, eps in (("rel_eps", rel_eps), ("abs_eps", abs_eps)):
        if not is_valid_float(eps) or eps < 0:
            raise ValueError(f"{name} must be a non-negative finite float, got {eps}")

    return max(abs_eps, rel_eps * abs(scale))


def is_negligible_pivot(pivot: float, tolerance: float) -> bool:
    """
    Проверка вырожденности pivot.

    Точный ноль и NaN считаются вырожденными независимо от tolerance.
    """
    if pivot == 0.0 or not is_valid_float(pivot):
        return True
    return abs(pivot) <= tolerance


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
