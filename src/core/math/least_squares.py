"""
Least-Squares Reduction — normal equations

Решение переопределённой системы A·x ≈ b (A размера m×n, m >= n) в смысле
минимума ‖A·x − b‖² через нормальные уравнения:

    Aᵗ = transpose(A)
    (AᵗA)·x = Aᵗb

Квадратная система n×n решается Linear Solver (метод Гаусса).

ОГРАНИЧЕНИЕ ТОЧНОСТИ:
Нормальные уравнения возводят число обусловленности в квадрат:
cond(AᵗA) = cond(A)². QR или SVD численно устойчивее, но требуют
примитивов, которых здесь нет. Для систем фиксированного малого размера
(8×6 в аффинной подгонке) с разумно обусловленными точками потеря
точности несущественна. Плохо обусловленные входы (почти коллинеарные
точки) отсекаются порогом pivot в солвере → SingularMatrix.
"""

from src.core.math.dense import (
    MatrixLike,
    Vector,
    VectorLike,
    multiply,
    multiply_vector,
    shape,
    transpose,
)
from src.core.math.errors import DimensionMismatch
from src.core.math.linear_solver import SolverConfig, solve_linear_system


def solve_least_squares(
    a: MatrixLike,
    b: VectorLike,
    config: SolverConfig | None = None,
) -> Vector:
    """
    Least-squares решение A·x ≈ b через нормальные уравнения.

    Args:
        a: Матрица m×n (обычно m >= n)
        b: Вектор правой части длины m
        config: Конфигурация солвера (опционально)

    Returns:
        x длины n, минимизирующий ‖A·x − b‖²

    Raises:
        DimensionMismatch: Если len(b) != m или A не прямоугольная
        SingularMatrix: Если AᵗA вырождена (rank(A) < n)

    Examples:
        >>> solve_least_squares([[1.0], [1.0]], [1.0, 3.0])
        [2.0]
    """
    rows, cols = shape(a, "A")
    if len(b) != rows:
        raise DimensionMismatch(f"A is {rows}x{cols} but b has length {len(b)}")

    a_t = transpose(a)
    ata = multiply(a_t, a)
    atb = multiply_vector(a_t, b)

    return solve_linear_system(ata, atb, config=config)


def residual_sum_of_squares(a: MatrixLike, x: VectorLike, b: VectorLike) -> float:
    """
    Сумма квадратов невязок ‖A·x − b‖².

    Raises:
        DimensionMismatch: Если размеры A, x, b несовместимы
    """
    ax = multiply_vector(a, x)
    if len(ax) != len(b):
        raise DimensionMismatch(f"A·x has length {len(ax)} but b has length {len(b)}")

    return sum(((ax_i - b_i) ** 2 for ax_i, b_i in zip(ax, b)), 0.0)
