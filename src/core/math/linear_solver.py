"""
Linear Solver — Gaussian elimination with partial pivoting

Решение квадратной системы A·x = b для небольших плотных матриц (n <= 8).

Алгоритм (для i = 0..n-1):
1. Pivot: строка с максимальным |A[k][i]| среди k = i..n-1
2. Перестановка строк i и maxRow в A (столбцы i..n-1) и в b
3. Исключение: для k > i
       c = -A[k][i] / A[i][i]
       A[k][i] = 0 (точно, без накопления шума)
       A[k][j] += c·A[i][j] для j > i
       b[k] += c·b[i]

Обратная подстановка (i = n-1..0):
    x[i] = b[i] / A[i][i]
    b[k] -= A[k][i]·x[i] для k < i

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные A и b никогда не модифицируются (работа на локальных копиях)
2. Вырожденный pivot → SingularMatrix, деление на ноль не выполняется
3. NaN/Inf в решении → SingularMatrix (никогда не возвращаются)
4. n == 0 → пустое решение
"""

import logging
from dataclasses import dataclass

from src.core.math.dense import MatrixLike, Vector, VectorLike, shape
from src.core.math.errors import DimensionMismatch, SingularMatrix
from src.core.math.numerical_safeguards import (
    EPS_PIVOT_ABS,
    EPS_PIVOT_REL,
    all_finite,
    is_negligible_pivot,
    max_abs_entry,
    pivot_tolerance,
)

log = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация солвера.

    Порог вырожденности pivot:
        tol = max(pivot_abs_eps, pivot_rel_eps * max|A|)
    """

    # Относительный порог (доля от максимального элемента матрицы)
    pivot_rel_eps: float = EPS_PIVOT_REL

    # Абсолютный порог
    pivot_abs_eps: float = EPS_PIVOT_ABS


DEFAULT_SOLVER_CONFIG = SolverConfig()


# =============================================================================
# SOLVER
# =============================================================================


def solve_linear_system(
    a: MatrixLike,
    b: VectorLike,
    config: SolverConfig | None = None,
) -> Vector:
    """
    Решение A·x = b методом Гаусса с частичным выбором ведущего элемента.

    Args:
        a: Квадратная матрица n×n
        b: Вектор правой части длины n
        config: Конфигурация порогов (опционально, используется default)

    Returns:
        Решение x длины n (новый список)

    Raises:
        DimensionMismatch: Если A не квадратная или len(b) != n
        SingularMatrix: Если pivot неотличим от нуля или решение не finite

    Examples:
        >>> solve_linear_system([[2.0, 0.0], [0.0, 4.0]], [2.0, 8.0])
        [1.0, 2.0]
        >>> solve_linear_system([], [])
        []
    """
    config = config or DEFAULT_SOLVER_CONFIG

    n = len(b)
    if n == 0 and len(a) == 0:
        return []

    rows, cols = shape(a, "A")
    if rows != cols:
        raise DimensionMismatch(f"A must be square, got {rows}x{cols}")
    if rows != n:
        raise DimensionMismatch(f"A is {rows}x{cols} but b has length {n}")

    # Локальные копии: элиминация выполняется in-place
    m = [[float(v) for v in row] for row in a]
    rhs = [float(v) for v in b]

    tol = pivot_tolerance(
        max_abs_entry(m),
        rel_eps=config.pivot_rel_eps,
        abs_eps=config.pivot_abs_eps,
    )

    for i in range(n):
        # 1. Поиск максимума в столбце i
        max_row = i
        max_el = abs(m[i][i])
        for k in range(i + 1, n):
            if abs(m[k][i]) > max_el:
                max_el = abs(m[k][i])
                max_row = k

        # 2. Перестановка строк (столбцы левее i уже обнулены)
        if max_row != i:
            for k in range(i, n):
                m[max_row][k], m[i][k] = m[i][k], m[max_row][k]
            rhs[max_row], rhs[i] = rhs[i], rhs[max_row]

        pivot = m[i][i]
        if is_negligible_pivot(pivot, tol):
            log.debug("singular pivot at step %d: %r (tolerance %r)", i, pivot, tol)
            raise SingularMatrix(
                f"matrix is singular: pivot {pivot!r} at step {i} "
                f"is within tolerance {tol!r} of zero",
                step=i,
                pivot=pivot,
            )

        # 3. Обнуление столбца i ниже диагонали
        for k in range(i + 1, n):
            c = -m[k][i] / pivot
            m[k][i] = 0.0
            for j in range(i + 1, n):
                m[k][j] += c * m[i][j]
            rhs[k] += c * rhs[i]

    # Обратная подстановка для верхнетреугольной m
    x = [0.0] * n
    for i in range(n - 1, -1, -1):
        x[i] = rhs[i] / m[i][i]
        for k in range(i - 1, -1, -1):
            rhs[k] -= m[k][i] * x[i]

    if not all_finite(x):
        raise SingularMatrix(f"solution is not finite: {x!r}")

    return x
