"""
Dense Matrix Ops — примитивы плотной линейной алгебры

Матрица представлена как список строк (row-major), вектор как список float.
Все функции чистые: входы не модифицируются, результат всегда новый список.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Матрица прямоугольная: rows >= 1, cols >= 1, все строки одной длины
2. Несовместимые размеры → DimensionMismatch (никогда мусор или IndexError)
"""

from typing import Sequence, TypeAlias

from src.core.math.errors import DimensionMismatch

Matrix: TypeAlias = list[list[float]]
Vector: TypeAlias = list[float]

MatrixLike: TypeAlias = Sequence[Sequence[float]]
VectorLike: TypeAlias = Sequence[float]


# =============================================================================
# SHAPE
# =============================================================================


def shape(matrix: MatrixLike, name: str = "matrix") -> tuple[int, int]:
    """
    Размер матрицы с проверкой прямоугольности.

    Args:
        matrix: Матрица (последовательность строк)
        name: Имя операнда (для сообщения об ошибке)

    Returns:
        (rows, cols)

    Raises:
        DimensionMismatch: Если нет строк, нет столбцов или строки разной длины

    Examples:
        >>> shape([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        (2, 3)
    """
    rows = len(matrix)
    if rows == 0:
        raise DimensionMismatch(f"{name} must have at least one row")

    cols = len(matrix[0])
    if cols == 0:
        raise DimensionMismatch(f"{name} must have at least one column")

    for i, row in enumerate(matrix):
        if len(row) != cols:
            raise DimensionMismatch(
                f"{name} is ragged: row {i} has {len(row)} columns, expected {cols}"
            )

    return rows, cols


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Произведение матриц C = A·B.

    C[i][j] = Σ_k A[i][k]·B[k][j]

    Raises:
        DimensionMismatch: Если A.cols != B.rows

    Examples:
        >>> multiply([[1.0, 2.0]], [[3.0], [4.0]])
        [[11.0]]
    """
    a_rows, a_cols = shape(a, "A")
    b_rows, b_cols = shape(b, "B")

    if a_cols != b_rows:
        raise DimensionMismatch(
            f"cannot multiply {a_rows}x{a_cols} by {b_rows}x{b_cols}: "
            f"inner dimensions differ ({a_cols} != {b_rows})"
        )

    result = [[0.0] * b_cols for _ in range(a_rows)]
    for i in range(a_rows):
        a_row = a[i]
        out_row = result[i]
        for k in range(a_cols):
            a_ik = a_row[k]
            b_row = b[k]
            for j in range(b_cols):
                out_row[j] += a_ik * b_row[j]

    return result


def multiply_vector(a: MatrixLike, v: VectorLike) -> Vector:
    """
    Произведение матрицы на вектор w = A·v.

    w[i] = Σ_j A[i][j]·v[j]

    Raises:
        DimensionMismatch: Если A.cols != len(v)
    """
    a_rows, a_cols = shape(a, "A")

    if a_cols != len(v):
        raise DimensionMismatch(
            f"cannot multiply {a_rows}x{a_cols} matrix by vector of length {len(v)}"
        )

    return [sum((a_ij * v_j for a_ij, v_j in zip(row, v)), 0.0) for row in a]


# =============================================================================
# TRANSPOSE
# =============================================================================


def transpose(a: MatrixLike) -> Matrix:
    """
    Транспонирование: Aᵗ[i][j] = A[j][i].

    Raises:
        DimensionMismatch: Если у A нет строк (число столбцов не определено)

    Examples:
        >>> transpose([[1.0, 2.0, 3.0]])
        [[1.0], [2.0], [3.0]]
    """
    _, cols = shape(a, "A")
    return [[row[j] for row in a] for j in range(cols)]
