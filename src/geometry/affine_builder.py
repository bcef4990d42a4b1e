"""
Affine Transform Builder — подгонка аффинного преобразования по 4 парам точек

Для каждой пары (p_i, q_i) в систему добавляются два уравнения:

    q_i.x = a·p_i.x + c·p_i.y + e
    q_i.y = b·p_i.x + d·p_i.y + f

Раскладка строк (неизвестные в порядке [a, c, e, b, d, f]):

    строка 2i:   [p_i.x, p_i.y, 1, 0,     0,     0]   rhs q_i.x
    строка 2i+1: [0,     0,     0, p_i.x, p_i.y, 1]   rhs q_i.y

Система 8×6 (8 уравнений, 6 неизвестных) решается через least squares.
Решение переупаковывается в канонический порядок (a, b, c, d, e, f).

Перед решением исходные точки центрируются на их центроиде (cx, cy),
перенос восстанавливается после:

    e = e' - a·cx - c·cy
    f = f' - b·cx - d·cy

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ровно 4 исходные и 4 целевые точки
2. Вырожденная конфигурация (коллинеарные исходные точки) →
   DegenerateConfiguration, никогда численно неустойчивый результат
3. Детекция вырожденности не зависит от положения четырёхугольника
   на плоскости (только от его формы)
"""

import logging
from typing import Any, Dict, Final, Sequence

from src.core.contracts import validate_affine_fit_request, validate_affine_transform
from src.core.domain import AffineTransform, Point
from src.core.math import (
    LinearAlgebraError,
    Matrix,
    SingularMatrix,
    SolverConfig,
    Vector,
    residual_sum_of_squares,
    solve_least_squares,
)

log = logging.getLogger(__name__)

# Количество пар точек (четырёхугольник → четырёхугольник)
QUAD_POINT_COUNT: Final[int] = 4


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateConfiguration(LinearAlgebraError):
    """
    Аффинная подгонка невозможна: система уравнений вырождена.

    Возникает, когда исходные точки коллинеарны (или совпадают), и
    нормальная матрица AᵗA не имеет обратной.
    """

    pass


# =============================================================================
# SYSTEM ASSEMBLY
# =============================================================================


def _check_quad(points: Sequence[Point], name: str) -> None:
    if len(points) != QUAD_POINT_COUNT:
        raise ValueError(
            f"{name} must contain exactly {QUAD_POINT_COUNT} points, got {len(points)}"
        )


def centroid(points: Sequence[Point]) -> Point:
    """Центроид (среднее арифметическое) непустого набора точек."""
    if not points:
        raise ValueError("centroid of an empty point set is undefined")
    n = len(points)
    return Point(x=sum(p.x for p in points) / n, y=sum(p.y for p in points) / n)


def build_affine_system(
    sources: Sequence[Point],
    targets: Sequence[Point],
) -> tuple[Matrix, Vector]:
    """
    Сборка системы 8×6 и вектора правой части длины 8.

    Args:
        sources: 4 исходные точки
        targets: 4 целевые точки

    Returns:
        (matrix, rhs)

    Raises:
        ValueError: Если точек не ровно 4
    """
    _check_quad(sources, "sources")
    _check_quad(targets, "targets")

    matrix: Matrix = []
    rhs: Vector = []
    for p, q in zip(sources, targets):
        matrix.append([p.x, p.y, 1.0, 0.0, 0.0, 0.0])
        rhs.append(q.x)
        matrix.append([0.0, 0.0, 0.0, p.x, p.y, 1.0])
        rhs.append(q.y)

    return matrix, rhs


# =============================================================================
# FIT
# =============================================================================


def fit_affine_transform(
    sources: Sequence[Point],
    targets: Sequence[Point],
    config: SolverConfig | None = None,
) -> AffineTransform:
    """
    Аффинное преобразование, наилучшее в смысле least squares.

    Args:
        sources: 4 исходные точки
        targets: 4 целевые точки (образы sources)
        config: Конфигурация солвера (опционально)

    Returns:
        AffineTransform (a, b, c, d, e, f)

    Raises:
        ValueError: Если точек не ровно 4
        DegenerateConfiguration: Если исходные точки вырождены
    """
    _check_quad(sources, "sources")
    _check_quad(targets, "targets")

    # Порог pivot относителен к max|AᵗA|: без центрирования он растёт
    # с квадратом удаления точек от начала координат
    center = centroid(sources)
    centered = [Point(x=p.x - center.x, y=p.y - center.y) for p in sources]
    matrix, rhs = build_affine_system(centered, targets)

    try:
        a, c, e_c, b, d, f_c = solve_least_squares(matrix, rhs, config=config)
    except SingularMatrix as exc:
        raise DegenerateConfiguration(
            f"source points do not determine an affine transform: {exc}"
        ) from exc

    if log.isEnabledFor(logging.DEBUG):
        rss = residual_sum_of_squares(matrix, [a, c, e_c, b, d, f_c], rhs)
        log.debug("affine fit residual sum of squares: %.3e", rss)

    e = e_c - a * center.x - c * center.y
    f = f_c - b * center.x - d * center.y
    return AffineTransform(a=a, b=b, c=c, d=d, e=e, f=f)


def compute_affine_transform(
    p0: Point,
    p1: Point,
    p2: Point,
    p3: Point,
    q0: Point,
    q1: Point,
    q2: Point,
    q3: Point,
) -> AffineTransform:
    """
    Аффинное преобразование, переводящее четырёхугольник p0..p3 в q0..q3.

    Raises:
        DegenerateConfiguration: Если исходные точки коллинеарны/вырождены
    """
    return fit_affine_transform([p0, p1, p2, p3], [q0, q1, q2, q3])


def fit_affine_transform_from_contract(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Подгонка по контракту affine_fit_request.

    Args:
        payload: dict по схеме affine_fit_request

    Returns:
        dict по схеме affine_transform

    Raises:
        jsonschema.ValidationError: Если payload не соответствует схеме
        DegenerateConfiguration: Если исходные точки вырождены
    """
    validate_affine_fit_request(payload)

    sources = [Point(**p) for p in payload["source"]]
    targets = [Point(**p) for p in payload["target"]]

    result = fit_affine_transform(sources, targets).to_contract()
    validate_affine_transform(result)
    return result
