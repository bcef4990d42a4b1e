"""
Тесты для Linear Solver (Gaussian elimination with partial pivoting)

Проверяет:
1. Корректность решения для известных систем
2. Частичный выбор pivot (нулевая диагональ)
3. SingularMatrix для вырожденных систем
4. DimensionMismatch для неквадратных систем
5. Иммутабельность входов
6. Конфигурацию порогов pivot
"""

import copy

import pytest

from src.core.math import (
    DEFAULT_SOLVER_CONFIG,
    EPS_PIVOT_ABS,
    EPS_PIVOT_REL,
    DimensionMismatch,
    SingularMatrix,
    SolverConfig,
    multiply_vector,
    solve_linear_system,
)

# =============================================================================
# ТЕСТЫ КОРРЕКТНОСТИ
# =============================================================================


class TestSolveLinearSystem:
    """Тесты для solve_linear_system"""

    def test_known_3x3_solution(self) -> None:
        """Система 3×3 с известным решением (2, 3, -1)"""
        a = [
            [2.0, 1.0, -1.0],
            [-3.0, -1.0, 2.0],
            [-2.0, 1.0, 2.0],
        ]
        b = [8.0, -11.0, -3.0]

        x = solve_linear_system(a, b)

        assert x == pytest.approx([2.0, 3.0, -1.0], abs=1e-9)

    def test_diagonal(self) -> None:
        assert solve_linear_system([[2.0, 0.0], [0.0, 4.0]], [2.0, 8.0]) == [1.0, 2.0]

    def test_1x1(self) -> None:
        assert solve_linear_system([[4.0]], [2.0]) == [0.5]

    def test_zero_diagonal_requires_pivoting(self) -> None:
        """Без перестановки строк деление на A[0][0] = 0"""
        a = [[0.0, 1.0], [1.0, 0.0]]
        b = [3.0, 5.0]

        x = solve_linear_system(a, b)

        assert x == pytest.approx([5.0, 3.0], abs=1e-12)

    def test_small_pivot_handled_by_pivoting(self) -> None:
        """Малый (но не нулевой) диагональный элемент не портит решение"""
        a = [[1e-20, 1.0], [1.0, 1.0]]
        b = [1.0, 2.0]

        x = solve_linear_system(a, b)

        assert x == pytest.approx([1.0, 1.0], abs=1e-9)

    def test_residual_is_small_for_8x8(self) -> None:
        n = 8
        a = [[1.0 / (i + j + 1) + (n if i == j else 0.0) for j in range(n)] for i in range(n)]
        expected = [float(i) - 3.5 for i in range(n)]
        b = multiply_vector(a, expected)

        x = solve_linear_system(a, b)

        assert x == pytest.approx(expected, abs=1e-9)

    def test_empty_system(self) -> None:
        """n == 0 → пустое решение"""
        assert solve_linear_system([], []) == []

    def test_result_is_floats(self) -> None:
        x = solve_linear_system([[1, 0], [0, 1]], [3, 4])
        assert all(isinstance(v, float) for v in x)


# =============================================================================
# ТЕСТЫ ИММУТАБЕЛЬНОСТИ
# =============================================================================


class TestInputsUnmodified:
    """Солвер работает на копиях"""

    def test_a_and_b_unchanged(self) -> None:
        a = [[0.0, 2.0, 1.0], [1.0, 1.0, 1.0], [4.0, 0.0, 2.0]]
        b = [1.0, 2.0, 3.0]
        a_before, b_before = copy.deepcopy(a), list(b)

        solve_linear_system(a, b)

        assert a == a_before
        assert b == b_before

    def test_unchanged_on_singular(self) -> None:
        a = [[1.0, 2.0], [2.0, 4.0]]
        b = [1.0, 1.0]

        with pytest.raises(SingularMatrix):
            solve_linear_system(a, b)

        assert a == [[1.0, 2.0], [2.0, 4.0]]
        assert b == [1.0, 1.0]


# =============================================================================
# ТЕСТЫ ВЫРОЖДЕННОСТИ
# =============================================================================


class TestSingularMatrix:
    """Тесты SingularMatrix"""

    @pytest.mark.parametrize("b", [[1.0, 1.0], [0.0, 0.0], [3.0, 6.0]])
    def test_singular_2x2(self, b: list[float]) -> None:
        """[[1,2],[2,4]] вырождена при любом b"""
        with pytest.raises(SingularMatrix, match="singular"):
            solve_linear_system([[1.0, 2.0], [2.0, 4.0]], b)

    def test_zero_matrix(self) -> None:
        with pytest.raises(SingularMatrix) as exc_info:
            solve_linear_system([[0.0, 0.0], [0.0, 0.0]], [1.0, 1.0])

        assert exc_info.value.step == 0
        assert exc_info.value.pivot == 0.0

    def test_step_reported(self) -> None:
        """Вырожденность обнаружена на втором шаге"""
        a = [[1.0, 0.0, 0.0], [0.0, 1.0, 1.0], [0.0, 1.0, 1.0]]

        with pytest.raises(SingularMatrix) as exc_info:
            solve_linear_system(a, [1.0, 1.0, 1.0])

        assert exc_info.value.step == 2

    def test_nearly_singular_rejected_by_relative_tolerance(self) -> None:
        a = [[1.0, 1.0], [1.0, 1.0 + 1e-14]]

        with pytest.raises(SingularMatrix):
            solve_linear_system(a, [1.0, 2.0])

    def test_nearly_singular_accepted_with_zero_tolerance(self) -> None:
        """С pivot_rel_eps=0 только точный ноль считается вырожденным"""
        a = [[1.0, 1.0], [1.0, 1.0 + 1e-14]]
        config = SolverConfig(pivot_rel_eps=0.0)

        x = solve_linear_system(a, [1.0, 2.0], config=config)

        assert len(x) == 2

    def test_absolute_tolerance(self) -> None:
        config = SolverConfig(pivot_abs_eps=1e-3)

        with pytest.raises(SingularMatrix):
            solve_linear_system([[1.0, 0.0], [0.0, 1e-4]], [1.0, 1.0], config=config)

    def test_negative_tolerance_rejected(self) -> None:
        config = SolverConfig(pivot_rel_eps=-1.0)

        with pytest.raises(ValueError, match="rel_eps"):
            solve_linear_system([[1.0]], [1.0], config=config)

    def test_non_finite_solution_rejected(self) -> None:
        """Переполнение при обратной подстановке → SingularMatrix"""
        a = [[1e-300, 0.0], [0.0, 1.0]]
        config = SolverConfig(pivot_rel_eps=0.0)

        with pytest.raises(SingularMatrix, match="not finite"):
            solve_linear_system(a, [1e300, 1.0], config=config)


# =============================================================================
# ТЕСТЫ РАЗМЕРОВ
# =============================================================================


class TestDimensions:
    """Тесты DimensionMismatch"""

    def test_non_square(self) -> None:
        with pytest.raises(DimensionMismatch, match="square"):
            solve_linear_system([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], [1.0, 2.0])

    def test_rhs_length_mismatch(self) -> None:
        with pytest.raises(DimensionMismatch, match="length 3"):
            solve_linear_system([[1.0, 0.0], [0.0, 1.0]], [1.0, 2.0, 3.0])

    def test_empty_rhs_with_matrix(self) -> None:
        with pytest.raises(DimensionMismatch):
            solve_linear_system([[1.0]], [])

    def test_empty_matrix_with_rhs(self) -> None:
        with pytest.raises(DimensionMismatch):
            solve_linear_system([], [1.0])


# =============================================================================
# ТЕСТЫ КОНФИГУРАЦИИ
# =============================================================================


class TestSolverConfig:
    """Тесты SolverConfig"""

    def test_defaults(self) -> None:
        assert DEFAULT_SOLVER_CONFIG.pivot_rel_eps == EPS_PIVOT_REL
        assert DEFAULT_SOLVER_CONFIG.pivot_abs_eps == EPS_PIVOT_ABS

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_SOLVER_CONFIG.pivot_rel_eps = 0.5  # type: ignore[misc]
