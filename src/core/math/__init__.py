"""
Core math modules

Плотная линейная алгебра для малых систем (<= 8×8) с гарантией того,
что вырожденность и несовместимость размеров всегда явно сообщаются.
"""

# Errors
from src.core.math.errors import (
    DimensionMismatch,
    LinearAlgebraError,
    SingularMatrix,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PIVOT_ABS,
    EPS_PIVOT_REL,
    all_finite,
    is_close,
    is_negligible_pivot,
    is_valid_float,
    max_abs_entry,
    pivot_tolerance,
)

# Dense Matrix Ops
from src.core.math.dense import (
    Matrix,
    Vector,
    multiply,
    multiply_vector,
    shape,
    transpose,
)

# Linear Solver
from src.core.math.linear_solver import (
    DEFAULT_SOLVER_CONFIG,
    SolverConfig,
    solve_linear_system,
)

# Least Squares
from src.core.math.least_squares import (
    residual_sum_of_squares,
    solve_least_squares,
)

__all__ = [
    # Errors
    "LinearAlgebraError",
    "DimensionMismatch",
    "SingularMatrix",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PIVOT_ABS",
    "EPS_PIVOT_REL",
    # Numerical Safeguards — Checks
    "all_finite",
    "is_close",
    "is_negligible_pivot",
    "is_valid_float",
    "max_abs_entry",
    "pivot_tolerance",
    # Dense Matrix Ops
    "Matrix",
    "Vector",
    "multiply",
    "multiply_vector",
    "shape",
    "transpose",
    # Linear Solver
    "DEFAULT_SOLVER_CONFIG",
    "SolverConfig",
    "solve_linear_system",
    # Least Squares
    "residual_sum_of_squares",
    "solve_least_squares",
]
