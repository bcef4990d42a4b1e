"""
Linear Algebra Errors

Таксономия ошибок плотной линейной алгебры:
- DimensionMismatch: несовместимые размеры операндов
- SingularMatrix: pivot неотличим от нуля при исключении

Обе ошибки не восстанавливаемы в точке детекции: они отражают свойство
входных данных, а не транзиентное состояние. Повтор вычисления бессмыслен.
"""


class LinearAlgebraError(ValueError):
    """Базовая ошибка модулей src.core.math."""

    pass


class DimensionMismatch(LinearAlgebraError):
    """
    Размеры операндов несовместимы с операцией.

    Примеры: A.cols != B.rows при умножении, рваная (ragged) матрица,
    матрица без строк при транспонировании.
    """

    pass


class SingularMatrix(LinearAlgebraError):
    """
    Матрица системы вырождена (или численно неотличима от вырожденной).

    Attributes:
        step: Индекс шага исключения, на котором найден нулевой pivot
              (None если вырожденность обнаружена по NaN/Inf в решении)
        pivot: Значение pivot на этом шаге
    """

    def __init__(self, message: str, step: int | None = None, pivot: float | None = None):
        super().__init__(message)
        self.step = step
        self.pivot = pivot
