"""
Error Tracking — Float64 со строгой оценкой накопленной ошибки

Модуль хранит рядом с вычисленным значением float64 консервативную верхнюю
границу абсолютной ошибки, накопленной цепочкой арифметических операций:
- Сложение/вычитание с обычным float и с другим ErrorTrackedFloat
- Умножение с обычным float и с другим ErrorTrackedFloat (cross term)
- Специальный случай нулевого результата (relative формула не определена)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. error_bound >= 0 для любого достижимого значения
2. error_bound не убывает ни на одной операции (ошибка не самокорректируется)
3. |value - true_value| <= error_bound по построению
4. Все операции чистые: каждая возвращает новый экземпляр, ничего не мутирует

ВЫВОД ФОРМУЛЫ:
    Если y есть машинное представление x, то |(x - y) / x| <= u, где u = 2^-52.
    x неизвестен, поэтому выражаем |x| через наблюдаемый y и берём
    больший из двух случаев знака:
        |x| <= |y| / (1 - u)
        e = u * |x| <= u * |y| / (1 - u)
    Если y == 0, берём наименьший положительный float64: это максимальная
    ошибка, при которой ненулевой результат округлился ровно в ноль.

    mul(mul(a, b), c) = (a*b + e) * c = a*b*c + e*c + e_new
    sum(mul(a, b), c) = (a*b + e) + c = a*b + c + e + e_new
    При цепочке умножений ошибка масштабируется модулем другого операнда,
    при сложении ошибки просто складываются.
"""

import math
from dataclasses import dataclass
from typing import Final

# =============================================================================
# КОНСТАНТЫ FLOAT64
# =============================================================================

# Unit roundoff (machine epsilon) для float64: мантисса 52 бита
UNIT_ROUNDOFF: Final[float] = 2.0**-52

# Наименьший положительный (subnormal) float64, ~4.94e-324
SMALLEST_POSITIVE_FLOAT64: Final[float] = math.ulp(0.0)


# =============================================================================
# ROUNDING INCREMENT
# =============================================================================


def rounding_increment(value: float) -> float:
    """
    Верхняя граница ошибки округления, внесённой одной операцией.

    Формула применяется к уже округлённому результату операции:
        value == 0  → SMALLEST_POSITIVE_FLOAT64
        иначе       → UNIT_ROUNDOFF * |value| / (1 - UNIT_ROUNDOFF)

    Для subnormal результатов relative формула уходит в underflow, поэтому
    результат не опускается ниже SMALLEST_POSITIVE_FLOAT64 (шаг сетки
    subnormal чисел). Для нормальных чисел это ограничение никогда не
    срабатывает.

    Args:
        value: Результат операции (после округления)

    Returns:
        Неотрицательная граница новой ошибки округления

    Examples:
        >>> rounding_increment(0.0) == SMALLEST_POSITIVE_FLOAT64
        True
        >>> abs(rounding_increment(3.0) - 6.66133814775094e-16) < 1e-28
        True
    """
    if value == 0:
        return SMALLEST_POSITIVE_FLOAT64

    increment = UNIT_ROUNDOFF * abs(value) / (1.0 - UNIT_ROUNDOFF)
    if increment < SMALLEST_POSITIVE_FLOAT64:
        return SMALLEST_POSITIVE_FLOAT64
    return increment


# =============================================================================
# ERROR TRACKED FLOAT
# =============================================================================


@dataclass(frozen=True, slots=True)
class ErrorTrackedFloat:
    """
    Значение float64 вместе с верхней границей его абсолютной ошибки.

    Immutable (frozen=True): каждая операция возвращает новый экземпляр.
    Свежесозданное значение считается точным (error_bound = 0).

    Порядок операций важен: граница зависит от промежуточных величин, поэтому
    mul_float(a).mul_float(b) даёт другую (обычно большую) границу, чем
    mul_float(a * b). Обе границы корректны.

    Examples:
        >>> x = ErrorTrackedFloat(1.0).add_float(2.0)
        >>> x.value
        3.0
        >>> x.error_bound == rounding_increment(3.0)
        True
        >>> (x * 2.0).value
        6.0
    """

    value: float
    error_bound: float = 0.0

    def __post_init__(self) -> None:
        # int и другие Real приводятся к float64 (frozen: через object.__setattr__)
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "error_bound", float(self.error_bound))
        if self.error_bound < 0:
            raise ValueError(f"error_bound must be non-negative, got {self.error_bound}")

    @classmethod
    def exact(cls, value: float) -> "ErrorTrackedFloat":
        """Точное входное значение (error_bound = 0)."""
        return cls(value, 0.0)

    def values(self) -> tuple[float, float]:
        """
        Пара (value, error_bound) без побочных эффектов.

        Returns:
            (value, error_bound)
        """
        return (self.value, self.error_bound)

    # -------------------------------------------------------------------------
    # Сложение и вычитание
    # -------------------------------------------------------------------------

    def add_float(self, other: float) -> "ErrorTrackedFloat":
        """
        Прибавить точный float.

        error' = error + rounding_increment(value')
        """
        result = self.value + float(other)
        return ErrorTrackedFloat(result, self.error_bound + rounding_increment(result))

    def sub_float(self, other: float) -> "ErrorTrackedFloat":
        """
        Вычесть точный float.

        error' = error + rounding_increment(value')
        """
        result = self.value - float(other)
        return ErrorTrackedFloat(result, self.error_bound + rounding_increment(result))

    def add(self, other: "ErrorTrackedFloat") -> "ErrorTrackedFloat":
        """
        Сложить с другим ErrorTrackedFloat.

        Ошибки суммы складываются без масштабирования:
            error' = error_a + error_b + rounding_increment(value')
        """
        result = self.value + other.value
        return ErrorTrackedFloat(
            result,
            self.error_bound + other.error_bound + rounding_increment(result),
        )

    def sub(self, other: "ErrorTrackedFloat") -> "ErrorTrackedFloat":
        """
        Вычесть другой ErrorTrackedFloat.

        error' = error_a + error_b + rounding_increment(value')
        """
        result = self.value - other.value
        return ErrorTrackedFloat(
            result,
            self.error_bound + other.error_bound + rounding_increment(result),
        )

    # -------------------------------------------------------------------------
    # Умножение
    # -------------------------------------------------------------------------

    def mul_float(self, other: float) -> "ErrorTrackedFloat":
        """
        Умножить на точный float.

        Накопленная ошибка масштабируется модулем множителя (cross term):
            error' = error * |f| + rounding_increment(value')

        Граница не опускается ниже исходной, поэтому умножение на |f| < 1
        не уменьшает накопленную ошибку.

        Args:
            other: Точный множитель f

        Returns:
            Новый ErrorTrackedFloat

        Examples:
            >>> x = ErrorTrackedFloat(1.0).add_float(2.0).mul_float(2.0)
            >>> x.value
            6.0
        """
        factor = float(other)
        result = self.value * factor
        error = self.error_bound * abs(factor) + rounding_increment(result)
        return ErrorTrackedFloat(result, max(error, self.error_bound))

    def mul(self, other: "ErrorTrackedFloat") -> "ErrorTrackedFloat":
        """
        Умножить на другой ErrorTrackedFloat.

        (a + ea) * (b + eb) = a*b + ea*b + eb*a + ea*eb, отсюда:
            error' = ea*|b| + eb*|a| + ea*eb + rounding_increment(value')

        ea*eb равно нулю, если хотя бы один операнд точный. Граница не
        опускается ниже границы любого из операндов.

        Args:
            other: Второй множитель

        Returns:
            Новый ErrorTrackedFloat
        """
        result = self.value * other.value
        error = (
            self.error_bound * abs(other.value)
            + other.error_bound * abs(self.value)
            + self.error_bound * other.error_bound
            + rounding_increment(result)
        )
        return ErrorTrackedFloat(result, max(error, self.error_bound, other.error_bound))

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "ErrorTrackedFloat":
        # Смена знака точна
        return ErrorTrackedFloat(-self.value, self.error_bound)

    def __add__(self, other: object) -> "ErrorTrackedFloat":
        if isinstance(other, ErrorTrackedFloat):
            return self.add(other)
        if isinstance(other, (int, float)):
            return self.add_float(other)
        return NotImplemented

    def __radd__(self, other: object) -> "ErrorTrackedFloat":
        if isinstance(other, (int, float)):
            return self.add_float(other)
        return NotImplemented

    def __sub__(self, other: object) -> "ErrorTrackedFloat":
        if isinstance(other, ErrorTrackedFloat):
            return self.sub(other)
        if isinstance(other, (int, float)):
            return self.sub_float(other)
        return NotImplemented

    def __rsub__(self, other: object) -> "ErrorTrackedFloat":
        # f - x == (-x) + f
        if isinstance(other, (int, float)):
            return (-self).add_float(other)
        return NotImplemented

    def __mul__(self, other: object) -> "ErrorTrackedFloat":
        if isinstance(other, ErrorTrackedFloat):
            return self.mul(other)
        if isinstance(other, (int, float)):
            return self.mul_float(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "ErrorTrackedFloat":
        if isinstance(other, (int, float)):
            return self.mul_float(other)
        return NotImplemented
