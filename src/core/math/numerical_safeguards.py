"""
Numerical Safeguards — проверки входов на границах модулей

Арифметика ErrorTrackedFloat тотальна и ничего не проверяет (hot path).
Проверки выполняются только там, где значения пересекают границу модуля:
- Sign filter: порог margin
- Snapshot модель: сериализуемые value/error_bound

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не считаются валидными числами
2. Ошибка валидации всегда ValueError с именем параметра
"""

import math


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
