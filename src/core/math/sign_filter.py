"""
Sign Filter — решение о надёжности знака ErrorTrackedFloat

Правило для потребителей (orientation, incircle и другие предикаты):
    |value| > error_bound + margin  → знак value доказуемо верен
    иначе                           → нужен точный пересчёт (вне этого модуля)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf в value или error_bound никогда не дают надёжного знака
2. Sign.ZERO возвращается только для точного нуля (error_bound == 0) и
   не считается надёжным знаком: |0| > 0 ложно
3. Неопределённый результат возвращается как данные (None), не исключение
"""

import logging
from enum import Enum
from typing import NamedTuple, Optional

from src.core.math.error_tracking import ErrorTrackedFloat
from src.core.math.numerical_safeguards import is_valid_float, validate_non_negative

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак вычисленного значения"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


# Знаки, прошедшие строгое правило |value| > error_bound + margin
_DECISIVE: frozenset = frozenset({Sign.POSITIVE, Sign.NEGATIVE})


# =============================================================================
# VERDICT
# =============================================================================


class SignVerdict(NamedTuple):
    """
    Результат проверки знака.

    sign равен None, если знак не может быть гарантирован и вызывающий код
    должен перейти к точной арифметике. Для точного нуля sign равен
    Sign.ZERO, но reliable=False (строгое правило не выполнено).
    """

    sign: Optional[Sign]
    value: float
    error_bound: float
    reliable: bool


# =============================================================================
# DECISION RULE
# =============================================================================


def certified_sign(x: ErrorTrackedFloat, margin: float = 0.0) -> Optional[Sign]:
    """
    Знак значения, если он доказуемо верен.

    Args:
        x: Вычисленное значение с границей ошибки
        margin: Дополнительный неотрицательный запас сверх error_bound

    Returns:
        Sign.POSITIVE / Sign.NEGATIVE если |value| > error_bound + margin,
        Sign.ZERO для точного нуля (информационно, не надёжный знак), иначе None

    Raises:
        ValueError: Если margin отрицательный или NaN/Inf

    Examples:
        >>> certified_sign(ErrorTrackedFloat(1.0).add_float(2.0))
        <Sign.POSITIVE: 'positive'>
        >>> certified_sign(ErrorTrackedFloat(5.0).sub_float(5.0)) is None
        True
        >>> certified_sign(ErrorTrackedFloat(0.0))
        <Sign.ZERO: 'zero'>
    """
    validate_non_negative(margin, "margin")

    value, error_bound = x.values()

    if not (is_valid_float(value) and is_valid_float(error_bound)):
        logger.debug("Non-finite operand: value=%r error_bound=%r", value, error_bound)
        return None

    if value == 0 and error_bound == 0:
        return Sign.ZERO

    if abs(value) > error_bound + margin:
        return Sign.POSITIVE if value > 0 else Sign.NEGATIVE

    logger.debug(
        "Inconclusive sign: |value|=%.17g <= error_bound=%.17g + margin=%.17g",
        abs(value),
        error_bound,
        margin,
    )
    return None


def is_sign_reliable(x: ErrorTrackedFloat, margin: float = 0.0) -> bool:
    """
    Проверка, можно ли доверять знаку value.

    Args:
        x: Вычисленное значение с границей ошибки
        margin: Дополнительный неотрицательный запас сверх error_bound

    Returns:
        True только если |value| > error_bound + margin (точный ноль не в счёт)

    Examples:
        >>> is_sign_reliable(ErrorTrackedFloat(3.0))
        True
        >>> is_sign_reliable(ErrorTrackedFloat(0.0))
        False
    """
    return certified_sign(x, margin) in _DECISIVE


def evaluate_sign(x: ErrorTrackedFloat, margin: float = 0.0) -> SignVerdict:
    """
    Полный вердикт: знак, исходная пара и флаг надёжности.

    Examples:
        >>> verdict = evaluate_sign(ErrorTrackedFloat(-2.0))
        >>> verdict.sign, verdict.reliable
        (<Sign.NEGATIVE: 'negative'>, True)
    """
    sign = certified_sign(x, margin)
    return SignVerdict(
        sign=sign,
        value=x.value,
        error_bound=x.error_bound,
        reliable=sign in _DECISIVE,
    )
