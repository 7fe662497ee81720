"""
Тесты для модуля Sign Filter

Проверяет:
1. Правило |value| > error_bound для надёжного знака
2. Точный ноль и ноль с ошибкой
3. Дополнительный margin и его валидацию
4. NaN/Inf никогда не дают надёжного знака
5. Логирование неопределённых вердиктов
6. Сценарий: 2x2 определитель (orientation) с близкими к вырожденным точками
"""

import logging

import pytest

from src.core.math.error_tracking import ErrorTrackedFloat
from src.core.math.sign_filter import (
    Sign,
    SignVerdict,
    certified_sign,
    evaluate_sign,
    is_sign_reliable,
)


def orient2d(ax, ay, bx, by, cx, cy) -> ErrorTrackedFloat:
    """(bx - ax) * (cy - ay) - (by - ay) * (cx - ax) с отслеживанием ошибки."""
    abx = ErrorTrackedFloat(bx).sub_float(ax)
    acy = ErrorTrackedFloat(cy).sub_float(ay)
    aby = ErrorTrackedFloat(by).sub_float(ay)
    acx = ErrorTrackedFloat(cx).sub_float(ax)
    return abx.mul(acy).sub(aby.mul(acx))


# =============================================================================
# ТЕСТЫ ПРАВИЛА РЕШЕНИЯ
# =============================================================================


class TestCertifiedSign:
    """Тесты для certified_sign"""

    def test_positive(self) -> None:
        """|value| > error_bound, value > 0 → POSITIVE"""
        assert certified_sign(ErrorTrackedFloat(1.0).add_float(2.0)) == Sign.POSITIVE

    def test_negative(self) -> None:
        """|value| > error_bound, value < 0 → NEGATIVE"""
        assert certified_sign(ErrorTrackedFloat(1.0).sub_float(2.0)) == Sign.NEGATIVE

    def test_exact_zero(self) -> None:
        """Точный ноль → ZERO"""
        assert certified_sign(ErrorTrackedFloat(0.0)) == Sign.ZERO

    def test_computed_zero_is_inconclusive(self) -> None:
        """Ноль с ненулевой ошибкой → None (нужен точный пересчёт)"""
        assert certified_sign(ErrorTrackedFloat(5.0).sub_float(5.0)) is None

    def test_value_equal_to_bound_is_inconclusive(self) -> None:
        """|value| == error_bound → None (строгое неравенство)"""
        assert certified_sign(ErrorTrackedFloat(1e-10, 1e-10)) is None
        assert certified_sign(ErrorTrackedFloat(-1e-10, 1e-10)) is None

    def test_value_below_bound_is_inconclusive(self) -> None:
        """|value| < error_bound → None"""
        assert certified_sign(ErrorTrackedFloat(1e-12, 1e-10)) is None

    def test_exact_nonzero(self) -> None:
        """Точное ненулевое значение всегда надёжно"""
        assert certified_sign(ErrorTrackedFloat(-1e-300)) == Sign.NEGATIVE
        assert certified_sign(ErrorTrackedFloat(5e-324)) == Sign.POSITIVE


class TestMargin:
    """Тесты дополнительного margin"""

    def test_margin_tightens_rule(self) -> None:
        """margin добавляется к error_bound"""
        x = ErrorTrackedFloat(1.0, 0.25)
        assert certified_sign(x, margin=0.5) == Sign.POSITIVE
        assert certified_sign(x, margin=0.75) is None

    def test_margin_does_not_affect_exact_zero(self) -> None:
        """Точный ноль остаётся ZERO при любом margin"""
        assert certified_sign(ErrorTrackedFloat(0.0), margin=1.0) == Sign.ZERO

    @pytest.mark.parametrize("margin", [-1e-9, float("nan"), float("inf")])
    def test_invalid_margin_raises(self, margin: float) -> None:
        """Отрицательный или NaN/Inf margin → ValueError"""
        with pytest.raises(ValueError, match="margin"):
            certified_sign(ErrorTrackedFloat(1.0), margin=margin)


class TestNonFinite:
    """NaN/Inf никогда не дают надёжного знака"""

    @pytest.mark.parametrize(
        "x",
        [
            ErrorTrackedFloat(float("nan")),
            ErrorTrackedFloat(float("inf")),
            ErrorTrackedFloat(float("-inf")),
            ErrorTrackedFloat(1.0, float("inf")),
            ErrorTrackedFloat(1.0, float("nan")),
        ],
    )
    def test_non_finite_is_inconclusive(self, x: ErrorTrackedFloat) -> None:
        """NaN/Inf → None"""
        assert certified_sign(x) is None
        assert not is_sign_reliable(x)

    def test_overflow_is_inconclusive(self) -> None:
        """Переполнение в цепочке → None"""
        x = ErrorTrackedFloat(1e300).mul_float(1e300)
        assert certified_sign(x) is None


# =============================================================================
# ТЕСТЫ ВЕРДИКТА
# =============================================================================


class TestEvaluateSign:
    """Тесты для evaluate_sign и is_sign_reliable"""

    def test_reliable_verdict(self) -> None:
        """Надёжный вердикт содержит знак и исходную пару"""
        x = ErrorTrackedFloat(1.0).add_float(2.0)
        verdict = evaluate_sign(x)

        assert isinstance(verdict, SignVerdict)
        assert verdict.sign == Sign.POSITIVE
        assert verdict.value == x.value
        assert verdict.error_bound == x.error_bound
        assert verdict.reliable is True

    def test_inconclusive_verdict(self) -> None:
        """Неопределённый вердикт: sign=None, reliable=False"""
        verdict = evaluate_sign(ErrorTrackedFloat(5.0).sub_float(5.0))
        assert verdict.sign is None
        assert verdict.reliable is False

    def test_is_sign_reliable(self) -> None:
        """is_sign_reliable следует строгому правилу |value| > error_bound"""
        assert is_sign_reliable(ErrorTrackedFloat(3.0))
        assert not is_sign_reliable(ErrorTrackedFloat(0.0, 1e-20))

    def test_exact_zero_is_not_reliable(self) -> None:
        """Точный ноль: sign=ZERO как информация, но |0| > 0 ложно"""
        x = ErrorTrackedFloat(0.0)
        verdict = evaluate_sign(x)

        assert verdict.sign == Sign.ZERO
        assert verdict.reliable is False
        assert not is_sign_reliable(x)
        assert is_sign_reliable(x) == (abs(x.value) > x.error_bound)

    def test_sign_is_string_enum(self) -> None:
        """Sign сериализуется как строка"""
        assert Sign.POSITIVE == "positive"
        assert Sign("negative") is Sign.NEGATIVE


# =============================================================================
# ТЕСТЫ ЛОГИРОВАНИЯ
# =============================================================================


class TestLogging:
    """Неопределённые вердикты логируются на уровне DEBUG"""

    def test_inconclusive_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Неопределённый знак → DEBUG запись"""
        with caplog.at_level(logging.DEBUG, logger="src.core.math.sign_filter"):
            certified_sign(ErrorTrackedFloat(5.0).sub_float(5.0))

        assert any("Inconclusive sign" in r.getMessage() for r in caplog.records)

    def test_reliable_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Надёжный знак не логируется"""
        with caplog.at_level(logging.DEBUG, logger="src.core.math.sign_filter"):
            certified_sign(ErrorTrackedFloat(3.0))

        assert not caplog.records


# =============================================================================
# СЦЕНАРИЙ: ORIENTATION
# =============================================================================


class TestOrientationScenario:
    """Фильтр знака 2x2 определителя (orientation test)"""

    def test_clearly_counterclockwise(self) -> None:
        """Явно невырожденный треугольник: знак надёжен"""
        det = orient2d(0.0, 0.0, 1.0, 0.0, 0.0, 1.0)
        assert det.value == 1.0
        assert certified_sign(det) == Sign.POSITIVE

    def test_clearly_clockwise(self) -> None:
        """Обратный обход: отрицательный знак"""
        det = orient2d(0.0, 0.0, 0.0, 1.0, 1.0, 0.0)
        assert det.value == -1.0
        assert certified_sign(det) == Sign.NEGATIVE

    def test_nearly_collinear_falls_back(self) -> None:
        """Почти коллинеарные точки: фильтр требует точного пересчёта"""
        det = orient2d(0.1, 0.1, 0.2, 0.2, 0.3, 0.3)
        assert abs(det.value) <= det.error_bound
        assert certified_sign(det) is None
