"""
ErrorBoundSnapshot — сериализуемый снимок ErrorTrackedFloat

Immutable Pydantic модель для записи вычисленного значения вместе с его
границей ошибки (например, в диагностике предиката перед точным пересчётом).
Полная совместимость с JSON Schema (src/core/contracts/schema/error_bound_snapshot.json).
"""

from typing import Final

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from src.core.math.error_tracking import ErrorTrackedFloat
from src.core.math.numerical_safeguards import validate_finite
from src.core.math.sign_filter import is_sign_reliable

# Версия схемы снимка
SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


class ErrorBoundSnapshot(BaseModel):
    """
    Снимок пары (value, error_bound).

    Immutable модель (frozen=True). Содержит:
    - Версию схемы (schema_version)
    - Вычисленное значение и границу его ошибки
    - Флаг надёжности знака по правилу |value| > error_bound
    """

    schema_version: str = Field(
        SNAPSHOT_SCHEMA_VERSION, pattern="^1$", description="Версия схемы снимка"
    )
    value: float = Field(..., description="Вычисленное значение float64")
    error_bound: float = Field(
        ..., ge=0, description="Верхняя граница абсолютной ошибки value"
    )
    sign_reliable: bool = Field(
        ...,
        description="Знак value доказуемо верен (|value| > error_bound, для точного нуля False)",
    )

    model_config = {"frozen": True}

    @field_validator("value", "error_bound")
    @classmethod
    def validate_finite_number(cls, v: float, info: ValidationInfo) -> float:
        """NaN/Inf не сериализуются в контракт."""
        validate_finite(v, info.field_name)
        return v

    @model_validator(mode="after")
    def validate_sign_flag(self) -> "ErrorBoundSnapshot":
        """
        Проверка согласованности sign_reliable с правилом решения.

        Флаг, не совпадающий с |value| > error_bound, означает повреждённые
        или вручную собранные данные.
        """
        expected = is_sign_reliable(self.to_tracked())
        if self.sign_reliable != expected:
            raise ValueError(
                f"sign_reliable={self.sign_reliable} contradicts "
                f"value={self.value!r}, error_bound={self.error_bound!r}"
            )
        return self

    @classmethod
    def from_tracked(cls, x: ErrorTrackedFloat) -> "ErrorBoundSnapshot":
        """
        Снимок ErrorTrackedFloat.

        Args:
            x: Вычисленное значение с границей ошибки

        Returns:
            ErrorBoundSnapshot с вычисленным флагом sign_reliable

        Raises:
            pydantic.ValidationError: Если value или error_bound NaN/Inf
        """
        return cls(
            value=x.value,
            error_bound=x.error_bound,
            sign_reliable=is_sign_reliable(x),
        )

    def to_tracked(self) -> ErrorTrackedFloat:
        """Восстановление ErrorTrackedFloat из снимка."""
        return ErrorTrackedFloat(self.value, self.error_bound)
