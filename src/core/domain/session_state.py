"""
SessionState — Редактируемые входные параметры калькулятора

Mutable Pydantic модель: единственный изменяемый ресурс сессии.
Каждое присваивание поля валидируется (validate_assignment=True):
некорректное значение отклоняется с ValidationError, прежнее значение
сохраняется.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_INITIAL_LIQUIDITY: Final[float] = 1000.0
DEFAULT_INITIAL_PRICE: Final[float] = 1.0
DEFAULT_FINAL_PRICE: Final[float] = 1.1
DEFAULT_FEE_PERCENT: Final[float] = 0.3
DEFAULT_CENTER_PRICE: Final[float] = 1.0
DEFAULT_DECADES: Final[float] = 3.0

# Верхняя граница комиссии (не включительно)
FEE_PERCENT_MAX: Final[float] = 100.0


# =============================================================================
# SESSION STATE MODEL
# =============================================================================


class SessionState(BaseModel):
    """
    Текущие входные параметры калькулятора.

    Одна модель на сессию. Изменяется поле за полем в ответ на
    провалидированный внешний ввод и живёт всё время сессии.
    Обе цены используют одну и ту же ликвидность (initial_liquidity).
    """

    # Пул
    initial_liquidity: float = Field(
        DEFAULT_INITIAL_LIQUIDITY, gt=0, allow_inf_nan=False, description="Ликвидность L"
    )
    initial_price: float = Field(
        DEFAULT_INITIAL_PRICE, gt=0, allow_inf_nan=False, description="Цена до сделки"
    )
    final_price: float = Field(
        DEFAULT_FINAL_PRICE, gt=0, allow_inf_nan=False, description="Цена после сделки"
    )
    fee_percent: float = Field(
        DEFAULT_FEE_PERCENT,
        ge=0,
        lt=FEE_PERCENT_MAX,
        allow_inf_nan=False,
        description="Комиссия в процентах [0, 100)",
    )

    # Калибровка слайдера
    center_price: float = Field(
        DEFAULT_CENTER_PRICE, gt=0, allow_inf_nan=False, description="Цена в центре слайдера"
    )
    decades: float = Field(
        DEFAULT_DECADES,
        gt=0,
        allow_inf_nan=False,
        description="Порядков цены на полный ход слайдера",
    )

    model_config = {"validate_assignment": True}

    def fee_fraction(self) -> float:
        """Комиссия как доля (0.3% → 0.003)"""
        return self.fee_percent / 100.0
