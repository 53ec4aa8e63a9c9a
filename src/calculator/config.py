"""Конфигурация калькулятора CPMM.

- SessionDefaults: начальные значения SessionState
- SliderConfig: границы и шаг виджета слайдера (привязка позиции к шагу)
- CalculatorConfig: агрегат для CalculatorSession
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from src.core.domain.session_state import (
    DEFAULT_CENTER_PRICE,
    DEFAULT_DECADES,
    DEFAULT_FEE_PERCENT,
    DEFAULT_FINAL_PRICE,
    DEFAULT_INITIAL_LIQUIDITY,
    DEFAULT_INITIAL_PRICE,
)
from src.core.math.numerical_safeguards import InvalidArgument

# Округление позиции после привязки к шагу (убирает хвосты вида 0.30000000000000004)
_SNAP_DIGITS = 12


@dataclass(frozen=True)
class SessionDefaults:
    """Начальные значения полей SessionState."""
    initial_liquidity: float = DEFAULT_INITIAL_LIQUIDITY
    initial_price: float = DEFAULT_INITIAL_PRICE
    final_price: float = DEFAULT_FINAL_PRICE
    fee_percent: float = DEFAULT_FEE_PERCENT
    center_price: float = DEFAULT_CENTER_PRICE
    decades: float = DEFAULT_DECADES

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SliderConfig:
    """Конфигурация виджета слайдера.

    Границы применяются только при отображении позиции;
    само отображение slider ↔ price не ограничено.
    """
    min_value: float = 0.0
    max_value: float = 1.0
    step: float = 0.001

    def __post_init__(self):
        if self.max_value <= self.min_value:
            raise InvalidArgument(
                f"max_value {self.max_value} must be > min_value {self.min_value}"
            )
        if self.step <= 0:
            raise InvalidArgument(f"step must be positive, got {self.step}")

    def clamp_for_widget(self, slider_value: float) -> float:
        """Позиция слайдера, как её показывает виджет.

        Позиция ограничивается [min_value, max_value] и округляется до
        ближайшего деления step, отсчитанного от min_value.
        """
        clamped = min(max(slider_value, self.min_value), self.max_value)
        steps = round((clamped - self.min_value) / self.step)
        snapped = round(self.min_value + steps * self.step, _SNAP_DIGITS)
        return min(snapped, self.max_value)


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация CalculatorSession.

    validate_contracts: проверять render() и snapshot() по JSON Schema контрактам
    """
    session_defaults: SessionDefaults = field(default_factory=SessionDefaults)
    slider: SliderConfig = field(default_factory=SliderConfig)
    validate_contracts: bool = True
