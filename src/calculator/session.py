"""CalculatorSession — headless контроллер сессии калькулятора CPMM.

Реализует контракт обновления полей для слоя представления:
- сырой ввод (строка) парсится в float, непарсируемый ввод отклоняется
- liquidity и цены должны быть строго положительными
- комиссия должна лежать в [0, 100)
- изменение через слайдер пересчитывает соответствующую цену
- изменение цены пересинхронизирует позицию слайдера
- после каждого принятого изменения выполняется recompute

Отклонённое изменение оставляет прежнее значение поля и не является
ошибкой: возвращается EditOutcome(accepted=False).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from src.calculator.config import CalculatorConfig
from src.calculator.recompute import RecomputeResult, recompute
from src.core.contracts.validators import (
    CalculatorOutputValidator,
    SessionStateValidator,
)
from src.core.domain.session_state import SessionState
from src.core.math.formatting import format_number
from src.core.math.numerical_safeguards import InvalidArgument, is_valid_float
from src.core.math.slider_mapping import price_to_slider, slider_to_price

logger = logging.getLogger(__name__)

RawInput = Union[str, float, int]


class FieldId(str, Enum):
    """Идентификаторы полей калькулятора (ввод и вывод)."""

    # Ввод
    INITIAL_LIQUIDITY = "initial-liquidity"
    INITIAL_PRICE = "initial-price"
    INITIAL_PRICE_SLIDER = "initial-price-slider"
    FEE_PERCENT = "fee-percent"
    FINAL_PRICE = "final-price"
    FINAL_PRICE_SLIDER = "final-price-slider"
    SLIDER_CALIBRATION = "slider-calibration"

    # Резервы
    INITIAL_BASE_RESERVES = "initial-base-reserves"
    INITIAL_QUOTE_RESERVES = "initial-quote-reserves"
    FINAL_BASE_RESERVES = "final-base-reserves"
    FINAL_QUOTE_RESERVES = "final-quote-reserves"

    # Дельты (с точки зрения кошелька)
    DELTA_PRICE = "delta-price"
    DELTA_BASE_RESERVES = "delta-base-reserves"
    DELTA_QUOTE_RESERVES = "delta-quote-reserves"
    FEE_BASE_COLLECTED = "fee-base-collected"
    FEE_QUOTE_COLLECTED = "fee-quote-collected"


@dataclass(frozen=True)
class EditOutcome:
    """Результат попытки изменить поле сессии."""

    field: FieldId
    accepted: bool
    value: Optional[float]
    reason: str


def parse_float(raw: RawInput) -> Optional[float]:
    """Парсинг сырого ввода в float.

    Returns:
        float или None, если ввод не является числом или не помещается в float
    """
    if isinstance(raw, bool):
        return None
    try:
        if isinstance(raw, (int, float)):
            return float(raw)
        return float(raw.strip())
    except (AttributeError, OverflowError, ValueError):
        return None


class CalculatorSession:
    """Сессия калькулятора: владеет единственным SessionState.

    Все мутации сериализуются через методы set_*; после каждой принятой
    мутации последний RecomputeResult обновляется.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Args:
            config: конфигурация (default CalculatorConfig())
        """
        self.config = config or CalculatorConfig()
        self.state = SessionState(**self.config.session_defaults.as_dict())
        self._last_result = recompute(self.state)

        self._output_validator: Optional[CalculatorOutputValidator] = None
        self._state_validator: Optional[SessionStateValidator] = None
        if self.config.validate_contracts:
            self._output_validator = CalculatorOutputValidator()
            self._state_validator = SessionStateValidator()

        logger.info(
            "CPMM calculator session initialized: liquidity=%s initial_price=%s "
            "final_price=%s fee_percent=%s",
            self.state.initial_liquidity,
            self.state.initial_price,
            self.state.final_price,
            self.state.fee_percent,
        )

    # -------------------------------------------------------------------------
    # Пересчёт
    # -------------------------------------------------------------------------

    @property
    def last_result(self) -> RecomputeResult:
        return self._last_result

    def recompute(self) -> RecomputeResult:
        """Пересчёт всех выходов из текущего состояния."""
        self._last_result = recompute(self.state)
        logger.debug(
            "Recomputed: price_delta=%s base_wallet_delta=%s quote_wallet_delta=%s",
            self._last_result.result.price_delta,
            self._last_result.result.base_wallet_delta,
            self._last_result.result.quote_wallet_delta,
        )
        return self._last_result

    # -------------------------------------------------------------------------
    # Позиции слайдеров (производные от цен)
    # -------------------------------------------------------------------------

    @property
    def initial_slider(self) -> float:
        return price_to_slider(
            self.state.initial_price, self.state.center_price, self.state.decades
        )

    @property
    def final_slider(self) -> float:
        return price_to_slider(
            self.state.final_price, self.state.center_price, self.state.decades
        )

    # -------------------------------------------------------------------------
    # Изменения полей
    # -------------------------------------------------------------------------

    def set_initial_liquidity(self, raw: RawInput) -> EditOutcome:
        return self._edit_field(FieldId.INITIAL_LIQUIDITY, "initial_liquidity", raw)

    def set_initial_price(self, raw: RawInput) -> EditOutcome:
        return self._edit_field(FieldId.INITIAL_PRICE, "initial_price", raw)

    def set_final_price(self, raw: RawInput) -> EditOutcome:
        return self._edit_field(FieldId.FINAL_PRICE, "final_price", raw)

    def set_fee_percent(self, raw: RawInput) -> EditOutcome:
        return self._edit_field(FieldId.FEE_PERCENT, "fee_percent", raw)

    def set_initial_slider(self, raw: RawInput) -> EditOutcome:
        return self._edit_slider(FieldId.INITIAL_PRICE_SLIDER, "initial_price", raw)

    def set_final_slider(self, raw: RawInput) -> EditOutcome:
        return self._edit_slider(FieldId.FINAL_PRICE_SLIDER, "final_price", raw)

    def set_slider_calibration(
        self, center_price: RawInput, decades: RawInput
    ) -> EditOutcome:
        """Перекалибровка слайдеров.

        Цены не меняются, позиции слайдеров пересчитываются из цен.
        Принимается только пара целиком.
        """
        center = parse_float(center_price)
        span = parse_float(decades)
        if center is None or span is None:
            return self._reject(
                FieldId.SLIDER_CALIBRATION,
                f"cannot parse calibration ({center_price!r}, {decades!r})",
            )

        try:
            SessionState.model_validate(
                {**self.state.model_dump(), "center_price": center, "decades": span}
            )
        except ValidationError as e:
            return self._reject(FieldId.SLIDER_CALIBRATION, _first_error(e))

        self.state.center_price = center
        self.state.decades = span
        logger.debug("Slider recalibrated: center_price=%s decades=%s", center, span)
        return EditOutcome(
            field=FieldId.SLIDER_CALIBRATION, accepted=True, value=center, reason="accepted"
        )

    def _edit_field(self, field_id: FieldId, attr: str, raw: RawInput) -> EditOutcome:
        value = parse_float(raw)
        if value is None:
            return self._reject(field_id, f"cannot parse {raw!r} as a number")
        return self._assign(field_id, attr, value)

    def _edit_slider(self, field_id: FieldId, attr: str, raw: RawInput) -> EditOutcome:
        position = parse_float(raw)
        if position is None or not is_valid_float(position):
            return self._reject(field_id, f"cannot parse {raw!r} as a slider position")

        price = slider_to_price(position, self.state.center_price, self.state.decades)
        return self._assign(field_id, attr, price)

    def _assign(self, field_id: FieldId, attr: str, value: float) -> EditOutcome:
        """Проверка изменения на копии состояния, затем применение.

        Изменение отклоняется, если нарушает инварианты SessionState или
        если производные резервы и дельты переполняются до inf/NaN.
        """
        try:
            candidate = SessionState.model_validate(
                {**self.state.model_dump(), attr: value}
            )
            outcome = recompute(candidate)
        except ValidationError as e:
            return self._reject(field_id, _first_error(e))
        except InvalidArgument as e:
            return self._reject(field_id, str(e))

        if not outcome.is_finite():
            return self._reject(
                field_id, f"{attr}={value} gives reserves or deltas outside float range"
            )

        setattr(self.state, attr, value)
        self._last_result = outcome
        logger.debug("Accepted %s=%s", field_id.value, value)
        return EditOutcome(field=field_id, accepted=True, value=value, reason="accepted")

    def _reject(self, field_id: FieldId, reason: str) -> EditOutcome:
        logger.debug("Rejected edit of %s: %s", field_id.value, reason)
        return EditOutcome(field=field_id, accepted=False, value=None, reason=reason)

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def render(self) -> Dict[str, str]:
        """Строки для отображения всех полей, по идентификаторам полей.

        Raises:
            jsonschema.ValidationError: если validate_contracts включён и
                строки не соответствуют контракту calculator_output
        """
        snapshot = self._last_result
        slider = self.config.slider
        result = snapshot.result

        fields = {
            FieldId.INITIAL_LIQUIDITY.value: format_number(self.state.initial_liquidity),
            FieldId.INITIAL_PRICE.value: format_number(self.state.initial_price),
            FieldId.INITIAL_PRICE_SLIDER.value: str(slider.clamp_for_widget(self.initial_slider)),
            FieldId.FEE_PERCENT.value: format_number(self.state.fee_percent),
            FieldId.FINAL_PRICE.value: format_number(self.state.final_price),
            FieldId.FINAL_PRICE_SLIDER.value: str(slider.clamp_for_widget(self.final_slider)),
            FieldId.INITIAL_BASE_RESERVES.value: format_number(snapshot.initial.base_reserves()),
            FieldId.INITIAL_QUOTE_RESERVES.value: format_number(snapshot.initial.quote_reserves()),
            FieldId.FINAL_BASE_RESERVES.value: format_number(snapshot.final.base_reserves()),
            FieldId.FINAL_QUOTE_RESERVES.value: format_number(snapshot.final.quote_reserves()),
            FieldId.DELTA_PRICE.value: format_number(result.price_delta),
            FieldId.DELTA_BASE_RESERVES.value: format_number(result.base_wallet_delta),
            FieldId.DELTA_QUOTE_RESERVES.value: format_number(result.quote_wallet_delta),
            FieldId.FEE_BASE_COLLECTED.value: format_number(result.base_fee_collected),
            FieldId.FEE_QUOTE_COLLECTED.value: format_number(result.quote_fee_collected),
        }
        if self._output_validator is not None:
            self._output_validator.validate(fields)
        return fields

    def snapshot(self) -> Dict[str, Any]:
        """SessionState как JSON-совместимый dict (контракт session_state)."""
        data = self.state.model_dump()
        if self._state_validator is not None:
            self._state_validator.validate(data)
        return data


def _first_error(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first['msg']}" if location else first["msg"]
