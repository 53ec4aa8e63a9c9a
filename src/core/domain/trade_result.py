"""
TradeResult — Результат перевода пула из одного состояния в другое

Immutable Pydantic модель. Дельты кошелька указаны с точки зрения трейдера
(положительное значение — трейдер получает, отрицательное — платит).
Комиссия берётся только со стороны входа и отражается отдельным полем,
а не вычитается из дельты кошелька.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class TradeSide(str, Enum):
    """Актив, которым трейдер платит пулу (сторона входа)"""

    BASE = "base"
    QUOTE = "quote"


# =============================================================================
# TRADE RESULT MODEL
# =============================================================================


class TradeResult(BaseModel):
    """
    Модель результата сделки.

    Immutable модель (frozen=True). Вычисляется по запросу,
    никогда не изменяется и не сохраняется.

    Инвариант: не более одного из base_fee_collected/quote_fee_collected
    отлично от нуля; оба равны нулю для no-op сделки.
    """

    price_delta: float = Field(..., description="Изменение цены (final - initial)")

    # Дельты кошелька (gross, до комиссии)
    base_wallet_delta: float = Field(..., description="Изменение base в кошельке трейдера")
    quote_wallet_delta: float = Field(..., description="Изменение quote в кошельке трейдера")

    # Комиссии (fee sink)
    base_fee_collected: float = Field(..., ge=0, description="Комиссия в base активе")
    quote_fee_collected: float = Field(..., ge=0, description="Комиссия в quote активе")

    model_config = {"frozen": True}

    def input_side(self) -> Optional[TradeSide]:
        """
        Сторона, которой трейдер платит пулу.

        Returns:
            TradeSide.BASE при продаже base, TradeSide.QUOTE при покупке base,
            None для no-op сделки
        """
        if self.base_wallet_delta < 0:
            return TradeSide.BASE
        if self.quote_wallet_delta < 0:
            return TradeSide.QUOTE
        return None

    def is_noop(self) -> bool:
        """True если сделка не переместила резервы"""
        return self.base_wallet_delta == 0.0 and self.quote_wallet_delta == 0.0
