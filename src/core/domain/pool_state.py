"""
PoolState — Снапшот состояния CPMM пула

Immutable Pydantic модель, представляющая экономическое состояние пула
с постоянным произведением (x * y = k = L^2).

Резервы не хранятся, а вычисляются из liquidity (L) и price (P):
- base_reserves  x = L / sqrt(P)
- quote_reserves y = L * sqrt(P)

Откуда P = y / x и x * y = L^2.
"""

import math

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import validate_positive


# =============================================================================
# POOL STATE MODEL
# =============================================================================


class PoolState(BaseModel):
    """
    Модель состояния пула (liquidity + spot price).

    Immutable модель (frozen=True). Создаётся заново для каждого пересчёта
    из текущего SessionState, идентичности кроме двух полей не имеет.
    """

    liquidity: float = Field(..., gt=0, description="Ликвидность L (масштаб пула)")
    price: float = Field(..., gt=0, description="Spot цена (quote за 1 base)")

    model_config = {"frozen": True}

    def base_reserves(self) -> float:
        """
        Резервы base актива.

        Returns:
            x = L / sqrt(P)
        """
        return self.liquidity / math.sqrt(self.price)

    def quote_reserves(self) -> float:
        """
        Резервы quote актива.

        Returns:
            y = L * sqrt(P)
        """
        return self.liquidity * math.sqrt(self.price)

    def invariant(self) -> float:
        """
        Инвариант постоянного произведения k = L^2.

        Используется для диагностики и тестов: всегда равен
        base_reserves() * quote_reserves() с точностью до округления float.
        """
        return self.liquidity * self.liquidity


# =============================================================================
# КОНСТРУКТОР С ВАЛИДАЦИЕЙ
# =============================================================================


def make_pool_state(liquidity: float, price: float) -> PoolState:
    """
    Создание PoolState с проверкой контракта.

    Args:
        liquidity: Ликвидность L (> 0)
        price: Spot цена P (> 0)

    Returns:
        Immutable PoolState

    Raises:
        InvalidArgument: Если liquidity или price не строго положительные
    """
    validate_positive(liquidity, "liquidity")
    validate_positive(price, "price")
    return PoolState(liquidity=liquidity, price=price)
