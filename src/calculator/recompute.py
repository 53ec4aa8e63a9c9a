"""Recompute — пересчёт всех выходов калькулятора из SessionState.

Единственная операция, которую вызывает слой представления после
любого принятого изменения ввода. Синхронная, чистая арифметика.
"""

from dataclasses import dataclass

from src.core.domain.pool_state import PoolState, make_pool_state
from src.core.domain.session_state import SessionState
from src.core.domain.trade_result import TradeResult
from src.core.math.numerical_safeguards import all_valid_floats
from src.engine.trade_engine import compute_trade


@dataclass(frozen=True)
class RecomputeResult:
    """Результат пересчёта: состояния пула до/после и результат сделки."""

    initial: PoolState
    final: PoolState
    result: TradeResult

    def is_finite(self) -> bool:
        """Все резервы, дельты и комиссии конечны.

        Конечные liquidity и price не гарантируют конечных резервов:
        L / sqrt(P) переполняется до inf при больших L и малых P.
        """
        return all_valid_floats(
            self.initial.base_reserves(),
            self.initial.quote_reserves(),
            self.final.base_reserves(),
            self.final.quote_reserves(),
            self.result.price_delta,
            self.result.base_wallet_delta,
            self.result.quote_wallet_delta,
            self.result.base_fee_collected,
            self.result.quote_fee_collected,
        )


def recompute(session: SessionState) -> RecomputeResult:
    """Пересчёт состояний пула и результата сделки.

    Сделка моделируется как движение цены при постоянной ликвидности:
    оба PoolState используют session.initial_liquidity.

    Args:
        session: текущие входные параметры

    Returns:
        RecomputeResult

    Raises:
        InvalidArgument: если состояние сессии нарушает контракт движка
    """
    initial = make_pool_state(session.initial_liquidity, session.initial_price)
    final = make_pool_state(session.initial_liquidity, session.final_price)
    result = compute_trade(initial, final, session.fee_fraction())

    return RecomputeResult(initial=initial, final=final, result=result)
