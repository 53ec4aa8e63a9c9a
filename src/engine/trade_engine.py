"""
Trade Engine — расчёт дельт кошелька и комиссии для CPMM сделки

Сделка моделируется как перевод пула из initial в final состояние.
Всё, что покидает пул, попадает в кошелёк трейдера, поэтому дельта кошелька
равна дельте резервов пула с обратным знаком.

Комиссия взимается с gross суммы входа (актива, которым трейдер платит) и
отправляется в fee sink. Дельты кошелька отражаются gross (до комиссии):
пара (wallet_delta, fee_collected) аддитивно описывает весь денежный поток.
"""

from src.core.domain.pool_state import PoolState
from src.core.domain.trade_result import TradeResult
from src.core.math.numerical_safeguards import validate_in_range


# =============================================================================
# КОМИССИЯ
# =============================================================================


def split_input_fee(
    base_gross: float,
    quote_gross: float,
    fee_fraction: float,
) -> tuple[float, float]:
    """
    Распределение комиссии по стороне входа.

    Стороны взаимоисключающие и выбираются по знаку gross суммы:
    - base_gross < 0: трейдер продаёт base → комиссия в base
    - quote_gross < 0: трейдер покупает base за quote → комиссия в quote
    - иначе (no-op): комиссии нет

    Args:
        base_gross: Gross дельта base в кошельке трейдера
        quote_gross: Gross дельта quote в кошельке трейдера
        fee_fraction: Доля комиссии в [0, 1)

    Returns:
        (base_fee, quote_fee), оба >= 0, не более одного ненулевого
    """
    if base_gross < 0:
        return (-base_gross) * fee_fraction, 0.0
    if quote_gross < 0:
        return 0.0, (-quote_gross) * fee_fraction
    return 0.0, 0.0


# =============================================================================
# РАСЧЁТ СДЕЛКИ
# =============================================================================


def compute_trade(
    initial: PoolState,
    final: PoolState,
    fee_fraction: float,
) -> TradeResult:
    """
    Вычисление результата сделки, переводящей пул из initial в final.

    Алгоритм:
        price_delta = final.price - initial.price
        base_gross  = -(final.base_reserves()  - initial.base_reserves())
        quote_gross = -(final.quote_reserves() - initial.quote_reserves())
        комиссия берётся только со стороны входа (см. split_input_fee)

    Args:
        initial: Состояние пула до сделки
        final: Состояние пула после сделки
        fee_fraction: Доля комиссии в [0, 1) (0.003 = 0.3%)

    Returns:
        TradeResult с gross дельтами кошелька и собранной комиссией

    Raises:
        InvalidArgument: Если fee_fraction вне [0, 1)
    """
    validate_in_range(
        fee_fraction, "fee_fraction", min_value=0.0, max_value=1.0, max_exclusive=True
    )

    price_delta = final.price - initial.price

    # Изменение резервов пула
    base_pool_delta = final.base_reserves() - initial.base_reserves()
    quote_pool_delta = final.quote_reserves() - initial.quote_reserves()

    # Что покинуло пул, поступило в кошелёк
    base_gross = -base_pool_delta
    quote_gross = -quote_pool_delta

    base_fee, quote_fee = split_input_fee(base_gross, quote_gross, fee_fraction)

    return TradeResult(
        price_delta=price_delta,
        base_wallet_delta=base_gross,
        quote_wallet_delta=quote_gross,
        base_fee_collected=base_fee,
        quote_fee_collected=quote_fee,
    )
