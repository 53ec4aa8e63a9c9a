"""
Domain models and value objects.

Contains the CPMM calculator entities: PoolState, TradeResult, SessionState.
"""

from src.core.domain.pool_state import PoolState, make_pool_state
from src.core.domain.session_state import (
    DEFAULT_CENTER_PRICE,
    DEFAULT_DECADES,
    DEFAULT_FEE_PERCENT,
    DEFAULT_FINAL_PRICE,
    DEFAULT_INITIAL_LIQUIDITY,
    DEFAULT_INITIAL_PRICE,
    FEE_PERCENT_MAX,
    SessionState,
)
from src.core.domain.trade_result import TradeResult, TradeSide

__all__ = [
    # Pool state
    "PoolState",
    "make_pool_state",
    # Trade result
    "TradeResult",
    "TradeSide",
    # Session state
    "SessionState",
    "DEFAULT_INITIAL_LIQUIDITY",
    "DEFAULT_INITIAL_PRICE",
    "DEFAULT_FINAL_PRICE",
    "DEFAULT_FEE_PERCENT",
    "DEFAULT_CENTER_PRICE",
    "DEFAULT_DECADES",
    "FEE_PERCENT_MAX",
]
