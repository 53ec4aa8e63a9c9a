"""Engine — расчёт сделки CPMM.

- compute_trade: дельты кошелька и комиссия со стороны входа
- split_input_fee: выбор стороны комиссии по знаку gross суммы
"""

from .trade_engine import compute_trade, split_input_fee

__all__ = [
    "compute_trade",
    "split_input_fee",
]
