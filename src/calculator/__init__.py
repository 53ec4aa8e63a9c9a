"""Calculator — сессия калькулятора CPMM поверх чистого движка.

- recompute: пересчёт всех выходов из SessionState
- CalculatorSession: headless контроллер ввода, синхронизации слайдеров и отображения
- CalculatorConfig: значения по умолчанию и параметры слайдера
"""

from .config import CalculatorConfig, SessionDefaults, SliderConfig
from .recompute import RecomputeResult, recompute
from .session import CalculatorSession, EditOutcome, FieldId, parse_float

__all__ = [
    "CalculatorConfig",
    "SessionDefaults",
    "SliderConfig",
    "RecomputeResult",
    "recompute",
    "CalculatorSession",
    "EditOutcome",
    "FieldId",
    "parse_float",
]
