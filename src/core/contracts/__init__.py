"""
Contract Validation Module

Модуль для валидации JSON контрактов калькулятора CPMM.
"""

from .validators import (
    CalculatorOutputValidator,
    ContractValidator,
    SchemaLoader,
    SessionStateValidator,
    default_loader,
    validate_calculator_output,
    validate_session_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SessionStateValidator",
    "CalculatorOutputValidator",
    # Functions
    "default_loader",
    "validate_session_state",
    "validate_calculator_output",
]
