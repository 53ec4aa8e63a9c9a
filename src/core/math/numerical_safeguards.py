"""
Numerical Safeguards — проверки аргументов и NaN/Inf детекция

Модуль обеспечивает единые проверки для всех вычислений калькулятора CPMM:
- InvalidArgument — нарушение контракта вызывающей стороной
- NaN/Inf детекция
- Валидация положительности и диапазонов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не проходят валидацию
2. Границы проверяются строго (без epsilon-допуска), ноль не является положительным
3. Все операции детерминированы и воспроизводимы
"""

import math

# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class InvalidArgument(ValueError):
    """
    Нарушение контракта вызывающей стороной.

    Возникает синхронно при конструировании PoolState с неположительными
    liquidity/price и при расчёте сделки с fee_fraction вне [0, 1).

    Слой ввода обязан отфильтровать некорректный пользовательский ввод до
    вызова движка, поэтому в нормальной интерактивной работе не возникает.
    """

    pass


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def all_valid_floats(*values: float) -> bool:
    """
    Проверка, что все значения валидны (ни одного NaN/Inf).

    Используется для отсева результатов, в которых промежуточные
    вычисления переполнились.
    """
    return all(is_valid_float(value) for value in values)


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidArgument(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
    max_exclusive: bool = False,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение, включительно (optional)
        max_value: Максимальное допустимое значение (optional)
        max_exclusive: Исключить max_value из диапазона (default: False)

    Raises:
        InvalidArgument: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidArgument(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise InvalidArgument(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None:
        if max_exclusive and value >= max_value:
            raise InvalidArgument(f"{name} must be < {max_value}, got {value}")
        if not max_exclusive and value > max_value:
            raise InvalidArgument(f"{name} must be <= {max_value}, got {value}")
