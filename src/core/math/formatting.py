"""
Number Formatting — политика отображения чисел

Только для отображения: результат теряет точность и не должен
использоваться в дальнейших вычислениях.
"""

from typing import Final

# Ниже этого порога (по модулю, кроме нуля) используется научная нотация
SCIENTIFIC_SMALL_THRESHOLD: Final[float] = 0.0001

# Начиная с этого порога (по модулю) используется научная нотация
SCIENTIFIC_LARGE_THRESHOLD: Final[float] = 1_000_000.0

FIXED_DIGITS: Final[int] = 6
SMALL_SCIENTIFIC_DIGITS: Final[int] = 6
LARGE_SCIENTIFIC_DIGITS: Final[int] = 4


def format_number(value: float) -> str:
    """
    Форматирование числа для отображения.

    Правила:
    - 0 < |value| < 1e-4: научная нотация, 6 знаков после запятой
    - |value| >= 1e6: научная нотация, 4 знака после запятой
    - иначе (включая ноль): фиксированная точка, 6 знаков

    Args:
        value: Число для отображения

    Returns:
        Строковое представление

    Examples:
        >>> format_number(1.5)
        '1.500000'
        >>> format_number(0.00001234)
        '1.234000e-05'
        >>> format_number(2500000.0)
        '2.5000e+06'
        >>> format_number(0.0)
        '0.000000'
    """
    magnitude = abs(value)

    if magnitude < SCIENTIFIC_SMALL_THRESHOLD and value != 0:
        return f"{value:.{SMALL_SCIENTIFIC_DIGITS}e}"
    if magnitude >= SCIENTIFIC_LARGE_THRESHOLD:
        return f"{value:.{LARGE_SCIENTIFIC_DIGITS}e}"
    return f"{value:.{FIXED_DIGITS}f}"
