"""
Slider Mapping — логарифмическая ось цены для слайдера

Слайдер в [0, 1] покрывает 2 * decades порядков цены вокруг center_price:
- 0.0 → center_price * 10^(-decades)
- 0.5 → center_price
- 1.0 → center_price * 10^(+decades)

Отображение тотально по s (экстраполяция за [0, 1] разрешена).
Обратное отображение для неположительных цен не определено и
возвращает центр слайдера вместо ошибки.
"""

import math
from typing import Final

# Позиция слайдера, соответствующая center_price
SLIDER_CENTER: Final[float] = 0.5


def slider_to_price(slider_value: float, center_price: float, decades: float) -> float:
    """
    Конверсия позиции слайдера в цену.

    exponent = (s - 0.5) * 2 * decades
    price    = center_price * 10^exponent

    Args:
        slider_value: Позиция слайдера (обычно [0, 1], но допускается любая)
        center_price: Цена в центре слайдера (> 0)
        decades: Количество порядков цены на полный ход слайдера (> 0)

    Returns:
        Цена для позиции слайдера

    Examples:
        >>> slider_to_price(0.5, 10.0, 2.0)
        10.0
        >>> slider_to_price(1.0, 1.0, 3.0)
        1000.0
    """
    exponent = (slider_value - SLIDER_CENTER) * 2.0 * decades
    try:
        scale = math.pow(10.0, exponent)
    except OverflowError:
        # Экстраполяция далеко за пределы диапазона: насыщение как в IEEE-754
        scale = math.inf
    return center_price * scale


def price_to_slider(price: float, center_price: float, decades: float) -> float:
    """
    Конверсия цены в позицию слайдера.

    slider = 0.5 + log10(price / center_price) / (2 * decades)

    Для price <= 0 или center_price <= 0 логарифм не определён:
    возвращается SLIDER_CENTER (мягкий degenerate mapping, без исключения).

    Args:
        price: Цена
        center_price: Цена в центре слайдера
        decades: Количество порядков цены на полный ход слайдера (> 0)

    Returns:
        Позиция слайдера (может выходить за [0, 1] для цен вне диапазона)
    """
    if price <= 0 or center_price <= 0:
        return SLIDER_CENTER

    exponent = math.log10(price / center_price)
    return SLIDER_CENTER + exponent / (2.0 * decades)
