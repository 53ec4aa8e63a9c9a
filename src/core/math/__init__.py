"""
Core math modules калькулятора CPMM

Численные проверки, логарифмическая ось слайдера и форматирование чисел.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Exceptions
    InvalidArgument,
    # NaN/Inf detection
    all_valid_floats,
    is_valid_float,
    # Validation
    validate_in_range,
    validate_positive,
)

# Slider Mapping
from src.core.math.slider_mapping import (
    SLIDER_CENTER,
    price_to_slider,
    slider_to_price,
)

# Formatting
from src.core.math.formatting import (
    SCIENTIFIC_LARGE_THRESHOLD,
    SCIENTIFIC_SMALL_THRESHOLD,
    format_number,
)

__all__ = [
    # Numerical Safeguards — Exceptions
    "InvalidArgument",
    # Numerical Safeguards — NaN/Inf detection
    "all_valid_floats",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_in_range",
    "validate_positive",
    # Slider Mapping
    "SLIDER_CENTER",
    "price_to_slider",
    "slider_to_price",
    # Formatting
    "SCIENTIFIC_LARGE_THRESHOLD",
    "SCIENTIFIC_SMALL_THRESHOLD",
    "format_number",
]
