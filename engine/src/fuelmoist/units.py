"""Temperature unit conversion."""

from __future__ import annotations

from fuelmoist.validation import require_finite


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit.

    Raises:
        InvalidInputError: If celsius is not a finite number
    """
    c = require_finite("celsius", celsius)
    return c * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius.

    Raises:
        InvalidInputError: If fahrenheit is not a finite number
    """
    f = require_finite("fahrenheit", fahrenheit)
    return (f - 32.0) * 5.0 / 9.0
