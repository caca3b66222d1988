"""Fahrenheit/Celsius conversions."""

from __future__ import annotations

FAHRENHEIT_OFFSET = 32.0
FAHRENHEIT_SCALE = 1.8


def fahrenheit_to_celsius(value: float) -> float:
    return (value - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE


def celsius_to_fahrenheit(value: float) -> float:
    return value * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET


def convert_temperature(value: float, to_fahrenheit: bool = False) -> float:
    """
    Convert ``value`` between the two scales.

    Parameters
    ----------
    value:
        Temperature to convert.
    to_fahrenheit:
        When True ``value`` is read as Celsius and converted to Fahrenheit.
        Otherwise it is read as Fahrenheit and converted to Celsius.
    """
    if to_fahrenheit:
        return celsius_to_fahrenheit(value)
    return fahrenheit_to_celsius(value)
