"""Exercises reachable from the menu."""

from .base import ExerciseSettings, InvalidArgumentError
from .carol import carol_lines, verse
from .fibonacci import fibonacci, fibonacci_sequence
from .lesson import lesson_lines
from .temperature import celsius_to_fahrenheit, convert_temperature, fahrenheit_to_celsius
