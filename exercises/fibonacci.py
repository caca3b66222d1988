"""Fibonacci-like sequence where the first two terms are both 1."""

from __future__ import annotations

import logging
from typing import List

from .base import InvalidArgumentError

logger = logging.getLogger(__name__)


def _check_index(value: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{label} must be non-negative, got {value}")


def fibonacci(n: int) -> int:
    """
    Return the sequence value at index ``n``.

    Parameters
    ----------
    n:
        Sequence index. ``fibonacci(0)`` and ``fibonacci(1)`` are both 1,
        every later value is the sum of the two before it.

    Returns
    -------
    int
        The sequence value. Python integers do not overflow, so indexes past
        the 64-bit range (97 and up) are exact.

    Raises
    ------
    InvalidArgumentError
        If ``n`` is negative.
    """
    _check_index(n, "n")

    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current

    logger.debug({"event": "fibonacci", "n": n, "bits": current.bit_length()})
    return current


def fibonacci_sequence(count: int) -> List[int]:
    """Return the first ``count`` values of the sequence."""
    _check_index(count, "count")

    values: List[int] = []
    previous, current = 1, 1
    for _ in range(count):
        values.append(previous)
        previous, current = current, previous + current
    return values
