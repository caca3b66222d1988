"""Lyrics of "The Twelve Days of Christmas"."""

from __future__ import annotations

from typing import List

from .base import InvalidArgumentError

ORDINALS = (
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
    "eleventh",
    "twelfth",
)

GIFTS = (
    "A partridge in a pear tree",
    "Two turtle doves",
    "Three French hens",
    "Four calling birds",
    "Five golden rings",
    "Six geese a-laying",
    "Seven swans a-swimming",
    "Eight maids a-milking",
    "Nine ladies dancing",
    "Ten lords a-leaping",
    "Eleven pipers piping",
    "Twelve drummers drumming",
)

DAYS = len(GIFTS)


def verse(day: int) -> List[str]:
    """Return the lines of the verse for ``day`` (1 to 12)."""
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= DAYS:
        raise InvalidArgumentError(f"day must be between 1 and {DAYS}, got {day!r}")

    lines = [f"On the {ORDINALS[day - 1]} day of Christmas my true love sent to me"]
    for gift_day in range(day, 1, -1):
        lines.append(GIFTS[gift_day - 1])
    lines.append("And a partridge in a pear tree" if day > 1 else GIFTS[0])
    return lines


def carol_lines() -> List[str]:
    """Return the whole carol, verses separated by a blank line."""
    lines: List[str] = []
    for day in range(1, DAYS + 1):
        if lines:
            lines.append("")
        lines.extend(verse(day))
    return lines
