"""Control-flow lesson: branching, breaking out of nested loops, ranges."""

from __future__ import annotations

from typing import List


def lesson_lines(number: int = 3) -> List[str]:
    """Return the lines printed by the lesson, in order."""
    lines: List[str] = []

    if number < 5:
        lines.append("condition true")
    else:
        lines.append("condition false")

    # The inner loop can stop itself or both loops at once.
    count = 0
    counting_up = True
    while counting_up:
        lines.append(f"count = {count}")
        remaining = 10

        while True:
            lines.append(f"remaining = {remaining}")
            if remaining == 9:
                break
            if count == 2:
                counting_up = False
                break
            remaining -= 1

        if counting_up:
            count += 1

    lines.append(f"End count = {count}")

    for value in reversed(range(1, 4)):
        lines.append(f"{value}!")

    return lines
