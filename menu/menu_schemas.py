"""Menu option table shown by the interactive loop."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

EXIT_SELECTOR = 6

MENU_OPTIONS: List[Dict[str, Any]] = [
    {
        "selector": 1,
        "name": "lesson_code",
        "label": "the lesson code",
        "description": "Branching, breaking out of nested loops and a reversed range countdown.",
    },
    {
        "selector": 2,
        "name": "fahrenheit_to_celsius",
        "label": "fahrenheit to celsius",
        "description": "Convert the configured temperature from Fahrenheit to Celsius.",
    },
    {
        "selector": 3,
        "name": "celsius_to_fahrenheit",
        "label": "celsius to fahrenheit",
        "description": "Convert the configured temperature from Celsius to Fahrenheit.",
    },
    {
        "selector": 4,
        "name": "fibonacci",
        "label": "fibonacci",
        "description": "Compute the sequence value at the configured index.",
    },
    {
        "selector": 5,
        "name": "christmas_carol",
        "label": "christmas carol",
        "description": "Print the lyrics of The Twelve Days of Christmas.",
    },
    {
        "selector": EXIT_SELECTOR,
        "name": "exit",
        "label": "exit",
        "description": "Leave the menu.",
    },
]


def get_menu_option(selector: int) -> Optional[Dict[str, Any]]:
    """Return the option registered for ``selector``, if any."""
    for option in MENU_OPTIONS:
        if option["selector"] == selector:
            return option
    return None


def get_all_menu_options() -> List[Dict[str, Any]]:
    return MENU_OPTIONS


def format_menu_prompt() -> str:
    """Build the one-line prompt listing every option."""
    parts = []
    for option in MENU_OPTIONS:
        if option["selector"] == EXIT_SELECTOR:
            parts.append(f"{option['selector']} to {option['label']}")
        else:
            parts.append(f"{option['selector']} for {option['label']}")
    return ", ".join(parts)
