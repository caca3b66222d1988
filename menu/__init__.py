"""Interactive menu dispatch for the exercises."""

from .menu_executor import MenuExecutor, execute_option, parse_selection
from .menu_schemas import (
    EXIT_SELECTOR,
    MENU_OPTIONS,
    format_menu_prompt,
    get_all_menu_options,
    get_menu_option,
)

__all__ = [
    "MenuExecutor",
    "execute_option",
    "parse_selection",
    "EXIT_SELECTOR",
    "MENU_OPTIONS",
    "get_menu_option",
    "get_all_menu_options",
    "format_menu_prompt",
]
