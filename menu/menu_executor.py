"""Dispatch menu selections to the exercises."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from exercises import (
    ExerciseSettings,
    carol_lines,
    convert_temperature,
    fibonacci,
    lesson_lines,
)

from .menu_schemas import get_menu_option

logger = logging.getLogger(__name__)


class MenuExecutor:
    """Run the exercise behind a menu selector."""

    def __init__(self, settings: Optional[ExerciseSettings] = None):
        """Initialize the executor with the inputs the exercises should use."""
        self.settings = settings or ExerciseSettings()
        self.actions: Dict[int, Callable[[], Dict[str, Any]]] = {
            1: self._execute_lesson_code,
            2: self._execute_fahrenheit_to_celsius,
            3: self._execute_celsius_to_fahrenheit,
            4: self._execute_fibonacci,
            5: self._execute_christmas_carol,
        }

    def execute(self, selector: int) -> Dict[str, Any]:
        """
        Run the action registered for ``selector``.

        Parameters
        ----------
        selector:
            Menu number picked by the user.

        Returns
        -------
        Dictionary with the action result, or the error information when the
        selector is unknown or the action raised.
        """
        if selector not in self.actions:
            logger.debug({"event": "menu_dispatch", "selector": selector, "status": "unknown"})
            return {
                "success": False,
                "selector": selector,
                "error": f"Unknown selector: {selector}",
                "available_selectors": list(self.actions.keys()),
            }

        name = get_menu_option(selector)["name"]
        try:
            result = self.actions[selector]()
        except Exception as error:
            logger.warning({
                "event": "menu_dispatch",
                "selector": selector,
                "name": name,
                "status": "failed",
                "error": str(error),
            })
            return {
                "success": False,
                "selector": selector,
                "name": name,
                "error": str(error),
                "error_type": type(error).__name__,
            }

        logger.debug({"event": "menu_dispatch", "selector": selector, "name": name, "status": "success"})
        return {
            "success": True,
            "selector": selector,
            "name": name,
            "result": result,
        }

    def _execute_lesson_code(self) -> Dict[str, Any]:
        return {"output": lesson_lines()}

    def _execute_fahrenheit_to_celsius(self) -> Dict[str, Any]:
        value = convert_temperature(self.settings.temperature, to_fahrenheit=False)
        return {
            "input": self.settings.temperature,
            "value": value,
            "output": [str(value)],
        }

    def _execute_celsius_to_fahrenheit(self) -> Dict[str, Any]:
        value = convert_temperature(self.settings.temperature, to_fahrenheit=True)
        return {
            "input": self.settings.temperature,
            "value": value,
            "output": [str(value)],
        }

    def _execute_fibonacci(self) -> Dict[str, Any]:
        index = self.settings.fibonacci_index
        value = fibonacci(index)
        return {
            "index": index,
            "value": value,
            "output": [f"fibonacci: {value}"],
        }

    def _execute_christmas_carol(self) -> Dict[str, Any]:
        return {"output": carol_lines()}


def parse_selection(text: str) -> Optional[int]:
    """
    Parse a menu selector from a line of input.

    Returns None when the line does not hold an integer, in which case the
    menu is simply shown again.
    """
    try:
        return int(text.strip())
    except ValueError:
        return None


# Global menu executor instance
_executor = MenuExecutor()


def execute_option(selector: int) -> Dict[str, Any]:
    """Execute a menu option using the global executor."""
    return _executor.execute(selector)
