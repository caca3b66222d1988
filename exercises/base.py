"""Shared types for the exercises."""

from __future__ import annotations

from pydantic import BaseModel, Field


class InvalidArgumentError(ValueError):
    """Raised when an exercise receives an argument outside its domain."""


class ExerciseSettings(BaseModel):
    """Inputs the menu passes to the exercises."""

    fibonacci_index: int = Field(97, ge=0, description="Sequence index computed by menu option 4.")
    temperature: float = Field(15.0, description="Temperature converted by menu options 2 and 3.")
