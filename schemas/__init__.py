"""Pydantic schema package for request and response models."""

from .meal_schema import MealDetail, MealCreateRequest, MealRenameRequest

__all__ = [
    "MealDetail",
    "MealCreateRequest",
    "MealRenameRequest",
]
