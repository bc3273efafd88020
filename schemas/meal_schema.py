"""Schemas for meal requests and responses.

Response fields are snake_case in Python and camelCase on the wire.
Request bodies are typed loosely on purpose: the meal service checks each
field and answers with a 400 naming the broken rule.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any


class MealDetail(BaseModel):
    """Representation of a meal in responses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    category: str
    last_cooked: str = Field(..., examples=["2026-01-27"])
    times_cooked: int


class MealCreateRequest(BaseModel):
    """Payload for adding a meal."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Any = Field(None, examples=["Fiskgratang"], description="At least 2 characters after trimming")
    category: Any = Field(None, examples=["fish"], description="One of meat, vegetarian, fish")
    last_cooked: Any = Field(None, examples=["2026-02-03"], description="Date in YYYY-MM-DD form")
    times_cooked: Any = Field(None, examples=[0], description="Non-negative integer")


class MealRenameRequest(BaseModel):
    """Payload for renaming a meal."""

    name: Any = Field(None, examples=["Fiskgratang med dill"])
