"""Meal tracking service.

Validates meal input, runs the queries behind the meal endpoints and maps
rows to `MealDetail` transfer objects. Every mutation is a single SQL
statement, so there is no partial-failure state to clean up.
"""

import re
from datetime import date
from typing import Any, Callable, List, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationError
from core.logger import get_logger
from core.repository import BaseRepository
from database.models import ALLOWED_CATEGORIES, Meal
from schemas.meal_schema import MealDetail

logger = get_logger("services.meal_service")

# External sort field -> ORM column
ALLOWED_SORT_FIELDS = {
    "name": Meal.name,
    "category": Meal.category,
    "lastCooked": Meal.last_cooked,
    "timesCooked": Meal.times_cooked,
}
DEFAULT_SORT_FIELD = "lastCooked"

MIN_NAME_LENGTH = 2
# Largest value an SQLite INTEGER column can hold.
MAX_STORED_INTEGER = 2 ** 63 - 1
# Format only: 2024-13-40 is accepted, calendar validity is not checked.
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_INTEGER_TEXT = re.compile(r"-?[0-9]+")


def validate_name(name: Any) -> str:
    """Return the trimmed name or raise ValidationError."""
    if not isinstance(name, str) or len(name.strip()) < MIN_NAME_LENGTH:
        raise ValidationError("Name must be at least 2 characters.", field="name")
    return name.strip()


def validate_category(category: Any) -> str:
    if category not in ALLOWED_CATEGORIES:
        raise ValidationError("Category must be meat, vegetarian, or fish.", field="category")
    return category


def validate_last_cooked(value: Any) -> str:
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        raise ValidationError("lastCooked must be in YYYY-MM-DD format.", field="lastCooked")
    return value


def validate_times_cooked(value: Any) -> int:
    """Coerce `value` to a non-negative int.

    Integers, integral floats (3.0) and integer strings ("3") are accepted.
    Booleans, fractions and anything non-numeric are not.
    """
    parsed: Optional[int] = None
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, float) and value.is_integer():
        parsed = int(value)
    elif isinstance(value, str) and _INTEGER_TEXT.fullmatch(value.strip()):
        parsed = int(value.strip())

    if parsed is None or parsed < 0 or parsed > MAX_STORED_INTEGER:
        raise ValidationError("timesCooked must be a non-negative integer.", field="timesCooked")
    return parsed


def parse_meal_id(raw: Any) -> int:
    """Parse a path id into a positive int or raise ValidationError."""
    if isinstance(raw, bool):
        meal_id = None
    elif isinstance(raw, int):
        meal_id = raw
    elif isinstance(raw, str) and raw.isascii() and raw.isdigit():
        meal_id = int(raw)
    else:
        meal_id = None

    if meal_id is None or meal_id < 1:
        raise ValidationError("Invalid meal id.", field="id")
    return meal_id


def _ensure_storable_id(meal_id: int) -> None:
    """Ids past the INTEGER range cannot match any row."""
    if meal_id > MAX_STORED_INTEGER:
        raise NotFoundError("Meal", meal_id)


def to_meal_detail(meal: Meal) -> MealDetail:
    """Map a Meal row to its transfer object."""
    return MealDetail(
        id=meal.id,
        name=meal.name,
        category=meal.category,
        last_cooked=meal.last_cooked,
        times_cooked=meal.times_cooked,
    )


class MealService:
    """Operations behind the /api/meals endpoints.

    Args:
        today: Callable returning the current local date; tests pass a fixed
            date to make mark-cooked deterministic.
    """

    def __init__(self, today: Callable[[], date] = date.today):
        self.today = today

    def list_meals(self, db: Session, sort_by: Optional[str] = None, order: Optional[str] = None) -> List[MealDetail]:
        """Return all meals sorted by an allow-listed field.

        Unknown `sort_by` values fall back to lastCooked; any `order` other
        than ``desc`` means ascending. Ties always break on ascending id.
        """
        column = ALLOWED_SORT_FIELDS.get(sort_by, ALLOWED_SORT_FIELDS[DEFAULT_SORT_FIELD])
        primary = column.desc() if order == "desc" else column.asc()
        meals = BaseRepository(Meal, db).list_ordered(primary, Meal.id.asc())
        return [to_meal_detail(m) for m in meals]

    def create_meal(
        self,
        db: Session,
        name: Any,
        category: Any,
        last_cooked: Any,
        times_cooked: Any,
    ) -> MealDetail:
        """Validate and insert a meal, returning the persisted record.

        Raises:
            ValidationError: If any field breaks its rule.
        """
        meal = Meal(
            name=validate_name(name),
            category=validate_category(category),
            last_cooked=validate_last_cooked(last_cooked),
            times_cooked=validate_times_cooked(times_cooked),
        )
        meal = BaseRepository(Meal, db).create(meal)
        logger.info("Meal created: id=%s name=%s", meal.id, meal.name)
        return to_meal_detail(meal)

    def mark_cooked_today(self, db: Session, meal_id: Any) -> MealDetail:
        """Set lastCooked to today and bump timesCooked by one.

        The increment happens inside the UPDATE statement, so concurrent
        calls for the same meal cannot lose a count.

        Raises:
            ValidationError: If `meal_id` is not a positive integer.
            NotFoundError: If no meal has that id.
        """
        meal_id = parse_meal_id(meal_id)
        _ensure_storable_id(meal_id)
        repo = BaseRepository(Meal, db)
        changed = repo.update_by_id(meal_id, {
            "last_cooked": self.today().isoformat(),
            "times_cooked": Meal.times_cooked + 1,
        })
        if changed == 0:
            raise NotFoundError("Meal", meal_id)
        logger.info("Meal cooked today: id=%s", meal_id)
        return to_meal_detail(repo.get_by_id(meal_id))

    def rename_meal(self, db: Session, meal_id: Any, name: Any) -> MealDetail:
        """Replace a meal's name with the trimmed `name`.

        Raises:
            ValidationError: If the id or name is invalid.
            NotFoundError: If no meal has that id.
        """
        meal_id = parse_meal_id(meal_id)
        new_name = validate_name(name)
        _ensure_storable_id(meal_id)
        repo = BaseRepository(Meal, db)
        if repo.update_by_id(meal_id, {"name": new_name}) == 0:
            raise NotFoundError("Meal", meal_id)
        logger.info("Meal renamed: id=%s name=%s", meal_id, new_name)
        return to_meal_detail(repo.get_by_id(meal_id))


# export singleton
meal_service = MealService()
__all__ = ["MealService", "meal_service", "ALLOWED_SORT_FIELDS"]
