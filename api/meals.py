"""Meals API router.

Exposes listing, creation, renaming and the "cooked today" action for the
web client. Mutations return the full updated meal so the client never
needs a second round-trip.
"""

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from schemas import MealDetail, MealCreateRequest, MealRenameRequest
from services.meal_service import meal_service

logger = get_logger("api.meals")
router = APIRouter(prefix="/api", tags=["meals"])


@router.get("/meals", response_model=List[MealDetail])
def list_meals(
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: Optional[str] = None,
    db: Session = Depends(get_db_read),
):
    """Return all meals sorted by `sortBy` (name, category, lastCooked,
    timesCooked) in `order` (asc or desc).

    Bad sort parameters fall back to the defaults instead of failing.
    """
    logger.debug("Listing meals sortBy=%s order=%s", sort_by, order)
    return meal_service.list_meals(db, sort_by=sort_by, order=order)


@router.post("/meals", response_model=MealDetail, status_code=201)
def create_meal(payload: MealCreateRequest = Body(...), db: Session = Depends(get_db_write)):
    """Add a meal and return it with its assigned id.

    Raises:
        ValidationError: If name, category, lastCooked or timesCooked is invalid.
    """
    return meal_service.create_meal(
        db,
        name=payload.name,
        category=payload.category,
        last_cooked=payload.last_cooked,
        times_cooked=payload.times_cooked,
    )


@router.post("/meals/{meal_id}/cooked-today", response_model=MealDetail)
def mark_cooked_today(meal_id: str, db: Session = Depends(get_db_write)):
    """Record that the meal was cooked today.

    Raises:
        ValidationError: If `meal_id` is not a positive integer.
        NotFoundError: If the meal does not exist.
    """
    return meal_service.mark_cooked_today(db, meal_id)


@router.patch("/meals/{meal_id}", response_model=MealDetail)
def rename_meal(meal_id: str, payload: MealRenameRequest = Body(...), db: Session = Depends(get_db_write)):
    """Rename a meal.

    Raises:
        ValidationError: If the id or the new name is invalid.
        NotFoundError: If the meal does not exist.
    """
    return meal_service.rename_meal(db, meal_id, payload.name)
