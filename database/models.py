"""SQLAlchemy ORM models for the meal tracker.

A single flat table holds every meal. The category constraint lives in the
schema as well as in the service so the database refuses bad rows even if
they bypass the API.
"""

from sqlalchemy import CheckConstraint, Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

ALLOWED_CATEGORIES = ("meat", "vegetarian", "fish")


class Meal(Base):
    """ORM model representing a tracked meal.

    `last_cooked` is stored as ISO ``YYYY-MM-DD`` text.
    """

    __tablename__ = "meals"
    __table_args__ = (
        CheckConstraint(
            "category IN ({})".format(", ".join(f"'{c}'" for c in ALLOWED_CATEGORIES)),
            name="ck_meals_category",
        ),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    last_cooked = Column(String, nullable=False)
    times_cooked = Column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self):
        return f"<Meal id={self.id} name={self.name!r} category={self.category}>"
