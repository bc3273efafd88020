"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and an `init_db` helper that creates
the meals table and seeds it when empty.
"""

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .models import Base, Meal
from data.meals_dataset import SEED_MEALS
from core.logger import get_logger

logger = get_logger("database")

DEFAULT_DB_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "meals.db")

# Read/Write partitioning pattern. Both default to the same local SQLite file.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", f"sqlite:///{DEFAULT_DB_PATH}")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)

# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args={"check_same_thread": False})
read_engine = create_engine(READ_DATABASE_URL, connect_args={"check_same_thread": False})

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def init_db() -> int:
    """Initialize database schema and seed meals.

    Creates the meals table if needed and, only when it holds no rows,
    inserts the seed meals in a single transaction. Safe to run on every
    startup.

    Returns:
        Number of meals seeded (0 when the table already had data).
    """
    Base.metadata.create_all(bind=write_engine)
    session = WriteSessionLocal()
    try:
        count = session.query(Meal).count()
        if count > 0:
            return 0
        for item in SEED_MEALS:
            session.add(Meal(**item))
        session.commit()
        logger.info("Seeded %s meals", len(SEED_MEALS))
        return len(SEED_MEALS)
    finally:
        session.close()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope.

    Use this generator as a FastAPI dependency to ensure the session is
    properly closed after the request completes.
    """
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope."""
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
