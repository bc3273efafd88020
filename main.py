"""Application entry point for the Meal Tracker API.

Defines the FastAPI app, middleware and exception handlers, includes the
meals router and serves the browser client from `public/`. The `lifespan`
handler initializes the DB on startup.
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.orm import Session

from database import init_db
from database.deps import get_db_read
from core.exceptions import DatabaseError
from core.error_handlers import register_exception_handlers
from core.logger import get_logger
from api.meals import router as meals_router

logger = get_logger("main")

PORT = int(os.getenv("PORT", "3000"))
PUBLIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "public")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: initialize resources before serving requests."""
    init_db()
    yield


app = FastAPI(title="Meal Tracker API", version="1.0.0", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Return basic health status and database connectivity.

    Raises:
        DatabaseError: If database connection fails.
    """
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.exception("Health check failed")
        raise DatabaseError("Database health check failed", operation="health_check") from e


app.include_router(meals_router)

# Mounted last so API routes take precedence over static files.
app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")


if __name__ == "__main__":
    import uvicorn

    logger.info("Meal tracker running at http://localhost:%s", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)
