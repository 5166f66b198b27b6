import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from stockmetrics.config import get_settings
from stockmetrics.database.engine import engine

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _database_status() -> str:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Health check could not reach the database", exc_info=True)
        return "unavailable"
    return "ok"


@router.get("/health")
def health_check():
    settings = get_settings()
    database = _database_status()
    return {
        "status": "ok" if database == "ok" else "degraded",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "database": database,
        "time": datetime.now(timezone.utc).isoformat(),
    }
