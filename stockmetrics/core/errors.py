import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from stockmetrics.core.constants import DASHBOARD_LOAD_ERROR

logger = logging.getLogger(__name__)

# store/transport failures: the whole request fails, no partial result
STORE_FAILURES = (SQLAlchemyError, ConnectionError, TimeoutError)


async def load_or_503(awaitable):
    try:
        return await awaitable
    except STORE_FAILURES:
        logger.exception("Failed to load dashboard data")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=DASHBOARD_LOAD_ERROR,
        )


__all__ = ["STORE_FAILURES", "load_or_503"]
