"""Health check endpoints."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fermentato.database import get_db
from fermentato.logging_config import get_logger

logger = get_logger("fermentato.routes.health")

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """Liveness probe for the hosting platform."""
    return {"status": "ok", "service": "fermentato"}


@router.get("/db")
def database_check(db=Depends(get_db)):
    """Readiness probe: the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database health check failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "unavailable", "database": "error"})
    return {"status": "ok", "database": "ok"}
