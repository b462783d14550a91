"""GET /api/health — system dependency check."""
import logging
from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from core.db_connector import describe_db_error, get_engine, ping
from core.errors import DataAccessError
from integrations.ollama_client import OllamaClient

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health_check():
    ollama_status = _check_ollama()
    db_status     = _check_database()
    overall = "ok" if ollama_status["status"] == "up" and db_status["status"] == "up" else "degraded"
    return {
        "status": overall,
        "services": {
            "ollama":   ollama_status,
            "database": db_status,
        },
    }


def _check_ollama() -> dict:
    healthy, detail = OllamaClient().is_healthy()
    if healthy:
        return {"status": "up", "model": detail, "url": settings.OLLAMA_HOST}
    return {"status": "down", "error": detail}


def _check_database() -> dict:
    try:
        ping(get_engine())
        return {"status": "up", "type": settings.DB_TYPE}
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        return {"status": "down", "error": describe_db_error(e)}
    except DataAccessError as e:
        return {"status": "down", "error": e.message}
