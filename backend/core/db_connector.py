"""
Database connector — process-wide SQLAlchemy engine with a bounded pool.
The engine is created once at startup and disposed at shutdown; each
statement checks a connection out and returns it on every exit path.
"""
import logging
from typing import Optional
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from core.errors import DataAccessError
from models.connection import ConnectionConfig

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None


def create_engine_from_config(cfg: ConnectionConfig) -> Engine:
    """
    Build a SQLAlchemy engine capped at cfg.pool_size physical connections.

    QueuePool has no idle reaper: pool_recycle replaces a connection older
    than cfg.pool_recycle seconds when it is next checked out, and pooled
    connections left untouched stay open until dispose_engine().
    """
    return create_engine(
        cfg.get_sqlalchemy_url(),
        connect_args=cfg.get_connect_args(),
        pool_size=cfg.pool_size,
        max_overflow=0,
        pool_timeout=cfg.pool_timeout,
        pool_recycle=cfg.pool_recycle,
        pool_pre_ping=True,
    )


def init_engine(cfg: Optional[ConnectionConfig] = None) -> Engine:
    global _engine
    if _engine is None:
        cfg = cfg or ConnectionConfig.from_settings(settings)
        _engine = create_engine_from_config(cfg)
        logger.info("Database engine ready (%s, pool_size=%d)", cfg.db_type, cfg.pool_size)
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        raise DataAccessError("Database engine has not been initialised")
    return _engine


def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
        logger.info("Database engine disposed")


def ping(engine: Engine) -> None:
    """Raise if the database cannot answer a trivial query."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def describe_db_error(e: SQLAlchemyError) -> str:
    """The driver-reported message, without SQLAlchemy's wrapper text."""
    orig: Optional[BaseException] = getattr(e, "orig", None)
    return str(orig).strip() if orig is not None else str(e)
