"""
Query executor — runs one approved statement on a pooled connection.
"""
import logging
import time
from typing import Any
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.db_connector import describe_db_error
from core.errors import ExecutionError

logger = logging.getLogger(__name__)


def execute_statement(engine: Engine, sql: str) -> list[dict[str, Any]]:
    """
    Execute `sql` and return its rows as label → value dicts, in the order
    the database returned them. The connection is checked back into the pool
    before this returns or raises; nothing is ever committed.
    """
    t0 = time.monotonic()
    try:
        with engine.connect() as conn:
            # literal colons, so ' :word' inside the statement is not a bind parameter
            result = conn.execute(text(sql.replace(":", r"\:")))
            rows = [dict(r._mapping) for r in result] if result.returns_rows else []
    except SQLAlchemyError as e:
        duration_ms = round((time.monotonic() - t0) * 1000)
        message = describe_db_error(e)
        logger.warning("SQL execution failed (%dms): %s", duration_ms, message)
        raise ExecutionError(f"Database query error: {message}", statement=sql) from e

    duration_ms = round((time.monotonic() - t0) * 1000)
    logger.info("Query returned %d rows in %dms", len(rows), duration_ms)
    return rows
