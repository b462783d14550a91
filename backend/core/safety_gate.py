"""
Safety gate — lexical filter run before any statement reaches the database.

Substring matching on the upper-cased text: a column named "update_date"
is rejected too. Rejecting a read-only query is preferred over running a
mutating one.
"""
import logging

from core.errors import UnsafeStatementError

logger = logging.getLogger(__name__)

FORBIDDEN_KEYWORDS = ("DROP", "DELETE", "TRUNCATE", "ALTER", "CREATE", "INSERT", "UPDATE")
MIN_STATEMENT_LENGTH = 5


def check_statement(sql: str) -> str:
    """Return the trimmed statement, or raise UnsafeStatementError."""
    statement = (sql or "").strip()
    upper = statement.upper()

    hits = [kw for kw in FORBIDDEN_KEYWORDS if kw in upper]
    if hits:
        logger.warning("Rejected statement containing %s: %s", ", ".join(hits), statement)
        raise UnsafeStatementError(
            "Query contains potentially dangerous operations", statement=statement,
        )
    if len(statement) < MIN_STATEMENT_LENGTH:
        logger.warning("Rejected empty or too-short statement: %r", statement)
        raise UnsafeStatementError(
            "Invalid or empty SQL query after cleaning", statement=statement,
        )
    return statement
