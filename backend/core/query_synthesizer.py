"""
Query synthesizer — asks the model for one SQL statement and strips the
formatting artifacts models like to add around it.
"""
import logging
import re

from config import settings
from core.errors import GenerationError
from integrations.ollama_client import OllamaClient, OllamaError

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```sql\n?", re.IGNORECASE)


def sanitize_sql(raw: str) -> str:
    """Remove ```sql fences, stray backticks and surrounding whitespace."""
    cleaned = _FENCE_RE.sub("", raw)
    cleaned = cleaned.replace("`", "")
    return cleaned.strip()


def synthesize_sql(prompt: str, ollama: OllamaClient) -> str:
    """
    One low-temperature completion reduced to a bare statement.
    The result is not parsed; syntax errors only show up at execution.
    """
    try:
        raw = ollama.generate(
            prompt,
            max_tokens=settings.SQL_MAX_TOKENS,
            temperature=settings.SQL_TEMPERATURE,
        )
    except OllamaError as e:
        raise GenerationError(f"Failed to generate SQL query: {e}", step="sql") from e

    sql = sanitize_sql(raw or "")
    if not sql:
        raise GenerationError("Failed to generate SQL query: model returned no text", step="sql")
    logger.info("Generated SQL: %s", sql)
    return sql
