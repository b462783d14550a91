"""
Response synthesizer — second model call that turns rows into prose.
"""
import logging
from typing import Any, Sequence

from config import settings
from core.errors import GenerationError
from integrations.ollama_client import OllamaClient, OllamaError
from prompts.sql_generation import build_answer_prompt

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = "Unable to generate response"


def synthesize_answer(
    question: str,
    sql: str,
    rows: Sequence[dict[str, Any]],
    ollama: OllamaClient,
) -> str:
    prompt = build_answer_prompt(question, sql, rows)
    try:
        answer = ollama.generate(
            prompt,
            max_tokens=settings.ANSWER_MAX_TOKENS,
            temperature=settings.ANSWER_TEMPERATURE,
        )
    except OllamaError as e:
        raise GenerationError(f"Failed to generate response: {e}", step="answer") from e

    answer = (answer or "").strip()
    if not answer:
        logger.warning("Model returned an empty answer; using fallback")
        return FALLBACK_ANSWER
    return answer
