"""
Ollama REST API client.
Wraps POST /api/generate for single-turn text completion.
"""
import logging
import time
from typing import Optional
import httpx

from config import settings

logger = logging.getLogger(__name__)


class OllamaError(RuntimeError):
    pass


class OllamaClient:
    """Thin client for the Ollama local LLM server."""

    def __init__(self, host: Optional[str] = None, model: Optional[str] = None):
        self.host = (host or settings.OLLAMA_HOST).rstrip("/")
        self.model = model or settings.OLLAMA_MODEL
        self.timeout = settings.OLLAMA_TIMEOUT_SECONDS
        self.max_retries = max(1, settings.OLLAMA_MAX_RETRIES)

    def is_healthy(self) -> tuple[bool, Optional[str]]:
        """Returns (True, model_name) if Ollama is reachable, (False, error) otherwise."""
        try:
            resp = httpx.get(f"{self.host}/api/version", timeout=5)
            resp.raise_for_status()
            return True, self.model
        except httpx.HTTPError as e:
            return False, str(e)

    def generate(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """
        Call Ollama /api/generate and return the raw text response.
        `max_tokens` bounds the completion length (num_predict).
        """
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "num_ctx": 4096,
                "num_predict": max_tokens,
                "temperature": temperature,
            },
        }
        last_err: Optional[Exception] = None
        for attempt in range(1, self.max_retries + 1):
            try:
                logger.debug("Ollama generate attempt %d", attempt)
                resp = httpx.post(
                    f"{self.host}/api/generate",
                    json=payload,
                    timeout=self.timeout,
                )
                resp.raise_for_status()
                text = (resp.json().get("response") or "").strip()
                logger.debug("Ollama response length: %d chars", len(text))
                return text
            except (httpx.HTTPError, ValueError) as e:
                last_err = e
                logger.warning("Ollama attempt %d/%d failed: %s", attempt, self.max_retries, e)
                if attempt < self.max_retries:
                    time.sleep(2 ** attempt)  # exponential back-off: 2s, 4s
        raise OllamaError(f"Ollama failed after {self.max_retries} attempts: {last_err}")
