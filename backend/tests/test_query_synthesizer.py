import pytest
from core.errors import GenerationError
from core.query_synthesizer import sanitize_sql, synthesize_sql
from integrations.ollama_client import OllamaError

PLAIN = "SELECT e.name FROM public.employees e LIMIT 50"


@pytest.mark.parametrize("raw", [
    PLAIN,
    f"```sql\n{PLAIN}\n```",
    f"```SQL\n{PLAIN}```",
    f"```\n{PLAIN}\n```",
    f"`{PLAIN}`",
    f"  \n{PLAIN}\n\n",
])
def test_sanitize_strips_formatting(raw):
    assert sanitize_sql(raw) == PLAIN


def test_sanitize_is_idempotent():
    raw = "```sql\nSELECT `name` FROM employees\n```"
    once = sanitize_sql(raw)
    assert once == "SELECT name FROM employees"
    assert sanitize_sql(once) == once


def test_synthesize_sql(scripted_ollama):
    ollama = scripted_ollama(f"```sql\n{PLAIN}\n```")
    assert synthesize_sql("prompt text", ollama) == PLAIN
    call = ollama.calls[0]
    assert call["prompt"] == "prompt text"
    assert call["max_tokens"] == 500
    assert call["temperature"] == 0.1


def test_synthesize_sql_service_error(scripted_ollama):
    ollama = scripted_ollama(OllamaError("connection refused"))
    with pytest.raises(GenerationError) as exc:
        synthesize_sql("prompt", ollama)
    assert exc.value.step == "sql"
    assert "connection refused" in exc.value.message


@pytest.mark.parametrize("reply", ["", "```sql\n```", "  ``  "])
def test_synthesize_sql_empty_reply(scripted_ollama, reply):
    with pytest.raises(GenerationError) as exc:
        synthesize_sql("prompt", scripted_ollama(reply))
    assert exc.value.step == "sql"
