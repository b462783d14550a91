"""
Question → SQL → rows → answer.

Runs strictly in order: schema, SQL synthesis, safety gate, execution,
answer synthesis. The first failure ends the run; nothing is retried and
no partial result is returned.
"""
import logging
from typing import Callable, Optional
from sqlalchemy.engine import Engine

from config import settings
from core.errors import PipelineError, ValidationError
from core.query_executor import execute_statement
from core.query_synthesizer import synthesize_sql
from core.response_synthesizer import synthesize_answer
from core.safety_gate import check_statement
from core.schema_aggregator import read_schema
from integrations.ollama_client import OllamaClient
from models.chat import ChatExchange, PipelineStage
from models.table import SchemaModel
from prompts.sql_generation import build_sql_prompt

logger = logging.getLogger(__name__)

_DIALECT_LABELS = {"postgresql": "PostgreSQL", "sqlite": "SQLite", "mysql": "MySQL"}


class QueryPipeline:
    """
    One instance can serve many runs; a run keeps all of its state on the
    stack, so concurrent runs share only the engine's pool.

    `gate` takes the sanitized statement and returns the approved one or
    raises UnsafeStatementError.
    """

    def __init__(
        self,
        engine: Engine,
        ollama: OllamaClient,
        gate: Callable[[str], str] = check_statement,
        row_limit: Optional[int] = None,
    ):
        self.engine = engine
        self.ollama = ollama
        self.gate = gate
        self.row_limit = row_limit or settings.SQL_ROW_LIMIT

    @property
    def dialect(self) -> str:
        name = self.engine.dialect.name
        return _DIALECT_LABELS.get(name, name)

    def run(self, question: str, schema: Optional[SchemaModel] = None) -> ChatExchange:
        """
        Answer one question. When `schema` is None it is aggregated from the
        database first. Raises a PipelineError whose `stage` is the step
        that did not complete.
        """
        stage = PipelineStage.RECEIVED
        try:
            if not question or not question.strip():
                raise ValidationError("Message is required")
            question = question.strip()

            stage = PipelineStage.SCHEMA_READY
            if schema is None:
                schema = read_schema(self.engine)

            stage = PipelineStage.SQL_SYNTHESIZED
            prompt = build_sql_prompt(question, schema, self.row_limit, self.dialect)
            candidate = synthesize_sql(prompt, self.ollama)

            stage = PipelineStage.SQL_VALIDATED
            sql = self.gate(candidate)

            stage = PipelineStage.ROWS_FETCHED
            rows = execute_statement(self.engine, sql)

            stage = PipelineStage.ANSWER_SYNTHESIZED
            answer = synthesize_answer(question, sql, rows, self.ollama)
        except PipelineError as e:
            if e.stage is None:
                e.stage = stage
            logger.warning("Pipeline failed at %s [%s]: %s", e.stage.value, e.category, e.message)
            raise

        logger.info("Pipeline done: %d rows, %d-char answer", len(rows), len(answer))
        return ChatExchange(question=question, sql_query=sql, rows=rows, answer=answer)
