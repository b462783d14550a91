"""Pydantic schemas for the chat API and pipeline results."""
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from models.table import SchemaModel


class PipelineStage(str, Enum):
    RECEIVED = "received"
    SCHEMA_READY = "schema_ready"
    SQL_SYNTHESIZED = "sql_synthesized"
    SQL_VALIDATED = "sql_validated"
    ROWS_FETCHED = "rows_fetched"
    ANSWER_SYNTHESIZED = "answer_synthesized"
    DONE = "done"
    FAILED = "failed"


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    db_schema: Optional[SchemaModel] = Field(None, alias="schema")


class ChatExchange(BaseModel):
    """One answered question. Built per request, never persisted."""
    question: str
    sql_query: str
    rows: list[dict[str, Any]]
    answer: str

    @property
    def result_count(self) -> int:
        return len(self.rows)


class ChatResponse(BaseModel):
    success: bool = True
    response: str
    sql_query: str
    result_count: int
    data: list[dict[str, Any]] = []

    @classmethod
    def from_exchange(cls, exchange: ChatExchange) -> "ChatResponse":
        return cls(
            response=exchange.answer,
            sql_query=exchange.sql_query,
            result_count=exchange.result_count,
            data=exchange.rows,
        )


class ChatErrorResponse(BaseModel):
    success: bool = False
    error: str
    stage: Optional[PipelineStage] = None
    details: str
