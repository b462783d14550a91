"""POST /api/chat — answer a natural-language question about the database."""
import logging
from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.db_connector import get_engine
from core.errors import PipelineError, ValidationError
from core.pipeline import QueryPipeline
from integrations.ollama_client import OllamaClient
from models.chat import ChatErrorResponse, ChatRequest, ChatResponse, PipelineStage

router = APIRouter()
logger = logging.getLogger(__name__)

STATUS_BY_CATEGORY = {
    "validation": 400,
    "unsafe_statement": 422,
    "generation": 502,
    "data_access": 500,
}


def error_response(e: PipelineError) -> JSONResponse:
    body = ChatErrorResponse(error=e.category, stage=e.stage, details=e.message)
    return JSONResponse(
        status_code=STATUS_BY_CATEGORY.get(e.category, 500),
        content=jsonable_encoder(body),
    )


@router.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest):
    try:
        if not req.message or not req.message.strip() or req.db_schema is None:
            raise ValidationError("Message and schema are required", stage=PipelineStage.RECEIVED)
        pipeline = QueryPipeline(engine=get_engine(), ollama=OllamaClient())
        exchange = pipeline.run(req.message, req.db_schema)
    except PipelineError as e:
        if e.stage is None:
            e.stage = PipelineStage.RECEIVED
        return error_response(e)
    return ChatResponse.from_exchange(exchange)
