"""GET /api/schema — aggregated schema for callers to reuse across questions."""
from fastapi import APIRouter

from api.chat import error_response
from core.db_connector import get_engine
from core.errors import DataAccessError
from core.schema_aggregator import read_schema
from models.chat import PipelineStage
from models.table import SchemaModel

router = APIRouter()


@router.get("/schema", response_model=SchemaModel)
def get_schema():
    try:
        return read_schema(get_engine())
    except DataAccessError as e:
        e.stage = PipelineStage.SCHEMA_READY
        return error_response(e)
