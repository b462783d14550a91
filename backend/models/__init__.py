from models.connection import ConnectionConfig  # noqa: F401
from models.table import ColumnDescriptor, TableDescriptor, SchemaModel  # noqa: F401
from models.chat import (  # noqa: F401
    PipelineStage, ChatRequest, ChatExchange, ChatResponse, ChatErrorResponse,
)
