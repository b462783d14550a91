from core.db_connector import create_engine_from_config, init_engine, get_engine, dispose_engine  # noqa: F401
from core.schema_aggregator import read_schema, aggregate_rows  # noqa: F401
from core.safety_gate import check_statement  # noqa: F401
from core.query_executor import execute_statement  # noqa: F401
from core.pipeline import QueryPipeline  # noqa: F401
