"""
Schema aggregator — reads catalog metadata and folds it into a SchemaModel.
PostgreSQL (and other information_schema servers) are read with one joined
catalog query; SQLite is read through the SQLAlchemy inspector and mapped
onto the same row shape so both go through the same fold.
"""
import logging
from typing import Iterable, Sequence
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.db_connector import describe_db_error
from core.errors import DataAccessError
from models.table import ColumnDescriptor, SchemaModel, TableDescriptor

logger = logging.getLogger(__name__)

SYSTEM_SCHEMAS = ("information_schema", "pg_catalog", "mysql", "performance_schema", "sys")

CATALOG_QUERY = f"""
SELECT
    t.table_schema,
    t.table_name,
    c.column_name,
    c.data_type,
    c.is_nullable,
    c.column_default,
    c.character_maximum_length,
    c.numeric_precision,
    c.numeric_scale,
    tc.constraint_type
FROM information_schema.tables t
LEFT JOIN information_schema.columns c
    ON t.table_name = c.table_name
    AND t.table_schema = c.table_schema
LEFT JOIN information_schema.key_column_usage kcu
    ON c.table_name = kcu.table_name
    AND c.column_name = kcu.column_name
    AND c.table_schema = kcu.table_schema
LEFT JOIN information_schema.table_constraints tc
    ON kcu.constraint_name = tc.constraint_name
    AND kcu.table_schema = tc.table_schema
WHERE t.table_schema NOT IN ({", ".join(f"'{s}'" for s in SYSTEM_SCHEMAS)})
    AND t.table_type = 'BASE TABLE'
ORDER BY t.table_schema, t.table_name, c.ordinal_position, tc.constraint_type
"""

# (table_schema, table_name, column_name, data_type, is_nullable, column_default,
#  character_maximum_length, numeric_precision, numeric_scale, constraint_type)
CatalogRow = Sequence


def _is_nullable(flag) -> bool:
    if isinstance(flag, str):
        return flag.upper() == "YES"
    return bool(flag)


def aggregate_rows(rows: Iterable[CatalogRow]) -> SchemaModel:
    """
    Fold catalog rows into a SchemaModel.
    Repeated rows for one column merge their constraint kind instead of
    adding a second column.
    """
    tables: dict[tuple[str, str], dict[str, dict]] = {}
    for row in rows:
        (schema_name, table_name, column_name, data_type, is_nullable, default,
         max_length, precision, scale, constraint_type) = row
        columns = tables.setdefault((schema_name, table_name), {})
        if column_name is None:
            continue
        col = columns.get(column_name)
        if col is None:
            col = columns[column_name] = {
                "name": column_name,
                "data_type": data_type,
                "is_nullable": _is_nullable(is_nullable),
                "default": None if default is None else str(default),
                "max_length": max_length,
                "numeric_precision": precision,
                "numeric_scale": scale,
                "constraints": [],
            }
        if constraint_type and constraint_type not in col["constraints"]:
            col["constraints"].append(constraint_type)

    return SchemaModel(tables=tuple(
        TableDescriptor(
            schema_name=schema_name,
            table_name=table_name,
            columns=tuple(
                ColumnDescriptor(**{**c, "constraints": tuple(c["constraints"])})
                for c in columns.values()
            ),
        )
        for (schema_name, table_name), columns in tables.items()
    ))


def _sqlite_catalog_rows(engine: Engine) -> list[tuple]:
    """Produce catalog-shaped rows for SQLite, which has no information_schema."""
    insp = inspect(engine)
    rows: list[tuple] = []
    for table_name in sorted(insp.get_table_names()):
        kinds: dict[str, list[str]] = {}
        for name in insp.get_pk_constraint(table_name).get("constrained_columns", []):
            kinds.setdefault(name, []).append("PRIMARY KEY")
        for fk in insp.get_foreign_keys(table_name):
            for name in fk["constrained_columns"]:
                kinds.setdefault(name, []).append("FOREIGN KEY")
        for uq in insp.get_unique_constraints(table_name):
            for name in uq["column_names"]:
                kinds.setdefault(name, []).append("UNIQUE")

        columns = insp.get_columns(table_name)
        if not columns:
            rows.append(("main", table_name) + (None,) * 8)
        for col in columns:
            sa_type = col["type"]
            base = (
                "main",
                table_name,
                col["name"],
                str(sa_type).upper(),
                col.get("nullable", True),
                col.get("default"),
                getattr(sa_type, "length", None),
                getattr(sa_type, "precision", None),
                getattr(sa_type, "scale", None),
            )
            for kind in sorted(kinds.get(col["name"], [])) or [None]:
                rows.append(base + (kind,))
    return rows


def read_schema(engine: Engine) -> SchemaModel:
    """
    Aggregate every base table outside the system catalogs.
    Raises DataAccessError if metadata cannot be read; never returns a
    partial model.
    """
    try:
        if engine.dialect.name == "sqlite":
            rows = _sqlite_catalog_rows(engine)
        else:
            with engine.connect() as conn:
                rows = conn.execute(text(CATALOG_QUERY)).fetchall()
    except SQLAlchemyError as e:
        logger.warning("Schema metadata query failed: %s", e)
        raise DataAccessError(f"Could not read schema metadata: {describe_db_error(e)}") from e

    schema = aggregate_rows(rows)
    logger.info("Aggregated %d tables", schema.table_count)
    return schema
