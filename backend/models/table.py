"""Pydantic schemas for the aggregated database schema."""
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator


class ColumnDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    data_type: str
    is_nullable: bool = True
    default: Optional[str] = None
    max_length: Optional[int] = None
    numeric_precision: Optional[int] = None
    numeric_scale: Optional[int] = None
    constraints: tuple[str, ...] = ()   # duplicate-free, first-seen order


class TableDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    schema_name: str
    table_name: str
    columns: tuple[ColumnDescriptor, ...] = ()

    @property
    def key(self) -> tuple[str, str]:
        return self.schema_name, self.table_name

    @property
    def qualified_name(self) -> str:
        return f"{self.schema_name}.{self.table_name}"

    @model_validator(mode="after")
    def _unique_columns(self):
        names = [c.name for c in self.columns]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate column names in {self.qualified_name}")
        return self


class SchemaModel(BaseModel):
    """Base tables of one database, keyed by (schema, table)."""
    model_config = ConfigDict(frozen=True)

    tables: tuple[TableDescriptor, ...] = ()

    @model_validator(mode="after")
    def _unique_tables(self):
        seen: set[tuple[str, str]] = set()
        for t in self.tables:
            if t.key in seen:
                raise ValueError(f"Duplicate table {t.qualified_name}")
            seen.add(t.key)
        return self

    @property
    def table_count(self) -> int:
        return len(self.tables)

    def keys(self) -> list[tuple[str, str]]:
        return [t.key for t in self.tables]

    def get(self, schema_name: str, table_name: str) -> Optional[TableDescriptor]:
        for t in self.tables:
            if t.key == (schema_name, table_name):
                return t
        return None
