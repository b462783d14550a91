from datetime import date
from decimal import Decimal

from models.table import ColumnDescriptor, SchemaModel, TableDescriptor
from prompts.sql_generation import (
    build_answer_prompt, build_sql_prompt, format_column, format_schema_context,
)


def _schema():
    return SchemaModel(tables=(
        TableDescriptor(schema_name="public", table_name="employees", columns=(
            ColumnDescriptor(name="id", data_type="integer", is_nullable=False,
                             constraints=("PRIMARY KEY",)),
            ColumnDescriptor(name="name", data_type="text"),
            ColumnDescriptor(name="department_id", data_type="integer",
                             constraints=("FOREIGN KEY", "UNIQUE")),
        )),
        TableDescriptor(schema_name="public", table_name="departments", columns=(
            ColumnDescriptor(name="id", data_type="integer", is_nullable=False,
                             constraints=("PRIMARY KEY",)),
        )),
    ))


def test_format_column():
    assert format_column(ColumnDescriptor(name="name", data_type="text")) == "name (text, nullable)"
    col = ColumnDescriptor(name="id", data_type="integer", is_nullable=False,
                           constraints=("PRIMARY KEY", "UNIQUE"))
    assert format_column(col) == "id (integer, not null, constraints: PRIMARY KEY, UNIQUE)"


def test_schema_context_lists_every_table_and_column():
    context = format_schema_context(_schema())
    assert context.count("Table: ") == 2
    assert (
        "Table: public.employees\n"
        "Columns: id (integer, not null, constraints: PRIMARY KEY), "
        "name (text, nullable), "
        "department_id (integer, nullable, constraints: FOREIGN KEY, UNIQUE)"
    ) in context
    assert "Table: public.departments\nColumns: id (integer, not null, constraints: PRIMARY KEY)" in context


def test_sql_prompt_rules():
    prompt = build_sql_prompt("Show me all employees", _schema())
    assert '"Show me all employees"' in prompt
    assert "LIMIT 50" in prompt
    assert "Return ONLY the SQL query" in prompt
    assert "backticks" in prompt
    assert "double quotes for identifiers" in prompt
    assert "JOIN" in prompt
    assert "table aliases" in prompt


def test_sql_prompt_is_deterministic():
    assert build_sql_prompt("q", _schema()) == build_sql_prompt("q", _schema())


def test_sql_prompt_row_limit_and_dialect():
    prompt = build_sql_prompt("q", _schema(), row_limit=10, dialect="SQLite")
    assert "LIMIT 10" in prompt
    assert "SQLite database schema" in prompt


def test_answer_prompt():
    rows = [{"name": "Ada", "salary": Decimal("120000.50"), "hired": date(2020, 1, 2)}]
    prompt = build_answer_prompt("Who is paid most?", "SELECT name FROM employees LIMIT 50", rows)
    assert 'User Question: "Who is paid most?"' in prompt
    assert "SQL Query Used: SELECT name FROM employees LIMIT 50" in prompt
    assert '"salary": "120000.50"' in prompt
    assert '"hired": "2020-01-02"' in prompt
    assert "If no results found" in prompt


def test_answer_prompt_no_rows():
    prompt = build_answer_prompt("q", "SELECT 1", [])
    assert "Query Results (JSON):\n[]" in prompt
