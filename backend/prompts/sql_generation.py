"""
LangChain prompt templates for SQL synthesis and answer summarization.
Rendering is deterministic: identical inputs give identical prompt text.
"""
import json
from typing import Any, Sequence

from langchain_core.prompts import PromptTemplate

from models.table import ColumnDescriptor, SchemaModel

# ── SQL synthesis ─────────────────────────────────────────────────────────────

SQL_GENERATION_TEMPLATE = """\
Given the following {dialect} database schema:

{schema_context}

Generate a SQL query to answer this question: "{question}"

IMPORTANT RULES:
1. Return ONLY the SQL query without any markdown formatting, explanations, or code blocks
2. Do NOT use backticks in your response
3. Use proper {dialect} syntax with double quotes for identifiers if needed
4. Include appropriate JOINs if needed, prefer JOINs over subqueries when relating tables
5. Limit results to {row_limit} rows maximum using LIMIT {row_limit}
6. Use table aliases for readability
7. If the question is unclear, make reasonable assumptions

SQL Query (no formatting):
"""

sql_generation_prompt = PromptTemplate(
    input_variables=["dialect", "schema_context", "question", "row_limit"],
    template=SQL_GENERATION_TEMPLATE,
)

# ── Answer summarization ──────────────────────────────────────────────────────

ANSWER_TEMPLATE = """\
User Question: "{question}"

SQL Query Used: {sql}

Query Results (JSON):
{results_json}

Based on the query results above, provide a natural, conversational answer to the user's question.
- Be concise but informative
- Present data in a readable format
- If there are multiple results, summarize appropriately
- If no results found, explain that clearly
- Use natural language, not technical jargon

Response:
"""

answer_prompt = PromptTemplate(
    input_variables=["question", "sql", "results_json"],
    template=ANSWER_TEMPLATE,
)


def format_column(col: ColumnDescriptor) -> str:
    parts = [col.data_type, "nullable" if col.is_nullable else "not null"]
    if col.constraints:
        parts.append(f"constraints: {', '.join(col.constraints)}")
    return f"{col.name} ({', '.join(parts)})"


def format_schema_context(schema: SchemaModel) -> str:
    """One block per table: 'Table: schema.table' then its column list."""
    return "\n\n".join(
        f"Table: {t.qualified_name}\n"
        f"Columns: {', '.join(format_column(c) for c in t.columns)}"
        for t in schema.tables
    )


def build_sql_prompt(
    question: str,
    schema: SchemaModel,
    row_limit: int = 50,
    dialect: str = "PostgreSQL",
) -> str:
    return sql_generation_prompt.format(
        dialect=dialect,
        schema_context=format_schema_context(schema),
        question=question,
        row_limit=row_limit,
    )


def serialize_rows(rows: Sequence[dict[str, Any]]) -> str:
    # Decimal / datetime / UUID and friends → str
    return json.dumps(list(rows), indent=2, default=str)


def build_answer_prompt(question: str, sql: str, rows: Sequence[dict[str, Any]]) -> str:
    return answer_prompt.format(
        question=question,
        sql=sql,
        results_json=serialize_rows(rows),
    )
