import pytest
from core.errors import UnsafeStatementError
from core.safety_gate import FORBIDDEN_KEYWORDS, check_statement


@pytest.mark.parametrize("keyword", FORBIDDEN_KEYWORDS)
@pytest.mark.parametrize("template", [
    "{kw} TABLE employees",
    "SELECT * FROM employees; {kw} FROM employees",
    "select * from employees where note = '{lower}'",
    "SELECT {lower}d_at FROM audit LIMIT 50",
])
def test_rejects_forbidden_keywords(keyword, template):
    sql = template.format(kw=keyword, lower=keyword.lower())
    with pytest.raises(UnsafeStatementError) as exc:
        check_statement(sql)
    assert exc.value.statement == sql.strip()
    assert exc.value.category == "unsafe_statement"


def test_rejects_identifier_containing_keyword():
    with pytest.raises(UnsafeStatementError):
        check_statement("SELECT update_date FROM employees LIMIT 50")


@pytest.mark.parametrize("sql", ["", "   ", "\n\t", "SEL", "  abcd  ", None])
def test_rejects_short_statements(sql):
    with pytest.raises(UnsafeStatementError):
        check_statement(sql)


@pytest.mark.parametrize("sql", [
    "SELECT 1",
    "  SELEC  ",
    'SELECT e.id, e.name FROM "public"."employees" e LIMIT 50',
    "WITH t AS (SELECT 1 AS x) SELECT x FROM t",
])
def test_accepts_safe_statements(sql):
    assert check_statement(sql) == sql.strip()
