import os
import sys
import tempfile

# Add the parent directory (backend) to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Settings are read at import time; keep the app off any real server.
os.environ.setdefault("DB_TYPE", "sqlite")
os.environ.setdefault("SQLITE_PATH", os.path.join(tempfile.gettempdir(), "askdb-test.db"))

import pytest
import sqlite3
from fastapi.testclient import TestClient

from core.db_connector import create_engine_from_config
from integrations.ollama_client import OllamaError
from models.connection import ConnectionConfig
from main import app


class ScriptedOllama:
    """Stands in for OllamaClient: replays canned completions and records calls."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: list[dict] = []

    def generate(self, prompt: str, max_tokens: int, temperature: float) -> str:
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        if not self.responses:
            raise OllamaError("no scripted response left")
        reply = self.responses.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def temp_sqlite_db():
    fd, path = tempfile.mkstemp(suffix=".db")
    try:
        conn = sqlite3.connect(path)
        cur = conn.cursor()
        cur.execute("""
            CREATE TABLE departments (
                id      INTEGER PRIMARY KEY,
                name    TEXT NOT NULL,
                UNIQUE (name)
            )""")
        cur.execute("""
            CREATE TABLE employees (
                id            INTEGER PRIMARY KEY,
                name          TEXT NOT NULL,
                salary        REAL,
                department_id INTEGER REFERENCES departments(id)
            )""")
        cur.execute("INSERT INTO departments (id, name) VALUES (1, 'Engineering'), (2, 'Sales')")
        cur.execute(
            "INSERT INTO employees (name, salary, department_id) VALUES "
            "('Ada', 120000, 1), ('Grace', 115000, 1), ('Linus', 90000, 2)"
        )
        conn.commit()
        conn.close()
        yield path
    finally:
        os.close(fd)
        os.remove(path)


@pytest.fixture
def sqlite_engine(temp_sqlite_db):
    engine = create_engine_from_config(ConnectionConfig(db_type="sqlite", file_path=temp_sqlite_db))
    yield engine
    engine.dispose()


@pytest.fixture
def scripted_ollama():
    return ScriptedOllama
