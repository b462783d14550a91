#!/usr/bin/env python3
"""
Seed a local SQLite database with demo data for AskDB development.
Usage (from the repository root):
    python scripts/seed_demo_db.py
Creates: scripts/demo.db (point SQLITE_PATH at it with DB_TYPE=sqlite).
"""
import sqlite3
import random
from datetime import date, timedelta
from pathlib import Path

DB_PATH = Path(__file__).parent / "demo.db"

DDL = [
    """
    CREATE TABLE IF NOT EXISTS departments (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        name        TEXT    NOT NULL,
        location    TEXT,
        UNIQUE (name)
    )""",
    """
    CREATE TABLE IF NOT EXISTS employees (
        id              INTEGER PRIMARY KEY AUTOINCREMENT,
        name            TEXT    NOT NULL,
        email           TEXT    NOT NULL,
        title           TEXT,
        salary          NUMERIC(10, 2),
        hired_on        DATE,
        department_id   INTEGER REFERENCES departments(id),
        manager_id      INTEGER REFERENCES employees(id),
        UNIQUE (email)
    )""",
    """
    CREATE TABLE IF NOT EXISTS projects (
        id              INTEGER PRIMARY KEY AUTOINCREMENT,
        name            TEXT    NOT NULL,
        department_id   INTEGER REFERENCES departments(id),
        budget          NUMERIC(12, 2),
        starts_on       DATE,
        ends_on         DATE
    )""",
    """
    CREATE TABLE IF NOT EXISTS assignments (
        employee_id     INTEGER NOT NULL REFERENCES employees(id),
        project_id      INTEGER NOT NULL REFERENCES projects(id),
        role            TEXT,
        hours_per_week  INTEGER,
        PRIMARY KEY (employee_id, project_id)
    )""",
]

DEPARTMENTS = [("Engineering", "Berlin"), ("Sales", "London"), ("Finance", "New York"),
               ("Support", "Manila"), ("Marketing", "Paris")]
TITLES = {
    "Engineering": ["Engineer", "Senior Engineer", "Staff Engineer"],
    "Sales":       ["Account Executive", "Sales Manager"],
    "Finance":     ["Analyst", "Controller"],
    "Support":     ["Support Specialist", "Support Lead"],
    "Marketing":   ["Marketing Specialist", "Brand Manager"],
}
FIRST = ["Ada", "Grace", "Linus", "Barbara", "Ken", "Margaret", "Dennis", "Frances", "Alan", "Radia"]
LAST  = ["Lovelace", "Hopper", "Torvalds", "Liskov", "Thompson", "Hamilton", "Ritchie", "Allen", "Kay", "Perlman"]
ROLES = ["Lead", "Contributor", "Reviewer"]


def seed():
    conn = sqlite3.connect(DB_PATH)
    cur  = conn.cursor()

    for stmt in DDL:
        cur.execute(stmt)

    for name, location in DEPARTMENTS:
        cur.execute("INSERT OR IGNORE INTO departments(name, location) VALUES (?,?)", (name, location))
    dept_ids = {name: i for i, (name, _) in enumerate(DEPARTMENTS, start=1)}

    # employees (60)
    for i in range(1, 61):
        dept = random.choice(DEPARTMENTS)[0]
        name = f"{random.choice(FIRST)} {random.choice(LAST)}"
        cur.execute(
            "INSERT OR IGNORE INTO employees(name,email,title,salary,hired_on,department_id,manager_id) "
            "VALUES (?,?,?,?,?,?,?)",
            (name, f"employee{i}@example.com", random.choice(TITLES[dept]),
             round(random.uniform(45_000, 180_000), 2),
             (date.today() - timedelta(days=random.randint(30, 3650))).isoformat(),
             dept_ids[dept], random.randint(1, i - 1) if i > 5 else None),
        )

    # projects (15) + assignments
    for i in range(1, 16):
        start = date.today() - timedelta(days=random.randint(0, 720))
        cur.execute(
            "INSERT INTO projects(name,department_id,budget,starts_on,ends_on) VALUES (?,?,?,?,?)",
            (f"Project {i}", random.randint(1, len(DEPARTMENTS)), round(random.uniform(10_000, 500_000), 2),
             start.isoformat(), (start + timedelta(days=random.randint(30, 365))).isoformat()),
        )
        project_id = cur.lastrowid
        for emp_id in random.sample(range(1, 61), random.randint(2, 6)):
            cur.execute(
                "INSERT OR IGNORE INTO assignments(employee_id,project_id,role,hours_per_week) VALUES (?,?,?,?)",
                (emp_id, project_id, random.choice(ROLES), random.choice([8, 16, 20, 40])),
            )

    conn.commit()
    conn.close()
    print(f"Demo database seeded: {DB_PATH}")
    print("   Tables: departments, employees, projects, assignments")


if __name__ == "__main__":
    seed()
