import os
import sys

import pytest
from sqlalchemy import create_engine, select

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from db_schema import typo_metadata, wordpress_tables

from typo2wp.config import MigrationOptions
from typo2wp.migration_tool import TypoMigrationTool


@pytest.fixture
def connection():
    """One in-memory database holding both the Typo and WordPress tables."""
    engine = create_engine("sqlite://")
    conn = engine.connect()
    typo_metadata.create_all(conn)
    wordpress_tables("wp_").create_all(conn)
    conn.commit()
    yield conn
    conn.close()
    engine.dispose()


@pytest.fixture
def wp():
    """The WordPress tables as plain SQLAlchemy ``Table`` objects."""
    return wordpress_tables("wp_").tables


@pytest.fixture
def insert(connection):
    """Insert rows into a table and commit."""
    def _insert(table, *rows):
        for row in rows:
            connection.execute(table.insert().values(**row))
        connection.commit()
    return _insert


@pytest.fixture
def fetch(connection):
    """Return every row of a table as a list of dicts."""
    def _fetch(table, *where):
        query = select(table)
        if where:
            query = query.where(*where)
        return [dict(r._mapping) for r in connection.execute(query)]
    return _fetch


@pytest.fixture
def make_tool(connection):
    """Build a migration tool over the shared connection.

    ``answers`` feeds the overwrite prompt; each call pops the next answer.
    """
    def _make(answers=None, **option_values):
        option_values.setdefault("from_db", "sqlite://")
        option_values.setdefault("overwrite_policy", "always")
        options = MigrationOptions(**option_values)
        queue = list(answers or [])
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        tool = TypoMigrationTool(options, connection, input_fn=fake_input)
        tool.prompts = prompts
        return tool
    return _make
