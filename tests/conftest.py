import os

# The module-level app in tasktracker.main is built at import time; keep it off Postgres.
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_tasktracker.db")

import pytest
from fastapi.testclient import TestClient

from tasktracker.database import init_db, make_engine, make_session_factory
from tasktracker.main import create_app


@pytest.fixture
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    yield eng
    eng.dispose()


@pytest.fixture
def client(engine):
    # entering the context runs the startup hook, which creates the table
    with TestClient(create_app(engine)) as c:
        yield c


@pytest.fixture
def db(engine):
    init_db(engine)
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
