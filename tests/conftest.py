import os

# todolist.main builds its module-level app (and engine) at import time, and the
# default URL is PostgreSQL. This must run before any todolist import; tests
# themselves use per-test SQLite apps from the fixtures below.
os.environ.setdefault("DATABASE_URL", "sqlite:///./todolist_test.db")

import pytest
from fastapi.testclient import TestClient
from todolist.main import create_app


@pytest.fixture
def app(tmp_path):
    return create_app(f"sqlite:///{tmp_path / 'todos.db'}")


# Entering the TestClient runs the lifespan, which creates the tables
@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app, client):
    with app.state.database.session() as session:
        yield session
