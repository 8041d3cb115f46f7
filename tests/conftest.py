import os

# Keep the module-level app off the production database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import (
    Column, Integer, MetaData, String, Table, create_engine
)
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from web.main import create_app
from web.repositories.test import TestRepository
from web.services.test import TestService


# Fixtures
@pytest.fixture
def sample_rows():
    return [
        {"id": 1, "b": "a", "q": "b", "o": 351235},
        {"id": 2, "b": "b", "q": "c", "o": 1001},
    ]

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    yield engine
    engine.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def test_table(engine):
    '''
    Creates an empty `test` table
    '''

    table = Table(
        "test",
        MetaData(),
        Column("id", Integer, primary_key=True),
        Column("b", String(20), nullable=False),
        Column("q", String(20), nullable=False),
        Column("o", Integer),
    )
    table.create(engine)
    return table

@pytest.fixture
def insert_rows(engine, test_table):
    def insert(rows):
        with engine.begin() as conn:
            conn.execute(test_table.insert(), rows)
    return insert

@pytest.fixture
def repository(session_factory):
    return TestRepository(session_factory, "test")

@pytest.fixture
def client(repository):
    app = create_app(TestService(repository))
    return TestClient(app, raise_server_exceptions=False)
