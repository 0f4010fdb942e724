"""
Configuration partagée pour tous les tests.
Chaque test reçoit une base SQLite en mémoire : aucune connexion au fichier configuré.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from labdb.database import get_db
from labdb.main import app
from labdb.tables import IncompleteStudentsTable, StudentsTable


@pytest.fixture
def memory_engine():
    """Moteur SQLite en mémoire, partagé entre threads (TestClient)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        isolation_level="AUTOCOMMIT",
    )
    yield engine
    engine.dispose()


@pytest.fixture
def connection(memory_engine):
    """Connexion sur le moteur en mémoire."""
    with memory_engine.connect() as conn:
        yield conn


@pytest.fixture
def table(connection):
    """Table students (variante complète), déjà créée."""
    t = StudentsTable(connection)
    assert t.create_table() is True
    return t


@pytest.fixture
def incomplete_table(connection):
    """Table students (variante incomplète), déjà créée."""
    t = IncompleteStudentsTable(connection)
    assert t.create_table() is True
    return t


@pytest.fixture
def client(connection, table):
    """Client HTTP de test branché sur la base en mémoire."""
    app.dependency_overrides[get_db] = lambda: connection
    yield TestClient(app)
    app.dependency_overrides.clear()
