"""
Fixtures compartilhadas: banco SQLite em memória e cliente de teste
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from boardcamp.database import get_db, Base

# Configurar banco de dados de teste em memória
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override da função get_db para usar banco de teste"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


# Override da dependência do banco de dados
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def test_db():
    """Fixture para criar e limpar banco de dados de teste"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(test_db):
    """Cliente HTTP sobre o banco de teste"""
    return TestClient(app)


@pytest.fixture(scope="function")
def db_session(test_db):
    """Sessão direta no banco de teste"""
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def valid_customer():
    return {
        "name": "Ana Souza",
        "phone": "11999999999",
        "cpf": "11111111111",
        "birthday": "1990-05-10",
    }


@pytest.fixture
def category_id(client):
    """Cria a categoria 'Estratégia' e retorna seu id"""
    assert client.post("/categories", json={"name": "Estratégia"}).status_code == 201
    return client.get("/categories").json()[0]["id"]
