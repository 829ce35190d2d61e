import pytest
from fastapi.testclient import TestClient

from controle_financeiro.config import Settings
from main import create_app


def make_settings(**overrides):
    valores = {"database_url": "sqlite://", "popular_moedas": False, "cors_origins": ["*"]}
    valores.update(overrides)
    return Settings(**valores)


@pytest.fixture
def app():
    return create_app(make_settings())


@pytest.fixture
def client(app):
    # O "with" dispara o lifespan (criação das tabelas e encerramento do pool)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def usuario(client):
    response = client.post(
        "/usuarios",
        json={"nome": "Ana", "email": "ana@x.com", "senha": "s3nha123"},
    )
    assert response.status_code == 201
    return response.json()["dados"]
