"""
Testes das rotas e do serviço de moedas.
"""

from fastapi.testclient import TestClient

from conftest import make_settings
from main import create_app


class TestMoedas:

    def test_moeda_padrao_primeiro(self, client):
        client.post("/moedas", json={"nome": "Dólar Americano", "codigo": "USD"})
        client.post("/moedas", json={"nome": "Euro", "codigo": "EUR"})
        client.post("/moedas", json={"nome": "Real Brasileiro", "codigo": "BRL", "padrao": True})

        body = client.get("/moedas").json()
        assert body["sucesso"] is True
        assert body["total"] == 3
        assert body["dados"][0]["codigo"] == "BRL"
        assert body["dados"][0]["padrao"] is True

    def test_codigo_duplicado(self, client):
        client.post("/moedas", json={"nome": "Euro", "codigo": "EUR"})
        response = client.post("/moedas", json={"nome": "Euro de novo", "codigo": "EUR"})
        assert response.status_code == 400
        assert response.json()["erro"] == "Código de moeda já cadastrado"

    def test_lista_vazia(self, client):
        assert client.get("/moedas").json() == {"sucesso": True, "total": 0, "dados": []}


class TestMoedasPadrao:

    def test_populadas_na_inicializacao(self):
        app = create_app(make_settings(popular_moedas=True))
        with TestClient(app) as client:
            body = client.get("/moedas").json()

        assert body["total"] == 3
        assert body["dados"][0]["codigo"] == "BRL"
        assert {m["codigo"] for m in body["dados"]} == {"BRL", "USD", "EUR"}

    def test_nao_duplica_se_ja_existem(self, app, client):
        from controle_financeiro.services.moeda_service import criar_moedas_padrao

        db = app.state.session_factory()
        try:
            assert criar_moedas_padrao(db) == 3
            assert criar_moedas_padrao(db) == 0
        finally:
            db.close()


class TestScriptSeed:

    def test_seed_em_banco_novo(self, tmp_path):
        from seed_moedas import seed_moedas

        settings = make_settings(database_url=f"sqlite:///{tmp_path / 'seed.db'}")
        assert seed_moedas(settings) == 3
        assert seed_moedas(settings) == 0
