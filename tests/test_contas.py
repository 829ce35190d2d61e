"""
Testes das rotas de contas.
"""

from decimal import Decimal


def criar_moeda(client, **dados):
    response = client.post("/moedas", json=dados)
    assert response.status_code == 201
    return response.json()["dados"]


class TestCriarConta:

    def test_saldo_inicial_padrao_zero(self, client, usuario):
        response = client.post("/contas", json={"nome": "Carteira", "usuario_id": usuario["id"]})
        assert response.status_code == 201
        dados = response.json()["dados"]
        assert Decimal(dados["saldo_inicial"]) == Decimal("0")
        assert dados["tipo"] is None
        assert dados["moeda"] is None

    def test_conta_com_moeda(self, client, usuario):
        moeda = criar_moeda(client, nome="Real Brasileiro", codigo="BRL", simbolo="R$", padrao=True)
        response = client.post(
            "/contas",
            json={
                "nome": "Banco",
                "tipo": "corrente",
                "saldo_inicial": 1500.75,
                "usuario_id": usuario["id"],
                "moeda_id": moeda["id"],
            },
        )
        assert response.status_code == 201
        dados = response.json()["dados"]
        assert isinstance(dados["saldo_inicial"], str)
        assert Decimal(dados["saldo_inicial"]) == Decimal("1500.75")
        assert dados["moeda"]["codigo"] == "BRL"

    def test_saldo_grande_sem_perda_de_precisao(self, client, usuario):
        response = client.post(
            "/contas",
            json={"nome": "Investimentos", "saldo_inicial": "12345678901.23", "usuario_id": usuario["id"]},
        )
        assert response.status_code == 201
        assert Decimal(response.json()["dados"]["saldo_inicial"]) == Decimal("12345678901.23")

    def test_campos_obrigatorios(self, client):
        response = client.post("/contas", json={"tipo": "corrente"})
        assert response.status_code == 400
        campos = {d["campo"] for d in response.json()["detalhes"]}
        assert {"nome", "usuario_id"} <= campos

    def test_referencias_inexistentes(self, client, usuario):
        response = client.post("/contas", json={"nome": "Banco", "usuario_id": 9999})
        assert response.status_code == 400

        response = client.post(
            "/contas", json={"nome": "Banco", "usuario_id": usuario["id"], "moeda_id": 9999}
        )
        assert response.status_code == 400
        assert response.json()["erro"] == "Usuário ou moeda informados não existem"


class TestListarContas:

    def test_ordem_alfabetica_com_moeda(self, client, usuario):
        moeda = criar_moeda(client, nome="Euro", codigo="EUR")
        client.post("/contas", json={"nome": "Poupança", "usuario_id": usuario["id"]})
        client.post("/contas", json={"nome": "Corretora", "usuario_id": usuario["id"], "moeda_id": moeda["id"]})

        body = client.get("/contas").json()
        assert body["total"] == 2
        assert [c["nome"] for c in body["dados"]] == ["Corretora", "Poupança"]
        assert body["dados"][0]["moeda"]["nome"] == "Euro"


class TestAlterarConta:

    def test_atualiza_parcialmente(self, client, usuario):
        conta = client.post(
            "/contas", json={"nome": "Banco", "tipo": "corrente", "usuario_id": usuario["id"]}
        ).json()["dados"]

        response = client.put(f"/contas/{conta['id']}", json={"saldo_inicial": 10})
        assert response.status_code == 200
        dados = response.json()["dados"]
        assert Decimal(dados["saldo_inicial"]) == Decimal("10")
        assert dados["tipo"] == "corrente"

    def test_remove(self, client, usuario):
        conta = client.post("/contas", json={"nome": "Banco", "usuario_id": usuario["id"]}).json()["dados"]
        assert client.delete(f"/contas/{conta['id']}").status_code == 200
        assert client.get(f"/contas/{conta['id']}").status_code == 404
        assert client.delete(f"/contas/{conta['id']}").status_code == 404
