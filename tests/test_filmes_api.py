from __future__ import annotations

FILME = {
    "nome": "O Auto da Compadecida",
    "descricao": "Comédia nordestina",
    "genero": "Comédia",
    "duracao": 104,
    "anolancamento": 2000,
}


def test_filme_lifecycle(client):
    resp = client.post("/filmes", json=FILME)
    assert resp.status_code == 201
    created = resp.json()
    for key, value in FILME.items():
        assert created[key] == value
    assert created["createdAt"] == created["updatedAt"]

    assert client.get(f"/filmes/{created['id']}").json() == created

    resp = client.patch(f"/filmes/{created['id']}", json={"duracao": 105})
    assert resp.status_code == 200
    assert resp.json()["duracao"] == 105
    assert resp.json()["nome"] == FILME["nome"]

    assert client.delete(f"/filmes/{created['id']}").status_code == 204
    resp = client.get(f"/filmes/{created['id']}")
    assert resp.status_code == 404
    assert resp.json()["message"] == f"Filme com o ID {created['id']} não encontrado"


def test_list_newest_first(client):
    first = client.post("/filmes", json=FILME).json()
    second = client.post("/filmes", json={**FILME, "nome": "Tropa de Elite", "anolancamento": 2007}).json()
    assert [f["id"] for f in client.get("/filmes").json()] == [second["id"], first["id"]]


def test_filme_validation(client):
    assert client.post("/filmes", json={**FILME, "anolancamento": 1850}).status_code == 400
    assert client.post("/filmes", json={**FILME, "duracao": 0}).status_code == 400
    assert client.post("/filmes", json={k: v for k, v in FILME.items() if k != "descricao"}).status_code == 400
    assert client.post("/filmes", json={**FILME, "diretor": "Guel Arraes"}).status_code == 400
    assert client.get("/filmes/xyz").status_code == 400
    assert client.delete("/filmes/12345").status_code == 404


def test_numbers_too_wide_for_storage_are_rejected(client):
    assert client.post("/filmes", json={**FILME, "duracao": 10**20}).status_code == 400
    assert client.post("/filmes", json={**FILME, "anolancamento": 10**20}).status_code == 400

    filme_id = client.post("/filmes", json=FILME).json()["id"]
    assert client.patch(f"/filmes/{filme_id}", json={"duracao": 10**20}).status_code == 400
    assert client.get(f"/filmes/{filme_id}").json()["duracao"] == FILME["duracao"]
    assert client.get("/filmes/99999999999999999999").status_code == 404
