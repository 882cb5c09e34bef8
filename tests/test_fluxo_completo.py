"""
Cenário ponta a ponta: um administrador e dois usuários de instituição
gerenciando turmas e jogadores pela API.
"""
import pytest

pytestmark = pytest.mark.django_db


def test_fluxo_admin_e_instituicoes(cliente_admin, cliente_u2, cliente_u3, admin, u2):
    # Admin cria C1 (dono: o próprio admin)
    r = cliente_admin.post("/api/turmas/", {"nome_turma": "C1"}, content_type="application/json")
    assert r.status_code == 201
    c1 = r.json()["id"]
    assert r.json()["createdBy"]["id"] == str(admin.pk)

    # U2 não pode excluir C1
    r = cliente_u2.delete(f"/api/turmas/{c1}/")
    assert r.status_code == 403

    # U2 cria C2 tentando atribuir outro dono; o dono é forçado para U2
    r = cliente_u2.post(
        "/api/turmas/",
        {"nome_turma": "C2", "createdBy": str(admin.pk)},
        content_type="application/json",
    )
    assert r.status_code == 201
    c2 = r.json()["id"]
    assert r.json()["createdBy"]["id"] == str(u2.pk)

    # U2 exclui C2
    assert cliente_u2.delete(f"/api/turmas/{c2}/").json() == {"ok": True}

    # U2 cria C3 e o jogador J1 nela
    c3 = cliente_u2.post("/api/turmas/", {"nome_turma": "C3"}, content_type="application/json").json()["id"]
    r = cliente_u2.post(
        "/api/jogadores/",
        {"nome_jogador": "J1", "login": "j1", "senha": "abc", "turma": c3},
        content_type="application/json",
    )
    assert r.status_code == 201
    j1 = r.json()["id"]

    # Admin vê J1; U3 não vê nada
    assert j1 in [j["id"] for j in cliente_admin.get("/api/jogadores/").json()]
    assert cliente_u3.get("/api/jogadores/").json() == []

    # U3 também não vê as turmas de U2 nem a do admin
    assert cliente_u3.get("/api/turmas/").json() == []
