"""
API de jogadores: autorização pelo dono da turma, atualização parcial,
listagem com escopo e jogadores órfãos.
"""
import uuid

import pytest

from apps.core.models import Jogador, Turma
from apps.turmas.services import jogador_service

pytestmark = pytest.mark.django_db


def _novo_jogador(turma, **extra):
    dados = {"nome_jogador": "Maria", "login": "Maria.S", "senha": "1234", "turma": str(turma.pk)}
    dados.update(extra)
    return dados


def test_dono_da_turma_cria_jogador(cliente_u2, turma_u2, u2):
    r = cliente_u2.post("/api/jogadores/", _novo_jogador(turma_u2), content_type="application/json")
    assert r.status_code == 201

    corpo = r.json()
    assert corpo["login"] == "maria.s"
    assert corpo["turma"]["id"] == str(turma_u2.pk)
    assert corpo["createdBy"]["id"] == str(u2.pk)
    assert "senha" not in corpo and "senha_hash" not in corpo

    jogador = Jogador.objects.get(pk=corpo["id"])
    assert jogador.senha_hash != "1234"
    assert jogador.verificar_senha("1234")


def test_turma_de_outro_usuario_recebe_403(cliente_u3, turma_u2):
    r = cliente_u3.post("/api/jogadores/", _novo_jogador(turma_u2), content_type="application/json")
    assert r.status_code == 403
    assert Jogador.objects.count() == 0


def test_turma_inexistente_recebe_404(cliente_u2):
    dados = {"nome_jogador": "Maria", "login": "maria", "senha": "1234", "turma": str(uuid.uuid4())}
    r = cliente_u2.post("/api/jogadores/", dados, content_type="application/json")
    assert r.status_code == 404
    assert r.json() == {"error": "Turma não encontrada"}
    assert Jogador.objects.count() == 0


@pytest.mark.parametrize("faltando", ["nome_jogador", "login", "senha", "turma"])
def test_campos_obrigatorios(cliente_u2, turma_u2, faltando):
    dados = _novo_jogador(turma_u2)
    dados.pop(faltando)
    r = cliente_u2.post("/api/jogadores/", dados, content_type="application/json")
    assert r.status_code == 400
    assert Jogador.objects.count() == 0


def test_login_duplicado_e_conflito(cliente_u2, jogador_u2, turma_u2):
    r = cliente_u2.post(
        "/api/jogadores/",
        _novo_jogador(turma_u2, login="JOAO"),
        content_type="application/json",
    )
    assert r.status_code == 409
    assert r.json() == {"error": "Login já cadastrado"}


def test_atualizar_so_o_nome_preserva_o_resto(cliente_u2, jogador_u2, turma_u2):
    hash_antes = jogador_u2.senha_hash

    r = cliente_u2.put(
        f"/api/jogadores/{jogador_u2.pk}/",
        {"nome_jogador": "João Pedro"},
        content_type="application/json",
    )
    assert r.status_code == 200

    jogador_u2.refresh_from_db()
    assert jogador_u2.nome_jogador == "João Pedro"
    assert jogador_u2.login == "joao"
    assert jogador_u2.senha_hash == hash_antes
    assert jogador_u2.turma_id == turma_u2.pk


def test_troca_de_senha(cliente_u2, jogador_u2):
    cliente_u2.put(f"/api/jogadores/{jogador_u2.pk}/", {"senha": "nova"}, content_type="application/json")
    jogador_u2.refresh_from_db()
    assert jogador_u2.verificar_senha("nova")


def test_mover_para_turma_alheia_recebe_403(cliente_u2, jogador_u2, u3, turma_u2):
    turma_u3 = Turma.objects.create(nome_turma="Do Bruno", criado_por=str(u3.pk))
    r = cliente_u2.put(
        f"/api/jogadores/{jogador_u2.pk}/",
        {"turma": str(turma_u3.pk)},
        content_type="application/json",
    )
    assert r.status_code == 403
    jogador_u2.refresh_from_db()
    assert jogador_u2.turma_id == turma_u2.pk


def test_outro_usuario_nao_altera_nem_exclui(cliente_u3, jogador_u2):
    r = cliente_u3.put(f"/api/jogadores/{jogador_u2.pk}/", {"nome_jogador": "X"}, content_type="application/json")
    assert r.status_code == 403
    assert cliente_u3.delete(f"/api/jogadores/{jogador_u2.pk}/").status_code == 403


def test_autorizacao_ignora_criador_do_jogador(cliente_admin, cliente_u2, cliente_u3, turma_u2, u3):
    r = cliente_admin.post(
        "/api/jogadores/",
        _novo_jogador(turma_u2, createdBy=str(u3.pk)),
        content_type="application/json",
    )
    assert r.status_code == 201
    jogador_id = r.json()["id"]
    assert r.json()["createdBy"]["id"] == str(u3.pk)

    # u3 criou, mas a turma é de u2
    r = cliente_u3.put(f"/api/jogadores/{jogador_id}/", {"nome_jogador": "X"}, content_type="application/json")
    assert r.status_code == 403

    r = cliente_u2.put(f"/api/jogadores/{jogador_id}/", {"nome_jogador": "Y"}, content_type="application/json")
    assert r.status_code == 200


def test_admin_cria_com_criador_inexistente_recebe_404(cliente_admin, turma_u2):
    r = cliente_admin.post(
        "/api/jogadores/",
        _novo_jogador(turma_u2, createdBy=str(uuid.uuid4())),
        content_type="application/json",
    )
    assert r.status_code == 404


def test_listagem_com_escopo(cliente_u2, cliente_u3, cliente_admin, jogador_u2):
    assert [j["login"] for j in cliente_u2.get("/api/jogadores/").json()] == ["joao"]
    assert cliente_u3.get("/api/jogadores/").json() == []
    assert [j["login"] for j in cliente_admin.get("/api/jogadores/").json()] == ["joao"]


def test_listagem_vazia_nao_consulta_jogadores(principal_u3, jogador_u2, django_assert_num_queries):
    # Somente a consulta das turmas do principal
    with django_assert_num_queries(1):
        assert jogador_service.listar(principal_u3) == []


def test_filtro_por_turma(cliente_u2, cliente_admin, cliente_u3, jogador_u2, turma_u2, u2):
    outra = Turma.objects.create(nome_turma="5º Ano C", criado_por=str(u2.pk))

    assert len(cliente_u2.get("/api/jogadores/", {"turma": str(turma_u2.pk)}).json()) == 1
    assert cliente_u2.get("/api/jogadores/", {"turma": str(outra.pk)}).json() == []
    assert len(cliente_admin.get("/api/jogadores/", {"turma": str(turma_u2.pk)}).json()) == 1
    assert cliente_admin.get("/api/jogadores/", {"turma": "invalido"}).json() == []

    # Filtro em turma alheia não amplia o escopo
    assert cliente_u3.get("/api/jogadores/", {"turma": str(turma_u2.pk)}).json() == []


def test_jogador_orfao(cliente_u2, cliente_admin, jogador_u2, turma_u2):
    turma_u2.delete()

    assert Jogador.objects.filter(pk=jogador_u2.pk).exists()

    r = cliente_u2.put(f"/api/jogadores/{jogador_u2.pk}/", {"nome_jogador": "X"}, content_type="application/json")
    assert r.status_code == 404
    assert r.json() == {"error": "Turma não encontrada"}

    listados = cliente_admin.get("/api/jogadores/").json()
    assert listados[0]["turma"] is None

    assert cliente_admin.delete(f"/api/jogadores/{jogador_u2.pk}/").json() == {"ok": True}
