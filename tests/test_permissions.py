"""
Resolução de perfil e guarda de autorização por dono.

Sem HTTP: exercita is_admin, normalizar_perfil e LudusPermissions
diretamente, incluindo a verificação em dois passos dos jogadores.
"""
import uuid
from types import SimpleNamespace

import pytest

from apps.core.exceptions import AcessoNegado, NaoEncontrado
from apps.core.models import Usuario
from apps.core.permissions import (
    Decisao,
    LudusPermissions,
    Principal,
    is_admin,
    normalizar_id,
    normalizar_perfil,
)


@pytest.mark.parametrize("perfil", [
    "admin",
    "administrador",
    "adm",
    " ADMIN ",
    "Administrador",
    ["Administrador"],
    ["instituicao", "adm"],
    ("admin",),
])
def test_is_admin_reconhece_variacoes(perfil):
    assert is_admin(perfil) is True


@pytest.mark.parametrize("perfil", [
    None,
    [],
    "",
    "instituicao",
    "administradora",
    ["instituicao"],
    [None, 3],
    42,
    {"perfil": "admin"},
])
def test_is_admin_falso_para_o_resto(perfil):
    assert is_admin(perfil) is False


def test_normalizar_perfil_mantem_apenas_o_primeiro_valor():
    assert normalizar_perfil(["Administrador", "instituicao"]) == Usuario.Perfil.ADMINISTRADOR
    assert normalizar_perfil(["instituicao", "admin"]) == Usuario.Perfil.INSTITUICAO
    assert normalizar_perfil([]) == Usuario.Perfil.INSTITUICAO
    assert normalizar_perfil(None) == Usuario.Perfil.INSTITUICAO
    assert normalizar_perfil(" adm ") == Usuario.Perfil.ADMINISTRADOR


def test_normalizar_id_forma_canonica_de_uuid():
    valor = uuid.uuid4()
    assert normalizar_id(str(valor).upper()) == str(valor)
    assert normalizar_id(f"  {valor} ") == str(valor)
    assert normalizar_id("dono-legado") == "dono-legado"
    assert normalizar_id(None) == ""


def test_dono_nao_admin_permitido_somente_no_que_e_seu():
    p = Principal(id=str(uuid.uuid4()), perfil="instituicao")
    outro = str(uuid.uuid4())

    for acao in ("atualizar", "excluir", "criar"):
        assert LudusPermissions.autorizar(p, p.id, acao) is Decisao.PERMITIR
        assert LudusPermissions.autorizar(p, p.id.upper(), acao) is Decisao.PERMITIR
        assert LudusPermissions.autorizar(p, outro, acao) is Decisao.NEGAR
        assert LudusPermissions.autorizar(p, "", acao) is Decisao.NEGAR
        assert LudusPermissions.autorizar(p, None, acao) is Decisao.NEGAR


def test_admin_permitido_sempre():
    p = Principal(id=str(uuid.uuid4()), perfil=["Administrador"])
    assert LudusPermissions.autorizar(p, str(uuid.uuid4()), "excluir") is Decisao.PERMITIR
    assert LudusPermissions.autorizar(p, None, "atualizar") is Decisao.PERMITIR


def test_exigir_levanta_acesso_negado():
    p = Principal(id="a", perfil="instituicao")
    with pytest.raises(AcessoNegado):
        LudusPermissions.exigir(p, "b", "excluir")
    LudusPermissions.exigir(p, "a", "excluir")


def test_principal_sem_id_nunca_e_dono():
    p = Principal(id="", perfil="instituicao")
    assert LudusPermissions.is_dono("", p) is False


def test_jogador_autorizado_pelo_dono_da_turma_e_nao_pelo_criador():
    dono_turma = Principal(id="dono-turma", perfil="instituicao")
    criador = Principal(id="criador-jogador", perfil="instituicao")
    jogador = SimpleNamespace(
        turma_ou_none=SimpleNamespace(criado_por="dono-turma"),
        criado_por="criador-jogador",
    )

    dono = LudusPermissions.dono_do_jogador(jogador)
    assert LudusPermissions.autorizar(dono_turma, dono, "atualizar") is Decisao.PERMITIR
    assert LudusPermissions.autorizar(criador, dono, "atualizar") is Decisao.NEGAR


def test_jogador_sem_turma_e_nao_encontrado():
    jogador = SimpleNamespace(turma_ou_none=None, criado_por="x")
    with pytest.raises(NaoEncontrado):
        LudusPermissions.dono_do_jogador(jogador)


def test_filtro_escopo():
    assert LudusPermissions.filtro_escopo(Principal(id="x", perfil="admin")) == {}
    assert LudusPermissions.filtro_escopo(Principal(id="x", perfil="instituicao")) == {"criado_por": "x"}
    assert LudusPermissions.filtro_escopo(Principal(id="x"), campo="turma__criado_por") == {"turma__criado_por": "x"}


def test_dono_para_nova_turma():
    alvo = str(uuid.uuid4())
    admin = Principal(id="adm-id", perfil="administrador")
    comum = Principal(id="u-id", perfil="instituicao")

    assert LudusPermissions.dono_para_nova_turma(admin, alvo.upper()) == alvo
    assert LudusPermissions.dono_para_nova_turma(admin, "") == "adm-id"
    assert LudusPermissions.dono_para_nova_turma(comum, alvo) == "u-id"
