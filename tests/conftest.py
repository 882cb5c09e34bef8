"""
Fixtures compartilhadas dos testes do Ludus.

Usuários são criados direto pelo manager; os clientes HTTP já saem com
sessão aberta via force_login.
"""
import pytest
from django.test import Client

from apps.core.models import Jogador, Turma, Usuario
from apps.core.permissions import Principal


def criar_usuario(email, nome, perfil=Usuario.Perfil.INSTITUICAO, senha='senha-forte-123'):
    return Usuario.objects.create_user(
        email_usuario=email,
        password=senha,
        nome_usuario=nome,
        instituicao_usuario='Escola Modelo',
        perfil=perfil,
    )


def cliente_de(usuario):
    cliente = Client()
    cliente.force_login(usuario)
    return cliente


@pytest.fixture
def admin(db):
    return criar_usuario('coordenacao@ludus.test', 'Coordenação', perfil=Usuario.Perfil.ADMINISTRADOR)


@pytest.fixture
def u2(db):
    return criar_usuario('professora@escola.test', 'Professora Ana')


@pytest.fixture
def u3(db):
    return criar_usuario('professor@escola.test', 'Professor Bruno')


@pytest.fixture
def cliente_admin(admin):
    return cliente_de(admin)


@pytest.fixture
def cliente_u2(u2):
    return cliente_de(u2)


@pytest.fixture
def cliente_u3(u3):
    return cliente_de(u3)


@pytest.fixture
def principal_admin(admin):
    return Principal.do_usuario(admin)


@pytest.fixture
def principal_u2(u2):
    return Principal.do_usuario(u2)


@pytest.fixture
def principal_u3(u3):
    return Principal.do_usuario(u3)


@pytest.fixture
def turma_u2(u2):
    return Turma.objects.create(nome_turma='5º Ano A', criado_por=str(u2.pk))


@pytest.fixture
def jogador_u2(turma_u2, u2):
    jogador = Jogador(login='joao', nome_jogador='João', turma=turma_u2, criado_por=u2)
    jogador.definir_senha('1234')
    jogador.save()
    return jogador
