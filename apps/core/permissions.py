# apps/core/permissions.py

import enum
import logging
import uuid
from dataclasses import dataclass
from functools import wraps

from django.http import JsonResponse

from .exceptions import AcessoNegado, NaoEncontrado

logger = logging.getLogger(__name__)

PERFIS_ADMIN = frozenset({'admin', 'administrador', 'adm'})


def is_admin(perfil):
    """
    Indica se a representação de perfil corresponde a um administrador

    Aceita texto ou lista de textos, com variações de caixa e espaços.
    Qualquer outro formato resulta em False.
    """
    if isinstance(perfil, str):
        return perfil.strip().lower() in PERFIS_ADMIN
    if isinstance(perfil, (list, tuple)):
        return any(
            isinstance(valor, str) and valor.strip().lower() in PERFIS_ADMIN
            for valor in perfil
        )
    return False


def normalizar_perfil(valor):
    """
    Reduz o perfil informado por um cliente ao valor único armazenado

    Só o primeiro valor de uma lista é considerado.
    """
    from .models import Usuario

    if isinstance(valor, (list, tuple)):
        valor = valor[0] if valor else None
    if is_admin(valor):
        return Usuario.Perfil.ADMINISTRADOR
    return Usuario.Perfil.INSTITUICAO


def normalizar_id(valor):
    """Forma canônica de um id para comparação de dono"""
    if valor is None:
        return ''
    texto = str(valor).strip()
    try:
        return str(uuid.UUID(texto))
    except ValueError:
        return texto


@dataclass(frozen=True)
class Principal:
    """Identidade autenticada que faz a requisição"""

    id: str
    perfil: object = None

    @classmethod
    def do_usuario(cls, usuario):
        return cls(id=normalizar_id(usuario.pk), perfil=usuario.perfil)

    @property
    def is_admin(self):
        return is_admin(self.perfil)


class Decisao(enum.Enum):
    PERMITIR = 'permitir'
    NEGAR = 'negar'


class LudusPermissions:
    """
    Guarda de autorização por dono

    Administradores podem tudo. Os demais só agem sobre registros dos
    quais são donos, e listagens ficam restritas a esses registros.
    """

    @staticmethod
    def is_dono(dono_id, principal):
        """Compara dono e principal pela forma canônica do id"""
        dono = normalizar_id(dono_id)
        return bool(dono) and bool(principal.id) and dono == normalizar_id(principal.id)

    @staticmethod
    def autorizar(principal, dono_id, acao):
        if principal.is_admin:
            return Decisao.PERMITIR
        if LudusPermissions.is_dono(dono_id, principal):
            return Decisao.PERMITIR
        return Decisao.NEGAR

    @staticmethod
    def exigir(principal, dono_id, acao):
        """Levanta AcessoNegado quando o guarda nega a ação"""
        if LudusPermissions.autorizar(principal, dono_id, acao) is Decisao.NEGAR:
            logger.warning(
                'Acesso negado: principal=%s acao=%s dono=%s',
                principal.id, acao, dono_id
            )
            raise AcessoNegado()

    @staticmethod
    def exigir_admin(principal):
        if not principal.is_admin:
            raise AcessoNegado()

    @staticmethod
    def filtro_escopo(principal, campo='criado_por'):
        """
        Filtro de listagem

        Vazio para administradores (todos os registros); para os demais,
        apenas os registros do próprio principal.
        """
        if principal.is_admin:
            return {}
        return {campo: principal.id}

    @staticmethod
    def dono_do_jogador(jogador):
        """
        Dono efetivo de um jogador: o dono da turma dele

        O criado_por do próprio jogador não participa da autorização.
        """
        turma = jogador.turma_ou_none
        if turma is None:
            raise NaoEncontrado('Turma não encontrada')
        return turma.criado_por

    @staticmethod
    def dono_para_nova_turma(principal, informado=None):
        """Administradores escolhem o dono; os demais são sempre donos"""
        if principal.is_admin and informado:
            return normalizar_id(informado)
        return principal.id


# Decoradores para views da API

def login_requerido_api(view_func):
    """Exige sessão autenticada; responde 401 em JSON"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return JsonResponse({'error': 'Não autenticado'}, status=401)
        request.principal = Principal.do_usuario(request.user)
        return view_func(request, *args, **kwargs)

    return wrapped_view


def requer_admin_api(view_func):
    """Exige sessão de administrador; responde 403 em JSON"""

    @wraps(view_func)
    @login_requerido_api
    def wrapped_view(request, *args, **kwargs):
        if not request.principal.is_admin:
            return JsonResponse({'error': 'Acesso negado'}, status=403)
        return view_func(request, *args, **kwargs)

    return wrapped_view
