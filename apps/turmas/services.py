# apps/turmas/services.py

"""
Serviços de turmas e jogadores

Turmas são autorizadas pelo próprio dono. Jogadores são autorizados pelo
dono da turma à qual pertencem (verificação em dois passos), nunca pelo
criado_por do jogador.
"""

import uuid
from typing import Dict, Iterable, List, Optional

from apps.core.crud import ServicoCrud
from apps.core.exceptions import Conflito, NaoEncontrado
from apps.core.models import Jogador, Turma, Usuario
from apps.core.permissions import LudusPermissions, normalizar_id
from apps.core.utils import data_iso, primeiro_presente, resumo_usuario, texto


def _uuid_ou_none(valor) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(valor).strip())
    except (TypeError, ValueError):
        return None


def _usuarios_por_id(ids: Iterable[str]) -> Dict[str, Usuario]:
    """Resolve vários ids de dono de uma vez"""
    uuids = {u for u in (_uuid_ou_none(i) for i in ids) if u}
    return {str(u.pk): u for u in Usuario.objects.filter(pk__in=uuids)}


def _dono_serializado(criado_por: str, usuarios: Dict[str, Usuario]):
    usuario = usuarios.get(normalizar_id(criado_por))
    return resumo_usuario(usuario) if usuario else criado_por


class TurmaService(ServicoCrud):
    model = Turma
    nome_entidade = 'Turma'
    campos_obrigatorios = ('nome_turma',)

    def escopo(self, principal, consulta, filtros):
        return consulta.filter(**LudusPermissions.filtro_escopo(principal))

    def verificar_acesso(self, principal, turma, acao):
        LudusPermissions.exigir(principal, turma.criado_por, acao)

    def montar(self, principal, dados):
        informado = primeiro_presente(dados, 'createdBy', 'criado_por')
        turma = Turma(
            nome_turma=texto(dados, 'nome_turma'),
            criado_por=LudusPermissions.dono_para_nova_turma(principal, informado),
        )
        return turma, {}

    def aplicar(self, principal, turma, dados):
        nome = texto(dados, 'nome_turma')
        if nome:
            turma.nome_turma = nome

        # Somente administradores transferem a turma
        informado = primeiro_presente(dados, 'createdBy', 'criado_por')
        if principal.is_admin and informado:
            turma.criado_por = normalizar_id(informado)
        return {}

    def serializar(self, turma, usuarios: Optional[Dict[str, Usuario]] = None) -> Dict:
        if usuarios is None:
            usuarios = _usuarios_por_id([turma.criado_por])
        return {
            'id': str(turma.pk),
            'nome_turma': turma.nome_turma,
            'createdBy': _dono_serializado(turma.criado_por, usuarios),
            'createdAt': data_iso(turma.criado_em),
        }

    def serializar_lista(self, turmas: Iterable) -> List[Dict]:
        turmas = list(turmas)
        usuarios = _usuarios_por_id(t.criado_por for t in turmas)
        return [self.serializar(turma, usuarios) for turma in turmas]


class JogadorService(ServicoCrud):
    model = Jogador
    nome_entidade = 'Jogador'
    campos_obrigatorios = ('nome_jogador', 'login', 'senha', 'turma')
    mensagem_conflito = 'Login já cadastrado'

    def consulta(self):
        return Jogador.objects.select_related('criado_por').prefetch_related('turma')

    def escopo(self, principal, consulta, filtros):
        turma_filtro = texto(filtros, 'turma')
        turma_uuid = _uuid_ou_none(turma_filtro) if turma_filtro else None
        if turma_filtro and turma_uuid is None:
            return None

        if principal.is_admin:
            return consulta.filter(turma_id=turma_uuid) if turma_uuid else consulta

        # Primeiro as turmas do principal, depois os jogadores delas
        turma_ids = list(
            Turma.objects
            .filter(**LudusPermissions.filtro_escopo(principal))
            .values_list('id', flat=True)
        )
        if turma_uuid:
            turma_ids = [pk for pk in turma_ids if pk == turma_uuid]
        if not turma_ids:
            return None
        return consulta.filter(turma_id__in=turma_ids)

    def verificar_acesso(self, principal, jogador, acao):
        if principal.is_admin:
            return
        dono = LudusPermissions.dono_do_jogador(jogador)
        LudusPermissions.exigir(principal, dono, acao)

    def montar(self, principal, dados):
        turma = self._turma_autorizada(principal, texto(dados, 'turma'), 'criar')

        login = texto(dados, 'login').lower()
        self._exigir_login_livre(login)

        jogador = Jogador(
            nome_jogador=texto(dados, 'nome_jogador'),
            login=login,
            turma=turma,
            criado_por=self._criador(principal, primeiro_presente(dados, 'createdBy', 'criado_por')),
        )
        jogador.definir_senha(texto(dados, 'senha'))
        return jogador, {}

    def aplicar(self, principal, jogador, dados):
        login = texto(dados, 'login').lower()
        if login and login != jogador.login:
            self._exigir_login_livre(login, excluir_pk=jogador.pk)
            jogador.login = login

        nome = texto(dados, 'nome_jogador')
        if nome:
            jogador.nome_jogador = nome

        turma_id = texto(dados, 'turma')
        if turma_id:
            jogador.turma = self._turma_autorizada(principal, turma_id, 'atualizar')

        senha = texto(dados, 'senha')
        if senha:
            jogador.definir_senha(senha)
        return {}

    def serializar(self, jogador) -> Dict:
        turma = jogador.turma_ou_none
        return {
            'id': str(jogador.pk),
            'login': jogador.login,
            'nome_jogador': jogador.nome_jogador,
            'turma': {
                'id': str(turma.pk),
                'nome_turma': turma.nome_turma,
                'createdBy': turma.criado_por,
            } if turma else None,
            'createdBy': resumo_usuario(jogador.criado_por),
            'createdAt': data_iso(jogador.criado_em),
        }

    # =================== MÉTODOS PRIVADOS ===================

    def _turma_autorizada(self, principal, turma_id, acao) -> Turma:
        """Turma existente sobre a qual o principal pode agir"""
        try:
            turma = Turma.objects.get(pk=_uuid_ou_none(turma_id))
        except Turma.DoesNotExist:
            raise NaoEncontrado('Turma não encontrada')
        LudusPermissions.exigir(principal, turma.criado_por, acao)
        return turma

    def _criador(self, principal, informado) -> Optional[Usuario]:
        if principal.is_admin and informado:
            usuario = Usuario.objects.filter(pk=_uuid_ou_none(informado)).first()
            if usuario is None:
                raise NaoEncontrado('Usuário não encontrado')
            return usuario
        return Usuario.objects.filter(pk=_uuid_ou_none(principal.id)).first()

    def _exigir_login_livre(self, login, excluir_pk=None):
        consulta = Jogador.objects.filter(login=login)
        if excluir_pk is not None:
            consulta = consulta.exclude(pk=excluir_pk)
        if consulta.exists():
            raise Conflito(self.mensagem_conflito)


turma_service = TurmaService()
jogador_service = JogadorService()
