# apps/core/usuario_service.py

"""
Serviço de usuários da instituição

Apenas administradores gerenciam usuários.
"""

from typing import Dict

from .crud import ServicoCrud
from .exceptions import Conflito
from .models import Usuario
from .permissions import LudusPermissions, normalizar_perfil
from .utils import data_iso, texto


class UsuarioService(ServicoCrud):
    model = Usuario
    nome_entidade = 'Usuário'
    campos_obrigatorios = ('nome_usuario', 'email_usuario', 'senha_usuario', 'instituicao_usuario')
    mensagem_conflito = 'E-mail já cadastrado'

    def escopo(self, principal, consulta, filtros):
        LudusPermissions.exigir_admin(principal)
        return consulta

    def verificar_acesso(self, principal, obj, acao):
        LudusPermissions.exigir_admin(principal)

    def criar(self, principal, dados):
        LudusPermissions.exigir_admin(principal)
        return super().criar(principal, dados)

    def montar(self, principal, dados):
        email = texto(dados, 'email_usuario').lower()
        self._exigir_email_livre(email)

        usuario = Usuario(
            nome_usuario=texto(dados, 'nome_usuario'),
            email_usuario=email,
            instituicao_usuario=texto(dados, 'instituicao_usuario'),
            perfil=normalizar_perfil(dados.get('perfil')),
        )
        usuario.set_password(texto(dados, 'senha_usuario'))
        return usuario, {}

    def aplicar(self, principal, usuario, dados):
        nome = texto(dados, 'nome_usuario')
        if nome:
            usuario.nome_usuario = nome

        email = texto(dados, 'email_usuario').lower()
        if email and email != usuario.email_usuario:
            self._exigir_email_livre(email, excluir_pk=usuario.pk)
            usuario.email_usuario = email

        instituicao = texto(dados, 'instituicao_usuario')
        if instituicao:
            usuario.instituicao_usuario = instituicao

        # Presente, mesmo vazio, redefine o perfil (vazio vira instituicao)
        if 'perfil' in dados:
            usuario.perfil = normalizar_perfil(dados['perfil'])

        senha = texto(dados, 'senha_usuario')
        if senha:
            usuario.set_password(senha)
        return {}

    def serializar(self, usuario) -> Dict:
        return {
            'id': str(usuario.pk),
            'nome_usuario': usuario.nome_usuario,
            'email_usuario': usuario.email_usuario,
            'instituicao_usuario': usuario.instituicao_usuario,
            'perfil': usuario.perfil,
            'createdAt': data_iso(usuario.criado_em),
        }

    def _exigir_email_livre(self, email, excluir_pk=None):
        consulta = Usuario.objects.filter(email_usuario=email)
        if excluir_pk is not None:
            consulta = consulta.exclude(pk=excluir_pk)
        if consulta.exists():
            raise Conflito(self.mensagem_conflito)


usuario_service = UsuarioService()
