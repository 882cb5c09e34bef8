# apps/core/auth_service.py

"""
Serviço de Autenticação - login por email, logout e provisionamento do
administrador inicial
"""

import logging
import secrets
from typing import Optional, Tuple

from django.conf import settings
from django.contrib.auth import authenticate, login, logout

from .models import Usuario

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Serviço encapsulado para gerenciar autenticação

    A verificação de senha é a do Django (hash configurado em
    PASSWORD_HASHERS); o serviço só normaliza o email e cuida da sessão.
    """

    def fazer_login(self, request, email: str, senha: str) -> Tuple[bool, str]:
        """
        Realiza login por email e senha

        Returns:
            Tuple[sucesso, mensagem]
        """
        email = (email or '').strip().lower()
        if not email or not senha:
            return False, 'Informe e-mail e senha.'

        usuario = authenticate(request, email_usuario=email, password=senha)
        if usuario is None:
            logger.info('Tentativa de login falhada para: %s', email)
            return False, 'Credenciais inválidas.'

        login(request, usuario)
        logger.info('Login: %s', usuario.email_usuario)
        return True, f'Bem-vindo, {usuario.nome_usuario}!'

    def fazer_logout(self, request) -> bool:
        """Encerra a sessão atual"""
        logout(request)
        return True

    def garantir_admin(self, email: Optional[str] = None, senha: Optional[str] = None,
                       nome: Optional[str] = None, instituicao: Optional[str] = None) -> Tuple[Usuario, bool]:
        """
        Garante que exista o administrador informado

        Campos ausentes usam as configurações LUDUS_ADMIN_*.

        Returns:
            Tuple[usuario, criado]
        """
        email = (email or settings.LUDUS_ADMIN_EMAIL).strip().lower()

        existente = Usuario.objects.filter(email_usuario=email).first()
        if existente:
            logger.info('Admin existente: %s', email)
            return existente, False

        usuario = Usuario.objects.create_user(
            email_usuario=email,
            password=senha or settings.LUDUS_ADMIN_PASSWORD,
            nome_usuario=nome or settings.LUDUS_ADMIN_NOME,
            instituicao_usuario=instituicao or settings.LUDUS_ADMIN_INSTITUICAO,
            perfil=Usuario.Perfil.ADMINISTRADOR,
        )
        logger.info('Admin criado: %s', email)
        return usuario, True

    def token_seed_valido(self, token: Optional[str]) -> bool:
        """Compara o token de provisionamento em tempo constante"""
        esperado = settings.LUDUS_ADMIN_SEED_TOKEN
        return bool(token) and bool(esperado) and secrets.compare_digest(str(token), esperado)


# Instância global do serviço
auth_service = AuthenticationService()
