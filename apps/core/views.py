# apps/core/views.py

import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.cache import cache
from django.db import DatabaseError
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST
from django_redis.exceptions import ConnectionInterrupted
from redis.exceptions import RedisError

from apps import __version__

from .auth_service import auth_service  # Importando nosso serviço encapsulado
from .forms import LoginForm
from .models import Usuario
from .permissions import Principal, login_requerido_api, requer_admin_api
from .usuario_service import usuario_service
from .utils import ler_dados, primeiro_presente

logger = logging.getLogger(__name__)


# =================== RESPOSTAS CRUD ===================

def responder_colecao(request, servico, dados=None):
    """
    GET lista com escopo do principal; POST cria e responde 201

    Compartilhado pelas views de API de todas as entidades.
    """
    if request.method == 'GET':
        objs = servico.listar(request.principal, request.GET)
        return JsonResponse(servico.serializar_lista(objs), safe=False)

    if dados is None:
        dados = ler_dados(request)
    obj = servico.criar(request.principal, dados)
    return JsonResponse(servico.serializar(obj), status=201)


def responder_item(request, servico, pk, dados=None):
    """PUT atualiza parcialmente; DELETE exclui"""
    if request.method == 'DELETE':
        return JsonResponse(servico.excluir(request.principal, pk))

    if dados is None:
        dados = ler_dados(request)
    obj = servico.atualizar(request.principal, pk, dados)
    return JsonResponse(servico.serializar(obj))


# =================== AUTENTICAÇÃO ===================

@require_http_methods(['GET', 'POST'])
def login_view(request):
    """
    View de login usando serviço encapsulado

    Aceita formulário ou JSON, com os nomes de campo email/username e
    password/senha.
    """
    if request.method == 'GET':
        if request.user.is_authenticated:
            return redirect(settings.LOGIN_REDIRECT_URL)
        return _render_login(request, LoginForm())

    dados = ler_dados(request)
    form = LoginForm({
        'email': primeiro_presente(dados, 'email', 'username'),
        'senha': primeiro_presente(dados, 'password', 'senha'),
    })
    if not form.is_valid():
        return _falha_login(request, form, 'Informe e-mail e senha.', 400)

    sucesso, mensagem = auth_service.fazer_login(
        request, form.cleaned_data['email'], form.cleaned_data['senha']
    )
    if not sucesso:
        return _falha_login(request, form, mensagem, 401)

    messages.success(request, mensagem)
    return redirect(settings.LOGIN_REDIRECT_URL)


def logout_view(request):
    """
    View de logout usando serviço encapsulado
    """
    auth_service.fazer_logout(request)
    messages.info(request, 'Você foi desconectado com sucesso.')
    return redirect('core:login')


@csrf_exempt
@require_POST
def seed_admin(request):
    """
    Cria o administrador inicial

    Protegido pelo token LUDUS_ADMIN_SEED_TOKEN (cabeçalho X-Seed-Token ou
    campo token). Idempotente: devolve o usuário existente.
    """
    dados = ler_dados(request)
    token = request.headers.get('X-Seed-Token') or primeiro_presente(dados, 'token')
    if not auth_service.token_seed_valido(token):
        logger.warning('Tentativa de seed-admin com token inválido')
        return JsonResponse({'error': 'Token inválido'}, status=403)

    usuario, criado = auth_service.garantir_admin(
        email=primeiro_presente(dados, 'email_usuario', 'email') or None,
        senha=primeiro_presente(dados, 'senha_usuario', 'senha', 'password') or None,
        nome=primeiro_presente(dados, 'nome_usuario', 'nome') or None,
        instituicao=primeiro_presente(dados, 'instituicao_usuario', 'instituicao') or None,
    )
    return JsonResponse(
        {'created': criado, 'usuario': usuario_service.serializar(usuario)},
        status=201 if criado else 200
    )


# =================== PÁGINAS ===================

@login_required
@require_GET
def usuario_view(request):
    """
    Administradores veem os usuários da instituição; os demais, o próprio perfil
    """
    principal = Principal.do_usuario(request.user)
    if principal.is_admin:
        context = {
            'title': 'Usuários da Instituição',
            'usuarios': usuario_service.listar(principal),
            'perfis': Usuario.Perfil.choices,
        }
        return render(request, 'core/usuario.html', context)

    context = {
        'title': 'Meu Perfil',
        'user': request.user
    }
    return render(request, 'core/perfil.html', context)


@require_GET
def health_check(request):
    """
    Health check para monitoramento
    """
    status = {
        'status': 'healthy',
        'database': 'ok',
        'cache': 'ok',
        'timestamp': timezone.now().isoformat(),
        'version': __version__
    }

    # Verificar conexão com banco
    try:
        Usuario.objects.exists()
    except DatabaseError as e:
        logger.error('Health check: banco indisponível: %s', e)
        status.update(status='unhealthy', database='erro')

    # Verificar cache (Redis em produção)
    try:
        cache.set('health_check', 'ok', 60)
        if cache.get('health_check') != 'ok':
            status.update(status='unhealthy', cache='erro')
    except (RedisError, ConnectionInterrupted) as e:
        logger.error('Health check: cache indisponível: %s', e)
        status.update(status='unhealthy', cache='erro')

    return JsonResponse(status, status=200 if status['status'] == 'healthy' else 503)


# =================== API ===================

@login_requerido_api
@require_GET
def api_me(request):
    """Dados do usuário logado"""
    dados = usuario_service.serializar(request.user)
    dados['is_admin'] = request.principal.is_admin
    return JsonResponse(dados)


@requer_admin_api
@require_http_methods(['GET', 'POST'])
def api_usuarios(request):
    return responder_colecao(request, usuario_service)


@requer_admin_api
@require_http_methods(['PUT', 'DELETE'])
def api_usuario_detalhe(request, pk):
    return responder_item(request, usuario_service, pk)


# =================== MÉTODOS PRIVADOS ===================

def _render_login(request, form, status=200):
    context = {
        'title': 'Login - Ludus',
        'form': form,
    }
    return render(request, 'core/login.html', context, status=status)


def _falha_login(request, form, mensagem, status):
    if request.content_type == 'application/json':
        return JsonResponse({'error': mensagem}, status=status)
    messages.error(request, mensagem)
    return _render_login(request, form, status=status)
