# apps/jogos/views.py

from django.views.decorators.http import require_http_methods

from apps.core.permissions import login_requerido_api, requer_admin_api
from apps.core.utils import ler_dados
from apps.core.views import responder_colecao, responder_item

from .services import categoria_service, conteudo_service, jogo_service


# =================== JOGOS ===================

@login_requerido_api
@require_http_methods(['GET', 'POST'])
def api_jogos(request):
    """
    Lista o catálogo (qualquer usuário) ou cadastra um jogo (administrador)

    O ícone pode vir como arquivo multipart no campo icone.
    """
    dados = ler_dados(request, com_arquivos=True) if request.method == 'POST' else None
    return responder_colecao(request, jogo_service, dados)


@requer_admin_api
@require_http_methods(['PUT', 'DELETE'])
def api_jogo_detalhe(request, pk):
    """Atualização aceita JSON ou multipart (troca do ícone)"""
    dados = ler_dados(request, com_arquivos=True) if request.method == 'PUT' else None
    return responder_item(request, jogo_service, pk, dados)


# =================== CATEGORIAS ===================

@login_requerido_api
@require_http_methods(['GET', 'POST'])
def api_categorias(request):
    return responder_colecao(request, categoria_service)


@requer_admin_api
@require_http_methods(['PUT', 'DELETE'])
def api_categoria_detalhe(request, pk):
    return responder_item(request, categoria_service, pk)


# =================== CONTEÚDOS RELACIONADOS ===================

@login_requerido_api
@require_http_methods(['GET', 'POST'])
def api_conteudos(request):
    return responder_colecao(request, conteudo_service)


@requer_admin_api
@require_http_methods(['PUT', 'DELETE'])
def api_conteudo_detalhe(request, pk):
    return responder_item(request, conteudo_service, pk)
