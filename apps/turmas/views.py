# apps/turmas/views.py

from django.contrib.auth.decorators import login_required
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.permissions import Principal, login_requerido_api
from apps.core.views import responder_colecao, responder_item

from .services import jogador_service, turma_service


@login_required
@require_GET
def turmas_view(request):
    """
    Página de gestão de turmas e jogadores

    Mostra apenas o que o usuário pode ver: todas as turmas para
    administradores, as próprias para os demais.
    """
    principal = Principal.do_usuario(request.user)
    turmas = turma_service.serializar_lista(turma_service.listar(principal))
    jogadores = jogador_service.serializar_lista(jogador_service.listar(principal))

    context = {
        'title': 'Turmas',
        'turmas': turmas,
        'jogadores': jogadores,
        'is_admin': principal.is_admin,
    }
    return render(request, 'turmas/turmas.html', context)


@login_requerido_api
@require_http_methods(['GET', 'POST'])
def api_turmas(request):
    return responder_colecao(request, turma_service)


@login_requerido_api
@require_http_methods(['PUT', 'DELETE'])
def api_turma_detalhe(request, pk):
    return responder_item(request, turma_service, pk)


@login_requerido_api
@require_http_methods(['GET', 'POST'])
def api_jogadores(request):
    """Jogadores visíveis ao principal; aceita ?turma=<id> como filtro"""
    return responder_colecao(request, jogador_service)


@login_requerido_api
@require_http_methods(['PUT', 'DELETE'])
def api_jogador_detalhe(request, pk):
    return responder_item(request, jogador_service, pk)
