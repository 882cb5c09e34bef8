# apps/core/middleware.py

import logging

from django.http import JsonResponse

from .exceptions import LudusError

logger = logging.getLogger(__name__)


class ApiErrorMiddleware:
    """
    Converte erros das views em respostas JSON

    LudusError vira {"error": mensagem} com o status correspondente. Fora
    de /api/, exceções inesperadas seguem para o tratamento padrão do
    Django.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, LudusError):
            if exception.status >= 500:
                logger.error('Erro interno em %s: %s', request.path, exception.mensagem)
            return JsonResponse({'error': exception.mensagem}, status=exception.status)

        if request.path.startswith('/api/'):
            logger.exception('Erro inesperado em %s %s', request.method, request.path)
            return JsonResponse({'error': 'Erro interno do servidor'}, status=500)

        return None
