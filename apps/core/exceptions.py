# apps/core/exceptions.py

"""
Erros de domínio do Ludus

Cada tipo corresponde a um status HTTP distinto. Os serviços levantam
estes erros e o ApiErrorMiddleware converte em resposta JSON.
"""


class LudusError(Exception):
    """Base dos erros de domínio"""

    status = 500
    mensagem_padrao = 'Erro interno do sistema'

    def __init__(self, mensagem=None):
        self.mensagem = mensagem or self.mensagem_padrao
        super().__init__(self.mensagem)


class DadosInvalidos(LudusError):
    """Campos obrigatórios ausentes ou com formato inválido"""

    status = 400
    mensagem_padrao = 'Dados obrigatórios ausentes'


class AcessoNegado(LudusError):
    """Negação do guarda de autorização"""

    status = 403
    mensagem_padrao = 'Acesso negado'


class NaoEncontrado(LudusError):
    """Entidade referenciada não existe"""

    status = 404
    mensagem_padrao = 'Não encontrado'


class Conflito(LudusError):
    """Colisão em campo único (email, login, nome)"""

    status = 409
    mensagem_padrao = 'Registro já existe'


class ErroInterno(LudusError):
    """Falha de persistência ou erro inesperado"""

    status = 500
