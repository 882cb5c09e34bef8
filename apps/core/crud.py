# apps/core/crud.py

"""
Serviço CRUD genérico

Cada entidade especializa os ganchos de escopo, validação, acesso e
aplicação de campos. Validação e autorização acontecem sempre antes de
qualquer escrita.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, transaction

from .exceptions import Conflito, DadosInvalidos, ErroInterno, NaoEncontrado
from .utils import texto

logger = logging.getLogger(__name__)


class ServicoCrud:
    """Base dos serviços de listagem, criação, atualização e exclusão"""

    model = None
    nome_entidade = 'Registro'
    campos_obrigatorios: Tuple[str, ...] = ()
    mensagem_conflito = 'Registro já existe'

    # =================== CONSULTAS ===================

    def consulta(self):
        return self.model.objects.all()

    def escopo(self, principal, consulta, filtros: Dict):
        """Restringe a listagem; None significa resultado vazio sem consulta"""
        return consulta

    def listar(self, principal, filtros: Optional[Dict] = None) -> List:
        consulta = self.escopo(principal, self.consulta(), filtros or {})
        if consulta is None:
            return []
        return list(consulta)

    def obter(self, pk, consulta=None):
        consulta = consulta if consulta is not None else self.consulta()
        try:
            return consulta.get(pk=pk)
        except (self.model.DoesNotExist, ValidationError, ValueError):
            raise NaoEncontrado(f'{self.nome_entidade} não encontrado(a)')

    # =================== GANCHOS ===================

    def verificar_acesso(self, principal, obj, acao: str):
        """Levanta AcessoNegado quando o principal não pode agir sobre obj"""

    def montar(self, principal, dados: Dict):
        """Retorna (instância não salva, relações muitos-para-muitos)"""
        raise NotImplementedError

    def aplicar(self, principal, obj, dados: Dict) -> Dict:
        """Aplica os campos presentes em obj; retorna relações a gravar"""
        raise NotImplementedError

    # =================== OPERAÇÕES ===================

    def validar_obrigatorios(self, dados: Dict):
        ausentes = [campo for campo in self.campos_obrigatorios if not texto(dados, campo)]
        if ausentes:
            raise DadosInvalidos(f"Campos obrigatórios ausentes: {', '.join(ausentes)}")

    def criar(self, principal, dados: Dict):
        self.validar_obrigatorios(dados)
        obj, relacoes = self.montar(principal, dados)
        self._persistir(obj, relacoes)
        logger.info('%s criado(a): id=%s por=%s', self.nome_entidade, obj.pk, principal.id)
        return obj

    def atualizar(self, principal, pk, dados: Dict):
        obj = self.obter(pk)
        self.verificar_acesso(principal, obj, 'atualizar')
        relacoes = self.aplicar(principal, obj, dados)
        self._persistir(obj, relacoes)
        logger.info('%s atualizado(a): id=%s por=%s', self.nome_entidade, obj.pk, principal.id)
        return obj

    def excluir(self, principal, pk) -> Dict:
        obj = self.obter(pk)
        self.verificar_acesso(principal, obj, 'excluir')
        try:
            obj.delete()
        except DatabaseError as e:
            logger.exception('Falha ao excluir %s %s', self.nome_entidade, pk)
            raise ErroInterno(f'Erro ao excluir {self.nome_entidade.lower()}') from e
        logger.info('%s excluído(a): id=%s por=%s', self.nome_entidade, pk, principal.id)
        return {'ok': True}

    def serializar(self, obj) -> Dict:
        raise NotImplementedError

    def serializar_lista(self, objs: Iterable) -> List[Dict]:
        return [self.serializar(obj) for obj in objs]

    # =================== MÉTODOS PRIVADOS ===================

    def _persistir(self, obj, relacoes: Optional[Dict] = None):
        try:
            with transaction.atomic():
                obj.save()
                for campo, valores in (relacoes or {}).items():
                    getattr(obj, campo).set(valores)
        except IntegrityError as e:
            raise Conflito(self.mensagem_conflito) from e
        except DatabaseError as e:
            logger.exception('Falha ao gravar %s', self.nome_entidade)
            raise ErroInterno(f'Erro ao gravar {self.nome_entidade.lower()}') from e

    def _buscar_relacionados(self, model, ids: List[str], nome: str) -> List:
        """Resolve uma lista de ids; qualquer id inexistente é NaoEncontrado"""
        encontrados = []
        for pk in ids:
            try:
                encontrados.append(model.objects.get(pk=pk))
            except (model.DoesNotExist, ValidationError, ValueError):
                raise NaoEncontrado(f'{nome} não encontrado(a): {pk}')
        return encontrados
