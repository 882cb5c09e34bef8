# apps/jogos/services.py

"""
Serviços do catálogo de jogos

Qualquer usuário autenticado lista; apenas administradores criam,
alteram e excluem.
"""

import logging
import uuid
from typing import Dict, Optional

from django.conf import settings
from django.core.files.storage import default_storage

from apps.core.crud import ServicoCrud
from apps.core.exceptions import Conflito, DadosInvalidos, LudusError, NaoEncontrado
from apps.core.models import Categoria, ConteudoRelacionado, Jogo, Usuario
from apps.core.permissions import LudusPermissions
from apps.core.utils import data_iso, inteiro, lista_de_ids, primeiro_presente, resumo_usuario, texto

logger = logging.getLogger(__name__)


class ServicoSomenteAdmin(ServicoCrud):
    """Listagem livre, escrita restrita a administradores"""

    def verificar_acesso(self, principal, obj, acao):
        LudusPermissions.exigir_admin(principal)

    def criar(self, principal, dados):
        LudusPermissions.exigir_admin(principal)
        return super().criar(principal, dados)

    def _criador(self, principal, dados) -> Optional[Usuario]:
        """Dono informado pelo administrador, ou o próprio principal"""
        informado = primeiro_presente(dados, 'createdBy', 'criado_por')
        try:
            pk = uuid.UUID(str(informado or principal.id).strip())
        except ValueError:
            pk = None
        usuario = Usuario.objects.filter(pk=pk).first() if pk else None
        if informado and usuario is None:
            raise NaoEncontrado('Usuário não encontrado')
        return usuario


class JogoService(ServicoSomenteAdmin):
    model = Jogo
    nome_entidade = 'Jogo'
    campos_obrigatorios = ('nome', 'identificacao_unity')
    campos_texto = ('descricao', 'link_jogar', 'icone_url', 'video_demo_url', 'github_url')

    def consulta(self):
        return Jogo.objects.select_related('criado_por').prefetch_related('categorias')

    def montar(self, principal, dados):
        jogo = Jogo(
            nome=texto(dados, 'nome'),
            identificacao_unity=texto(dados, 'identificacao_unity'),
            criado_por=self._criador(principal, dados),
        )
        relacoes = self._aplicar_campos(jogo, dados)
        return jogo, relacoes

    def aplicar(self, principal, jogo, dados):
        for campo in ('nome', 'identificacao_unity'):
            valor = texto(dados, campo)
            if valor:
                setattr(jogo, campo, valor)
        return self._aplicar_campos(jogo, dados)

    def serializar(self, jogo) -> Dict:
        return {
            'id': str(jogo.pk),
            'nome': jogo.nome,
            'descricao': jogo.descricao,
            'identificacao_unity': jogo.identificacao_unity,
            'link_jogar': jogo.link_jogar,
            'icone_url': jogo.icone_url,
            'video_demo_url': jogo.video_demo_url,
            'github_url': jogo.github_url,
            'total_niveis': jogo.total_niveis,
            'xp_maxima': jogo.xp_maxima,
            'categorias': [
                {'id': str(categoria.pk), 'nome': categoria.nome}
                for categoria in jogo.categorias.all()
            ],
            'createdBy': resumo_usuario(jogo.criado_por),
            'createdAt': data_iso(jogo.criado_em),
        }

    def validar_icone(self, arquivo):
        if arquivo.content_type not in settings.LUDUS_UPLOAD_MIME_TYPES:
            raise DadosInvalidos('Apenas imagens são permitidas')

    def salvar_icone(self, arquivo) -> str:
        """Grava o ícone enviado e retorna o nome no storage"""
        extensao = arquivo.name.rsplit('.', 1)[-1].lower() if '.' in arquivo.name else 'img'
        nome = default_storage.save(f'uploads/jogo-{uuid.uuid4().hex}.{extensao}', arquivo)
        logger.info('Ícone salvo: %s', nome)
        return nome

    def _persistir(self, jogo, relacoes=None):
        """
        Grava o ícone pendente só depois de todas as validações

        Se a gravação do jogo falhar, o arquivo é removido.
        """
        icone = getattr(jogo, '_icone_pendente', None)
        if icone is None:
            return super()._persistir(jogo, relacoes)

        nome = self.salvar_icone(icone)
        jogo.icone_url = default_storage.url(nome)
        try:
            super()._persistir(jogo, relacoes)
        except LudusError:
            default_storage.delete(nome)
            logger.info('Ícone removido após falha: %s', nome)
            raise
        jogo._icone_pendente = None

    def _aplicar_campos(self, jogo, dados) -> Dict:
        for campo in self.campos_texto:
            valor = texto(dados, campo)
            if valor:
                setattr(jogo, campo, valor)

        for campo in ('total_niveis', 'xp_maxima'):
            valor = inteiro(dados, campo)
            if valor is not None:
                setattr(jogo, campo, valor)

        relacoes = {}
        categoria_ids = lista_de_ids(dados, 'categorias')
        if categoria_ids:
            relacoes['categorias'] = self._buscar_relacionados(Categoria, categoria_ids, 'Categoria')

        # Arquivo validado aqui, gravado apenas em _persistir
        icone = dados.get('icone')
        if icone is not None and hasattr(icone, 'content_type'):
            self.validar_icone(icone)
            jogo._icone_pendente = icone
        return relacoes


class CategoriaService(ServicoSomenteAdmin):
    model = Categoria
    nome_entidade = 'Categoria'
    campos_obrigatorios = ('nome',)
    mensagem_conflito = 'Categoria já existe'

    def montar(self, principal, dados):
        nome = texto(dados, 'nome')
        self._exigir_nome_livre(nome)
        return Categoria(nome=nome, criado_por=self._criador(principal, dados)), {}

    def aplicar(self, principal, categoria, dados):
        nome = texto(dados, 'nome')
        if nome and nome != categoria.nome:
            self._exigir_nome_livre(nome, excluir_pk=categoria.pk)
            categoria.nome = nome
        return {}

    def serializar(self, categoria) -> Dict:
        return {
            'id': str(categoria.pk),
            'nome': categoria.nome,
            'createdBy': resumo_usuario(categoria.criado_por),
            'createdAt': data_iso(categoria.criado_em),
        }

    def _exigir_nome_livre(self, nome, excluir_pk=None):
        consulta = Categoria.objects.filter(nome__iexact=nome)
        if excluir_pk is not None:
            consulta = consulta.exclude(pk=excluir_pk)
        if consulta.exists():
            raise Conflito(self.mensagem_conflito)


class ConteudoService(ServicoSomenteAdmin):
    model = ConteudoRelacionado
    nome_entidade = 'Conteúdo'
    campos_obrigatorios = ('titulo', 'descricao')
    campos_texto = ('titulo', 'descricao', 'link_externo', 'pdf_url', 'tag')

    def consulta(self):
        return ConteudoRelacionado.objects.select_related('criado_por').prefetch_related('jogos')

    def montar(self, principal, dados):
        conteudo = ConteudoRelacionado(criado_por=self._criador(principal, dados))
        return conteudo, self.aplicar(principal, conteudo, dados)

    def aplicar(self, principal, conteudo, dados):
        for campo in self.campos_texto:
            valor = texto(dados, campo)
            if valor:
                setattr(conteudo, campo, valor)

        tipo = texto(dados, 'tipo')
        if tipo:
            if tipo not in ConteudoRelacionado.Tipo.values:
                raise DadosInvalidos('Tipo deve ser Artigo ou Evento')
            conteudo.tipo = tipo

        relacoes = {}
        jogo_ids = lista_de_ids(dados, 'jogos')
        if jogo_ids:
            relacoes['jogos'] = self._buscar_relacionados(Jogo, jogo_ids, 'Jogo')
        return relacoes

    def serializar(self, conteudo) -> Dict:
        return {
            'id': str(conteudo.pk),
            'titulo': conteudo.titulo,
            'descricao': conteudo.descricao,
            'link_externo': conteudo.link_externo,
            'pdf_url': conteudo.pdf_url,
            'tag': conteudo.tag,
            'tipo': conteudo.tipo or None,
            'jogos': [str(jogo.pk) for jogo in conteudo.jogos.all()],
            'createdBy': resumo_usuario(conteudo.criado_por),
            'createdAt': data_iso(conteudo.criado_em),
        }


jogo_service = JogoService()
categoria_service = CategoriaService()
conteudo_service = ConteudoService()
