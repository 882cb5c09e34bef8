# apps/core/utils.py

import json
from typing import Dict, List, Optional

from django.http import QueryDict
from django.http.multipartparser import MultiPartParserError

from .exceptions import DadosInvalidos


def ler_dados(request, com_arquivos: bool = False) -> Dict:
    """
    Lê o corpo da requisição como dicionário

    Aceita JSON ou formulário (urlencoded/multipart), inclusive em PUT.
    Campos repetidos do formulário viram listas. Com com_arquivos, os
    arquivos enviados entram no dicionário pelo nome do campo.
    """
    if request.content_type == 'application/json':
        if not request.body:
            return {}
        try:
            dados = json.loads(request.body)
        except ValueError:
            raise DadosInvalidos('JSON inválido')
        if not isinstance(dados, dict):
            raise DadosInvalidos('JSON deve ser um objeto')
        return dados

    arquivos = None
    if request.method == 'POST':
        query, arquivos = request.POST, request.FILES
    elif request.content_type == 'multipart/form-data':
        # Fora do POST o Django não processa multipart sozinho
        try:
            query, arquivos = request.parse_file_upload(request.META, request)
        except MultiPartParserError:
            raise DadosInvalidos('Formulário multipart inválido')
    else:
        query = QueryDict(request.body, encoding=request.encoding)

    dados = {}
    for chave in query:
        valores = query.getlist(chave)
        dados[chave] = valores[0] if len(valores) == 1 else valores

    if com_arquivos and arquivos:
        for chave in arquivos:
            dados[chave] = arquivos[chave]
    return dados


def texto(dados: Dict, campo: str) -> str:
    """Valor textual de um campo, sem espaços nas pontas ('' se ausente)"""
    valor = dados.get(campo)
    if valor is None:
        return ''
    if isinstance(valor, (list, tuple)):
        valor = valor[0] if valor else ''
    return str(valor).strip()


def primeiro_presente(dados: Dict, *campos: str) -> str:
    """Primeiro campo não vazio entre os aliases informados"""
    for campo in campos:
        valor = texto(dados, campo)
        if valor:
            return valor
    return ''


def inteiro(dados: Dict, campo: str) -> Optional[int]:
    """Inteiro não negativo de um campo; None se ausente ou vazio"""
    valor = texto(dados, campo)
    if not valor:
        return None
    try:
        numero = int(valor)
    except ValueError:
        raise DadosInvalidos(f"Campo {campo} deve ser um número inteiro")
    if numero < 0:
        raise DadosInvalidos(f"Campo {campo} não pode ser negativo")
    return numero


def lista_de_ids(dados: Dict, campo: str) -> Optional[List[str]]:
    """
    Lista de ids de um campo

    Aceita lista ou texto separado por vírgulas. None quando o campo não
    foi enviado, para distinguir de uma lista vazia explícita.
    """
    if campo not in dados:
        return None
    valor = dados[campo]
    if valor is None:
        return []
    if isinstance(valor, str):
        valor = valor.split(',')
    return [str(item).strip() for item in valor if str(item).strip()]


def data_iso(valor) -> Optional[str]:
    return valor.isoformat() if valor else None


def resumo_usuario(usuario) -> Optional[Dict]:
    """Dados públicos de um usuário referenciado (populate do dono)"""
    if usuario is None:
        return None
    return {
        'id': str(usuario.pk),
        'nome_usuario': usuario.nome_usuario,
        'email_usuario': usuario.email_usuario,
    }
