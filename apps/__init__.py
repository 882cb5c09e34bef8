# apps/__init__.py

"""
Ludus - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: Models, autenticação, permissões e usuários da instituição
- jogos: Catálogo de jogos, categorias e conteúdos relacionados
- turmas: Turmas e jogadores, com escopo por dono
"""

__version__ = '0.1.0'
__author__ = 'Equipe Ludus'
