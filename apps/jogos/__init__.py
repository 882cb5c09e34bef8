# apps/jogos/__init__.py

"""
Jogos - Catálogo de jogos educacionais do Ludus

Funcionalidades:
- CRUD de jogos (com upload de ícone)
- Categorias de jogos
- Conteúdos relacionados (artigos e eventos)
"""
