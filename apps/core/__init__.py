# apps/core/__init__.py

"""
Core - Aplicação principal do Ludus

Contém:
- Models (Usuario, Categoria, Jogo, ConteudoRelacionado, Turma, Jogador)
- Guarda de autorização por dono e resolução de perfil
- Serviço CRUD genérico e erros da API
- Views de autenticação e da API de usuários
- Comando para garantir o administrador inicial
"""
