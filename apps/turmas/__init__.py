# apps/turmas/__init__.py

"""
Turmas - Turmas e jogadores do Ludus

Funcionalidades:
- CRUD de turmas com escopo por dono
- CRUD de jogadores autorizado pelo dono da turma
"""
