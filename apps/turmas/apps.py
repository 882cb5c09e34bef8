# apps/turmas/apps.py

from django.apps import AppConfig


class TurmasConfig(AppConfig):
    """Configuração da app Turmas"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.turmas'
    verbose_name = 'Turmas e Jogadores'
