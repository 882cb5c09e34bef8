# apps/jogos/apps.py

from django.apps import AppConfig


class JogosConfig(AppConfig):
    """Configuração da app Jogos"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.jogos'
    verbose_name = 'Jogos - Catálogo'
