# apps/core/signals.py

from django.db.models.signals import pre_save
from django.dispatch import receiver

from .models import Jogador, Usuario


@receiver(pre_save, sender=Usuario)
def normalizar_email_usuario(sender, instance, **kwargs):
    """
    Garante email em minúsculas mesmo fora dos serviços
    (admin do Django, shell, comandos)
    """
    if instance.email_usuario:
        instance.email_usuario = instance.email_usuario.strip().lower()


@receiver(pre_save, sender=Jogador)
def normalizar_login_jogador(sender, instance, **kwargs):
    if instance.login:
        instance.login = instance.login.strip().lower()
