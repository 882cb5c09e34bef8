#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.

Ludus - Gestão de jogos, turmas e jogadores
"""

import os
import sys


def main():
    """Run administrative tasks."""

    # Configuração padrão para desenvolvimento
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Comandos customizados do Ludus
    if len(sys.argv) > 1:
        command = sys.argv[1]

        # Comando de setup inicial
        if command == 'setup':
            print("🚀 Configurando Ludus...")

            # Executar migrações
            print("📊 Aplicando migrações...")
            if os.system('python manage.py migrate') != 0:
                print("❌ Erro nas migrações")
                return

            # Garantir o administrador configurado em LUDUS_ADMIN_*
            print("👤 Verificando administrador...")
            if os.system('python manage.py garantir_admin') == 0:
                print("✅ Setup concluído!")
            else:
                print("⚠️  Setup parcial concluído (sem administrador)")
            return

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
