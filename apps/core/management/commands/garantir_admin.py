# apps/core/management/commands/garantir_admin.py

from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from apps.core.auth_service import auth_service


class Command(BaseCommand):
    help = 'Garante que o administrador configurado (LUDUS_ADMIN_*) exista'

    def add_arguments(self, parser):
        parser.add_argument('--email', help='Email do administrador (padrão: LUDUS_ADMIN_EMAIL)')
        parser.add_argument('--senha', help='Senha inicial (padrão: LUDUS_ADMIN_PASSWORD)')
        parser.add_argument('--nome', help='Nome exibido (padrão: LUDUS_ADMIN_NOME)')
        parser.add_argument('--instituicao', help='Instituição (padrão: LUDUS_ADMIN_INSTITUICAO)')

    def handle(self, *args, **options):
        self.stdout.write('🔍 Verificando administrador...')

        try:
            usuario, criado = auth_service.garantir_admin(
                email=options.get('email'),
                senha=options.get('senha'),
                nome=options.get('nome'),
                instituicao=options.get('instituicao'),
            )
        except DatabaseError as e:
            raise CommandError(f'Banco indisponível: {e}') from e

        if criado:
            self.stdout.write(self.style.SUCCESS(f'✅ Administrador criado: {usuario.email_usuario}'))
        else:
            self.stdout.write(f'ℹ️  Administrador já existe: {usuario.email_usuario}')
