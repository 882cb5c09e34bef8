import uuid

import apps.core.models
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='Usuario',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
                ('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nome_usuario', models.CharField(max_length=150)),
                ('email_usuario', models.EmailField(max_length=254, unique=True)),
                ('instituicao_usuario', models.CharField(max_length=200)),
                ('perfil', models.CharField(blank=True, choices=[('administrador', 'Administrador'), ('instituicao', 'Instituição')], default='instituicao', max_length=20)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'db_table': 'usuario',
                'ordering': ['nome_usuario'],
            },
            managers=[
                ('objects', apps.core.models.UsuarioManager()),
            ],
        ),
        migrations.CreateModel(
            name='Categoria',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nome', models.CharField(max_length=100, unique=True)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('criado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='categorias_criadas', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'categoria',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='Jogo',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nome', models.CharField(max_length=200)),
                ('descricao', models.TextField(blank=True)),
                ('identificacao_unity', models.CharField(max_length=200)),
                ('link_jogar', models.CharField(blank=True, max_length=500)),
                ('icone_url', models.CharField(blank=True, max_length=500)),
                ('video_demo_url', models.CharField(blank=True, max_length=500)),
                ('github_url', models.CharField(blank=True, max_length=500)),
                ('total_niveis', models.PositiveIntegerField(blank=True, null=True)),
                ('xp_maxima', models.PositiveIntegerField(blank=True, null=True)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('categorias', models.ManyToManyField(blank=True, related_name='jogos', to='core.categoria')),
                ('criado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='jogos_criados', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'jogo',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='ConteudoRelacionado',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('titulo', models.CharField(max_length=200)),
                ('descricao', models.TextField()),
                ('link_externo', models.CharField(blank=True, max_length=500)),
                ('pdf_url', models.CharField(blank=True, max_length=500)),
                ('tag', models.CharField(blank=True, max_length=100)),
                ('tipo', models.CharField(blank=True, choices=[('Artigo', 'Artigo'), ('Evento', 'Evento')], max_length=10)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('criado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='conteudos_criados', to=settings.AUTH_USER_MODEL)),
                ('jogos', models.ManyToManyField(blank=True, related_name='conteudos', to='core.jogo')),
            ],
            options={
                'db_table': 'conteudo_relacionado',
                'ordering': ['-criado_em'],
            },
        ),
        migrations.CreateModel(
            name='Turma',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nome_turma', models.CharField(max_length=200)),
                ('criado_por', models.CharField(db_index=True, max_length=64)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'turma',
                'ordering': ['nome_turma'],
            },
        ),
        migrations.CreateModel(
            name='Jogador',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('login', models.CharField(max_length=150, unique=True)),
                ('senha_hash', models.CharField(max_length=256)),
                ('nome_jogador', models.CharField(max_length=200)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('criado_por', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='jogadores_criados', to=settings.AUTH_USER_MODEL)),
                ('turma', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='jogadores', to='core.turma')),
            ],
            options={
                'db_table': 'jogador',
                'ordering': ['nome_jogador'],
            },
        ),
    ]
