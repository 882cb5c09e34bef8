# apps/core/models.py

import uuid

from django.contrib.auth.base_user import BaseUserManager
from django.contrib.auth.hashers import check_password, make_password
from django.contrib.auth.models import AbstractUser
from django.db import models


class UsuarioManager(BaseUserManager):
    """Manager com email como identificador de login"""

    use_in_migrations = True

    def _create_user(self, email_usuario, password, **extra_fields):
        if not email_usuario:
            raise ValueError('O email é obrigatório')
        email_usuario = self.normalize_email(email_usuario).lower()
        usuario = self.model(email_usuario=email_usuario, **extra_fields)
        usuario.set_password(password)
        usuario.save(using=self._db)
        return usuario

    def create_user(self, email_usuario, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email_usuario, password, **extra_fields)

    def create_superuser(self, email_usuario, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('perfil', Usuario.Perfil.ADMINISTRADOR)
        return self._create_user(email_usuario, password, **extra_fields)

    def get_by_natural_key(self, email_usuario):
        return self.get(email_usuario=(email_usuario or '').lower())


class Usuario(AbstractUser):
    """
    Usuário da instituição

    O login é feito pelo email. O perfil é um valor único: apenas o
    primeiro valor informado pelos clientes é mantido (ver
    permissions.normalizar_perfil).
    """

    class Perfil(models.TextChoices):
        ADMINISTRADOR = 'administrador', 'Administrador'
        INSTITUICAO = 'instituicao', 'Instituição'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    username = None
    email = None

    nome_usuario = models.CharField(max_length=150)
    email_usuario = models.EmailField(unique=True)
    instituicao_usuario = models.CharField(max_length=200)
    perfil = models.CharField(
        max_length=20,
        choices=Perfil.choices,
        default=Perfil.INSTITUICAO,
        blank=True
    )

    criado_em = models.DateTimeField(auto_now_add=True)

    objects = UsuarioManager()

    USERNAME_FIELD = 'email_usuario'
    EMAIL_FIELD = 'email_usuario'
    REQUIRED_FIELDS = ['nome_usuario', 'instituicao_usuario']

    class Meta:
        db_table = 'usuario'
        ordering = ['nome_usuario']

    def __str__(self):
        return f"{self.nome_usuario} ({self.email_usuario})"

    def get_full_name(self):
        return self.nome_usuario

    def get_short_name(self):
        return self.nome_usuario


class Categoria(models.Model):
    """Categoria de jogos"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    nome = models.CharField(max_length=100, unique=True)
    criado_por = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='categorias_criadas'
    )
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'categoria'
        ordering = ['nome']

    def __str__(self):
        return self.nome


class Jogo(models.Model):
    """Jogo educacional publicado na plataforma"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    nome = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    identificacao_unity = models.CharField(max_length=200)
    link_jogar = models.CharField(max_length=500, blank=True)
    icone_url = models.CharField(max_length=500, blank=True)
    video_demo_url = models.CharField(max_length=500, blank=True)
    github_url = models.CharField(max_length=500, blank=True)
    total_niveis = models.PositiveIntegerField(null=True, blank=True)
    xp_maxima = models.PositiveIntegerField(null=True, blank=True)
    categorias = models.ManyToManyField(
        Categoria,
        blank=True,
        related_name='jogos'
    )
    criado_por = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='jogos_criados'
    )
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'jogo'
        ordering = ['nome']

    def __str__(self):
        return self.nome


class ConteudoRelacionado(models.Model):
    """Artigo ou evento relacionado a um ou mais jogos"""

    class Tipo(models.TextChoices):
        ARTIGO = 'Artigo', 'Artigo'
        EVENTO = 'Evento', 'Evento'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    titulo = models.CharField(max_length=200)
    descricao = models.TextField()
    link_externo = models.CharField(max_length=500, blank=True)
    pdf_url = models.CharField(max_length=500, blank=True)
    tag = models.CharField(max_length=100, blank=True)
    tipo = models.CharField(max_length=10, choices=Tipo.choices, blank=True)
    jogos = models.ManyToManyField(
        Jogo,
        blank=True,
        related_name='conteudos'
    )
    criado_por = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='conteudos_criados'
    )
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'conteudo_relacionado'
        ordering = ['-criado_em']

    def __str__(self):
        return self.titulo


class Turma(models.Model):
    """
    Turma de jogadores

    O dono é guardado como id em texto: administradores podem atribuir
    qualquer identificador, e a comparação de dono é feita sobre a forma
    canônica do texto.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    nome_turma = models.CharField(max_length=200)
    criado_por = models.CharField(max_length=64, db_index=True)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'turma'
        ordering = ['nome_turma']

    def __str__(self):
        return self.nome_turma

    @property
    def dono(self):
        """Usuario dono da turma, se o id corresponder a um usuário"""
        try:
            return Usuario.objects.filter(pk=uuid.UUID(str(self.criado_por))).first()
        except ValueError:
            return None


class Jogador(models.Model):
    """
    Jogador vinculado a uma turma

    A referência à turma é fraca: excluir a turma não apaga jogadores.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    login = models.CharField(max_length=150, unique=True)
    senha_hash = models.CharField(max_length=256)
    nome_jogador = models.CharField(max_length=200)
    turma = models.ForeignKey(
        Turma,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='jogadores'
    )
    criado_por = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='jogadores_criados'
    )
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'jogador'
        ordering = ['nome_jogador']

    def __str__(self):
        return f"{self.nome_jogador} ({self.login})"

    def definir_senha(self, senha):
        self.senha_hash = make_password(senha)

    def verificar_senha(self, senha):
        return check_password(senha, self.senha_hash)

    @property
    def turma_ou_none(self):
        """Turma do jogador, ou None se ela não existir mais"""
        try:
            return self.turma
        except Turma.DoesNotExist:
            return None
