# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .forms import UsuarioChangeForm, UsuarioCreationForm
from .models import Categoria, ConteudoRelacionado, Jogador, Jogo, Turma, Usuario


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin customizado para o modelo Usuario"""

    form = UsuarioChangeForm
    add_form = UsuarioCreationForm

    list_display = [
        'email_usuario', 'nome_usuario', 'instituicao_usuario',
        'perfil_badge', 'is_active', 'criado_em'
    ]
    list_filter = ['perfil', 'is_staff', 'is_active']
    search_fields = ['email_usuario', 'nome_usuario', 'instituicao_usuario']
    ordering = ['-criado_em']
    readonly_fields = ['criado_em', 'last_login']

    fieldsets = (
        (None, {'fields': ('email_usuario', 'password')}),
        ('Informações', {
            'fields': ('nome_usuario', 'instituicao_usuario', 'perfil')
        }),
        ('Permissões do admin', {
            'fields': ('is_active', 'is_staff', 'is_superuser'),
            'classes': ('collapse',)
        }),
        ('Datas', {
            'fields': ('criado_em', 'last_login'),
            'classes': ('collapse',)
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': (
                'email_usuario', 'nome_usuario', 'instituicao_usuario',
                'perfil', 'password1', 'password2'
            ),
        }),
    )

    def perfil_badge(self, obj):
        """Exibe o perfil com badge colorido"""
        cores = {
            Usuario.Perfil.ADMINISTRADOR: '#EF4444',
            Usuario.Perfil.INSTITUICAO: '#3B82F6',
        }
        cor = cores.get(obj.perfil, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_perfil_display()
        )

    perfil_badge.short_description = 'Perfil'


@admin.register(Categoria)
class CategoriaAdmin(admin.ModelAdmin):
    list_display = ['nome', 'criado_por', 'criado_em']
    search_fields = ['nome']


@admin.register(Jogo)
class JogoAdmin(admin.ModelAdmin):
    """Admin do catálogo de jogos"""

    list_display = ['nome', 'identificacao_unity', 'total_niveis', 'xp_maxima', 'criado_por', 'criado_em']
    list_filter = ['categorias', 'criado_em']
    search_fields = ['nome', 'identificacao_unity', 'descricao']
    filter_horizontal = ['categorias']
    readonly_fields = ['criado_em']

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('nome', 'descricao', 'identificacao_unity', 'categorias')
        }),
        ('Links', {
            'fields': ('link_jogar', 'icone_url', 'video_demo_url', 'github_url')
        }),
        ('Progressão', {
            'fields': ('total_niveis', 'xp_maxima')
        }),
        ('Autoria', {
            'fields': ('criado_por', 'criado_em'),
            'classes': ('collapse',)
        })
    )


@admin.register(ConteudoRelacionado)
class ConteudoRelacionadoAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'tipo', 'tag', 'criado_por', 'criado_em']
    list_filter = ['tipo']
    search_fields = ['titulo', 'descricao', 'tag']
    filter_horizontal = ['jogos']


class JogadorInline(admin.TabularInline):
    model = Jogador
    extra = 0
    fields = ['login', 'nome_jogador', 'criado_por']
    readonly_fields = ['criado_por']
    show_change_link = True


@admin.register(Turma)
class TurmaAdmin(admin.ModelAdmin):
    """Admin de turmas; o dono é o id textual em criado_por"""

    list_display = ['nome_turma', 'criado_por', 'jogadores_count', 'criado_em']
    search_fields = ['nome_turma', 'criado_por']
    inlines = [JogadorInline]

    def jogadores_count(self, obj):
        return obj.jogadores.count()

    jogadores_count.short_description = 'Jogadores'


@admin.register(Jogador)
class JogadorAdmin(admin.ModelAdmin):
    list_display = ['login', 'nome_jogador', 'turma', 'criado_por', 'criado_em']
    search_fields = ['login', 'nome_jogador']
    exclude = ['senha_hash']
    list_select_related = ['criado_por']


# Customização do site admin
admin.site.site_header = "Ludus - Administração"
admin.site.site_title = "Ludus Admin"
admin.site.index_title = "Painel Administrativo"
