# apps/jogos/urls.py

from django.urls import path
from . import views

app_name = 'jogos'

urlpatterns = [
    # Catálogo de jogos
    path('api/jogos/', views.api_jogos, name='api_jogos'),
    path('api/jogos/<str:pk>/', views.api_jogo_detalhe, name='api_jogo_detalhe'),

    # Categorias
    path('api/categorias/', views.api_categorias, name='api_categorias'),
    path('api/categorias/<str:pk>/', views.api_categoria_detalhe, name='api_categoria_detalhe'),

    # Conteúdos relacionados (artigos e eventos)
    path('api/conteudos/', views.api_conteudos, name='api_conteudos'),
    path('api/conteudos/<str:pk>/', views.api_conteudo_detalhe, name='api_conteudo_detalhe'),
]
